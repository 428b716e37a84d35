# subscription_service/server/main.py
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from subscription_service import create_data_store
from subscription_service.config import Settings, get_settings
from subscription_service.exceptions import BadRequestError, ServiceError, ValidationError
from subscription_service.store import DataStore
from .routes import cameras_router, health_router, locations_router, plans_router, subscriptions_router

logger = logging.getLogger(__name__)


def _error_response(error: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.kind}: {exc}", extra={"kind": exc.kind})
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # a JSON route called with no body at all
    if any(err.get("type") == "missing" and tuple(err.get("loc", ())) == ("body",) for err in errors):
        error: ServiceError = BadRequestError("Request body is required")
    else:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in errors
        )
        error = ValidationError(details)
    logger.error(f"{request.method} {request.url.path} rejected: {error.kind}: {error}", extra={"kind": error.kind})
    return _error_response(error)


def create_app(store: Optional[DataStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the HTTP application.

    When `store` is given it is used as-is and left open on shutdown;
    otherwise one is created from settings at startup and closed at shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if getattr(app.state, "store", None) is None:
            owned = create_data_store(settings.data_store_config())
            app.state.store = owned
        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()

    app = FastAPI(title="subscription-service", lifespan=lifespan)
    app.state.store = store

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    for router in (subscriptions_router, locations_router, cameras_router, plans_router, health_router):
        app.include_router(router, prefix=settings.server.prefix)

    return app
