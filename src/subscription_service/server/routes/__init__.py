from .subscriptions import router as subscriptions_router
from .locations import router as locations_router
from .cameras import router as cameras_router
from .plans import router as plans_router
from .health import router as health_router

__all__ = [
    "subscriptions_router",
    "locations_router",
    "cameras_router",
    "plans_router",
    "health_router",
]
