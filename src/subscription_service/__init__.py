# src/subscription_service/__init__.py

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker

from .config import get_settings, DataStoreConfig, PostgresConfig, CimConfig, Settings
from .store import DataStore
from .repositories.pg_repositorySubscription import SubscriptionRepository
from .repositories.pg_repositoryLocation import LocationRepository
from .repositories.pg_repositoryCamera import CameraServiceRepository
from .repositories.pg_repositoryPlan import PlanRepository
from .repositories.pg_repositoryLookup import LookupRepository, CountryCurrencyLookup

from .exceptions import *


def create_engine_from_config(config: PostgresConfig) -> AsyncEngine:
    """Async engine for the configured DSN; pool and server settings only apply to PostgreSQL."""
    if not config.is_postgres():
        return create_async_engine(config.get_pg_dsn())

    return create_async_engine(
        config.get_pg_dsn(),
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        pool_recycle=config.pool_recycle,
        pool_pre_ping=config.pool_pre_ping,
        connect_args={
            "server_settings": {
                "application_name": config.application_name
            }
        },
    )


def build_data_store(
    engine: AsyncEngine,
    config: Optional[DataStoreConfig] = None,
    lookup: Optional[CountryCurrencyLookup] = None,
) -> DataStore:
    """Wires every repository onto one engine."""
    config = config or DataStoreConfig()
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)

    reference_repo = LookupRepository(session_factory)

    return DataStore(
        subscriptions=SubscriptionRepository(
            session_factory,
            cim_test_mode=config.cim.transaction_mode == "test",
        ),
        locations=LocationRepository(session_factory),
        cameras=CameraServiceRepository(session_factory),
        plans=PlanRepository(session_factory),
        reference=reference_repo,
        lookup=lookup,
        engine=engine,
    )


def create_data_store(config: Optional[DataStoreConfig] = None) -> DataStore:
    """
    Factory for a configured DataStore.

    :param config: Explicit settings. Environment variables are used when omitted.
    :return: DataStore owning its engine; release it with `await store.aclose()`.
    """
    if config is None:
        config = get_settings().data_store_config()

    engine = create_engine_from_config(config.postgres)
    return build_data_store(engine, config)


__all__ = [
    "DataStore", "create_data_store", "build_data_store", "create_engine_from_config",
    "DataStoreConfig", "PostgresConfig", "CimConfig", "Settings", "CountryCurrencyLookup",
    "ServiceError", "NotFoundError", "ConflictError", "InvalidParameterError", "ValidationError",
    "BadRequestError", "ServerError", "BadSubscriptionDataError", "DatabaseError",
]
