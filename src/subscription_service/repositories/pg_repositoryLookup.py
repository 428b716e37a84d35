# subscription_service/repositories/pg_repositoryLookup.py

import logging
from typing import Optional, Protocol

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from subscription_service.db import CountryORM, CurrencyORM
from subscription_service.db.base import get_session
from subscription_service.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class CountryCurrencyLookup(Protocol):
    """Resolves human codes to the numeric ids stored on rows. None = no match."""

    async def country_id(self, code: str) -> Optional[int]: ...

    async def currency_id(self, code: str) -> Optional[int]: ...


class LookupRepository:
    """Reference tables: uc_countries, currencies."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def check_connection(self):
        """Runs a trivial query against the database."""
        logger.debug("Checking database connection...")
        async with get_session(self._session_factory) as session:
            try:
                await session.execute(text("SELECT 1"))
                logger.debug("Database connection successful.")
            except SQLAlchemyError as e:
                logger.error(f"Database connection failed: {e}")
                raise DatabaseError("Failed to connect to the database.") from e

    async def country_id(self, code: str) -> Optional[int]:
        stmt = select(CountryORM.country_id).where(CountryORM.country_iso_code_2 == code)
        async with get_session(self._session_factory) as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def currency_id(self, code: str) -> Optional[int]:
        async with get_session(self._session_factory) as session:
            result = await session.execute(select(CurrencyORM.id).where(CurrencyORM.code == code))
            return result.scalar_one_or_none()
