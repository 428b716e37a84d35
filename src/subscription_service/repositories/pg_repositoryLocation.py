# subscription_service/repositories/pg_repositoryLocation.py

import logging
from typing import List, Optional

from sqlalchemy import select, update, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from subscription_service.constants import ServiceStatus
from subscription_service.db import LocationORM, LocationAuditORM, CountryORM, ZoneORM, ServiceORM
from subscription_service.db.base import get_session, row_to_dict
from subscription_service.db.uow import AsyncUnitOfWork
from subscription_service.exceptions import DatabaseError

logger = logging.getLogger(__name__)

location_table = LocationORM.__table__
location_audit_table = LocationAuditORM.__table__


class LocationRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @staticmethod
    def _select():
        return (
            select(
                location_table,
                ZoneORM.zone_code.label("state"),
                CountryORM.country_iso_code_2.label("country"),
            )
            .join(CountryORM, location_table.c.country_id == CountryORM.country_id)
            .outerjoin(ZoneORM, location_table.c.zone == ZoneORM.zone_id)
        )

    async def get_by_sid(self, sid: int) -> Optional[dict]:
        async with get_session(self._session_factory) as session:
            result = await session.execute(self._select().where(location_table.c.sid == sid))
            return row_to_dict(result.mappings().first())

    async def get_by_account(self, account: str) -> Optional[dict]:
        """Location whose subscription has the highest s_status for this account."""
        stmt = (
            self._select()
            .join(ServiceORM, ServiceORM.sid == location_table.c.sid)
            .where(location_table.c.account == account)
            .order_by(ServiceORM.s_status.desc())
            .limit(1)
        )
        async with get_session(self._session_factory) as session:
            result = await session.execute(stmt)
            return row_to_dict(result.mappings().first())

    async def list_by_uid(self, uid: int) -> List[dict]:
        async with get_session(self._session_factory) as session:
            result = await session.execute(self._select().where(location_table.c.uid == uid))
            return [dict(row) for row in result.mappings().all()]

    async def account_to_sid(self, account: str) -> Optional[int]:
        """Sid of the practicing/active subscription behind an account."""
        stmt = (
            select(location_table.c.sid)
            .join(ServiceORM, ServiceORM.sid == location_table.c.sid)
            .where(location_table.c.account == account, ServiceORM.s_status >= ServiceStatus.PRACTICE_MODE)
            .limit(1)
        )
        async with get_session(self._session_factory) as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def sid_to_account(self, sid: int) -> Optional[str]:
        async with get_session(self._session_factory) as session:
            result = await session.execute(select(location_table.c.account).where(location_table.c.sid == sid))
            return result.scalar_one_or_none()

    async def save_with_audit(self, row: dict, audit_row: dict) -> None:
        sid = row["sid"]
        async with AsyncUnitOfWork(self._session_factory) as uow:
            try:
                await uow.session.execute(update(location_table).where(location_table.c.sid == sid).values(**row))
                await uow.session.execute(insert(location_audit_table).values(**audit_row))
            except SQLAlchemyError as e:
                logger.error(f"Failed to save location {sid}: {e}")
                raise DatabaseError(f"Failed to save location {sid}: {e}") from e
