# subscription_service/repositories/pg_repositorySubscription.py

import logging
from typing import List, Optional

from sqlalchemy import select, update, insert, exists
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from subscription_service.db import (
    ServiceORM,
    ServiceAuditORM,
    CurrencyORM,
    CountryORM,
    LocationORM,
    PaymentProfileORM,
    PaymentProfileTestORM,
)
from subscription_service.db.base import get_session, row_to_dict
from subscription_service.db.uow import AsyncUnitOfWork
from subscription_service.exceptions import DatabaseError

logger = logging.getLogger(__name__)

service_table = ServiceORM.__table__
service_audit_table = ServiceAuditORM.__table__


class SubscriptionRepository:
    """
    ss_service rows, joined with their currency/country codes and the
    card on file.
    """
    def __init__(self, session_factory: async_sessionmaker[AsyncSession], cim_test_mode: bool = False):
        self._session_factory = session_factory
        self._profiles = (PaymentProfileTestORM if cim_test_mode else PaymentProfileORM).__table__

    def _select(self):
        profiles = self._profiles
        return (
            select(
                service_table,
                CurrencyORM.code.label("currency"),
                CountryORM.country_iso_code_2.label("country"),
                profiles.c.cc_type,
                profiles.c.last_four,
            )
            .join(CurrencyORM, service_table.c.currency_id == CurrencyORM.id)
            .join(CountryORM, service_table.c.country_id == CountryORM.country_id)
            .outerjoin(profiles, service_table.c.cim_ppid == profiles.c.customer_payment_profile_id)
        )

    async def get_by_sid(self, sid: int) -> Optional[dict]:
        async with get_session(self._session_factory) as session:
            result = await session.execute(self._select().where(service_table.c.sid == sid))
            return row_to_dict(result.mappings().first())

    async def get_by_account(self, account: str) -> Optional[dict]:
        """Most active subscription for an account (highest s_status)."""
        stmt = (
            self._select()
            .join(LocationORM, LocationORM.sid == service_table.c.sid)
            .where(LocationORM.account == account)
            .order_by(service_table.c.s_status.desc())
            .limit(1)
        )
        async with get_session(self._session_factory) as session:
            result = await session.execute(stmt)
            return row_to_dict(result.mappings().first())

    async def list_by_uid(self, uid: int) -> List[dict]:
        stmt = self._select().where(service_table.c.uid == uid).order_by(service_table.c.s_status.desc())
        async with get_session(self._session_factory) as session:
            result = await session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]

    async def exists(self, sid: int) -> bool:
        async with get_session(self._session_factory) as session:
            result = await session.execute(select(exists().where(service_table.c.sid == sid)))
            return bool(result.scalar())

    async def insert(self, row: dict) -> int:
        """Inserts a cleaned ss_service row and returns the new sid."""
        async with AsyncUnitOfWork(self._session_factory) as uow:
            try:
                result = await uow.session.execute(insert(service_table).values(**row))
            except SQLAlchemyError as e:
                logger.error(f"Failed to insert subscription: {e}")
                raise DatabaseError(f"Failed to insert subscription: {e}") from e
            return result.inserted_primary_key[0]

    async def save_with_audit(self, row: dict, audit_row: dict) -> None:
        """Updates ss_service by sid and appends the audit row in the same transaction."""
        sid = row["sid"]
        async with AsyncUnitOfWork(self._session_factory) as uow:
            try:
                await uow.session.execute(update(service_table).where(service_table.c.sid == sid).values(**row))
                await uow.session.execute(insert(service_audit_table).values(**audit_row))
            except SQLAlchemyError as e:
                logger.error(f"Failed to save subscription {sid}: {e}")
                raise DatabaseError(f"Failed to save subscription {sid}: {e}") from e
