# subscription_service/repositories/pg_repositoryPlan.py

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from subscription_service.db import ServicePlanORM, CountryORM, CurrencyORM
from subscription_service.db.base import get_session, row_to_dict

logger = logging.getLogger(__name__)

plan_table = ServicePlanORM.__table__


class PlanRepository:
    """Read-only access to ss_service_plan."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @staticmethod
    def _select():
        return (
            select(
                plan_table,
                CountryORM.country_iso_code_2.label("country"),
                CurrencyORM.code.label("currency"),
            )
            .join(CountryORM, plan_table.c.country_id == CountryORM.country_id)
            .join(CurrencyORM, plan_table.c.currency_id == CurrencyORM.id)
        )

    async def get_by_sku(self, sku: str) -> Optional[dict]:
        async with get_session(self._session_factory) as session:
            result = await session.execute(self._select().where(plan_table.c.plan_sku == sku))
            return row_to_dict(result.mappings().first())

    async def list_by_country(self, country: str) -> List[dict]:
        stmt = (
            self._select()
            .where(CountryORM.country_iso_code_2 == country)
            .order_by(plan_table.c.price, plan_table.c.plan_sku)
        )
        async with get_session(self._session_factory) as session:
            result = await session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]
