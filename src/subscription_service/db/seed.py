# subscription_service/db/seed.py
"""Reference rows every deployment needs: the supported countries and their currencies."""
from __future__ import annotations

import logging

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncConnection

from .reference.reference_orm import CountryORM, CurrencyORM

logger = logging.getLogger(__name__)

COUNTRIES = [
    {"country_id": 840, "country_name": "United States", "country_iso_code_2": "US", "country_iso_code_3": "USA"},
    {"country_id": 826, "country_name": "United Kingdom", "country_iso_code_2": "GB", "country_iso_code_3": "GBR"},
]

CURRENCIES = [
    {"id": 840, "code": "USD", "name": "US Dollar"},
    {"id": 826, "code": "GBP", "name": "Pound Sterling"},
]


async def seed_reference(conn: AsyncConnection) -> int:
    """Inserts missing reference rows. Returns how many were added."""
    added = 0
    for table, key, rows in (
        (CountryORM.__table__, "country_id", COUNTRIES),
        (CurrencyORM.__table__, "id", CURRENCIES),
    ):
        existing = set((await conn.execute(select(table.c[key]))).scalars().all())
        missing = [row for row in rows if row[key] not in existing]
        if missing:
            await conn.execute(insert(table), missing)
            added += len(missing)
    logger.info(f"Seeded {added} reference rows")
    return added
