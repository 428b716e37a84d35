# subscription_service/db/reference/reference_orm.py
from __future__ import annotations
from typing import Optional
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from ..base import Base


class CountryORM(Base):
    __tablename__ = "uc_countries"

    # ISO 3166 numeric code
    country_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    country_name: Mapped[str] = mapped_column(String(255), nullable=False)
    country_iso_code_2: Mapped[str] = mapped_column(String(2), nullable=False, unique=True)
    country_iso_code_3: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)


class CurrencyORM(Base):
    __tablename__ = "currencies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    code: Mapped[str] = mapped_column(String(3), nullable=False, unique=True)
    name: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)


class ZoneORM(Base):
    __tablename__ = "uc_zones"

    zone_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    zone_country_id: Mapped[int] = mapped_column(Integer, nullable=False)
    zone_code: Mapped[str] = mapped_column(String(8), nullable=False)
    zone_name: Mapped[str] = mapped_column(String(128), nullable=False)
