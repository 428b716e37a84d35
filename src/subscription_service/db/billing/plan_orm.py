# subscription_service/db/billing/plan_orm.py
from __future__ import annotations
from typing import Optional
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from ..base import Base


class ServicePlanORM(Base):
    __tablename__ = "ss_service_plan"

    # Country variants carry a suffix: SSEDSM2, SSEDSM2_GB
    plan_sku: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    renew: Mapped[int] = mapped_column(Integer, nullable=False, default=-1)
    system_version: Mapped[int] = mapped_column(Integer, nullable=False, default=20)

    # Serialized feature data, same format as ss_service.data
    data: Mapped[str] = mapped_column(Text, nullable=False, default="")

    country_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    currency_id: Mapped[int] = mapped_column(Integer, nullable=False)
