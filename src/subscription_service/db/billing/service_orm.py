# subscription_service/db/billing/service_orm.py
from __future__ import annotations
from typing import Optional
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from ..base import Base


class ServiceColumns:
    """Columns shared by ss_service and its audit table."""

    uid: Mapped[int] = mapped_column(Integer, nullable=False, default=-1, index=True)
    order_product_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    plan_sku: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    # unix timestamps, 0 means "never"
    created: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    activated: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    expires: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    canceled: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    extra_time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    renew: Mapped[int] = mapped_column(Integer, nullable=False, default=-1)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    extra_charge: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    s_status: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    cim_ppid: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cim_uid: Mapped[int] = mapped_column(Integer, nullable=False, default=-1)
    backup_cim_ppid: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    activation_code: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    # Serialized feature data, see db/blob.py
    data: Mapped[str] = mapped_column(Text, nullable=False, default="")
    last_signal: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cancel_reason: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    system_version: Mapped[int] = mapped_column(Integer, nullable=False, default=20)
    dcid: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dispatch_name: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    currency_id: Mapped[int] = mapped_column(Integer, nullable=False, default=840)
    country_id: Mapped[int] = mapped_column(Integer, nullable=False, default=840)


class ServiceORM(ServiceColumns, Base):
    __tablename__ = "ss_service"

    sid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class ServiceAuditORM(ServiceColumns, Base):
    __tablename__ = "ss_service_audit"

    audit_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    edit_uid: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    edit_timestamp: Mapped[int] = mapped_column(Integer, nullable=False)
