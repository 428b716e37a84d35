# subscription_service/db/billing/payment_profile_orm.py
from __future__ import annotations
from typing import Optional
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from ..base import Base


class PaymentProfileColumns:
    customer_payment_profile_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    uid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    cc_type: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    last_four: Mapped[Optional[str]] = mapped_column(String(4), nullable=True)


class PaymentProfileORM(PaymentProfileColumns, Base):
    __tablename__ = "uc_cim_payment_profiles"


class PaymentProfileTestORM(PaymentProfileColumns, Base):
    """Sandbox profiles, read when cim.transaction_mode == 'test'."""
    __tablename__ = "uc_cim_payment_profiles_test"
