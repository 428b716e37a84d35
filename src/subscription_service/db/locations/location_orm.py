# subscription_service/db/locations/location_orm.py
from __future__ import annotations
from typing import Optional
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from ..base import Base


class LocationColumns:
    """Columns shared by ss_location and its audit table."""

    uid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    l_status: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    account: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    modified: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    location_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    street1: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    street2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    cross_street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    zone: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    municipality: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    country_id: Mapped[int] = mapped_column(Integer, nullable=False, default=840)
    time_zone: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    dispatch_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    residence_type: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    num_adults: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    num_children: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    abort: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    signature: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    names: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    mfa: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # primary contacts
    first_name: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    first_name2: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    last_name2: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    phone2: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # secondary contacts
    contact_name1: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_phone1: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    contact_name2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_phone2: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    contact_name3: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_phone3: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    contact_name4: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_phone4: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    contact_name5: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_phone5: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # dispatch numbers
    pd_phone1: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    pd_phone2: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    fd_phone1: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    fd_phone2: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    guard_phone1: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    guard_phone2: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    license_number: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    license_expiration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    template_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    enable_cops_video: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    enable_smashsafe: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    enable_securitas_video: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # securitas dispatch
    site_no: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    sitestat_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    cs_no: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)


class LocationORM(LocationColumns, Base):
    __tablename__ = "ss_location"

    # Shared with ss_service.sid, never generated here
    sid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)


class LocationAuditORM(LocationColumns, Base):
    __tablename__ = "ss_location_audit"

    audit_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    edit_uid: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    edit_timestamp: Mapped[int] = mapped_column(Integer, nullable=False)
