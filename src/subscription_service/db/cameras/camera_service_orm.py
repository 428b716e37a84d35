# subscription_service/db/cameras/camera_service_orm.py
from __future__ import annotations
from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from ..base import Base


class CameraServiceColumns:
    uid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    sid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    uuid: Mapped[str] = mapped_column(String(64), nullable=False)

    recording_lifetime: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    plan_sku: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    expires: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    canceled: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    extra_time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    trial_used: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class CameraServiceORM(CameraServiceColumns, Base):
    __tablename__ = "ss_camera_service"
    __table_args__ = (UniqueConstraint("sid", "uuid", name="uq_ss_camera_service_sid_uuid"),)

    csid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class CameraServiceAuditORM(CameraServiceColumns, Base):
    __tablename__ = "ss_camera_service_audit"

    audit_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    csid: Mapped[int] = mapped_column(Integer, nullable=False)
    edit_uid: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    edit_timestamp: Mapped[int] = mapped_column(Integer, nullable=False)
