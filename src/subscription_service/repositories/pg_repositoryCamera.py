# subscription_service/repositories/pg_repositoryCamera.py

import logging
from typing import List, Optional

from sqlalchemy import select, update, insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from subscription_service.db import CameraServiceORM, CameraServiceAuditORM
from subscription_service.db.base import get_session, row_to_dict
from subscription_service.db.uow import AsyncUnitOfWork
from subscription_service.exceptions import ConflictError, DatabaseError

logger = logging.getLogger(__name__)

camera_table = CameraServiceORM.__table__
camera_audit_table = CameraServiceAuditORM.__table__


class CameraServiceRepository:
    """ss_camera_service: one row per (sid, uuid) camera."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_by_sid(self, sid: int) -> List[dict]:
        async with get_session(self._session_factory) as session:
            result = await session.execute(select(camera_table).where(camera_table.c.sid == sid))
            return [dict(row) for row in result.mappings().all()]

    async def list_by_uid(self, uid: int) -> List[dict]:
        async with get_session(self._session_factory) as session:
            result = await session.execute(select(camera_table).where(camera_table.c.uid == uid))
            return [dict(row) for row in result.mappings().all()]

    async def get_by_sid_uuid(self, sid: int, uuid: str) -> Optional[dict]:
        stmt = select(camera_table).where(camera_table.c.sid == sid, camera_table.c.uuid == uuid)
        async with get_session(self._session_factory) as session:
            result = await session.execute(stmt)
            return row_to_dict(result.mappings().first())

    async def insert(self, row: dict) -> int:
        async with AsyncUnitOfWork(self._session_factory) as uow:
            try:
                result = await uow.session.execute(insert(camera_table).values(**row))
            except IntegrityError as e:
                # lost a race against another create for the same pair
                raise ConflictError("Camera service for this uuid and sid already exists!") from e
            except SQLAlchemyError as e:
                logger.error(f"Failed to insert camera service: {e}")
                raise DatabaseError(f"Failed to insert camera service: {e}") from e
            logger.debug(f"Camera service insert result: csid={result.inserted_primary_key[0]}")
            return result.inserted_primary_key[0]

    async def save_with_audit(self, row: dict, audit_row: dict) -> None:
        sid, uuid = row["sid"], row["uuid"]
        stmt = (
            update(camera_table)
            .where(camera_table.c.sid == sid, camera_table.c.uuid == uuid)
            .values(**row)
        )
        async with AsyncUnitOfWork(self._session_factory) as uow:
            try:
                await uow.session.execute(stmt)
                await uow.session.execute(insert(camera_audit_table).values(**audit_row))
            except SQLAlchemyError as e:
                logger.error(f"Failed to save camera service {sid}/{uuid}: {e}")
                raise DatabaseError(f"Failed to save camera service {sid}/{uuid}: {e}") from e
