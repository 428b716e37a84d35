# subscription_service/entities/camera_subscription.py
from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, List, Optional

from subscription_service.exceptions import ConflictError, NotFoundError, ServerError
from subscription_service.formatters import camera_subscription_formatter as format
from subscription_service.utils.helpers import deep_merge, now_unix, one_month_from_now

from .state import EntityHandle

if TYPE_CHECKING:
    from subscription_service.store import DataStore

logger = logging.getLogger(__name__)


class CameraSubscription(EntityHandle):
    entity_name = "Camera Subscription"

    def to_client(self) -> dict[str, Any]:
        return format.to_client(self._row("call to_client"))

    async def save(self, actor: Optional[int] = None) -> None:
        sub = format.clean(self._row("save"))

        if not sub.get("uuid") or not sub.get("sid"):
            raise ServerError("Cannot Update Camera Subscription, Sid and UUID must be present")

        audit = dict(sub, edit_uid=actor or 0, edit_timestamp=now_unix())
        await self._store.cameras.save_with_audit(sub, audit)
        logger.info(
            f"Saved camera subscription {sub['sid']}/{sub['uuid']}",
            extra={"sid": sub["sid"], "uuid": sub["uuid"], "actor": audit["edit_uid"]},
        )

    async def _merge_and_save(self, actor: Optional[int], changes: dict) -> None:
        self._set_row(deep_merge(copy.deepcopy(self._row("update")), changes))
        await self.save(actor)

    async def update(self, actor: Optional[int], updates: dict) -> None:
        self._row("update")
        await self._merge_and_save(actor, format.from_client(updates))

    async def cancel(self, actor: Optional[int]) -> None:
        self._row("cancel subscription")
        await self._merge_and_save(actor, {"expires": 0, "canceled": now_unix()})

    async def activate(self, actor: Optional[int]) -> None:
        self._row("reactivate subscription")
        await self._merge_and_save(actor, {"canceled": 0, "expires": one_month_from_now()})


async def by_sid(store: "DataStore", sid: int) -> List[CameraSubscription]:
    logger.debug(f"Getting camera subscriptions by sid: {sid}")
    rows = await store.cameras.list_by_sid(sid)
    return [CameraSubscription(store, row) for row in rows]


async def by_uid(store: "DataStore", uid: int) -> List[CameraSubscription]:
    logger.debug(f"Getting camera subscriptions by uid: {uid}")
    rows = await store.cameras.list_by_uid(uid)
    return [CameraSubscription(store, row) for row in rows]


async def by_sid_uuid(store: "DataStore", sid: int, uuid: str) -> CameraSubscription:
    logger.debug(f"Getting a camera subscription by sid: {sid} and uuid: {uuid}")
    row = await store.cameras.get_by_sid_uuid(sid, uuid)
    if row is None:
        raise NotFoundError("A Camera Subscription does not exist for this uuid & sid")
    return CameraSubscription(store, row)


async def create(store: "DataStore", uuid: str, fields: dict) -> CameraSubscription:
    """
    Creates the camera service row for (sid, uuid). Caller fields win,
    `create_defaults()` fills the rest.
    """
    sid = fields.get("sid")

    if await store.cameras.get_by_sid_uuid(sid, uuid) is not None:
        raise ConflictError("Camera service for this uuid and sid already exists!")

    cam_sub = {"uuid": uuid, "sid": sid, "uid": fields.get("uid")}
    cam_sub.update(format.from_client(fields))
    for column, default in format.create_defaults().items():
        cam_sub.setdefault(column, default)

    csid = await store.cameras.insert(format.clean(cam_sub))
    logger.info(f"Created camera subscription {csid} for sid {sid} and uuid {uuid}")

    return await by_sid_uuid(store, sid, uuid)
