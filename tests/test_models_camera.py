import time

import pytest
from sqlalchemy import select

from subscription_service.db import CameraServiceAuditORM
from subscription_service.entities import camera_subscription as CameraSubscription
from subscription_service.exceptions import ConflictError, NotFoundError, ServerError
from conftest import CAMERA_SID, SID, UID

pytestmark = pytest.mark.asyncio


async def test_lookups(store):
    assert len(await CameraSubscription.by_sid(store, SID)) == 2
    assert len(await CameraSubscription.by_uid(store, UID)) == 3
    assert await CameraSubscription.by_sid(store, 99999) == []

    sub = await CameraSubscription.by_sid_uuid(store, CAMERA_SID, "cam-ccc")
    assert sub.to_client()["uuid"] == "cam-ccc"


async def test_by_sid_uuid_not_found(store):
    with pytest.raises(NotFoundError):
        await CameraSubscription.by_sid_uuid(store, SID, "cam-ccc")


async def test_create_uses_defaults(store):
    sub = await CameraSubscription.create(store, "cam-new", {"sid": SID, "uid": UID, "trialUsed": True})

    client = sub.to_client()
    assert client["uuid"] == "cam-new"
    assert client["planSku"] == "SSVM1"
    assert client["recordingLifetime"] == 2628000
    assert client["trialUsed"] is True
    assert client["canceled"] == 0
    assert client["expires"] > int(time.time())


async def test_create_caller_fields_win(store):
    sub = await CameraSubscription.create(
        store, "cam-new", {"sid": SID, "uid": UID, "planSku": "SSVM2", "price": 499}
    )

    assert sub.to_client()["planSku"] == "SSVM2"
    assert sub.to_client()["price"] == 499


async def test_create_existing_pair_conflicts(store):
    with pytest.raises(ConflictError):
        await CameraSubscription.create(store, "cam-aaa", {"sid": SID, "uid": UID})


async def test_cancel_and_activate(store, db_engine):
    sub = await CameraSubscription.by_sid_uuid(store, SID, "cam-aaa")

    await sub.cancel(5)
    canceled = (await CameraSubscription.by_sid_uuid(store, SID, "cam-aaa")).to_client()
    assert canceled["expires"] == 0
    assert canceled["canceled"] > 0

    await sub.activate(5)
    active = (await CameraSubscription.by_sid_uuid(store, SID, "cam-aaa")).to_client()
    assert active["canceled"] == 0
    assert active["expires"] > int(time.time())

    async with db_engine.connect() as conn:
        audits = (
            await conn.execute(select(CameraServiceAuditORM.__table__).where(CameraServiceAuditORM.uuid == "cam-aaa"))
        ).mappings().all()
    assert len(audits) == 2
    assert all(audit["edit_uid"] == 5 for audit in audits)


async def test_update(store):
    sub = await CameraSubscription.by_sid_uuid(store, SID, "cam-bbb")

    await sub.update(None, {"sid": SID, "uid": UID, "recordingLifetime": 86400, "trialUsed": True})

    reloaded = (await CameraSubscription.by_sid_uuid(store, SID, "cam-bbb")).to_client()
    assert reloaded["recordingLifetime"] == 86400
    assert reloaded["trialUsed"] is True


async def test_save_requires_sid_and_uuid(store):
    sub = CameraSubscription.CameraSubscription(store, {"sid": SID})

    with pytest.raises(ServerError):
        await sub.save()


async def test_unloaded_camera_subscription_raises(store):
    sub = await CameraSubscription.by_sid_uuid(store, SID, "cam-aaa")
    sub.clear()

    with pytest.raises(ServerError):
        sub.to_client()
    with pytest.raises(ServerError):
        await sub.cancel(None)
    with pytest.raises(ServerError):
        await sub.activate(None)
    with pytest.raises(ServerError):
        await sub.update(None, {"price": 1})


async def test_cancel_writes_one_audit_row(store, db_engine):
    sub = await CameraSubscription.by_sid_uuid(store, CAMERA_SID, "cam-ccc")

    await sub.cancel(8)

    canceled = (await CameraSubscription.by_sid_uuid(store, CAMERA_SID, "cam-ccc")).to_client()["canceled"]
    async with db_engine.connect() as conn:
        audits = (
            await conn.execute(select(CameraServiceAuditORM.__table__).where(CameraServiceAuditORM.uuid == "cam-ccc"))
        ).mappings().all()
    assert len(audits) == 1
    assert audits[0]["canceled"] == canceled
    assert audits[0]["expires"] == 0
    assert audits[0]["edit_uid"] == 8


async def test_save_on_cleared_handle_raises(store):
    sub = await CameraSubscription.by_sid_uuid(store, SID, "cam-aaa")
    sub.clear()

    with pytest.raises(ServerError):
        await sub.save()
