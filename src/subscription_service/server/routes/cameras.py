# subscription_service/server/routes/cameras.py
from typing import Annotated

from fastapi import APIRouter, Query

from subscription_service.entities import camera_subscription as CameraSubscription
from subscription_service.exceptions import InvalidParameterError
from subscription_service.models import CameraLookupQuery, CameraQuery, CameraSubscriptionInput
from ..deps import ActorDep, StoreDep

router = APIRouter(tags=["cameras"])


@router.get("/cameras/{uuid}")
async def get_camera(uuid: str, query: Annotated[CameraLookupQuery, Query()], store: StoreDep):
    """Get Camera Service by UUID and Sid."""
    subscription = await CameraSubscription.by_sid_uuid(store, query.sid, uuid)
    return {"subscription": subscription.to_client()}


@router.get("/cameras")
async def list_cameras(query: Annotated[CameraQuery, Query()], store: StoreDep):
    """All Camera Services for an account, by Sid or else by Uid."""
    if not query.sid and not query.uid:
        raise InvalidParameterError("Uid or Sid must be given")

    if query.sid:
        camera_subs = await CameraSubscription.by_sid(store, query.sid)
    else:
        camera_subs = await CameraSubscription.by_uid(store, query.uid)

    result = {"subscriptions": [sub.to_client() for sub in camera_subs]}
    if query.sid:
        result["sid"] = query.sid
    if query.uid:
        result["uid"] = query.uid
    return result


@router.post("/cameras/{uuid}")
async def create_camera(uuid: str, body: CameraSubscriptionInput, store: StoreDep):
    sub = await CameraSubscription.create(store, uuid, body.model_dump(exclude_unset=True))
    return {"subscription": sub.to_client()}


@router.put("/cameras/{uuid}")
async def update_camera(uuid: str, body: CameraSubscriptionInput, store: StoreDep, actor: ActorDep):
    updates = body.model_dump(exclude_unset=True)

    sub = await CameraSubscription.by_sid_uuid(store, body.sid, uuid)
    await sub.update(actor, updates)

    return {"subscription": sub.to_client()}


@router.post("/cameras/{uuid}/{sid}/cancel")
async def cancel_camera(uuid: str, sid: int, store: StoreDep, actor: ActorDep):
    subscription = await CameraSubscription.by_sid_uuid(store, sid, uuid)
    await subscription.cancel(actor)
    return {"subscription": subscription.to_client()}


@router.post("/cameras/{uuid}/{sid}/activate")
async def activate_camera(uuid: str, sid: int, store: StoreDep, actor: ActorDep):
    subscription = await CameraSubscription.by_sid_uuid(store, sid, uuid)
    await subscription.activate(actor)
    return {"subscription": subscription.to_client()}
