# subscription_service/server/routes/subscriptions.py
import logging
from typing import Optional

from fastapi import APIRouter, Path

from subscription_service.entities import location as Location
from subscription_service.entities import plan as Plan
from subscription_service.entities import subscription as Subscription
from subscription_service.exceptions import InvalidParameterError
from subscription_service.models import SubscriptionCreate, SubscriptionUpdate
from ..deps import ActorDep, StoreDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["subscriptions"])


@router.get("/subscriptions/{sid}")
async def get_subscription(sid: int, store: StoreDep):
    """Get subscription and location by sid."""
    subscription = await Subscription.by_sid(store, sid)
    location = await Location.by_sid(store, sid)

    return {
        "subscription": subscription.to_client(),
        "location": location.to_client(),
    }


@router.put("/subscriptions/{sid}")
async def update_subscription(sid: int, body: SubscriptionUpdate, store: StoreDep, actor: ActorDep):
    updates = body.model_dump(exclude_unset=True)
    logger.debug(f"Updating Subscription: {sid} with updates: {updates}")

    subscription = await Subscription.by_sid(store, sid)
    await subscription.update(actor, updates)

    return {"subscription": subscription.to_client()}


@router.get("/subscriptions/user/{uid}")
async def get_user_subscriptions(uid: int, store: StoreDep):
    """Subscriptions and Locations for a user, most active first."""
    logger.debug(f"Getting all subscriptions and locations for user: {uid}")

    subscriptions = await Subscription.by_uid(store, uid)
    locations = {location.sid: location for location in await Location.by_uid(store, uid)}

    results = []
    for sub in subscriptions:
        item = {"subscription": sub.to_client()}
        matching = locations.get(sub.sid)
        if matching is not None:
            item["location"] = matching.to_client()
        results.append(item)

    results.sort(key=lambda item: item["subscription"]["sStatus"] or 0, reverse=True)

    return {"uid": uid, "subscriptions": results}


@router.post("/subscriptions/plan/{sku}")
async def create_subscription(sku: str, store: StoreDep, body: Optional[SubscriptionCreate] = None):
    fields = (body or SubscriptionCreate()).model_dump(exclude_none=True)

    plan = await Plan.by_sku(store, sku)
    subscription = await Subscription.create(store, fields, plan)

    return {"subscription": subscription.to_client()}


@router.post("/subscriptions/{sid}/apply/{sku}")
async def apply_plan(
    sid: int,
    store: StoreDep,
    actor: ActorDep,
    sku: str = Path(..., pattern=r"^[A-Za-z0-9_]+$"),
):
    plan = await Plan.by_sku(store, sku)
    subscription = await Subscription.by_sid(store, sid)

    plan_country = plan.to_client()["country"]
    sub_country = subscription.to_client()["country"]
    if plan_country != sub_country:
        raise InvalidParameterError(
            f"Cannot apply a plan with a different country: <{plan_country}> "
            f"to this subscription with country: <{sub_country}>"
        )

    await subscription.apply_plan(actor, plan)

    return {"subscription": subscription.to_client()}
