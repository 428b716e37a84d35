import logging

from fastapi import APIRouter

from subscription_service.entities import location as Location
from subscription_service.models import LocationUpdate
from ..deps import ActorDep, StoreDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["subscriptions"])


@router.put("/locations/{sid}")
async def update_location(sid: int, body: LocationUpdate, store: StoreDep, actor: ActorDep):
    """Update a Location by sid."""
    updates = body.model_dump(exclude_unset=True)
    logger.debug(f"Updating location: {sid} with updates: {updates}")

    location = await Location.by_sid(store, sid)
    await location.update(actor, updates)

    return {"location": location.to_client()}
