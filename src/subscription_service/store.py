import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from subscription_service.repositories import (
    SubscriptionRepository,
    LocationRepository,
    CameraServiceRepository,
    PlanRepository,
    LookupRepository,
    CountryCurrencyLookup,
)
from subscription_service.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class DataStore:
    """
    Single access point the entity layer persists through.

    `lookup` resolves country/currency codes during updates. It defaults to
    the database-backed LookupRepository and can be swapped for a fake.
    """

    def __init__(
        self,
        subscriptions: SubscriptionRepository,
        locations: LocationRepository,
        cameras: CameraServiceRepository,
        plans: PlanRepository,
        reference: LookupRepository,
        lookup: Optional[CountryCurrencyLookup] = None,
        engine: Optional[AsyncEngine] = None,
    ):
        self.subscriptions = subscriptions
        self.locations = locations
        self.cameras = cameras
        self.plans = plans
        self.reference = reference
        self.lookup: CountryCurrencyLookup = lookup or reference
        self._engine = engine

    async def check_connections(self) -> dict[str, str]:
        """Reports the status of every external service this store depends on."""
        statuses = {}
        try:
            await self.reference.check_connection()
            statuses["database"] = "ok"
        except DatabaseError as e:
            statuses["database"] = f"failed: {e}"
        return statuses

    async def aclose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
