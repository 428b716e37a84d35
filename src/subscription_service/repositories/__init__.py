from .pg_repositorySubscription import SubscriptionRepository
from .pg_repositoryLocation import LocationRepository
from .pg_repositoryCamera import CameraServiceRepository
from .pg_repositoryPlan import PlanRepository
from .pg_repositoryLookup import LookupRepository, CountryCurrencyLookup

__all__ = [
    "SubscriptionRepository",
    "LocationRepository",
    "CameraServiceRepository",
    "PlanRepository",
    "LookupRepository",
    "CountryCurrencyLookup",
]
