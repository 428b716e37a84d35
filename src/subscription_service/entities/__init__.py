from . import subscription
from . import location
from . import camera_subscription
from . import plan
from .state import EMPTY, Empty, EntityHandle, Loaded
from .subscription import Subscription
from .location import Location, location_offset
from .camera_subscription import CameraSubscription
from .plan import Plan, format_plan

__all__ = [
    "subscription",
    "location",
    "camera_subscription",
    "plan",
    "EMPTY",
    "Empty",
    "EntityHandle",
    "Loaded",
    "Subscription",
    "Location",
    "location_offset",
    "CameraSubscription",
    "Plan",
    "format_plan",
]
