from .subscription import CreditCardInput, FeaturesInput, SubscriptionUpdate, SubscriptionCreate
from .location import ContactInput, PrimaryContactInput, DispatchNumbersInput, SecuritasInfoInput, LocationUpdate
from .camera import CameraSubscriptionInput, CameraQuery, CameraLookupQuery
from .plan import PlanQuery

__all__ = [
    "CreditCardInput", "FeaturesInput", "SubscriptionUpdate", "SubscriptionCreate",
    "ContactInput", "PrimaryContactInput", "DispatchNumbersInput", "SecuritasInfoInput", "LocationUpdate",
    "CameraSubscriptionInput", "CameraQuery", "CameraLookupQuery",
    "PlanQuery",
]
