from . import data_formatter
from . import subscription_formatter
from . import location_formatter
from . import camera_subscription_formatter
from .data_formatter import Feature, SubscriptionData, features_from_data, data_from_features

__all__ = [
    "data_formatter",
    "subscription_formatter",
    "location_formatter",
    "camera_subscription_formatter",
    "Feature",
    "SubscriptionData",
    "features_from_data",
    "data_from_features",
]
