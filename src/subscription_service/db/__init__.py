# subscription_service/db/__init__.py

from .base import Base

from .reference.reference_orm import CountryORM, CurrencyORM, ZoneORM

from .billing.plan_orm import ServicePlanORM
from .billing.service_orm import ServiceORM, ServiceAuditORM
from .billing.payment_profile_orm import PaymentProfileORM, PaymentProfileTestORM

from .locations.location_orm import LocationORM, LocationAuditORM
from .cameras.camera_service_orm import CameraServiceORM, CameraServiceAuditORM


__all__ = [
    "Base",
    "CountryORM",
    "CurrencyORM",
    "ZoneORM",
    "ServicePlanORM",
    "ServiceORM",
    "ServiceAuditORM",
    "PaymentProfileORM",
    "PaymentProfileTestORM",
    "LocationORM",
    "LocationAuditORM",
    "CameraServiceORM",
    "CameraServiceAuditORM",
]
