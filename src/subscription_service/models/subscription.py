from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreditCardInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ppid: Optional[int] = None
    backupPpid: Optional[int] = None
    uid: Optional[int] = None


class FeaturesInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    monitoring: Optional[bool] = None
    alerts: Optional[bool] = None
    online: Optional[bool] = None
    hazard: Optional[bool] = None
    video: Optional[bool] = None
    cameras: Optional[int] = None


class SubscriptionUpdate(BaseModel):
    """Body of PUT /subscriptions/{sid}. Every field is optional."""

    model_config = ConfigDict(extra="forbid")

    uid: Optional[int] = None
    sid: Optional[int] = None
    orderId: Optional[int] = None
    orderProductId: Optional[int] = None
    planSku: Optional[str] = None
    planName: Optional[str] = None
    currency: Optional[str] = None
    country: Optional[str] = Field(None, min_length=2, max_length=2, pattern=r"^[A-Za-z0-9]+$")
    expires: Optional[int] = None
    time: Optional[int] = None
    extraTime: Optional[int] = None
    price: Optional[int] = None
    extraCharge: Optional[int] = None
    renew: Optional[int] = None
    activationCode: Optional[str] = None
    systemVersion: Optional[int] = None
    dispatcher: Optional[str] = None
    creditCard: Optional[CreditCardInput] = None
    features: Optional[FeaturesInput] = None
    upgradeStatus: Optional[int] = None


class SubscriptionCreate(BaseModel):
    """
    Body of POST /subscriptions/plan/{sku}. The whole body may be omitted.

    `sid` is normally assigned by the database; a caller may pin one, which
    fails with Conflict when that sid is already taken.
    """

    model_config = ConfigDict(extra="forbid")

    sid: Optional[int] = None
    uid: int = -1
    orderId: int = 0
    orderProductId: int = 0
    activationCode: str = ""
    creditCard: Optional[CreditCardInput] = None
