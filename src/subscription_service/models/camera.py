from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CameraSubscriptionInput(BaseModel):
    """Body of POST and PUT /cameras/{uuid}."""

    model_config = ConfigDict(extra="forbid")

    sid: int
    uid: int
    uuid: Optional[str] = None
    recordingLifetime: Optional[int] = None
    planSku: Optional[str] = None
    price: Optional[int] = None
    expires: Optional[int] = None
    time: Optional[int] = None
    extraTime: Optional[int] = None
    trialUsed: Optional[bool] = None


class CameraQuery(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sid: Optional[int] = None
    uid: Optional[int] = None


class CameraLookupQuery(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sid: int
