from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# first and last name, or nothing at all
FULL_NAME_PATTERN = r"(^$)|\S+\s+\S+"


class ContactInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    phone: Optional[str] = None


class PrimaryContactInput(ContactInput):
    name: Optional[str] = Field(None, pattern=FULL_NAME_PATTERN)


class DispatchNumbersInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    police1: Optional[str] = None
    police2: Optional[str] = None
    fire1: Optional[str] = None
    fire2: Optional[str] = None
    guard1: Optional[str] = None
    guard2: Optional[str] = None


class SecuritasInfoInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    siteNo: Optional[str] = None
    sitestatId: Optional[str] = None
    csNo: Optional[str] = None


class LocationUpdate(BaseModel):
    """Body of PUT /locations/{sid}."""

    model_config = ConfigDict(extra="forbid")

    sid: Optional[int] = None
    uid: Optional[int] = None
    lStatus: Optional[int] = None
    account: Optional[str] = None
    street1: Optional[str] = None
    street2: Optional[str] = None
    crossStreet: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    county: Optional[str] = None
    country: Optional[str] = None
    notes: Optional[str] = None
    residenceType: Optional[int] = None
    numAdults: Optional[int] = None
    numChildren: Optional[int] = None
    safeWord: Optional[str] = None
    signature: Optional[str] = None
    timeZone: Optional[int] = None
    primaryContacts: Optional[List[PrimaryContactInput]] = Field(None, max_length=2)
    secondaryContacts: Optional[List[ContactInput]] = Field(None, max_length=5)
    videoVerification: Optional[bool] = None
    licenseNumber: Optional[str] = None
    licenseExpiration: Optional[int] = None
    templateId: Optional[int] = None
    names: Optional[str] = None
    dispatchNumbers: Optional[DispatchNumbersInput] = None
    securitasInfo: Optional[SecuritasInfoInput] = None
