# subscription_service/formatters/location_formatter.py
"""ss_location rows <-> client locations."""
from __future__ import annotations

from typing import Any

from subscription_service.constants import CERTIFICATE_URI

# client field -> ss_location column
FIELD_MAP = {
    "sid": "sid",
    "uid": "uid",
    "lStatus": "l_status",
    "account": "account",
    "street1": "street1",
    "street2": "street2",
    "crossStreet": "cross_street",
    "name": "location_name",
    "city": "city",
    "state": "state",
    "zip": "postal_code",
    "county": "municipality",
    "country": "country",
    "notes": "dispatch_notes",
    "residenceType": "residence_type",
    "numAdults": "num_adults",
    "numChildren": "num_children",
    "safeWord": "abort",
    "signature": "signature",
    "timeZone": "time_zone",
    "names": "names",
    "licenseNumber": "license_number",
    "licenseExpiration": "license_expiration",
    "templateId": "template_id",
}

DISPATCH_NUMBERS_MAP = {
    "police1": "pd_phone1",
    "police2": "pd_phone2",
    "fire1": "fd_phone1",
    "fire2": "fd_phone2",
    "guard1": "guard_phone1",
    "guard2": "guard_phone2",
}

SECURITAS_INFO_MAP = {
    "siteNo": "site_no",
    "sitestatId": "sitestat_id",
    "csNo": "cs_no",
}

MAX_PRIMARY_CONTACTS = 2
MAX_SECONDARY_CONTACTS = 5

# (first name, last name, phone) columns per primary contact slot
PRIMARY_CONTACT_COLUMNS = (
    ("first_name", "last_name", "phone"),
    ("first_name2", "last_name2", "phone2"),
)

COLUMNS = (
    "modified",
    "sid",
    "uid",
    "l_status",
    "account",
    "abort",
    "signature",
    "first_name",
    "last_name",
    "phone",
    "phone2",
    "street1",
    "street2",
    "city",
    "zone",
    "postal_code",
    "municipality",
    "cross_street",
    "dispatch_notes",
    "contact_name1",
    "contact_phone1",
    "contact_name2",
    "contact_phone2",
    "contact_name3",
    "contact_phone3",
    "contact_name4",
    "contact_phone4",
    "contact_name5",
    "contact_phone5",
    "names",
    "time_zone",
    "residence_type",
    "num_adults",
    "num_children",
    "pd_phone1",
    "pd_phone2",
    "fd_phone1",
    "fd_phone2",
    "license_number",
    "license_expiration",
    "template_id",
    "guard_phone1",
    "guard_phone2",
    "mfa",
    "enable_cops_video",
    "first_name2",
    "last_name2",
    "location_name",
    "enable_smashsafe",
    "site_no",
    "enable_securitas_video",
    "sitestat_id",
    "cs_no",
    "country_id",
)


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> Any:
    return int(value) if value is not None else None


def _full_name(first: Any, last: Any) -> str:
    return f"{_str(first)}{' ' if last else ''}{_str(last)}"


def to_client(loc_row: dict) -> dict[str, Any]:
    row = loc_row
    return {
        "sid": _int(row.get("sid")),
        "uid": _int(row.get("uid")),
        "lStatus": row.get("l_status"),
        "account": _str(row.get("account")),
        "street1": _str(row.get("street1")),
        "street2": _str(row.get("street2")),
        "crossStreet": _str(row.get("cross_street")),
        "name": _str(row.get("location_name")),
        "city": _str(row.get("city")),
        "state": _str(row.get("state")),
        "zip": _str(row.get("postal_code")),
        "county": _str(row.get("municipality")),
        "country": row.get("country"),
        "notes": _str(row.get("dispatch_notes")),
        "residenceType": row.get("residence_type"),
        "numAdults": row.get("num_adults"),
        "numChildren": row.get("num_children"),
        "safeWord": _str(row.get("abort")),
        "signature": _str(row.get("signature")),
        "timeZone": row.get("time_zone"),
        "locationOffset": row.get("locationOffset"),
        "primaryContacts": [
            {
                "name": _full_name(row.get(first), row.get(last)),
                "phone": _str(row.get(phone)),
            }
            for first, last, phone in PRIMARY_CONTACT_COLUMNS
        ],
        "secondaryContacts": [
            {
                "name": _str(row.get(f"contact_name{i}")),
                "phone": _str(row.get(f"contact_phone{i}")),
            }
            for i in range(1, MAX_SECONDARY_CONTACTS + 1)
        ],
        "videoVerification": bool(row.get("enable_cops_video")),
        "certificateUri": CERTIFICATE_URI.format(uid=row.get("uid"), sid=row.get("sid")),
        "licenseNumber": _str(row.get("license_number")),
        "licenseExpiration": row.get("license_expiration"),
        "templateId": row.get("template_id"),
        "names": row.get("names"),
        "modified": row.get("modified"),
        "dispatchNumbers": {field: _str(row.get(column)) for field, column in DISPATCH_NUMBERS_MAP.items()},
        "securitasInfo": {field: _str(row.get(column)) for field, column in SECURITAS_INFO_MAP.items()},
    }


def from_client(location: dict) -> dict[str, Any]:
    """Only fields present in `location` show up in the result."""
    loc = {column: location[field] for field, column in FIELD_MAP.items() if field in location}

    secondary = location.get("secondaryContacts") or []
    for i, contact in enumerate(secondary[:MAX_SECONDARY_CONTACTS], start=1):
        if "name" in contact:
            loc[f"contact_name{i}"] = contact["name"]
        if "phone" in contact:
            loc[f"contact_phone{i}"] = contact["phone"]

    for nested, mapping in (("dispatchNumbers", DISPATCH_NUMBERS_MAP), ("securitasInfo", SECURITAS_INFO_MAP)):
        values = location.get(nested)
        if isinstance(values, dict):
            loc.update({column: values[field] for field, column in mapping.items() if field in values})

    # Primary contacts are only touched when a name/phone is actually given.
    # Names keep the first two whitespace separated tokens, anything after is dropped.
    primary = location.get("primaryContacts") or []
    for contact, (first, last, phone) in zip(primary, PRIMARY_CONTACT_COLUMNS):
        tokens = (contact.get("name") or "").split()
        if tokens:
            loc[first] = tokens[0]
            if len(tokens) > 1:
                loc[last] = tokens[1]
        if contact.get("phone"):
            loc[phone] = contact["phone"]

    # Only set videoVerification if it was passed in
    if location.get("videoVerification") is not None:
        loc["enable_cops_video"] = 1 if location["videoVerification"] is True else 0

    return loc


def clean(location: dict) -> dict[str, Any]:
    """Remove any fields not in ss_location."""
    return {column: location[column] for column in COLUMNS if column in location}
