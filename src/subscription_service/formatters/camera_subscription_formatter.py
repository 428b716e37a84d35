# subscription_service/formatters/camera_subscription_formatter.py
from __future__ import annotations

from typing import Any

from subscription_service.constants import DEFAULT_CAMERA_PLAN, ONE_MONTH_IN_SECONDS
from subscription_service.utils.helpers import now_unix, one_month_from_now

FIELD_MAP = {
    "expires": "expires",
    "time": "time",
    "extraTime": "extra_time",
    "price": "price",
    "recordingLifetime": "recording_lifetime",
    "planSku": "plan_sku",
}

COLUMNS = (
    "csid",
    "uid",
    "sid",
    "uuid",
    "recording_lifetime",
    "plan_sku",
    "price",
    "created",
    "expires",
    "canceled",
    "time",
    "extra_time",
    "trial_used",
)


def from_client(updates: dict) -> dict[str, Any]:
    to_update = {column: updates[field] for field, column in FIELD_MAP.items() if field in updates}

    if "trialUsed" in updates:
        to_update["trial_used"] = 1 if updates["trialUsed"] else 0

    return to_update


def to_client(sub: dict) -> dict[str, Any]:
    return {
        "uid": sub.get("uid"),
        "sid": sub.get("sid"),
        "uuid": sub.get("uuid"),
        "recordingLifetime": int(sub.get("recording_lifetime") or 0),
        "planSku": sub.get("plan_sku"),
        "price": sub.get("price"),
        "created": sub.get("created"),
        "expires": sub.get("expires"),
        "canceled": sub.get("canceled"),
        "time": sub.get("time"),
        "extraTime": sub.get("extra_time"),
        "trialUsed": bool(sub.get("trial_used")),
    }


def create_defaults() -> dict[str, Any]:
    return {
        "recording_lifetime": ONE_MONTH_IN_SECONDS,
        "plan_sku": DEFAULT_CAMERA_PLAN,
        "price": 0,
        "created": now_unix(),
        "expires": one_month_from_now(),
        "canceled": 0,
        "time": ONE_MONTH_IN_SECONDS,
        "extra_time": 0,
        "trial_used": 0,
    }


def clean(sub: dict) -> dict[str, Any]:
    return {column: sub[column] for column in COLUMNS if column in sub}
