import copy
import logging
import time
from datetime import datetime, timezone
from typing import Any, Mapping

from dateutil.relativedelta import relativedelta

from subscription_service.constants import CAMERA_PLANS

logger = logging.getLogger(__name__)


def deep_merge(target: dict, source: Mapping[str, Any]) -> dict:
    """
    Recursively merges `source` into `target` in place and returns `target`.
    Nested dicts are merged key by key; any other value from `source` overwrites.
    """
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            deep_merge(target[key], value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def now_unix() -> int:
    return int(time.time())


def one_month_from_now() -> int:
    """Unix timestamp one calendar month from now."""
    return int((datetime.now(timezone.utc) + relativedelta(months=1)).timestamp())


def strip_country(sku: str | None) -> str:
    return (sku or "").split("_")[0]


def is_downgrade_to_camera(current_sku: str | None, new_sku: str | None) -> bool:
    logger.debug(f"Checking camera downgrade for current sku: {current_sku} to new sku: {new_sku}")

    # A camera plan may only be applied over another camera plan
    return strip_country(new_sku) in CAMERA_PLANS and strip_country(current_sku) not in CAMERA_PLANS
