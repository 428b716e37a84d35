from typing import Any

from subscription_service.constants import (
    DEFAULT_COUNTRY_ID,
    DEFAULT_CURRENCY_ID,
    ONE_MONTH_IN_SECONDS,
)
from subscription_service.utils.helpers import now_unix

# column -> default for a brand new ss_service row; `created` is filled at build time
SUBSCRIPTION_DEFAULTS: dict[str, Any] = {
    "uid": -1,
    "order_product_id": 0,
    "plan_sku": "",
    "name": "",
    "activated": 0,
    "expires": 0,
    "canceled": 0,
    "time": ONE_MONTH_IN_SECONDS,
    "extra_time": 0,
    "renew": -1,
    "price": 0,
    "extra_charge": 0,
    "s_status": 0,
    "cim_ppid": 0,
    "cim_uid": -1,
    "activation_code": "",
    "data": "",
    "last_signal": 0,
    "cancel_reason": None,
    "system_version": 20,
    "dcid": 0,
    "dispatch_name": "cops",
    "order_id": 0,
    "backup_cim_ppid": None,
    "currency_id": DEFAULT_CURRENCY_ID,
    "country_id": DEFAULT_COUNTRY_ID,
}


def new_subscription(fields: dict) -> dict[str, Any]:
    """Full ss_service row: values from `fields` where given, defaults elsewhere."""
    row = {column: fields.get(column, default) for column, default in SUBSCRIPTION_DEFAULTS.items()}
    row["created"] = fields.get("created", now_unix())
    if fields.get("sid") is not None:
        row["sid"] = fields["sid"]
    return row
