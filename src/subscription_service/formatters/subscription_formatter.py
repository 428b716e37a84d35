# subscription_service/formatters/subscription_formatter.py
"""ss_service rows <-> client subscriptions."""
from __future__ import annotations

from typing import Any

from .data_formatter import data_from_features, features_from_data

# client field -> ss_service column
FIELD_MAP = {
    "uid": "uid",
    "sid": "sid",
    "sStatus": "s_status",
    "orderId": "order_id",
    "orderProductId": "order_product_id",
    "planSku": "plan_sku",
    "planName": "name",
    "expires": "expires",
    "renew": "renew",
    "extraCharge": "extra_charge",
    "currency": "currency",
    "country": "country",
    "activationCode": "activation_code",
    "systemVersion": "system_version",
    "dispatcher": "dispatch_name",
}

CREDIT_CARD_MAP = {
    "ppid": "cim_ppid",
    "backupPpid": "backup_cim_ppid",
    "uid": "cim_uid",
}

COLUMNS = (
    "sid",
    "uid",
    "order_product_id",
    "plan_sku",
    "name",
    "created",
    "activated",
    "expires",
    "canceled",
    "time",
    "extra_time",
    "renew",
    "price",
    "extra_charge",
    "s_status",
    "cim_ppid",
    "cim_uid",
    "activation_code",
    "data",
    "last_signal",
    "cancel_reason",
    "system_version",
    "dcid",
    "dispatch_name",
    "order_id",
    "backup_cim_ppid",
    "currency_id",
    "country_id",
)


def _int(value: Any) -> Any:
    return int(value) if value is not None else None


def to_client(service_row: dict, data: dict | None) -> dict[str, Any]:
    row = service_row
    return {
        "uid": _int(row.get("uid")),
        "sid": _int(row.get("sid")),
        "orderId": row.get("order_id"),
        "orderProductId": row.get("order_product_id"),
        "sStatus": _int(row.get("s_status")),
        "planSku": row.get("plan_sku"),
        "planName": row.get("name"),
        "currency": row.get("currency"),
        "country": row.get("country"),
        "data": row.get("data"),
        "created": row.get("created"),
        "activated": row.get("activated"),
        "expires": row.get("expires"),
        "canceled": row.get("canceled"),
        "cancelReason": row.get("cancel_reason"),
        "time": row.get("time"),
        "extraTime": row.get("extra_time"),
        "price": row.get("price"),
        "extraCharge": row.get("extra_charge"),
        "renew": row.get("renew"),
        "lastSignal": row.get("last_signal"),
        "activationCode": row.get("activation_code"),
        "systemVersion": row.get("system_version"),
        "dispatcher": row.get("dispatch_name"),
        "creditCard": {
            "ppid": row.get("cim_ppid"),
            "backupPpid": row.get("backup_cim_ppid"),
            "uid": row.get("cim_uid"),
            "type": row.get("cc_type") or "",
            "lastFour": row.get("last_four") or "",
        },
        "upgradeStatus": (data or {}).get("upgrade_status"),
        "features": features_from_data(data),
    }


def from_client(service: dict) -> dict[str, Any]:
    """Only fields present in `service` show up in the result."""
    updates = {column: service[field] for field, column in FIELD_MAP.items() if field in service}

    credit_card = service.get("creditCard")
    if isinstance(credit_card, dict):
        updates.update({column: credit_card[field] for field, column in CREDIT_CARD_MAP.items() if field in credit_card})

    # `data` here is a feature delta, not a serialized blob
    if service.get("features"):
        updates["data"] = data_from_features(service["features"])

    return updates


def clean(service: dict) -> dict[str, Any]:
    """Only return fields that exist in ss_service."""
    return {column: service[column] for column in COLUMNS if column in service}
