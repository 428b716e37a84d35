# subscription_service/entities/plan.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List

from subscription_service.db.blob import unserialize
from subscription_service.exceptions import BadSubscriptionDataError, NotFoundError
from subscription_service.formatters.data_formatter import SubscriptionData

from .state import EntityHandle

if TYPE_CHECKING:
    from subscription_service.store import DataStore

logger = logging.getLogger(__name__)


class Plan(EntityHandle):
    """Read-only ss_service_plan row."""

    entity_name = "Plan"

    def to_client(self) -> dict[str, Any]:
        return format_plan(self._row("call to_client"))

    def to_internal(self) -> dict[str, Any]:
        """The raw plan row, merged as-is into subscriptions."""
        return dict(self._row("call to_internal"))


def format_plan(plan: dict) -> dict[str, Any]:
    try:
        data = SubscriptionData.from_dict(unserialize(plan.get("data")))
    except ValueError as e:
        raise BadSubscriptionDataError(f"No Data available on plan {plan.get('plan_sku')}") from e

    return {
        "planSku": plan.get("plan_sku"),
        "time": plan.get("time"),
        "renew": plan.get("renew"),
        "price": plan.get("price"),
        "name": plan.get("name"),
        "description": plan.get("description") or "",
        "features": data.to_features(),
        "systemVersion": plan.get("system_version"),
        "currency": plan.get("currency"),
        "country": plan.get("country"),
    }


async def by_country(store: "DataStore", country: str) -> List[Plan]:
    logger.debug(f"Looking up service plans by country: {country}")
    rows = await store.plans.list_by_country(country)
    return [Plan(store, row) for row in rows]


async def by_sku(store: "DataStore", sku: str) -> Plan:
    logger.debug(f"Getting plan by sku: {sku}")
    row = await store.plans.get_by_sku(sku)
    if row is None:
        raise NotFoundError(f"Plan could not be found for sku: {sku}")
    return Plan(store, row)
