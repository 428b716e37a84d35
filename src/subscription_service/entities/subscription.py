# subscription_service/entities/subscription.py
from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, List, Optional

from subscription_service.constants import DISPATCHER_FROM_COUNTRY_ID
from subscription_service.db.blob import serialize, unserialize
from subscription_service.exceptions import (
    BadSubscriptionDataError,
    ConflictError,
    InvalidParameterError,
    NotFoundError,
    ServerError,
)
from subscription_service.formatters import subscription_formatter as format
from subscription_service.formatters.data_formatter import SubscriptionData
from subscription_service.utils.helpers import deep_merge, is_downgrade_to_camera, now_unix

from .build import new_subscription
from .plan import Plan
from .state import EntityHandle

if TYPE_CHECKING:
    from subscription_service.store import DataStore

logger = logging.getLogger(__name__)


class Subscription(EntityHandle):
    entity_name = "Subscription"

    @property
    def sid(self) -> Optional[int]:
        return self._row("read sid").get("sid")

    @staticmethod
    def _decode_data(row: dict) -> SubscriptionData:
        try:
            return SubscriptionData.from_dict(unserialize(row.get("data")))
        except ValueError as e:
            raise BadSubscriptionDataError("No Data available on subscription") from e

    async def update(self, actor: Optional[int], service: dict) -> None:
        row = self._row("update subscription")

        updates = format.from_client(service)
        # sid is immutable
        updates.pop("sid", None)

        # unknown codes leave the stored ids alone
        if updates.get("country"):
            country_id = await self._store.lookup.country_id(updates["country"])
            if country_id:
                updates["country_id"] = country_id

        if updates.get("currency"):
            currency_id = await self._store.lookup.currency_id(updates["currency"])
            if currency_id:
                updates["currency_id"] = currency_id

        data = self._decode_data(row).merge(SubscriptionData.from_dict(updates.get("data")))

        upgrade_status = service.get("upgradeStatus")
        if upgrade_status is not None:
            data = data.with_upgrade_status(upgrade_status)

        updates["data"] = serialize(data.to_dict())

        self._set_row(deep_merge(copy.deepcopy(row), updates))

        await self.save(actor)

    async def save(self, actor: Optional[int] = None) -> None:
        row = self._row("save subscription")
        if not row.get("sid"):
            raise ServerError("Subscription must have a sid to be saved")

        subscription = format.clean(row)

        # the audit table has no order_id
        audit = {column: value for column, value in subscription.items() if column != "order_id"}
        audit["edit_uid"] = actor or 0
        audit["edit_timestamp"] = now_unix()

        await self._store.subscriptions.save_with_audit(subscription, audit)
        logger.info(
            f"Saved subscription {row['sid']} (edit_uid={audit['edit_uid']})",
            extra={"sid": row["sid"], "actor": audit["edit_uid"]},
        )

    async def apply_plan(self, actor: Optional[int], plan: Plan) -> None:
        row = self._row("apply plan to subscription")

        plan_row = plan.to_internal()

        if is_downgrade_to_camera(row.get("plan_sku"), plan_row.get("plan_sku")):
            raise InvalidParameterError("Cannot downgrade a monitored plan to a camera plan")

        self._set_row(deep_merge(copy.deepcopy(row), plan_row))

        await self.save(actor)

    def to_client(self) -> dict[str, Any]:
        row = self._row("return subscription")
        return format.to_client(row, self._decode_data(row).to_dict())


async def by_sid(store: "DataStore", sid: int) -> Subscription:
    """Returns a single Subscription by sid."""
    logger.debug(f"Getting Subscription by Sid: {sid}")
    row = await store.subscriptions.get_by_sid(sid)
    if row is None:
        raise NotFoundError("Could not find Subscription")
    return Subscription(store, row)


async def by_account(store: "DataStore", account: str) -> Subscription:
    """Returns the most active Subscription for an account."""
    logger.debug(f"Getting Subscription by Account: {account}")
    row = await store.subscriptions.get_by_account(account)
    if row is None:
        raise NotFoundError("Could not find Subscription")
    return Subscription(store, row)


async def by_uid(store: "DataStore", uid: int) -> List[Subscription]:
    """All Subscriptions owned by a user, most active first. Empty when none."""
    logger.debug(f"Getting all subscriptions by Uid: {uid}")
    rows = await store.subscriptions.list_by_uid(uid)
    return [Subscription(store, row) for row in rows]


async def create(store: "DataStore", fields: dict, plan: Plan) -> Subscription:
    """
    Creates a new Subscription from client fields and a Plan.

    Plan columns are laid over the client fields, defaults fill whatever is
    still missing, and the dispatcher follows the resulting country. The
    stored row is fetched back so the caller sees what the database holds.
    """
    base = plan.to_internal()

    sid = fields.get("sid")
    if sid is not None and await store.subscriptions.exists(sid):
        raise ConflictError(f"Subscription {sid} already exists")

    subscription = new_subscription(deep_merge(format.from_client(fields), base))

    # Select proper dispatcher
    subscription["dispatch_name"] = DISPATCHER_FROM_COUNTRY_ID.get(
        subscription["country_id"], subscription["dispatch_name"]
    )

    new_sid = await store.subscriptions.insert(format.clean(subscription))
    logger.info(f"Created subscription {new_sid} from plan {base.get('plan_sku')}")

    return await by_sid(store, new_sid)
