# subscription_service/entities/location.py
from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from subscription_service.constants import TIMEZONES_TO_STRING
from subscription_service.exceptions import NotFoundError, ServerError
from subscription_service.formatters import location_formatter as format
from subscription_service.utils.helpers import deep_merge, now_unix

from .state import EntityHandle

if TYPE_CHECKING:
    from subscription_service.store import DataStore

logger = logging.getLogger(__name__)


def location_offset(time_zone: Optional[int], now: Optional[datetime] = None) -> int:
    """Current UTC offset in seconds for a stored time_zone id. 0 for unknown ids."""
    tz_name = TIMEZONES_TO_STRING.get(time_zone)
    if tz_name is None:
        return 0
    logger.debug(f"Converting timezone: {tz_name}")
    try:
        zone = ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        logger.warning(f"Timezone data missing for {tz_name}")
        return 0
    offset = (now or datetime.now(timezone.utc)).astimezone(zone).utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


class Location(EntityHandle):
    entity_name = "Location"

    @property
    def sid(self) -> Optional[int]:
        return self._row("read sid").get("sid")

    def is_camera_account(self) -> bool:
        account = self._row("access location").get("account")
        return not account or account.startswith("X")

    async def update(self, actor: Optional[int], updates: dict) -> None:
        row = self._row("update location")

        changes = format.from_client(updates)
        changes.pop("sid", None)
        merged = deep_merge(copy.deepcopy(row), changes)

        if merged.get("country"):
            country_id = await self._store.lookup.country_id(merged["country"])
            if country_id:
                merged["country_id"] = country_id

        merged["modified"] = now_unix()
        self._set_row(merged)

        logger.debug("Updating Location and Auditing")
        await self.save(actor)

    async def save(self, actor: Optional[int] = None) -> None:
        row = self._row("save location")
        if not row.get("sid"):
            raise ServerError("Location must have a sid to be saved")

        location = format.clean(row)
        audit = dict(location, edit_uid=actor or 0, edit_timestamp=now_unix())

        await self._store.locations.save_with_audit(location, audit)
        logger.info(
            f"Saved location {row['sid']} (edit_uid={audit['edit_uid']})",
            extra={"sid": row["sid"], "actor": audit["edit_uid"]},
        )

    def to_client(self) -> dict[str, Any]:
        row = self._row("return location")
        # never trust a stored offset
        return format.to_client(dict(row, locationOffset=location_offset(row.get("time_zone"))))


async def by_sid(store: "DataStore", sid: int) -> Location:
    logger.debug(f"Getting Location by Sid: {sid}")
    row = await store.locations.get_by_sid(sid)
    if row is None:
        raise NotFoundError("Could not find location")
    return Location(store, row)


async def by_account(store: "DataStore", account: str) -> Location:
    """Location whose subscription has the highest s_status."""
    logger.debug(f"Getting Location by Account: {account}")
    row = await store.locations.get_by_account(account)
    if row is None:
        raise NotFoundError("Could not find location")
    return Location(store, row)


async def by_uid(store: "DataStore", uid: int) -> List[Location]:
    logger.debug(f"Getting Locations by Uid: {uid}")
    rows = await store.locations.list_by_uid(uid)
    return [Location(store, row) for row in rows]


async def account_to_sid(store: "DataStore", account: str) -> Optional[int]:
    return await store.locations.account_to_sid(account)


async def sid_to_account(store: "DataStore", sid: int) -> Optional[str]:
    return await store.locations.sid_to_account(sid)
