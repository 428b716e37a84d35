# subscription_service/db/blob.py
"""Codec for the opaque `data` columns on ss_service and ss_service_plan."""
import json
from typing import Any


def serialize(value: dict[str, Any]) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def unserialize(raw: str | bytes | None) -> dict[str, Any]:
    """
    Decodes a stored blob. Raises ValueError for empty, malformed or
    non-object input; callers decide what that means for them.
    """
    if raw is None or (isinstance(raw, (str, bytes)) and not raw.strip()):
        raise ValueError("empty data blob")
    try:
        value = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as e:
        raise ValueError(f"malformed data blob: {e}") from e
    if not isinstance(value, dict):
        raise ValueError(f"data blob must decode to an object, got {type(value).__name__}")
    return value
