# subscription_service/formatters/data_formatter.py
from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any, Optional

BOOLEAN_FEATURES = ("monitoring", "alerts", "online", "hazard", "video")
CAMERAS = "cameras"


def features_from_data(data: dict | None) -> dict[str, Any]:
    features = (data or {}).get("features") or {}

    def _enabled(name: str) -> bool:
        return bool((features.get(name) or {}).get("enable", 0))

    result: dict[str, Any] = {name: _enabled(name) for name in BOOLEAN_FEATURES}
    result[CAMERAS] = (features.get(CAMERAS) or {}).get("value", 0)
    return result


def data_from_features(features: dict | None) -> dict[str, Any]:
    features = features or {}
    data: dict[str, Any] = {}

    for name in BOOLEAN_FEATURES:
        if features.get(name) is not None:
            data.setdefault("features", {})[name] = {"enable": int(features[name])}

    # cameras.enable follows the camera count, it can't be set on its own
    if features.get(CAMERAS) is not None:
        num_cams = features[CAMERAS]
        data.setdefault("features", {})[CAMERAS] = {
            "enable": 1 if num_cams > 0 else 0,
            "value": num_cams,
        }

    return data


def _mapping(raw: Any, what: str) -> dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{what} must be an object, got {type(raw).__name__}")
    return dict(raw)


@dataclass(frozen=True)
class Feature:
    """One entry of data.features. Keys other than enable/value ride along in `extra`."""

    enable: int = 0
    value: Optional[int] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict | None, name: str = "feature") -> "Feature":
        raw = _mapping(raw, f"feature {name}")
        enable = raw.pop("enable", 0) or 0
        try:
            enable = int(enable)
        except (TypeError, ValueError) as e:
            raise ValueError(f"feature {name} has a non numeric enable: {enable!r}") from e
        return cls(enable=enable, value=raw.pop("value", None), extra=raw)

    def to_dict(self) -> dict[str, Any]:
        out = copy.deepcopy(self.extra)
        out["enable"] = self.enable
        if self.value is not None:
            out["value"] = self.value
        return out

    def merge(self, delta: "Feature") -> "Feature":
        extra = copy.deepcopy(self.extra)
        extra.update(copy.deepcopy(delta.extra))
        return Feature(
            enable=delta.enable,
            value=delta.value if delta.value is not None else self.value,
            extra=extra,
        )


@dataclass(frozen=True)
class SubscriptionData:
    """
    Decoded ss_service.data blob.

    `features` and `upgrade_status` are typed; any other key the blob carries
    lives in `extra` and is written back untouched.
    """

    features: dict[str, Feature] = field(default_factory=dict)
    upgrade_status: Optional[int] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict | None) -> "SubscriptionData":
        """Raises ValueError when the blob or one of its features is not shaped like an object."""
        raw = _mapping(raw, "data")
        raw_features = _mapping(raw.pop("features", None), "features")
        upgrade_status = raw.pop("upgrade_status", None)
        return cls(
            features={name: Feature.from_dict(value, name) for name, value in raw_features.items()},
            upgrade_status=upgrade_status,
            extra=raw,
        )

    def to_dict(self) -> dict[str, Any]:
        out = copy.deepcopy(self.extra)
        if self.features:
            out["features"] = {name: feature.to_dict() for name, feature in self.features.items()}
        if self.upgrade_status is not None:
            out["upgrade_status"] = self.upgrade_status
        return out

    def merge(self, delta: "SubscriptionData") -> "SubscriptionData":
        """Feature-wise merge; `delta` wins per attribute, untouched features are kept."""
        features = dict(self.features)
        for name, change in delta.features.items():
            current = features.get(name)
            features[name] = change if current is None else current.merge(change)
        extra = copy.deepcopy(self.extra)
        extra.update(copy.deepcopy(delta.extra))
        return SubscriptionData(
            features=features,
            upgrade_status=delta.upgrade_status if delta.upgrade_status is not None else self.upgrade_status,
            extra=extra,
        )

    def with_upgrade_status(self, upgrade_status: int) -> "SubscriptionData":
        return replace(self, upgrade_status=upgrade_status)

    def to_features(self) -> dict[str, Any]:
        return features_from_data(self.to_dict())
