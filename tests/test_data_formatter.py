import pytest

from subscription_service.db.blob import serialize, unserialize
from subscription_service.formatters.data_formatter import (
    Feature,
    SubscriptionData,
    data_from_features,
    features_from_data,
)


def test_features_from_data_decodes_flags_and_camera_count():
    data = {
        "features": {
            "monitoring": {"enable": 1},
            "alerts": {"enable": 0},
            "video": {"enable": 1},
            "cameras": {"enable": 1, "value": 4},
        }
    }

    assert features_from_data(data) == {
        "monitoring": True,
        "alerts": False,
        "online": False,
        "hazard": False,
        "video": True,
        "cameras": 4,
    }


@pytest.mark.parametrize("data", [None, {}, {"features": None}, {"features": {}}])
def test_features_from_data_defaults_when_missing(data):
    features = features_from_data(data)

    assert features["cameras"] == 0
    assert not any(features[name] for name in ("monitoring", "alerts", "online", "hazard", "video"))


def test_data_from_features_only_writes_given_flags():
    assert data_from_features({"monitoring": True, "video": False, "alerts": None}) == {
        "features": {"monitoring": {"enable": 1}, "video": {"enable": 0}}
    }


def test_data_from_features_camera_enable_follows_count():
    assert data_from_features({"cameras": 3}) == {"features": {"cameras": {"enable": 1, "value": 3}}}
    assert data_from_features({"cameras": 0}) == {"features": {"cameras": {"enable": 0, "value": 0}}}


def test_data_from_features_empty():
    assert data_from_features({}) == {}
    assert data_from_features(None) == {}


def test_subscription_data_merge_keeps_untouched_features():
    current = SubscriptionData.from_dict(
        {
            "features": {"monitoring": {"enable": 1}, "cameras": {"enable": 1, "value": 5}},
            "upgrade_status": 1,
            "legacy_flag": "keep-me",
        }
    )
    delta = SubscriptionData.from_dict({"features": {"monitoring": {"enable": 0}, "hazard": {"enable": 1}}})

    merged = current.merge(delta)

    assert merged.features["monitoring"] == Feature(enable=0)
    assert merged.features["hazard"] == Feature(enable=1)
    assert merged.features["cameras"] == Feature(enable=1, value=5)
    assert merged.upgrade_status == 1
    assert merged.to_dict()["legacy_flag"] == "keep-me"


def test_subscription_data_camera_value_survives_enable_only_delta():
    current = SubscriptionData.from_dict({"features": {"cameras": {"enable": 1, "value": 5}}})

    merged = current.merge(SubscriptionData(features={"cameras": Feature(enable=0)}))

    assert merged.features["cameras"] == Feature(enable=0, value=5)


def test_with_upgrade_status_returns_new_value():
    data = SubscriptionData()

    upgraded = data.with_upgrade_status(3)

    assert upgraded.upgrade_status == 3
    assert data.upgrade_status is None
    assert upgraded.to_dict() == {"upgrade_status": 3}


def test_to_features_matches_codec():
    data = SubscriptionData.from_dict({"features": {"online": {"enable": 1}}})

    assert data.to_features()["online"] is True


def test_blob_codec_is_stable():
    blob = serialize({"b": 1, "a": {"enable": 1}})

    assert blob == '{"a":{"enable":1},"b":1}'
    assert unserialize(blob) == {"a": {"enable": 1}, "b": 1}


@pytest.mark.parametrize("raw", [None, "", "   ", "not-json", "[1, 2]", "42"])
def test_unserialize_rejects_bad_blobs(raw):
    with pytest.raises(ValueError):
        unserialize(raw)


def test_feature_keeps_unknown_keys_through_merge():
    current = SubscriptionData.from_dict({"features": {"video": {"enable": 1, "retention": 30, "tier": "pro"}}})
    delta = SubscriptionData.from_dict({"features": {"video": {"enable": 0, "tier": "basic"}}})

    merged = current.merge(delta)

    assert merged.to_dict() == {"features": {"video": {"enable": 0, "retention": 30, "tier": "basic"}}}


@pytest.mark.parametrize(
    "raw",
    [
        {"features": {"monitoring": 1}},
        {"features": ["monitoring"]},
        {"features": {"alerts": {"enable": "yes"}}},
        {"features": {"alerts": {"enable": [1]}}},
    ],
)
def test_subscription_data_rejects_misshapen_blobs(raw):
    with pytest.raises(ValueError):
        SubscriptionData.from_dict(raw)
