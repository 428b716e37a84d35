from datetime import datetime, timezone

import pytest

from subscription_service.entities.location import location_offset
from subscription_service.utils.helpers import deep_merge, is_downgrade_to_camera, strip_country


def test_deep_merge_merges_nested_and_overwrites():
    target = {"a": 1, "nested": {"x": 1, "y": 2}, "keep": True}

    deep_merge(target, {"a": 2, "nested": {"y": 3, "z": 4}, "new": None})

    assert target == {"a": 2, "nested": {"x": 1, "y": 3, "z": 4}, "keep": True, "new": None}


def test_deep_merge_explicit_none_overwrites():
    assert deep_merge({"a": 1}, {"a": None}) == {"a": None}


def test_strip_country():
    assert strip_country("SSEDSM2_GB") == "SSEDSM2"
    assert strip_country(None) == ""


@pytest.mark.parametrize(
    "current, new, expected",
    [
        ("SSEDSM2", "SSEDCM1", True),
        ("SSEDSM2_GB", "SSEDCMU_GB", True),
        ("SSEDBM1", "SSBCV1", True),
        ("SSEDCM1", "SSEDCMU", False),
        ("SSBCV1", "SSEDCM1", False),
        ("SSEDCM1", "SSEDSM2", False),
        ("SSEDBM1", "SSEDSM2", False),
    ],
)
def test_is_downgrade_to_camera(current, new, expected):
    assert is_downgrade_to_camera(current, new) is expected


def test_location_offset_follows_dst():
    winter = datetime(2024, 1, 15, 12, tzinfo=timezone.utc)
    summer = datetime(2024, 7, 15, 12, tzinfo=timezone.utc)

    assert location_offset(0, winter) == -5 * 3600
    assert location_offset(0, summer) == -4 * 3600
    assert location_offset(5, summer) == -7 * 3600
    assert location_offset(8, winter) == 0
    assert location_offset(8, summer) == 3600


def test_location_offset_unknown_zone():
    assert location_offset(99) == 0
    assert location_offset(None) == 0
