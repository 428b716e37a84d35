import pytest

from subscription_service.entities import plan as Plan
from subscription_service.exceptions import NotFoundError, ServerError

pytestmark = pytest.mark.asyncio


async def test_by_sku(store):
    plan = await Plan.by_sku(store, "SSEDSM2_GB")

    client = plan.to_client()
    assert client["planSku"] == "SSEDSM2_GB"
    assert client["country"] == "GB"
    assert client["currency"] == "GBP"
    assert client["features"]["cameras"] == 10

    internal = plan.to_internal()
    assert internal["country_id"] == 826
    assert isinstance(internal["data"], str)


async def test_by_sku_not_found(store):
    with pytest.raises(NotFoundError):
        await Plan.by_sku(store, "NOPE")


async def test_by_country(store):
    plans = await Plan.by_country(store, "US")

    assert [plan.to_client()["planSku"] for plan in plans] == ["SSBCV1", "SSEDCM1", "SSEDCMU", "SSEDBM1", "SSEDSM2"]
    assert await Plan.by_country(store, "FR") == []


async def test_unloaded_plan_raises(store):
    plan = await Plan.by_sku(store, "SSEDSM2")
    plan.clear()

    with pytest.raises(ServerError):
        plan.to_client()
    with pytest.raises(ServerError):
        plan.to_internal()
