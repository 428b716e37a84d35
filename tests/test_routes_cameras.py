import pytest

from conftest import CAMERA_SID, SID, UID

pytestmark = pytest.mark.asyncio


async def test_get_camera(client):
    response = await client.get("/v1/cameras/cam-aaa", params={"sid": SID})

    assert response.status_code == 200
    assert response.json()["subscription"]["uuid"] == "cam-aaa"


async def test_get_camera_requires_sid(client):
    response = await client.get("/v1/cameras/cam-aaa")

    assert response.status_code == 400


async def test_get_camera_not_found(client):
    response = await client.get("/v1/cameras/cam-zzz", params={"sid": SID})

    assert response.status_code == 404


async def test_list_by_sid(client):
    response = await client.get("/v1/cameras", params={"sid": SID})

    body = response.json()
    assert response.status_code == 200
    assert body["sid"] == SID
    assert "uid" not in body
    assert {sub["uuid"] for sub in body["subscriptions"]} == {"cam-aaa", "cam-bbb"}


async def test_list_by_uid(client):
    response = await client.get("/v1/cameras", params={"uid": UID})

    body = response.json()
    assert body["uid"] == UID
    assert "sid" not in body
    assert len(body["subscriptions"]) == 3


async def test_list_requires_sid_or_uid(client):
    response = await client.get("/v1/cameras")

    assert response.status_code == 400
    assert response.json() == {"type": "InvalidParameter", "statusCode": 400, "message": "Uid or Sid must be given"}


async def test_list_rejects_unknown_query(client):
    response = await client.get("/v1/cameras", params={"sid": SID, "foo": "bar"})

    assert response.status_code == 400


async def test_create_camera(client):
    response = await client.post("/v1/cameras/cam-new", json={"sid": CAMERA_SID, "uid": UID})

    assert response.status_code == 200
    sub = response.json()["subscription"]
    assert sub["uuid"] == "cam-new"
    assert sub["planSku"] == "SSVM1"
    assert sub["trialUsed"] is False


async def test_create_camera_conflict(client):
    response = await client.post("/v1/cameras/cam-aaa", json={"sid": SID, "uid": UID})

    assert response.status_code == 409
    assert response.json()["type"] == "Conflict"


async def test_create_camera_requires_sid_and_uid(client):
    response = await client.post("/v1/cameras/cam-new", json={"sid": SID})

    assert response.status_code == 400


async def test_update_camera(client):
    response = await client.put("/v1/cameras/cam-bbb", json={"sid": SID, "uid": UID, "price": 299})

    assert response.status_code == 200
    assert response.json()["subscription"]["price"] == 299


async def test_cancel_and_activate_camera(client):
    canceled = await client.post(f"/v1/cameras/cam-ccc/{CAMERA_SID}/cancel")
    assert canceled.status_code == 200
    assert canceled.json()["subscription"]["expires"] == 0

    activated = await client.post(f"/v1/cameras/cam-ccc/{CAMERA_SID}/activate")
    assert activated.status_code == 200
    assert activated.json()["subscription"]["canceled"] == 0
    assert activated.json()["subscription"]["expires"] > 0
