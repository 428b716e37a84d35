import json
import time

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

# Base creates/drops every table for each test
from subscription_service.db.base import Base
from subscription_service.db import (
    ServiceORM,
    ServicePlanORM,
    LocationORM,
    CameraServiceORM,
    PaymentProfileORM,
    ZoneORM,
)
from subscription_service.db.seed import seed_reference
from subscription_service.config import Settings, DataStoreConfig, PostgresConfig
from subscription_service import DataStore, build_data_store
from subscription_service.server import create_app

ONE_MONTH = 2628000
NOW = int(time.time())

UID = 500
SID = 1001  # monitored, has location + cameras + card on file
CAMERA_SID = 1002  # camera-only service with an X account
NO_LOCATION_SID = 1003  # no ss_location row
BAD_DATA_SID = 1004  # undecodable data blob
ACCOUNT = "ACCT1001"
PPID = 7001

ALL_FEATURES = {
    "features": {
        "monitoring": {"enable": 1},
        "alerts": {"enable": 1},
        "online": {"enable": 1},
        "hazard": {"enable": 1},
        "video": {"enable": 1},
        "cameras": {"enable": 1, "value": 10},
    }
}

BASIC_FEATURES = {
    "features": {
        "monitoring": {"enable": 1},
        "alerts": {"enable": 1},
        "online": {"enable": 0},
        "hazard": {"enable": 1},
        "video": {"enable": 0},
        "cameras": {"enable": 0, "value": 0},
    }
}

CAMERA_FEATURES = {
    "features": {
        "video": {"enable": 1},
        "cameras": {"enable": 1, "value": 1},
    }
}


def _plan(sku, name, price, data, country_id=840, currency_id=840):
    return {
        "plan_sku": sku,
        "name": name,
        "description": f"{name} plan",
        "price": price,
        "time": ONE_MONTH,
        "renew": 1,
        "system_version": 20,
        "data": json.dumps(data),
        "country_id": country_id,
        "currency_id": currency_id,
    }


PLANS = [
    _plan("SSEDSM2", "Interactive Monitoring", 2499, ALL_FEATURES),
    _plan("SSEDSM2_GB", "Interactive Monitoring", 2999, ALL_FEATURES, country_id=826, currency_id=826),
    _plan("SSEDBM1", "Standard Monitoring", 1499, BASIC_FEATURES),
    _plan("SSEDCM1", "Camera Only", 499, CAMERA_FEATURES),
    _plan("SSEDCMU", "Camera Unlimited", 999, CAMERA_FEATURES),
    _plan("SSBCV1", "Blank", 0, {"features": {}}),
]


def _service(sid, plan_sku, s_status, data, **extra):
    row = {
        "sid": sid,
        "uid": UID,
        "order_id": 9000 + sid,
        "order_product_id": 0,
        "plan_sku": plan_sku,
        "name": "Interactive Monitoring",
        "created": NOW - ONE_MONTH,
        "activated": NOW - ONE_MONTH,
        "expires": NOW + ONE_MONTH,
        "time": ONE_MONTH,
        "renew": 1,
        "price": 2499,
        "s_status": s_status,
        "cim_ppid": 0,
        "cim_uid": UID,
        "activation_code": f"ACT{sid}",
        "data": data,
        "system_version": 20,
        "dispatch_name": "cops",
        "currency_id": 840,
        "country_id": 840,
    }
    row.update(extra)
    return row


SERVICES = [
    _service(SID, "SSEDSM2", 20, json.dumps(ALL_FEATURES), cim_ppid=PPID),
    _service(CAMERA_SID, "SSEDCM1", 7, json.dumps(CAMERA_FEATURES)),
    _service(NO_LOCATION_SID, "SSEDBM1", 0, json.dumps(BASIC_FEATURES)),
    _service(BAD_DATA_SID, "SSEDBM1", 10, "not-a-blob", uid=600),
]

LOCATIONS = [
    {
        "sid": SID,
        "uid": UID,
        "l_status": 1,
        "account": ACCOUNT,
        "modified": NOW - ONE_MONTH,
        "location_name": "Home",
        "street1": "1 Main St",
        "city": "Boston",
        "zone": 12,
        "postal_code": "02110",
        "country_id": 840,
        "time_zone": 0,
        "abort": "pineapple",
        "first_name": "John",
        "last_name": "Smith",
        "phone": "5555550100",
        "contact_name1": "Jane Doe",
        "contact_phone1": "5555550101",
        "pd_phone1": "5555550911",
        "enable_cops_video": 1,
    },
    {
        "sid": CAMERA_SID,
        "uid": UID,
        "l_status": 1,
        "account": f"X{CAMERA_SID}",
        "modified": NOW - ONE_MONTH,
        "country_id": 826,
        "time_zone": 8,
    },
    {
        "sid": BAD_DATA_SID,
        "uid": 600,
        "l_status": 1,
        "account": "ACCT1004",
        "modified": NOW - ONE_MONTH,
        "country_id": 840,
        "time_zone": 3,
    },
]


def _camera(sid, uuid):
    return {
        "uid": UID,
        "sid": sid,
        "uuid": uuid,
        "recording_lifetime": ONE_MONTH,
        "plan_sku": "SSVM1",
        "price": 0,
        "created": NOW - ONE_MONTH,
        "expires": NOW + ONE_MONTH,
        "canceled": 0,
        "time": ONE_MONTH,
        "extra_time": 0,
        "trial_used": 0,
    }


CAMERAS = [
    _camera(SID, "cam-aaa"),
    _camera(SID, "cam-bbb"),
    _camera(CAMERA_SID, "cam-ccc"),
]


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """
    In-memory SQLite shared across sessions through a StaticPool.
    Tables and seed rows are rebuilt for every test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await seed_reference(conn)
        await conn.execute(
            insert(ZoneORM.__table__),
            [{"zone_id": 12, "zone_country_id": 840, "zone_code": "MA", "zone_name": "Massachusetts"}],
        )
        await conn.execute(insert(ServicePlanORM.__table__), PLANS)
        await conn.execute(insert(ServiceORM.__table__), SERVICES)
        for location in LOCATIONS:
            await conn.execute(insert(LocationORM.__table__).values(**location))
        await conn.execute(insert(CameraServiceORM.__table__), CAMERAS)
        await conn.execute(
            insert(PaymentProfileORM.__table__),
            [{"customer_payment_profile_id": PPID, "uid": UID, "cc_type": "Visa", "last_four": "4242"}],
        )
    yield engine
    await engine.dispose()


@pytest.fixture
def store_config() -> DataStoreConfig:
    return DataStoreConfig(postgres=PostgresConfig(url="sqlite+aiosqlite:///:memory:"))


@pytest_asyncio.fixture(scope="function")
async def store(db_engine, store_config) -> DataStore:
    """DataStore wired the same way the application wires it, over the test engine."""
    return build_data_store(db_engine, store_config)


@pytest_asyncio.fixture(scope="function")
async def client(store):
    app = create_app(store=store, settings=Settings())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
