import json
import logging

import pytest

from subscription_service.config import PostgresConfig, Settings
from subscription_service.entities import Subscription
from subscription_service.exceptions import DatabaseError, NotFoundError, ServerError
from subscription_service.logging import JsonFormatter


def test_pg_dsn_from_fields():
    config = PostgresConfig(user="svc", password="pw", host="db", port=6543, db="subs")

    assert config.get_pg_dsn() == "postgresql+asyncpg://svc:pw@db:6543/subs"
    assert config.is_postgres()


def test_url_override_wins():
    config = PostgresConfig(host="db", url="sqlite+aiosqlite:///:memory:")

    assert config.get_pg_dsn() == "sqlite+aiosqlite:///:memory:"
    assert not config.is_postgres()


def test_settings_from_nested_env(monkeypatch):
    monkeypatch.setenv("POSTGRES__HOST", "pg.internal")
    monkeypatch.setenv("CIM__TRANSACTION_MODE", "test")
    monkeypatch.setenv("SERVER__PORT", "8080")

    settings = Settings()

    assert settings.postgres.host == "pg.internal"
    assert settings.server.port == 8080
    assert settings.data_store_config().cim.transaction_mode == "test"


def test_json_formatter_includes_request_extras():
    record = logging.LogRecord("subscription_service.server", logging.INFO, __file__, 1, "GET /v1/plans 200", None, None)
    record.method = "GET"
    record.path = "/v1/plans"
    record.status = 200
    record.duration_ms = 1.5

    line = json.loads(JsonFormatter().format(record))

    assert line["msg"] == "GET /v1/plans 200"
    assert line["status"] == 200
    assert line["duration_ms"] == 1.5


def test_json_formatter_includes_entity_extras():
    record = logging.LogRecord("subscription_service.entities", logging.INFO, __file__, 1, "Saved", None, None)
    record.sid = 1001
    record.uuid = "cam-aaa"
    record.actor = 31

    line = json.loads(JsonFormatter().format(record))

    assert line["sid"] == 1001
    assert line["uuid"] == "cam-aaa"
    assert line["actor"] == 31
    assert "kind" not in line
    assert line["ts"]


def test_error_payload():
    assert NotFoundError("gone").to_dict() == {"type": "NotFound", "statusCode": 404, "message": "gone"}
    assert ServerError("boom").to_dict()["statusCode"] == 500
    assert DatabaseError().kind == "DatabaseError"


def test_empty_handle_repr():
    sub = Subscription(None, None)

    assert repr(sub) == "<Subscription empty>"
    with pytest.raises(ServerError, match="Subscription was not loaded, cannot return subscription"):
        sub.to_client()
