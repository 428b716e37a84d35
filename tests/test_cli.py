from sqlalchemy import create_engine, inspect, select
from typer.testing import CliRunner

from subscription_service.cli import app
from subscription_service.config import reset_settings
from subscription_service.db import CountryORM

runner = CliRunner()


def test_cli_init_and_check(tmp_path, monkeypatch):
    """init creates and seeds a file database, check then reports it healthy."""
    # --- ARRANGE ---
    db_file = tmp_path / "cli.db"
    monkeypatch.setenv("POSTGRES__URL", f"sqlite+aiosqlite:///{db_file}")
    reset_settings()

    try:
        # --- ACT 1 ---
        result_init = runner.invoke(app, ["init", "--seed"])

        # --- ASSERT 1 ---
        assert result_init.exit_code == 0, f"'init' failed: {result_init.output}"

        engine = create_engine(f"sqlite:///{db_file}")
        inspector = inspect(engine)
        assert inspector.has_table("ss_service")
        assert inspector.has_table("ss_location_audit")
        with engine.connect() as conn:
            codes = set(conn.execute(select(CountryORM.country_iso_code_2)).scalars())
        assert codes == {"US", "GB"}
        engine.dispose()

        # --- ACT 2 ---
        result_check = runner.invoke(app, ["check"])

        # --- ASSERT 2 ---
        assert result_check.exit_code == 0, f"'check' failed: {result_check.output}"
    finally:
        reset_settings()
