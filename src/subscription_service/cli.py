import asyncio
import logging
import sys
from typing import Optional

import typer

if sys.platform == "win32":
    # asyncpg needs the selector loop on Windows
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from sqlalchemy.exc import SQLAlchemyError

from subscription_service import create_data_store, create_engine_from_config
from subscription_service.config import get_settings
from subscription_service.db.base import Base
from subscription_service.db.seed import seed_reference
from subscription_service.logging import configure
from subscription_service.utils.cli_utils import get_rich_console, status_table

app = typer.Typer(help="CLI for subscription-service management.")
logger = logging.getLogger(__name__)
console = get_rich_console()


@app.command()
def init(seed: bool = typer.Option(False, "--seed", help="Insert the US/GB country and currency rows.")):
    """
    Creates all database tables, optionally seeding reference data.
    """
    console.rule("[bold cyan]Service Initialization[/bold cyan]")

    async def _create_tables():
        settings = get_settings()
        engine = create_engine_from_config(settings.postgres)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
                console.print("[bold green]✔[/bold green] Database tables created successfully.")
                if seed:
                    added = await seed_reference(conn)
                    console.print(f"[bold green]✔[/bold green] Seeded {added} reference rows.")
        finally:
            await engine.dispose()

    with console.status("Creating database tables...", spinner="dots"):
        try:
            asyncio.run(_create_tables())
        except SQLAlchemyError as e:
            console.print(f"[bold red]✖[/bold red] Database initialization FAILED: {e}")
            raise typer.Exit(code=1)

    console.print("\n[bold green]✅ Service initialized successfully![/bold green]")


@app.command()
def check():
    """Checks connectivity to the database."""
    console.rule("[bold cyan]Connection Check[/bold cyan]")

    async def _check():
        store = create_data_store()
        try:
            return await store.check_connections()
        finally:
            await store.aclose()

    statuses = asyncio.run(_check())
    console.print(status_table(statuses))

    if any(status != "ok" for status in statuses.values()):
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address, defaults to server.host."),
    port: Optional[int] = typer.Option(None, help="Bind port, defaults to server.port."),
):
    """Runs the HTTP API with uvicorn."""
    import uvicorn

    from subscription_service.server import create_app

    settings = get_settings()
    configure(settings.log_level)

    uvicorn.run(
        create_app(settings=settings),
        host=host or settings.server.host,
        port=port or settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    app()
