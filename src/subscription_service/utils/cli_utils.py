from rich.console import Console
from rich.table import Table


def get_rich_console() -> Console: return Console(stderr=True)


def status_table(statuses: dict[str, str]) -> Table:
    """Render a service -> status mapping, 'ok' in green and anything else in red."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Service")
    table.add_column("Status")
    for name, status in statuses.items():
        style = "green" if status == "ok" else "red"
        table.add_row(name, f"[{style}]{status}[/{style}]")
    return table
