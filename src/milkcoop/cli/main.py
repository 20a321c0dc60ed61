"""
Milk Collection CLI

Administration commands:
- init-db: create missing tables and columns
- serve: run the API with uvicorn
- promote: promote a user to admin
- stats: print dashboard statistics
"""

from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from milkcoop.db import Database
from milkcoop.exceptions import MilkCoopError
from milkcoop.logging import setup_logging
from milkcoop.schema import ensure_schema
from milkcoop.settings import get_settings

app = typer.Typer(
    name="milkcoop",
    help="Milk Collection API administration",
)

console = Console()


def get_database() -> Database:
    """Database handle from the environment settings."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    return Database(settings.DATABASE_URL)


@app.command()
def init_db():
    """Create missing tables and columns."""
    database = get_database()
    try:
        added = ensure_schema(database.engine)
    except Exception as e:
        rprint(f"[red]Schema initialization failed: {e}[/red]")
        raise typer.Exit(1)
    finally:
        database.dispose()

    if added:
        for column in added:
            rprint(f"[yellow]Added column {column}[/yellow]")
    rprint("[green]Schema ready[/green]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: HOST setting)"),
    port: Optional[int] = typer.Option(None, help="Port (default: PORT setting)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "milkcoop.main:create_app",
        factory=True,
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
    )


@app.command()
def promote(user_id: str = typer.Argument(..., help="User UUID")):
    """Promote a user to admin."""
    from milkcoop.service import UserService

    database = get_database()
    db = database.session()
    try:
        UserService(db).promote_to_admin(user_id)
    except MilkCoopError as e:
        rprint(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    finally:
        db.close()
        database.dispose()

    rprint(f"[green]User {user_id} is now an admin[/green]")


@app.command()
def stats():
    """Print dashboard statistics."""
    from milkcoop.service import StatsService

    database = get_database()
    db = database.session()
    try:
        data = StatsService(db).compute()
    except MilkCoopError as e:
        rprint(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    finally:
        db.close()
        database.dispose()

    table = Table(title="Dashboard")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


if __name__ == "__main__":
    app()
