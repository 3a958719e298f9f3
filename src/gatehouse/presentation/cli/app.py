"""Gatehouse CLI application using Typer.

Provides deployment utilities: secret generation, schema creation and
running the API server.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from gatehouse.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_for_url,
    create_tables,
    ensure_sqlite_directory,
)
from gatehouse_config.settings import get_settings

app = typer.Typer(
    name="gatehouse",
    help="Gatehouse - login and signup service CLI",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets(
    jwt_bytes: int = typer.Option(
        64,
        min=32,
        help="Random bytes in the JWT signing key",
    ),
) -> None:
    """Print fresh values for JWT_SECRET_KEY and POSTGRES_PASSWORD.

    Paste the lines into config/.env or config/.env.dev.
    """
    console.print("\n[bold green]Gatehouse secrets[/bold green]")

    # soft_wrap keeps each KEY=value on one copyable line
    console.print(
        f"[cyan]JWT_SECRET_KEY[/cyan]={secrets.token_urlsafe(jwt_bytes)}",
        soft_wrap=True,
    )
    console.print(
        f"[cyan]POSTGRES_PASSWORD[/cyan]={secrets.token_urlsafe(32)}",
        soft_wrap=True,
    )

    console.print("\n[yellow]Do not commit these values.[/yellow]\n")


async def _init_db(database_url: str) -> None:
    ensure_sqlite_directory(database_url)
    engine = create_engine_for_url(database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_db() -> None:
    """Create missing database tables."""
    settings = get_settings()
    asyncio.run(_init_db(settings.database_url))
    console.print(f"[green]Database ready[/green] ({settings.database_backend})")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(
        None,
        help="Bind address (default from settings)",
    ),
    port: Optional[int] = typer.Option(
        None,
        help="Port (default from settings)",
    ),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "gatehouse.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
