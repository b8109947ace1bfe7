"""Todo list CLI application using Typer.

Command-line utilities for running the API server, preparing the
database and generating deployment secrets.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from todolist.presentation.api.dependencies import build_engine, create_tables
from todolist_config import get_settings

app = typer.Typer(
    name="todolist",
    help="Todo List - multi-user todo lists over HTTP",
    no_args_is_help=True,
)
console = Console()


db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port

    console.print(
        f"[bold green]{settings.app_name}[/bold green] listening on "
        f"[cyan]http://{bind_host}:{bind_port}{settings.api_prefix}[/cyan]",
    )
    uvicorn.run(
        "todolist.presentation.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


async def _init_database(database_url: str) -> None:
    engine = build_engine(database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_database() -> None:
    """Create missing tables. Existing tables and data are left untouched."""
    settings = get_settings()
    asyncio.run(_init_database(settings.database_url))
    console.print("[green]Database schema is up to date[/green]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for the configuration.

    - JWT_SECRET_KEY: Secret for signing bearer tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Todo List Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n",
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}", soft_wrap=True)

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}", soft_wrap=True)

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]",
    )
    console.print(
        "[dim]Copy the above values to config/.env (production) or "
        "config/.env.dev (local).[/dim]\n",
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
