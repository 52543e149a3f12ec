"""Blogger CLI application using Typer.

This module provides command-line utilities for the blogger backend:
secret generation for deployment configuration and database schema
management.
"""

import asyncio
import logging
import secrets

import typer
from rich.console import Console

from blogger.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    database_display_name,
    drop_tables,
)
from blogger_config.settings import get_settings

app = typer.Typer(
    name="blogger",
    help="Blogger - authentication backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for blogger configuration.

    Generates the required secrets:
    - AUTH_SECRET: Secret for signing session and OAuth state tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Blogger Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256 signing
    auth_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]AUTH_SECRET[/cyan]={auth_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@db_app.command("init")
def db_init() -> None:
    """Create all database tables (idempotent)."""
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    console.print(f"Database: {database_display_name(settings.database_url)}")
    asyncio.run(create_tables())
    console.print("[bold green]Database initialized successfully![/bold green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop all database tables (USE WITH CAUTION!)."""
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    console.print(f"Database: {database_display_name(settings.database_url)}")

    if not force:
        console.print("[yellow]WARNING: This will DELETE ALL DATA in the database![/yellow]")
        if not typer.confirm("Continue?"):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    asyncio.run(drop_tables())
    console.print("[bold green]Database tables dropped successfully![/bold green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
