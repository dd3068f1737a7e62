"""Store Rating CLI application using Typer.

Command-line utilities for operating the backend: schema creation,
bootstrapping the first administrator and secret generation.
"""

import asyncio
import secrets
from typing import Annotated, Optional

import typer
from rich.console import Console

from storerating.presentation.api.dependencies import (
    create_tables,
    get_engine,
    get_session_maker,
)
from storerating.presentation.cli.seed import seed_super_admin
from storerating_config.settings import get_settings
from storerating_identity.services import PasswordHashingService

app = typer.Typer(
    name="storerating",
    help="Store Rating - backend administration CLI",
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


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for the Store Rating configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Store Rating Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

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


async def _init_db() -> None:
    try:
        await create_tables()
    finally:
        await get_engine().dispose()


@app.command("init-db")
def init_db() -> None:
    """Create any missing database tables (idempotent)."""
    asyncio.run(_init_db())
    console.print("[green]Database schema is up to date.[/green]")


async def _seed_admin(name: str, email: str, password: str, address: str) -> bool:
    settings = get_settings()
    try:
        await create_tables()
        async with get_session_maker()() as session:
            admin = await seed_super_admin(
                session,
                PasswordHashingService(rounds=settings.bcrypt_rounds),
                name=name,
                email=email,
                password=password,
                address=address,
            )
    finally:
        await get_engine().dispose()
    return admin is not None


@app.command("seed-admin")
def seed_admin(
    email: Annotated[Optional[str], typer.Option(help="Admin email")] = None,
    password: Annotated[Optional[str], typer.Option(help="Admin password")] = None,
    name: Annotated[Optional[str], typer.Option(help="Admin display name")] = None,
    address: Annotated[Optional[str], typer.Option(help="Admin address")] = None,
) -> None:
    """Create the System Administrator account if it does not exist yet.

    Unset options fall back to the SUPERADMIN_* settings.
    """
    settings = get_settings()
    email = email or settings.superadmin_email
    created = asyncio.run(
        _seed_admin(
            name=name or settings.superadmin_name,
            email=email,
            password=password or settings.superadmin_password.get_secret_value(),
            address=address or settings.superadmin_address,
        ),
    )
    if created:
        console.print(f"[green]Super admin created:[/green] {email}")
    else:
        console.print(f"[yellow]Super admin already exists:[/yellow] {email}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
