"""
labbook — CLI entry point.

Usage:
  labbook resolve                        # show (and cache) the backend URL
  labbook refresh                        # forget the cached URL and rediscover
  labbook health
  labbook login you@lab.org
  labbook whoami
  labbook logout
  labbook equipment [--search microscope]
  labbook bookings [--all] [--status pending]
  labbook slots <equipment-id> <YYYY-MM-DD>
  labbook book <equipment-id> <YYYY-MM-DD> <HH:MM> <HH:MM> [--purpose ...]
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from labbook import __version__
from labbook.api import LabbookAPI
from labbook.client import ApiClient
from labbook.core.config import Settings
from labbook.exceptions import AuthenticationError, LabbookError
from labbook.logger import set_verbose
from labbook.session import AuthSession

from .display import (
    console,
    err,
    info,
    ok,
    print_bookings,
    print_endpoint,
    print_equipment,
    print_slots,
    print_user,
    spinner,
    warn,
)

# ── App ───────────────────────────────────────────────────────────────────────

app = typer.Typer(
    name="labbook",
    help="Lab equipment booking client",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    env: str = typer.Option("", "--env", "-e", help="production | development", envvar="LABBOOK_ENV"),
    dev_host: str = typer.Option("", "--dev-host", help="Dev server address, host[:port]", envvar="LABBOOK_DEV_HOST"),
    store: str = typer.Option("", "--store", help="Secure store file", envvar="LABBOOK_STORE"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log discovery and requests to stderr"),
    version: bool = typer.Option(False, "--version", "-V", help="Print version and exit", is_eager=True),
) -> None:
    """[bold]labbook[/bold] — book lab equipment from the terminal"""
    if version:
        console.print(f"labbook [bold]v{__version__}[/bold]")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()
    set_verbose(verbose)
    settings = Settings.from_env()
    if env:
        settings.production = env.strip().lower() in ("production", "prod")
    if dev_host:
        settings.dev_host_uri = dev_host
    if store:
        settings.store_path = Path(store).expanduser()
    ctx.obj = settings


def _run(ctx: typer.Context, fn):
    """Build a client, run ``fn(api)`` to completion, map errors to exit code 1."""

    async def _main():
        client = await ApiClient.create(ctx.obj)
        async with client:
            return await fn(LabbookAPI(client))

    try:
        return asyncio.run(_main())
    except AuthenticationError as e:
        err(f"Not signed in: {e.message}")
        info("Sign in with: [bold]labbook login <email>[/bold]")
        raise typer.Exit(1)
    except LabbookError as e:
        err(str(e))
        raise typer.Exit(1)


# ── Connection ────────────────────────────────────────────────────────────────


@app.command()
def resolve(ctx: typer.Context) -> None:
    """Resolve the backend URL (cached when healthy) and print it."""

    async def _go(api: LabbookAPI):
        return api.client.current_url

    with spinner("Resolving backend"):
        url = _run(ctx, _go)
    ok(f"Backend: [bold]{url}[/bold]")


@app.command()
def refresh(ctx: typer.Context) -> None:
    """Forget the cached backend URL and rediscover it."""

    async def _go(api: LabbookAPI):
        url = await api.client.refresh_base_url()
        return url, await api.client.check_connection()

    with spinner("Rediscovering backend"):
        url, health_data = _run(ctx, _go)
    print_endpoint(url, ctx.obj.mode, health_data)
    if health_data is None:
        raise typer.Exit(1)


@app.command()
def health(ctx: typer.Context) -> None:
    """Check the backend's /health endpoint."""

    async def _go(api: LabbookAPI):
        return api.client.current_url, await api.client.check_connection()

    url, health_data = _run(ctx, _go)
    print_endpoint(url, ctx.obj.mode, health_data)
    if health_data is None:
        raise typer.Exit(1)


# ── Auth ──────────────────────────────────────────────────────────────────────


@app.command()
def login(
    ctx: typer.Context,
    email: Annotated[str, typer.Argument(help="Account email")],
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
) -> None:
    """Sign in and store the bearer token."""

    async def _go(api: LabbookAPI):
        session = AuthSession(api.auth, api.client.tokens)
        return await session.login(email, password)

    user = _run(ctx, _go)
    print_user(user)


@app.command()
def logout(ctx: typer.Context) -> None:
    """Sign out and forget the stored token."""

    async def _go(api: LabbookAPI):
        await AuthSession(api.auth, api.client.tokens).logout()

    _run(ctx, _go)
    ok("Signed out")


@app.command()
def whoami(ctx: typer.Context) -> None:
    """Verify the stored token and show the signed-in user."""

    async def _go(api: LabbookAPI):
        session = AuthSession(api.auth, api.client.tokens)
        return session.user if await session.check_auth() else None

    user = _run(ctx, _go)
    if user is None:
        warn("Not signed in")
        raise typer.Exit(1)
    print_user(user)


# ── Equipment & bookings ──────────────────────────────────────────────────────


@app.command()
def equipment(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Filter by name"),
) -> None:
    """List equipment."""

    async def _go(api: LabbookAPI):
        return await api.equipment.get_all(params={"search": search} if search else None)

    print_equipment(_run(ctx, _go))


@app.command()
def bookings(
    ctx: typer.Context,
    all_users: bool = typer.Option(False, "--all", help="Every user's bookings (admin)"),
    status: str = typer.Option("", "--status", help="pending | approved | rejected | cancelled"),
) -> None:
    """List your bookings."""
    params = {"status": status} if status else None

    async def _go(api: LabbookAPI):
        if all_users:
            return await api.bookings.get_all(params=params)
        return await api.bookings.get_my_bookings(params=params)

    print_bookings(_run(ctx, _go))


@app.command()
def slots(
    ctx: typer.Context,
    equipment_id: Annotated[int, typer.Argument(help="Equipment ID")],
    date: Annotated[str, typer.Argument(help="Date, YYYY-MM-DD")],
) -> None:
    """Show free time slots for one piece of equipment."""

    async def _go(api: LabbookAPI):
        return await api.bookings.get_available_slots(equipment_id, date)

    print_slots(_run(ctx, _go), date)


@app.command()
def book(
    ctx: typer.Context,
    equipment_id: Annotated[int, typer.Argument(help="Equipment ID")],
    date: Annotated[str, typer.Argument(help="Date, YYYY-MM-DD")],
    start: Annotated[str, typer.Argument(help="Start time, HH:MM")],
    end: Annotated[str, typer.Argument(help="End time, HH:MM")],
    purpose: str = typer.Option("", "--purpose", help="What the slot is for"),
) -> None:
    """Request a booking; an admin approves it."""

    async def _go(api: LabbookAPI):
        return await api.bookings.create(equipment_id, date, start, end, purpose=purpose or None)

    data = _run(ctx, _go)
    booking = data.get("booking", data) if isinstance(data, dict) else {}
    ok(f"Booking requested — [bold]#{booking.get('id', '?')}[/bold] ({booking.get('status', 'pending')})")


# ── Entry ─────────────────────────────────────────────────────────────────────


def main() -> None:
    app()


if __name__ == "__main__":
    main()
