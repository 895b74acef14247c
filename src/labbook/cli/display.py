"""Rich display helpers — panels, tables, spinners."""

from __future__ import annotations

from contextlib import contextmanager

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

THEME = Theme(
    {
        "lab.accent": "#3FA7D6",
        "lab.accent2": "#1B6E99",
        "lab.text": "#C9D6E3",
        "lab.muted": "#5A6278",
        "lab.ok": "#3d9e5a",
        "lab.warn": "#d4a017",
        "lab.err": "#e05555",
    }
)

console = Console(theme=THEME, highlight=False)

# Booking and equipment states -> (style, glyph). A booking moves
# pending -> approved | rejected | cancelled -> completed; equipment is
# available, in use, under maintenance or unavailable.
STATUS_STYLES = {
    "pending": ("lab.warn", "◔"),
    "approved": ("lab.ok", "◕"),
    "completed": ("lab.accent", "●"),
    "rejected": ("lab.err", "⊘"),
    "cancelled": ("lab.muted", "○"),
    "available": ("lab.ok", "●"),
    "in_use": ("lab.accent", "◑"),
    "maintenance": ("lab.warn", "⚒"),
    "unavailable": ("lab.err", "⊘"),
}


def _items(data, key: str) -> list:
    """Backend lists arrive bare or wrapped as ``{key: [...]}`` / ``{"data": [...]}``."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for k in (key, "data"):
            if isinstance(data.get(k), list):
                return data[k]
    return []


def _status(value) -> str:
    value = str(value or "—")
    color, glyph = STATUS_STYLES.get(value.lower().replace(" ", "_"), ("lab.text", "·"))
    return f"[{color}]{glyph} {value}[/{color}]"


# ── Connection ────────────────────────────────────────────────────────────────


def print_endpoint(url: str, mode: str, health: dict | None) -> None:
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column(style="lab.muted", no_wrap=True, width=14)
    table.add_column(style="lab.text")
    table.add_row("Mode", mode)
    table.add_row("Backend", url)
    if health is None:
        table.add_row("Health", "[lab.err]○  unreachable[/lab.err]")
    else:
        table.add_row("Health", f"[lab.ok]●  {health.get('status', 'healthy')}[/lab.ok]")
        server = health.get("server") or {}
        for iface in server.get("networkInterfaces") or []:
            table.add_row(iface.get("name", "iface"), iface.get("address", ""))

    color = "lab.ok" if health is not None else "lab.err"
    console.print(Panel(table, title=f"[{color}]Backend connection[/{color}]", border_style=color, padding=(1, 2)))


# ── Domain tables ─────────────────────────────────────────────────────────────


def print_user(user: dict) -> None:
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column(style="lab.muted", no_wrap=True, width=14)
    table.add_column(style="lab.text")
    for field in ("name", "email", "role", "department", "phone"):
        if user.get(field):
            table.add_row(field.capitalize(), str(user[field]))
    console.print(Panel(table, title="[lab.accent]Signed in[/lab.accent]", border_style="lab.accent2", padding=(1, 2)))


def print_equipment(data) -> None:
    items = _items(data, "equipment")
    if not items:
        console.print("  [lab.muted]No equipment found[/lab.muted]")
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="lab.accent2", padding=(0, 2))
    table.add_column("ID", style="lab.accent", no_wrap=True, width=6)
    table.add_column("Name", style="lab.text")
    table.add_column("Location", style="lab.muted")
    table.add_column("Status", no_wrap=True)
    for eq in items:
        table.add_row(str(eq.get("id", "")), eq.get("name", ""), eq.get("location") or "", _status(eq.get("status")))
    console.print(
        Panel(table, title=f"[lab.accent]{len(items)} equipment[/lab.accent]", border_style="lab.accent2", padding=(0, 1))
    )


def print_bookings(data) -> None:
    items = _items(data, "bookings")
    if not items:
        console.print("  [lab.muted]No bookings yet[/lab.muted]")
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="lab.accent2", padding=(0, 2))
    table.add_column("ID", style="lab.accent", no_wrap=True, width=6)
    table.add_column("Equipment", style="lab.text")
    table.add_column("Date", style="lab.text", no_wrap=True)
    table.add_column("Time", style="lab.muted", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    for b in items:
        table.add_row(
            str(b.get("id", "")),
            b.get("equipment_name") or str(b.get("equipment_id", "")),
            str(b.get("booking_date", ""))[:10],
            f"{b.get('start_time', '')}–{b.get('end_time', '')}",
            _status(b.get("status")),
        )
    console.print(
        Panel(table, title=f"[lab.accent]{len(items)} bookings[/lab.accent]", border_style="lab.accent2", padding=(0, 1))
    )


def print_slots(data, date: str) -> None:
    slots = _items(data, "slots")
    if not slots:
        console.print(f"  [lab.muted]No free slots on {date}[/lab.muted]")
        return
    console.print(f"  [lab.muted]{date}[/lab.muted]  {_status('available')}")
    for slot in slots:
        window = f"{slot.get('start_time', '')}–{slot.get('end_time', '')}" if isinstance(slot, dict) else str(slot)
        console.print(f"    [lab.text]{window}[/lab.text]")


# ── Waiting on the backend ────────────────────────────────────────────────────


@contextmanager
def spinner(message: str):
    """Show ``message`` while discovery or a request is in flight; erased afterwards."""
    with console.status(f"[lab.text]{message}…[/lab.text]", spinner="dots", spinner_style="lab.accent") as status:
        yield status


# ── Notices ───────────────────────────────────────────────────────────────────

# Same glyph family as the status column: a filled dot means done, a slashed
# circle means refused, a hollow one means nothing happened.
NOTICES = {
    "ok": ("lab.ok", "●", "lab.text"),
    "warn": ("lab.warn", "◔", "lab.text"),
    "err": ("lab.err", "⊘", "lab.err"),
    "info": ("lab.muted", "○", "lab.muted"),
}


def notice(kind: str, message: str) -> None:
    mark_style, glyph, text_style = NOTICES[kind]
    console.print(f"  [{mark_style}]{glyph}[/{mark_style}] [{text_style}]{message}[/{text_style}]")


def ok(message: str) -> None:
    notice("ok", message)


def warn(message: str) -> None:
    notice("warn", message)


def err(message: str) -> None:
    notice("err", message)


def info(message: str) -> None:
    notice("info", message)
