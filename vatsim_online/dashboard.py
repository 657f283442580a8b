from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vatsim_online.config import INSTRUCTIONS, REFRESH_INTERVAL_SECONDS

UNKNOWN_AIRCRAFT = "???"


def format_hours(hours):
    try:
        return f"{round(hours):,}"
    except (ValueError, OverflowError):
        return "n/a"


def render_header(view, interval=REFRESH_INTERVAL_SECONDS):
    line = Text()
    line.append(INSTRUCTIONS.format(interval=interval), style="bold cyan")

    updated = Text()
    if view.last_updated is not None:
        stamp = view.last_updated.strftime("%Y-%m-%dT%H:%M:%SZ")
        updated.append(f"⏱️ Last updated: {stamp}", style="bold green")
    else:
        updated.append("⏳ Waiting for first update...", style="bold yellow")

    parts = [Align.center(line), Align.center(updated)]
    if view.last_error:
        parts.append(Align.center(Text(f"⚠️ Refresh failed: {view.last_error}", style="bold red")))
    return Panel(Group(*parts), expand=True)


def render_table(view, airport, view_distance):
    table = Table(
        expand=True,
        title=f"Pilots within {view_distance:g} nm of {airport}",
        header_style="bold white on blue",
    )
    table.add_column("Pilot callsign", ratio=15)
    table.add_column("Aircraft", ratio=15)
    table.add_column("Time piloting (hours)", justify="right", ratio=35)
    table.add_column("Time controlling (hours)", justify="right", ratio=35)

    for i, row in enumerate(view.rows):
        table.add_row(
            row.pilot.callsign,
            row.pilot.aircraft or UNKNOWN_AIRCRAFT,
            format_hours(row.experience.pilot),
            format_hours(row.experience.atc),
            style="reverse" if i == view.selected else None,
        )
    return table


def render_dashboard(view, airport, view_distance, interval=REFRESH_INTERVAL_SECONDS):
    """Everything the live screen shows, rebuilt from scratch on each change."""
    body = [render_header(view, interval), render_table(view, airport, view_distance)]
    if not view.rows and view.last_updated is not None:
        body.append(Align.center(Text("No pilots in range.", style="dim")))
    return Group(*body)
