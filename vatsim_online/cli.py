import asyncio
import logging
import sys
import webbrowser

import click
from rich.console import Console
from rich.live import Live

from vatsim_online.airports import AIRPORTS, lookup_airport
from vatsim_online.api import VatsimClient, stats_url
from vatsim_online.config import DEFAULT_VIEW_DISTANCE_NM, REFRESH_INTERVAL_SECONDS
from vatsim_online.dashboard import render_dashboard
from vatsim_online.engine import RefreshEngine
from vatsim_online.errors import FetchError, UnknownAirport
from vatsim_online.keyboard import keyboard_task
from vatsim_online.logging_config import setup_logging
from vatsim_online.scheduler import Scheduler
from vatsim_online.state import ViewState

console = Console()
logger = logging.getLogger(__name__)


def open_stats(row):
    url = stats_url(row.cid)
    logger.info("Opening stats for %s (%s)", row.pilot.callsign, url)
    webbrowser.open(url)


async def run_dashboard(client, airport, center, view_distance, interval):
    """Live table until the user quits."""
    if not sys.stdin.isatty():
        raise click.ClickException("The live view needs an interactive terminal")

    engine = RefreshEngine(client.fetch_online_pilots, client.fetch_experience)
    view = ViewState()
    keys = asyncio.Queue()

    with Live(render_dashboard(view, airport, view_distance, interval), console=console,
              auto_refresh=False, screen=True, transient=True) as live:

        def redraw(state):
            live.update(render_dashboard(state, airport, view_distance, interval), refresh=True)

        scheduler = Scheduler(engine, center, view_distance, keys=keys, view=view,
                              interval=interval, on_change=redraw, on_open=open_stats)
        key_task = asyncio.create_task(keyboard_task(keys))
        try:
            await scheduler.run()
        finally:
            key_task.cancel()
            try:
                await key_task
            except asyncio.CancelledError:
                pass


@click.command()
@click.argument("airport", required=False)
@click.option("-d", "--distance", "view_distance", default=DEFAULT_VIEW_DISTANCE_NM, type=float,
              show_default=True, help="View distance around the airport (nm)")
@click.option("--interval", default=REFRESH_INTERVAL_SECONDS, type=click.FloatRange(min=1),
              show_default=True, help="Seconds between refreshes")
@click.option("--show-airports", is_flag=True, help="Show supported airports and exit")
@click.option("--log-file", default=None, type=click.Path(dir_okay=False), help="Also write logs to this file")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def main(airport, view_distance, interval, show_airports, log_file, verbose):
    """
    Watch pilots online on VATSIM around AIRPORT, least experienced first.

    Examples:
      vatsim-online KSAN
      vatsim-online KLAX --distance 40
    """
    if show_airports:
        for identifier in AIRPORTS:
            click.echo(identifier)
        return

    if not airport:
        raise click.UsageError("No specified airport")
    try:
        center = lookup_airport(airport)
    except UnknownAirport as e:
        raise click.ClickException(f"{e}. Use --show-airports to list supported airports.")
    airport = airport.strip().upper()

    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file=log_file, console=console)

    client = VatsimClient()
    try:
        client.resolve_v3_url()
    except FetchError as e:
        raise click.ClickException(f"Could not set up access to VATSIM API: {e}")

    try:
        asyncio.run(run_dashboard(client, airport, center, view_distance, interval))
    except KeyboardInterrupt:
        console.print("\nExiting...")
