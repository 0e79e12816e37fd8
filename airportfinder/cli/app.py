"""
Main CLI application for AirportFinder
Ranks London airports by public transport time from a postcode
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from airportfinder.journeys.destinations import (
    DEFAULT_DESTINATIONS,
    DestinationConfigError,
    load_destinations,
)
from airportfinder.journeys.models import JourneyResult
from airportfinder.journeys.service import JourneyService, SearchError

from .config import SearchOptions

# Initialize Typer app
app = typer.Typer(
    name="airportfinder",
    help="AirportFinder - Fastest public transport journeys to London airports",
    add_completion=False,
)

# Console for rich output
console = Console()


def _load_registry(destinations_file: Optional[Path]):
    if destinations_file is None:
        return DEFAULT_DESTINATIONS
    try:
        return load_destinations(destinations_file)
    except DestinationConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _format_duration(result: JourneyResult) -> str:
    if result.error:
        return "-"
    if result.duration_minutes is None:
        return "No journey found"
    hours, minutes = divmod(result.duration_minutes, 60)
    return f"{hours}h {minutes:02d}m" if hours else f"{minutes} min"


def render_results(results: List[JourneyResult], postcode: str, show_legs: bool = False) -> None:
    """Print ranked journey results as a table"""
    table = Table(title=f"\nFastest journeys from {postcode}")
    table.add_column("#", justify="right")
    table.add_column("Airport", style="cyan")
    table.add_column("Time", justify="right")
    table.add_column("Route")

    for rank, result in enumerate(results, start=1):
        if result.error:
            table.add_row(str(rank), result.destination_name, _format_duration(result),
                          f"[red]{result.error}[/red]")
        else:
            table.add_row(str(rank), result.destination_name, _format_duration(result),
                          result.summary)

    console.print(table)

    if not show_legs:
        return

    for result in results:
        if not result.legs:
            continue
        console.print(f"\n[bold]{result.destination_name}[/bold] ({result.duration_minutes} min)")
        for leg in result.legs:
            step = leg.instruction or f"{leg.mode} from {leg.from_name} to {leg.to_name}"
            console.print(f"  • [green]{leg.mode}[/green] {leg.duration_minutes} min: {step}")


@app.command()
def search(
    postcode: str = typer.Argument(..., help="UK postcode to travel from"),
    date: Optional[str] = typer.Option(None, "--date", help="Travel date (YYYYMMDD)"),
    time: Optional[str] = typer.Option(None, "--time", help="Departure time (HHMM)"),
    destinations: Optional[Path] = typer.Option(None, "--destinations", help="YAML/JSON file of destinations"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    legs: bool = typer.Option(False, "--legs", help="Show step-by-step itineraries"),
):
    """
    Rank airports by fastest public transport journey from a postcode

    Examples:
        airportfinder search "SW1A 1AA"
        airportfinder search "E14 5AB" --date 20240315 --time 0830 --legs
    """
    try:
        options = SearchOptions(
            postcode=postcode,
            date=date,
            time=time,
            destinations_file=destinations,
        )
    except ValidationError as e:
        for error in e.errors():
            console.print(f"[red]{error['msg']}[/red]")
        raise typer.Exit(1)

    service = JourneyService(destinations=_load_registry(options.destinations_file))

    try:
        results = asyncio.run(service.search(options.postcode, options.date, options.time))
    except SearchError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Search cancelled by user[/yellow]")
        raise typer.Exit(0)

    if as_json:
        payload = [r.model_dump(by_alias=True) for r in results]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    render_results(results, options.postcode, show_legs=legs)


@app.command()
def airports(
    destinations: Optional[Path] = typer.Option(None, "--destinations", help="YAML/JSON file of destinations"),
):
    """List the destinations searched"""
    table = Table(title="\nDestinations")
    table.add_column("Name", style="cyan")
    table.add_column("Location")

    for destination in _load_registry(destinations):
        table.add_row(destination.name, destination.location_token)

    console.print(table)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    AirportFinder - find the quickest airport to reach by public transport
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Main entry point for CLI"""
    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv()

    app()


if __name__ == "__main__":
    main()
