"""
Command-line interface for the donor profile flattener.

This module provides the CLI entry point: converting a donor profile file
into flat records, and previewing the result without writing anything.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from donor_profiles.config import get_settings
from donor_profiles.storage import load_donor_profiles, write_output_records
from donor_profiles.transformer import transform_batch
from donor_profiles.utils.errors import DonorProfilesException
from donor_profiles.utils.logging import setup_logging

app = typer.Typer(
    name="donor-profiles",
    help="Flatten donor survey profiles into a normalized record schema",
    add_completion=False,
)
console = Console()


def _parse_as_of(as_of: Optional[str]) -> Optional[date]:
    if as_of is None:
        return None
    try:
        return datetime.strptime(as_of, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter("expected a date in YYYY-MM-DD form", param_hint="--as-of")


@app.command()
def convert(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Donor profiles JSON file (default: donorprofiles.json)",
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON file (default: a2_profiles.json)",
    ),
    as_of: Optional[str] = typer.Option(
        None,
        "--as-of",
        help="Processing date for ages, YYYY-MM-DD (default: today)",
    ),
    require_photo: Optional[bool] = typer.Option(
        None,
        "--require-photo/--allow-missing-photo",
        help="Abort when a donor has no photos instead of leaving user_image empty",
    ),
):
    """Convert donor profiles into flat output records."""
    settings = get_settings()
    source = input_path or settings.input_path
    sink = output_path or settings.output_path
    today = _parse_as_of(as_of)
    strict = settings.require_photo if require_photo is None else require_photo

    try:
        donors = load_donor_profiles(source)
        records = transform_batch(donors, today=today, require_photo=strict)
        write_output_records(sink, records, indent=settings.output_indent)
    except DonorProfilesException as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"✅ Cleaned donor profiles written to {sink}")


@app.command()
def preview(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Donor profiles JSON file (default: donorprofiles.json)",
    ),
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Number of records to show"),
    as_of: Optional[str] = typer.Option(
        None,
        "--as-of",
        help="Processing date for ages, YYYY-MM-DD (default: today)",
    ),
    require_photo: Optional[bool] = typer.Option(
        None,
        "--require-photo/--allow-missing-photo",
        help="Abort when a donor has no photos instead of leaving user_image empty",
    ),
):
    """Show transformed records without writing an output file."""
    settings = get_settings()
    source = input_path or settings.input_path
    today = _parse_as_of(as_of)
    strict = settings.require_photo if require_photo is None else require_photo

    try:
        donors = load_donor_profiles(source)
        records = transform_batch(donors[:limit], today=today, require_photo=strict)
    except DonorProfilesException as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=f"Donor Profiles ({len(records)} of {len(donors)})")
    table.add_column("User", style="cyan", no_wrap=True)
    table.add_column("Donor Code", no_wrap=True)
    table.add_column("Age", justify="right", no_wrap=True)
    table.add_column("Image")
    table.add_column("Text", overflow="fold")

    for record in records:
        text = record.text if len(record.text) <= 80 else record.text[:77] + "..."
        table.add_row(record.user, record.donor_code, str(record.age), record.user_image, text)

    console.print(table)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Donor profile flattener."""
    log_level = "DEBUG" if debug else None
    setup_logging(log_level=log_level)


if __name__ == "__main__":
    app()
