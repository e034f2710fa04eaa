"""
THEOLOGOS - Main CLI Application

Command-line interface for inspecting scripture citations in import data.
"""
import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from config import get_config
from core.errors import CanonicalStoreError
from db.store import CanonicalStoreClient
from observability import setup_observability
from scripture import (
    ParsedReference,
    ReferenceResolver,
    ResolutionResult,
    build_proof_groups,
    convert_machine_code_groups,
    detect_references,
    parse_references,
    sort_by_reading_position,
)

# Initialize app
app = typer.Typer(
    name="theologos",
    help="THEOLOGOS - Scripture Reference Resolution",
    add_completion=False,
)

console = Console()


@app.callback()
def startup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log dropped and unresolved citations"),
):
    """Configure logging and tracing before any command runs."""
    setup_observability(get_config())
    if verbose:
        root = logging.getLogger()
        root.setLevel(logging.DEBUG)
        for handler in root.handlers:
            handler.setLevel(logging.DEBUG)


@app.command()
def parse(
    text: str = typer.Argument(..., help="Citations, e.g. 'Romans 8:28-30; 1 Cor 13:4'"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Parse traditional-notation citations."""
    _display_parsed(parse_references(text), json_output)


@app.command()
def detect(
    text: Optional[str] = typer.Argument(None, help="Free-form text to scan"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the text from a file"),
):
    """Find inline citations in prose."""
    if file is not None:
        if not file.exists():
            console.print(f"[red]Error: Input file not found: {file}[/red]")
            raise typer.Exit(1)
        text = file.read_text(encoding="utf-8")
    elif text is None:
        console.print("[yellow]Provide TEXT or --file[/yellow]")
        raise typer.Exit(1)

    found = detect_references(text)
    for reference in found:
        console.print(reference, markup=False, highlight=False)
    console.print(f"\nDetected {len(found)} references")


@app.command()
def osis(
    groups: List[str] = typer.Argument(..., help="Machine-code groups, e.g. 'Gen.3.6-Gen.3.8,Gen.3.13'"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Convert machine-code proof groups."""
    _display_parsed(convert_machine_code_groups(groups), json_output)


@app.command()
def resolve(
    text: str = typer.Argument(..., help="Citations, or prose with --prose"),
    prose: bool = typer.Option(False, "--prose", "-p", help="Detect citations in free-form text"),
    database_url: Optional[str] = typer.Option(
        None, "--database-url", "-d", envvar="DATABASE_URL", help="Canonical store URL"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
):
    """Resolve citations against the canonical store."""
    try:
        with CanonicalStoreClient(database_url) as store:
            resolver = ReferenceResolver(store)
            result = resolver.detect_and_resolve(text) if prose else resolver.parse_and_resolve(text)
    except CanonicalStoreError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    _display_resolution(result)


# Helper functions
def _display_parsed(parsed: List[ParsedReference], json_output: bool):
    """Display parsed citations."""
    if json_output:
        typer.echo(json.dumps([ref.to_dict() for ref in parsed], indent=2))
        return

    if not parsed:
        console.print("[yellow]No references parsed[/yellow]")
        return

    table = Table(title="Parsed References")
    table.add_column("Book", style="cyan")
    table.add_column("Chapter", style="green")
    table.add_column("Verses")

    for ref in parsed:
        table.add_row(ref.book_name, str(ref.chapter), ", ".join(str(v) for v in ref.verses))

    console.print(table)


def _display_resolution(result: ResolutionResult):
    """Display resolved verses, unresolved descriptors and proof groups."""
    table = Table(title="Resolved Verses")
    table.add_column("Reference", style="cyan")
    table.add_column("Verse ID")

    for ref in result.resolved:
        table.add_row(ref.display_text, ref.verse_id)

    console.print(table)

    if result.unresolved:
        console.print("[yellow]Unresolved:[/yellow]")
        for descriptor in result.unresolved:
            console.print(f"  - {descriptor}", markup=False, highlight=False)

    groups = build_proof_groups(sort_by_reading_position(result.resolved))
    if groups:
        console.print("[bold]Proof groups:[/bold]")
        for group in groups:
            console.print(f"  {group.display_text}", markup=False, highlight=False)

    detected = getattr(result, "detected_count", None)
    summary = f"\n{result.resolved_count} resolved, {result.unresolved_count} unresolved"
    if detected is not None:
        summary += f", {detected} detected"
    console.print(summary)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
