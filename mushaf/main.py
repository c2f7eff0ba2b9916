#!/usr/bin/env python3
"""
Main CLI entry point for mushaf
"""

import asyncio
from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from mushaf import __version__
from mushaf.config.constants import OPENING_FORMULA
from mushaf.config.settings import get_env_info, get_provider_settings, validate_all_env_vars
from mushaf.exceptions import MushafError
from mushaf.models.entries import EntryDetail, EntrySummary
from mushaf.services.provider import build_provider, close_provider
from mushaf.ui.search_filter import filter_entries
from mushaf.utils.logging_utils import setup_cli_logging
from mushaf.utils.output import console, err_console, print_json

app = typer.Typer(help="Browse the Quran text corpus from the terminal.")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
):
    """
    mushaf - remote-navigable Quran browser

    [bold]Examples:[/bold]

    Open the browser:
        [cyan]mushaf browse[/cyan]

    Search the index:
        [cyan]mushaf list --query Yasin[/cyan]

    Print one surah:
        [cyan]mushaf show 36[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)
    ctx.obj = {"verbose": verbose}
    if ctx.invoked_subcommand == "browse":
        # The TUI logs to a file, see setup_tui_logging
        return
    setup_cli_logging(verbose=verbose, quiet=quiet)


async def _fetch_entries() -> list[EntrySummary]:
    provider = build_provider(get_provider_settings())
    try:
        return list(await provider.list_entries())
    finally:
        await close_provider(provider)


async def _fetch_entry(entry_id: int) -> EntryDetail:
    provider = build_provider(get_provider_settings())
    try:
        return await provider.get_entry(entry_id)
    finally:
        await close_provider(provider)


@app.command()
def browse(
    ctx: typer.Context,
    theme: Optional[str] = typer.Option(
        None, "--theme", "-t", help="Theme to use (mushaf-dark, mushaf-light)"
    ),
):
    """Open the remote-navigable TUI browser."""
    from mushaf.ui.app import MushafApp
    from mushaf.utils.logging_utils import setup_tui_logging

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    setup_tui_logging("DEBUG" if verbose else None)
    try:
        provider = build_provider(get_provider_settings())
        MushafApp(provider, theme=theme).run()
    except KeyboardInterrupt:
        pass
    except MushafError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(1) from e


@app.command("list")
def list_entries(
    query: str = typer.Option("", "--query", "-s", help="Filter by name or exact number"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """List the entries of the corpus."""
    if format not in ("table", "json"):
        err_console.print(f"Unknown format: {format}", style="red")
        raise typer.Exit(1)

    try:
        entries = filter_entries(asyncio.run(_fetch_entries()), query)
    except MushafError as e:
        err_console.print(f"Error: {e.message}", style="red")
        raise typer.Exit(1) from e

    if format == "json":
        print_json(
            [
                {
                    "number": e.number,
                    "name": e.name,
                    "englishName": e.english_name,
                    "englishNameTranslation": e.english_name_translation,
                    "revelationType": e.revelation_type.value,
                    "numberOfAyahs": e.number_of_ayahs,
                }
                for e in entries
            ]
        )
        return

    if not entries:
        console.print("[yellow]No entries found[/yellow]")
        return

    table = Table(title="Surahs")
    table.add_column("#", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("English", style="magenta", no_wrap=True)
    table.add_column("Type", style="green")
    table.add_column("Ayahs", justify="right", style="blue")
    for entry in entries:
        table.add_row(
            str(entry.number),
            entry.name,
            f"{entry.english_name} ({entry.english_name_translation})",
            entry.revelation_type.label,
            str(entry.number_of_ayahs),
        )
    console.print(table)


@app.command()
def show(entry_id: int = typer.Argument(..., help="Surah number")):
    """Print the full text of one entry."""
    try:
        detail = asyncio.run(_fetch_entry(entry_id))
    except MushafError as e:
        err_console.print(f"Error: {e.message}", style="red")
        raise typer.Exit(1) from e

    console.rule(Text(f"{detail.number}. {detail.name}", style="bold"))
    console.print(
        f"{detail.english_name} · {detail.revelation_type.label} · {detail.number_of_ayahs}",
        justify="center",
        style="dim",
    )
    console.print(OPENING_FORMULA, justify="center", style="yellow")
    for ayah in detail.ayahs:
        line = Text()
        if ayah.display_text:
            line.append(ayah.display_text + " ")
        line.append(f"﴿{ayah.number_in_surah}﴾", style="bold")
        console.print(line)


@app.command()
def config():
    """Show environment settings and whether they are valid."""
    table = Table(title="Environment")
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_column("Default", style="dim")
    table.add_column("Valid")
    for name, info in get_env_info().items():
        table.add_row(
            name,
            info["value"] if info["is_set"] else "-",
            str(info["default"]),
            "[green]yes[/green]" if info["valid"] else "[red]no[/red]",
        )
    console.print(table)

    errors = validate_all_env_vars()
    for error in errors:
        err_console.print(f"[red]•[/red] {error}")
    if errors:
        raise typer.Exit(1)


@app.command()
def version():
    """Show mushaf version"""
    typer.echo(f"mushaf version {__version__}")


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
