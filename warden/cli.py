"""Typer CLI — run an OWASP Top 10 review from the command line."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from warden import __version__

app = typer.Typer(
    name="warden",
    help="Warden — OWASP Top 10 review for storefront backends",
    no_args_is_help=True,
)
console = Console()

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_CRASHED = 2


def _setup_logging(verbose: bool = False, config_level: str | None = None) -> None:
    if verbose:
        level = logging.DEBUG
    elif config_level:
        level = getattr(logging, config_level.upper(), logging.INFO)
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _split(value: str | None) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()] if value else []


@app.command()
def review(
    url: str | None = typer.Option(None, "--url", "-u", help="Target server base URL"),
    config: str | None = typer.Option(None, help="Path to config YAML"),
    only: str | None = typer.Option(None, help="Comma-separated probe groups to run"),
    skip: str | None = typer.Option(
        None, "--skip", "-x", help="Comma-separated probe groups to skip",
    ),
    advisories: bool = typer.Option(
        True, "--advisories/--no-advisories",
        help="Record reminder findings that do not depend on the target's answers",
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Report directory"),
    save: bool = typer.Option(True, "--save/--no-save", help="Write the JSON report"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Run the security review and exit 1 if critical/high findings remain."""
    from warden import Warden
    from warden.config import Settings
    from warden.errors import ReviewError
    from warden.reporting import JsonRenderer, print_summary

    settings = Settings.load(config)
    _setup_logging(verbose, config_level=settings.log_level)

    builder = Warden(url, config=settings).only(*_split(only)).skip(*_split(skip))
    if not advisories:
        builder = builder.no_advisories()

    console.print(f"[bold blue]Warden v{__version__}[/] — Reviewing [bold]{builder.target}[/]")

    try:
        report = asyncio.run(builder.run())
    except ReviewError as e:
        console.print(f"[bold red]Security review failed:[/] {e}")
        raise typer.Exit(EXIT_CRASHED) from e

    print_summary(report, console)
    if save:
        out_dir = Path(output) if output else settings.reports_dir
        path = JsonRenderer().render(report, out_dir)
        console.print(f"  Report: {path}")

    raise typer.Exit(EXIT_FINDINGS if report.summary.requires_attention else EXIT_CLEAN)


@app.command()
def groups():
    """List probe groups in review order."""
    from warden.probes.registry import GROUP_CLASSES

    table = Table(title="Warden Probe Groups")
    table.add_column("OWASP", style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for cls in GROUP_CLASSES:
        table.add_row(cls.meta.owasp, cls.meta.name, cls.meta.description)
    console.print(table)


@app.command()
def version():
    """Show version."""
    console.print(f"Warden v{__version__}")


if __name__ == "__main__":
    app()
