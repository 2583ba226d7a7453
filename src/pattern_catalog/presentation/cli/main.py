"""Main CLI application for Pattern-Catalog."""

import sys

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pattern_catalog import __version__
from pattern_catalog.application.demos import DEMOS, DemoResult, run_all, run_demo
from pattern_catalog.domain.exceptions import PatternCatalogError
from pattern_catalog.infrastructure.database.connection import safe_url
from pattern_catalog.shared.config.settings import get_settings
from pattern_catalog.shared.logging import configure_logging

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

app = typer.Typer(
    name="pattern-catalog",
    help="Runnable examples of classic object-oriented design patterns",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Configure logging before any command runs."""
    configure_logging(get_settings().logging, verbose=verbose)


def _print_result(result: DemoResult) -> None:
    console.print(f"[bold blue]{result.pattern.title()}[/bold blue]")
    for line in result.lines:
        console.print(f"  {line}", markup=False, highlight=False)


@app.command()
def version():
    """Show version information."""
    console.print(Panel(
        Text(f"{get_settings().app_name} v{__version__}\nClassic design patterns in Python", justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command("list")
def list_demos():
    """List available pattern demos."""
    table = Table(title="Pattern Demos")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name, demo in DEMOS.items():
        table.add_row(name, (demo.__doc__ or "").strip())
    console.print(table)


@app.command()
def run(
    name: str = typer.Argument(..., help="Pattern to demonstrate"),
):
    """Run the demo for a single pattern."""
    try:
        result = run_demo(name)
    except PatternCatalogError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1)
    _print_result(result)


@app.command("all")
def run_everything():
    """Run every pattern demo."""
    for result in run_all():
        _print_result(result)


@app.command()
def config():
    """Show current configuration."""
    settings = get_settings()
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for section in ("database", "logging", "catalog"):
        values = getattr(settings, section).model_dump()
        for key, value in values.items():
            if section == "database" and key == "url":
                value = safe_url(value)
            table.add_row(f"{section}.{key}", str(value))
    console.print(table)


if __name__ == "__main__":
    app()
