"""CLI commands that query the scanning service: health, rules, validate."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from codeguardian.api.client import ScanClient
from codeguardian.cli.display import status_markup
from codeguardian.config import CodeGuardianConfig
from codeguardian.errors import RemoteError
from codeguardian.health import HealthMonitor, HealthStatus
from codeguardian.source.languages import LANGUAGES, language_for_filename

console = Console(stderr=True)


def _client(config: CodeGuardianConfig) -> ScanClient:
    return ScanClient(config.api_url, timeout=config.timeout)


@click.command()
@click.pass_context
def health(ctx: click.Context) -> None:
    """Check whether the scanning service is reachable."""
    config: CodeGuardianConfig = ctx.obj["config"]

    async def _probe() -> HealthMonitor:
        async with _client(config) as client:
            monitor = HealthMonitor(client)
            await monitor.probe()
            return monitor

    monitor = asyncio.run(_probe())
    console.print(f"{status_markup(monitor.status)}  [dim]{config.api_url}[/dim]")

    if monitor.status != HealthStatus.CONNECTED:
        console.print(
            "[yellow]The backend scanning service is currently offline.[/yellow]"
        )
        sys.exit(1)

    info = monitor.info
    if info and info.service:
        console.print(f"  Service: {info.service} {info.version}".rstrip())
        console.print(f"  Status: {info.status}")


@click.command()
@click.pass_context
def rules(ctx: click.Context) -> None:
    """List the rule categories the service checks for."""
    config: CodeGuardianConfig = ctx.obj["config"]

    async def _fetch():
        async with _client(config) as client:
            return await client.rules()

    try:
        catalog = asyncio.run(_fetch())
    except RemoteError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    table = Table(title="Security rules", show_lines=True)
    table.add_column("Category", style="cyan")
    table.add_column("Checks")
    for category, checks in sorted(catalog.categories.items()):
        table.add_row(category.replace("_", " ").title(), "\n".join(checks))
    console.print(table)
    console.print(f"Total rules: {catalog.total_rules}")


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--language",
    "-l",
    type=click.Choice(LANGUAGES, case_sensitive=False),
    help="Language hint (inferred from the file extension by default).",
)
@click.pass_context
def validate(ctx: click.Context, file: str, language: str | None) -> None:
    """Ask the service for a quick pre-scan check of FILE."""
    config: CodeGuardianConfig = ctx.obj["config"]
    code = Path(file).read_text(encoding="utf-8", errors="replace")
    language = language or language_for_filename(file)

    async def _validate():
        async with _client(config) as client:
            return await client.validate(code, language)

    try:
        report = asyncio.run(_validate())
    except RemoteError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    verdict = "[green]valid[/green]" if report.is_valid else "[red]invalid[/red]"
    console.print(f"[bold]{file}[/bold]: {verdict}")
    console.print(
        f"  {report.line_count} lines, {report.character_count} characters, "
        f"language: {report.language or 'unknown'}"
    )
