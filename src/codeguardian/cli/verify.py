"""CLI command: codeguardian verify — check a deployed frontend/backend pair."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from codeguardian.verify import DeploymentVerifier

console = Console(stderr=True)


@click.command()
@click.argument("frontend_url")
@click.argument("backend_url")
@click.option(
    "--timeout",
    type=float,
    default=10.0,
    show_default=True,
    help="Per-request timeout in seconds.",
)
def verify(frontend_url: str, backend_url: str, timeout: float) -> None:
    """Verify a deployment: backend /api/health and frontend reachability."""
    console.print("[bold]Code Guardian[/bold] deployment verification")
    console.print(f"  Frontend URL: [cyan]{frontend_url}[/cyan]")
    console.print(f"  Backend URL:  [cyan]{backend_url}[/cyan]\n")

    report = DeploymentVerifier(frontend_url, backend_url, timeout=timeout).run()

    for check in report.checks:
        mark = "[green]✓[/green]" if check.passed else "[red]✗[/red]"
        console.print(f"{mark} {check.detail}")
        for key, value in check.facts.items():
            console.print(f"    {key}: {value}")

    console.print("\n[bold]Verification summary[/bold]")
    for check in report.checks:
        result = "[green]PASS[/green]" if check.passed else "[red]FAIL[/red]"
        console.print(f"  {check.name:<10} {result}")

    if not report.passed:
        console.print(
            "\n[yellow]Some checks failed. See the deployment guide for "
            "troubleshooting steps.[/yellow]"
        )
        sys.exit(1)

    console.print("\n[green]All checks passed.[/green]")
    console.print(f"  Live demo: {report.frontend_url}")
    console.print(f"  API health: {report.backend_url}/api/health")
