"""CLI command: codeguardian scan [FILE] — submit code to the scanning service."""

from __future__ import annotations

import asyncio
import sys

import click
from rich.console import Console

from codeguardian.api.client import ScanClient
from codeguardian.cli.display import render_findings, render_summary
from codeguardian.config import CodeGuardianConfig
from codeguardian.errors import CodeGuardianError, NoDataError
from codeguardian.results.export import write_export
from codeguardian.results.filters import (
    ALL,
    FilterState,
    distinct_types,
    filter_findings,
)
from codeguardian.scan.models import Severity
from codeguardian.scan.orchestrator import ScanOrchestrator, ScanPhase, ScanState
from codeguardian.source.acquisition import InputAcquisition
from codeguardian.source.languages import LANGUAGES
from codeguardian.source.models import SourceArtifact
from codeguardian.source.samples import SAMPLES

console = Console(stderr=True)

_SEVERITY_CHOICES = [ALL] + [s.value.lower() for s in Severity]


@click.command()
@click.argument(
    "file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--sample",
    "-s",
    type=click.Choice(sorted(SAMPLES)),
    help="Scan a built-in example instead of a file.",
)
@click.option(
    "--language",
    "-l",
    type=click.Choice(LANGUAGES, case_sensitive=False),
    help="Language hint (inferred from the file extension by default).",
)
@click.option(
    "--severity",
    type=click.Choice(_SEVERITY_CHOICES, case_sensitive=False),
    default=ALL,
    show_default=True,
    help="Only show findings of this severity.",
)
@click.option(
    "--type",
    "type_",
    default=ALL,
    help="Only show findings whose type contains this text.",
)
@click.option(
    "--suggestions",
    is_flag=True,
    help="Show suggested fixes.",
)
@click.option(
    "--export",
    "export_path",
    type=click.Path(dir_okay=False, writable=True),
    help="Write all findings (unfiltered) to a JSON file.",
)
@click.pass_context
def scan(
    ctx: click.Context,
    file: str | None,
    sample: str | None,
    language: str | None,
    severity: str,
    type_: str,
    suggestions: bool,
    export_path: str | None,
) -> None:
    """Scan FILE (or code piped on stdin) for security issues."""
    config: CodeGuardianConfig = ctx.obj["config"]

    try:
        artifact = _acquire(file, sample, language)
        state = asyncio.run(_run_scan(config, artifact))
    except CodeGuardianError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if state.phase == ScanPhase.FAILED:
        console.print(f"[red]Scan failed:[/red] {state.error}")
        sys.exit(1)

    findings = state.findings
    if state.summary is not None:
        console.print(render_summary(state.summary))

    if not findings:
        console.print(
            "[green]No issues found. Your code looks clean according to "
            "our security rules.[/green]"
        )
    else:
        filters = FilterState.parse(severity, type_)
        shown = filter_findings(findings, filters)
        console.print(render_findings(shown, show_suggestions=suggestions))
        console.print(f"Showing {len(shown)} of {len(findings)} issues")
        if not filters.is_default:
            console.print(
                f"[dim]Types: {', '.join(distinct_types(findings))}[/dim]"
            )

    if export_path:
        try:
            path = write_export(findings, export_path)
        except NoDataError as e:
            console.print(f"[yellow]{e}[/yellow]")
        else:
            console.print(f"Exported {len(findings)} findings to [cyan]{path}[/cyan]")

    critical_count = sum(1 for f in findings if f.severity == Severity.CRITICAL)
    if critical_count > 0:
        console.print(f"\n[red]{critical_count} critical finding(s)[/red]")
        sys.exit(1)


def _acquire(
    file: str | None,
    sample: str | None,
    language: str | None,
) -> SourceArtifact:
    acquisition = InputAcquisition()
    if sample:
        acquisition.load_sample(sample)
    elif file and file != "-":
        return asyncio.run(acquisition.accept_file(file, language=language))
    else:
        acquisition.accept_code(sys.stdin.read())

    if language:
        acquisition.select_language(language)
    return acquisition.artifact


async def _run_scan(config: CodeGuardianConfig, artifact: SourceArtifact) -> ScanState:
    async with ScanClient(config.api_url, timeout=config.timeout) as client:
        orchestrator = ScanOrchestrator(client)
        with console.status("Scanning..."):
            return await orchestrator.submit(artifact)
