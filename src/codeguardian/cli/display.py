"""Rich renderables for findings, summaries, and service status."""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from codeguardian.health import HealthStatus
from codeguardian.scan.models import Finding, ScanSummary, Severity

SEVERITY_COLORS = {
    Severity.CRITICAL: "red",
    Severity.HIGH: "dark_orange",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "blue",
}

_STATUS_LABELS = {
    HealthStatus.CONNECTED: ("green", "Backend Connected"),
    HealthStatus.DISCONNECTED: ("red", "Backend Offline"),
    HealthStatus.UNKNOWN: ("yellow", "Checking..."),
}


def severity_markup(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "white")
    return f"[{color}]{severity.value}[/{color}]"


def status_markup(status: HealthStatus) -> str:
    color, label = _STATUS_LABELS[status]
    return f"[{color}]●[/{color}] {label}"


def render_summary(summary: ScanSummary) -> Table:
    table = Table(title="Summary", show_header=True, header_style="bold")
    table.add_column("Total", justify="right")
    for severity in Severity:
        color = SEVERITY_COLORS[severity]
        table.add_column(severity.value.title(), justify="right", style=color)
    table.add_row(
        str(summary.total_issues),
        str(summary.critical_issues),
        str(summary.high_issues),
        str(summary.medium_issues),
        str(summary.low_issues),
    )
    table.caption = f"Scanned on {summary.scan_time:%Y-%m-%d %H:%M:%S %Z}".rstrip()
    return table


def render_findings(
    findings: Sequence[Finding],
    show_suggestions: bool = False,
) -> Table:
    table = Table(title="Findings", show_lines=False)
    table.add_column("Severity", style="bold", width=10)
    table.add_column("Line", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Message")
    table.add_column("Code", max_width=50)
    if show_suggestions:
        table.add_column("Suggestion", style="green")

    for finding in findings:
        row = [
            severity_markup(finding.severity),
            str(finding.line),
            finding.type,
            finding.message,
            Text(finding.code_snippet or "", style="dim"),
        ]
        if show_suggestions:
            row.append(finding.suggestion or "")
        table.add_row(*row)
    return table
