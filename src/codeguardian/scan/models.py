"""Scan data models — findings, summaries, and scan outcomes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union


class Severity(enum.Enum):
    """Finding severity level, most severe first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class Finding:
    """A single issue reported by the scanning service."""

    severity: Severity
    type: str
    line: int
    message: str
    code_snippet: str | None = None
    suggestion: str | None = None


@dataclass(frozen=True)
class ScanSummary:
    """Severity-bucketed counts for a finding list."""

    total_issues: int = 0
    critical_issues: int = 0
    high_issues: int = 0
    medium_issues: int = 0
    low_issues: int = 0
    scan_time: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def counts(self) -> tuple[int, int, int, int, int]:
        return (
            self.total_issues,
            self.critical_issues,
            self.high_issues,
            self.medium_issues,
            self.low_issues,
        )


class FailureKind(enum.Enum):
    """How a scan failed, as classified on the client side."""

    SERVER_REJECTED = "server_rejected"
    UNREACHABLE = "unreachable"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ScanSuccess:
    """The service scanned the code and returned findings."""

    findings: tuple[Finding, ...]
    summary: ScanSummary

    ok = True


@dataclass(frozen=True)
class ScanFailure:
    """The scan did not complete; ``message`` is shown to the user."""

    kind: FailureKind
    message: str

    ok = False


ScanOutcome = Union[ScanSuccess, ScanFailure]
