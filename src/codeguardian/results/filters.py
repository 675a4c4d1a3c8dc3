"""Filtered and faceted views over a finding list.

Everything here is a pure function of its arguments: findings are never
reordered, duplicated or mutated, and no state is kept between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from codeguardian.scan.models import Finding, ScanSummary, Severity

ALL = "all"


@dataclass(frozen=True)
class FilterState:
    """Active filters; ``None`` means "All" for either facet."""

    severity: Severity | None = None
    type: str | None = None

    @classmethod
    def parse(cls, severity: str = ALL, type: str = ALL) -> FilterState:
        """Build a FilterState from user-facing choices such as ``"all"``."""
        sev = None if severity.lower() == ALL else Severity(severity.upper())
        typ = None if type.lower() == ALL else type
        return cls(severity=sev, type=typ)

    @property
    def is_default(self) -> bool:
        return self.severity is None and self.type is None


def _matches(finding: Finding, state: FilterState) -> bool:
    if state.severity is not None and finding.severity != state.severity:
        return False
    if state.type is not None and state.type.lower() not in finding.type.lower():
        return False
    return True


def filter_findings(
    findings: Sequence[Finding],
    state: FilterState,
) -> list[Finding]:
    """Return the findings matching ``state``, in their original order."""
    return [f for f in findings if _matches(f, state)]


def distinct_types(findings: Iterable[Finding]) -> list[str]:
    """Finding types in first-seen order, without duplicates."""
    return list(dict.fromkeys(f.type for f in findings))


def summarize(
    findings: Iterable[Finding],
    scan_time: datetime | None = None,
) -> ScanSummary:
    """Build the summary whose counts match ``findings``."""
    counts = dict.fromkeys(Severity, 0)
    total = 0
    for f in findings:
        counts[f.severity] += 1
        total += 1

    extra = {} if scan_time is None else {"scan_time": scan_time}
    return ScanSummary(
        total_issues=total,
        critical_issues=counts[Severity.CRITICAL],
        high_issues=counts[Severity.HIGH],
        medium_issues=counts[Severity.MEDIUM],
        low_issues=counts[Severity.LOW],
        **extra,
    )
