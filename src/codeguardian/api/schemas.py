"""Wire schemas for the scanning service's JSON bodies."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from codeguardian.scan.models import Finding, ScanSummary, Severity


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FindingPayload(_Wire):
    severity: Severity
    type: str
    line: int
    message: str
    code_snippet: str | None = Field(default=None, alias="codeSnippet")
    suggestion: str | None = None

    def to_finding(self) -> Finding:
        return Finding(
            severity=self.severity,
            type=self.type,
            line=self.line,
            message=self.message,
            code_snippet=self.code_snippet,
            suggestion=self.suggestion,
        )

    @classmethod
    def from_finding(cls, finding: Finding) -> FindingPayload:
        return cls(
            severity=finding.severity,
            type=finding.type,
            line=finding.line,
            message=finding.message,
            code_snippet=finding.code_snippet,
            suggestion=finding.suggestion,
        )


class SummaryPayload(_Wire):
    total_issues: int = Field(alias="totalIssues")
    critical_issues: int = Field(alias="criticalIssues")
    high_issues: int = Field(alias="highIssues")
    medium_issues: int = Field(alias="mediumIssues")
    low_issues: int = Field(alias="lowIssues")
    scan_time: datetime | None = Field(default=None, alias="scanTime")

    def to_summary(self) -> ScanSummary:
        return ScanSummary(
            total_issues=self.total_issues,
            critical_issues=self.critical_issues,
            high_issues=self.high_issues,
            medium_issues=self.medium_issues,
            low_issues=self.low_issues,
            scan_time=self.scan_time or datetime.now(timezone.utc),
        )


class ScanResponse(_Wire):
    success: bool
    results: list[FindingPayload] = Field(default_factory=list)
    summary: SummaryPayload | None = None
    message: str | None = None


class ScanRequestBody(_Wire):
    code: str
    language: str | None = None
    filename: str | None = None


class HealthPayload(_Wire):
    status: str
    service: str = ""
    version: str = ""


class ValidationPayload(_Wire):
    is_valid: bool = Field(alias="isValid")
    line_count: int = Field(alias="lineCount")
    character_count: int = Field(alias="characterCount")
    language: str = ""


class ValidateResponse(_Wire):
    success: bool
    validation: ValidationPayload


class RulesResponse(_Wire):
    categories: dict[str, list[str]] = Field(default_factory=dict)
    total_rules: int = Field(default=0, alias="totalRules")
