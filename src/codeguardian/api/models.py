"""Results of the service's auxiliary endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HealthInfo:
    """Body of a successful health check."""

    status: str
    service: str = ""
    version: str = ""


@dataclass(frozen=True)
class ValidationReport:
    """Server-side pre-scan check of a code artifact."""

    is_valid: bool
    line_count: int
    character_count: int
    language: str = ""


@dataclass(frozen=True)
class RuleCatalog:
    """Rule categories the service checks for."""

    categories: dict[str, list[str]] = field(default_factory=dict)
    total_rules: int = 0
