"""Deployment verification — checks a deployed frontend/backend pair."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)

VERIFY_TIMEOUT = 10.0


@dataclass
class CheckResult:
    """Outcome of one deployment check."""

    name: str
    passed: bool
    detail: str = ""
    facts: dict[str, str] = field(default_factory=dict)


@dataclass
class VerificationReport:
    frontend_url: str
    backend_url: str
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return bool(self.checks) and all(c.passed for c in self.checks)


class DeploymentVerifier:
    """Runs the backend health and frontend reachability checks."""

    def __init__(
        self,
        frontend_url: str,
        backend_url: str,
        timeout: float = VERIFY_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._frontend_url = frontend_url.rstrip("/")
        self._backend_url = backend_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def run(self) -> VerificationReport:
        report = VerificationReport(
            frontend_url=self._frontend_url,
            backend_url=self._backend_url,
        )
        with httpx.Client(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            report.checks.append(self._check_backend(client))
            report.checks.append(self._check_frontend(client))
        return report

    def _check_backend(self, client: httpx.Client) -> CheckResult:
        url = f"{self._backend_url}/api/health"
        try:
            response = client.get(url)
        except httpx.RequestError as e:
            logger.debug("Backend check %s: %r", url, e)
            return CheckResult("Backend", False, f"Backend health check failed: {e}")

        if response.status_code != 200:
            return CheckResult(
                "Backend",
                False,
                f"Backend health check failed (HTTP {response.status_code})",
            )
        try:
            data = response.json()
        except (ValueError, RecursionError):
            return CheckResult(
                "Backend", False, "Backend health check returned invalid JSON"
            )
        if not isinstance(data, dict):
            return CheckResult(
                "Backend", False, "Backend health check returned invalid JSON"
            )

        return CheckResult(
            "Backend",
            True,
            "Backend health check passed",
            facts={
                "Status": str(data.get("status", "")),
                "Service": str(data.get("service", "")),
                "Version": str(data.get("version", "")),
            },
        )

    def _check_frontend(self, client: httpx.Client) -> CheckResult:
        try:
            response = client.get(self._frontend_url)
        except httpx.RequestError as e:
            logger.debug("Frontend check %s: %r", self._frontend_url, e)
            return CheckResult("Frontend", False, f"Frontend test failed: {e}")

        if response.status_code != 200:
            return CheckResult(
                "Frontend",
                False,
                f"Frontend not accessible (HTTP {response.status_code})",
            )

        page = response.text
        has_react = "react" in page.lower()
        has_app = "Code Guardian" in page or "code-guardian" in page
        return CheckResult(
            "Frontend",
            True,
            "Frontend is accessible",
            facts={
                "HTTP Status": str(response.status_code),
                "React App": "yes" if has_react else "not detected",
                "Code Guardian": "yes" if has_app else "not detected",
            },
        )
