"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from codeguardian.api.client import ScanClient
from codeguardian.scan.models import Finding, Severity

BASE_URL = "http://scanner.test/api"


@pytest.fixture
def findings() -> list[Finding]:
    return [
        Finding(Severity.CRITICAL, "Hardcoded Password", 3, "Found: hardcoded password"),
        Finding(Severity.HIGH, "Use of eval() function", 9, "Found: use of eval() function"),
        Finding(Severity.MEDIUM, "Weak Random Generation", 12, "Found: weak random generation"),
        Finding(Severity.HIGH, "Hardcoded API Key", 2, "Found: hardcoded api key"),
        Finding(Severity.LOW, "Hardcoded URL", 14, "Found: hardcoded url"),
        Finding(Severity.CRITICAL, "Hardcoded Password", 20, "Found: hardcoded password"),
    ]


@pytest.fixture
def eval_response() -> dict:
    return {
        "success": True,
        "results": [
            {
                "severity": "HIGH",
                "type": "UnsafeEval",
                "line": 1,
                "message": "eval() usage detected",
            }
        ],
        "summary": {
            "totalIssues": 1,
            "highIssues": 1,
            "criticalIssues": 0,
            "mediumIssues": 0,
            "lowIssues": 0,
        },
    }


@pytest.fixture
def make_client() -> Callable[..., ScanClient]:
    """Build a ScanClient whose transport is a request handler.

    The handler receives the httpx.Request and returns an httpx.Response,
    or a (status, body) tuple where a dict/list body is sent as JSON.
    """

    def _make(handler: Callable[[httpx.Request], object]) -> ScanClient:
        def _dispatch(request: httpx.Request) -> httpx.Response:
            result = handler(request)
            if isinstance(result, httpx.Response):
                return result
            status, body = result
            if isinstance(body, (dict, list)):
                return httpx.Response(status, json=body)
            return httpx.Response(status, text=body)

        return ScanClient(BASE_URL, transport=httpx.MockTransport(_dispatch))

    return _make
