"""Tests for the scanning service client and its failure classification."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone

import httpx
import pytest

from codeguardian.api.client import NO_RESPONSE_MESSAGE
from codeguardian.errors import ServerRejected, Unreachable, UnknownResponse
from codeguardian.scan.models import FailureKind, ScanFailure, ScanSuccess, Severity

DEEPLY_NESTED = "[" * 100_000 + "]" * 100_000


def _scan(client, code="eval(x)", language="javascript", filename=None):
    async def _go():
        async with client:
            return await client.scan(code, language=language, filename=filename)

    return asyncio.run(_go())


def _call(client, method, *args):
    async def _go():
        async with client:
            return await getattr(client, method)(*args)

    return asyncio.run(_go())


class TestScan:
    def test_success(self, make_client, eval_response):
        seen: list[httpx.Request] = []

        def handler(request):
            seen.append(request)
            return 200, eval_response

        outcome = _scan(make_client(handler))

        assert isinstance(outcome, ScanSuccess)
        assert len(outcome.findings) == 1
        finding = outcome.findings[0]
        assert finding.severity == Severity.HIGH
        assert finding.type == "UnsafeEval"
        assert finding.code_snippet is None
        assert outcome.summary.high_issues == 1

        (request,) = seen
        assert request.method == "POST"
        assert request.url.path == "/api/scan"
        assert json.loads(request.content) == {
            "code": "eval(x)",
            "language": "javascript",
            "filename": None,
        }

    def test_scan_time_parsed(self, make_client, eval_response):
        eval_response["summary"]["scanTime"] = "2024-05-01T12:00:00.000+00:00"
        outcome = _scan(make_client(lambda r: (200, eval_response)))
        assert outcome.summary.scan_time == datetime(
            2024, 5, 1, 12, 0, tzinfo=timezone.utc
        )

    def test_structured_failure_is_server_rejected(self, make_client):
        body = {"success": False, "error": "Scan failed", "message": "boom", "results": []}
        outcome = _scan(make_client(lambda r: (500, body)))
        assert outcome == ScanFailure(FailureKind.SERVER_REJECTED, "boom")

    def test_structured_failure_with_200(self, make_client):
        body = {"success": False, "message": "Code content cannot be empty"}
        outcome = _scan(make_client(lambda r: (200, body)))
        assert outcome.kind == FailureKind.SERVER_REJECTED
        assert outcome.message == "Code content cannot be empty"

    def test_connection_error_is_unreachable(self, make_client):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        outcome = _scan(make_client(handler))
        assert outcome == ScanFailure(FailureKind.UNREACHABLE, NO_RESPONSE_MESSAGE)

    def test_timeout_is_unreachable(self, make_client):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        assert _scan(make_client(handler)).kind == FailureKind.UNREACHABLE

    @pytest.mark.parametrize(
        ("status", "body"),
        [
            (200, "<html>not json</html>"),
            (502, "Bad Gateway"),
            (500, {"error": "Internal"}),
            (200, {"success": True, "results": []}),
            (200, {"success": True, "results": [{"severity": "SEVERE"}], "summary": {}}),
            (200, {"success": False}),
            (200, ["not", "an", "object"]),
            pytest.param(200, DEEPLY_NESTED, id="200-deeply-nested"),
            pytest.param(500, DEEPLY_NESTED, id="500-deeply-nested"),
        ],
    )
    def test_malformed_responses_are_unknown(self, make_client, status, body):
        outcome = _scan(make_client(lambda r: (status, body)))
        assert isinstance(outcome, ScanFailure)
        assert outcome.kind == FailureKind.UNKNOWN

    def test_inconsistent_summary_is_unknown(self, make_client, eval_response):
        eval_response["summary"]["highIssues"] = 0
        eval_response["summary"]["lowIssues"] = 1
        outcome = _scan(make_client(lambda r: (200, eval_response)))
        assert outcome.kind == FailureKind.UNKNOWN


class TestHealth:
    def test_health_info(self, make_client):
        body = {"status": "UP", "service": "Code Guardian Scanner", "version": "1.0.0"}
        info = _call(make_client(lambda r: (200, body)), "health")
        assert info.status == "UP"
        assert info.service == "Code Guardian Scanner"
        assert info.version == "1.0.0"

    def test_any_2xx_is_healthy(self, make_client):
        info = _call(make_client(lambda r: (204, "")), "health")
        assert info.status == ""

    def test_non_2xx_raises(self, make_client):
        with pytest.raises(UnknownResponse):
            _call(make_client(lambda r: (503, "Service Unavailable")), "health")

    def test_deeply_nested_error_body_raises_unknown(self, make_client):
        with pytest.raises(UnknownResponse):
            _call(make_client(lambda r: (503, DEEPLY_NESTED)), "health")

    def test_unreachable_raises(self, make_client):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(Unreachable):
            _call(make_client(handler), "health")


class TestValidateAndRules:
    def test_validate(self, make_client):
        body = {
            "success": True,
            "validation": {
                "isValid": True,
                "lineCount": 3,
                "characterCount": 42,
                "language": "python",
            },
        }
        report = _call(make_client(lambda r: (200, body)), "validate", "x = 1", "python")
        assert report.is_valid
        assert report.line_count == 3
        assert report.character_count == 42

    def test_validate_rejected(self, make_client):
        body = {"success": False, "error": "Request validation failed", "message": "bad"}
        with pytest.raises(ServerRejected, match="bad"):
            _call(make_client(lambda r: (400, body)), "validate", "", None)

    def test_rules(self, make_client):
        body = {
            "categories": {"secrets": ["API Keys", "Passwords"]},
            "totalRules": 12,
        }
        catalog = _call(make_client(lambda r: (200, body)), "rules")
        assert catalog.categories == {"secrets": ["API Keys", "Passwords"]}
        assert catalog.total_rules == 12

    def test_rules_deeply_nested_body_is_unknown(self, make_client):
        with pytest.raises(UnknownResponse):
            _call(make_client(lambda r: (200, DEEPLY_NESTED)), "rules")
