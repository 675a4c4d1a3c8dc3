"""Tests for deployment verification."""

from __future__ import annotations

import httpx

from codeguardian.verify import DeploymentVerifier

FRONTEND = "https://code-guardian.example.app"
BACKEND = "https://code-guardian-backend.example.com"


def _verifier(handler) -> DeploymentVerifier:
    return DeploymentVerifier(
        FRONTEND + "/", BACKEND, transport=httpx.MockTransport(handler)
    )


def _healthy(request: httpx.Request) -> httpx.Response:
    if request.url.host == "code-guardian-backend.example.com":
        assert request.url.path == "/api/health"
        return httpx.Response(
            200,
            json={"status": "UP", "service": "Code Guardian Scanner", "version": "1.0.0"},
        )
    return httpx.Response(
        200, text="<html><div id='root'>Code Guardian</div><script>React</script></html>"
    )


def test_all_checks_pass():
    report = _verifier(_healthy).run()
    assert report.passed
    backend, frontend = report.checks
    assert backend.facts["Version"] == "1.0.0"
    assert frontend.facts["Code Guardian"] == "yes"
    assert frontend.facts["React App"] == "yes"


def test_backend_down_fails():
    def handler(request):
        if request.url.host == "code-guardian-backend.example.com":
            return httpx.Response(503)
        return _healthy(request)

    report = _verifier(handler).run()
    assert not report.passed
    backend, frontend = report.checks
    assert not backend.passed
    assert "503" in backend.detail
    assert frontend.passed


def test_frontend_unreachable_fails():
    def handler(request):
        if request.url.host == "code-guardian.example.app":
            raise httpx.ConnectError("refused", request=request)
        return _healthy(request)

    report = _verifier(handler).run()
    assert not report.passed
    assert not report.checks[1].passed


def test_backend_invalid_json_fails():
    def handler(request):
        if request.url.host == "code-guardian-backend.example.com":
            return httpx.Response(200, text="ok")
        return _healthy(request)

    assert not _verifier(handler).run().checks[0].passed
