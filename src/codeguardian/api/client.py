"""Async HTTP client for the Code Guardian scanning service."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PayloadError

from codeguardian.api.models import HealthInfo, RuleCatalog, ValidationReport
from codeguardian.api.schemas import (
    HealthPayload,
    RulesResponse,
    ScanRequestBody,
    ScanResponse,
    ValidateResponse,
)
from codeguardian.errors import (
    RemoteError,
    ServerRejected,
    Unreachable,
    UnknownResponse,
)
from codeguardian.results.filters import summarize
from codeguardian.scan.models import (
    FailureKind,
    ScanFailure,
    ScanOutcome,
    ScanSuccess,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8085/api"
DEFAULT_TIMEOUT = 30.0

NO_RESPONSE_MESSAGE = "No response from server. Please check your connection."

_FAILURE_KINDS = {
    ServerRejected: FailureKind.SERVER_REJECTED,
    Unreachable: FailureKind.UNREACHABLE,
    UnknownResponse: FailureKind.UNKNOWN,
}


async def _log_request(request: httpx.Request) -> None:
    logger.debug("API request: %s %s", request.method, request.url)


async def _log_response(response: httpx.Response) -> None:
    level = logging.DEBUG if response.is_success else logging.WARNING
    logger.log(
        level,
        "API response: %d %s %s",
        response.status_code,
        response.request.method,
        response.request.url,
    )


class ScanClient:
    """Talks to the scanning service's ``/scan``, ``/health``,
    ``/validate`` and ``/rules`` endpoints.

    ``scan()`` never raises for remote problems; it folds them into a
    ``ScanFailure``. The other calls raise ``RemoteError`` subclasses.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
            event_hooks={
                "request": [_log_request],
                "response": [_log_response],
            },
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> ScanClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def scan(
        self,
        code: str,
        language: str | None = None,
        filename: str | None = None,
    ) -> ScanOutcome:
        """Submit code for scanning and classify the result."""
        body = ScanRequestBody(code=code, language=language, filename=filename)
        try:
            response = await self._send(
                "POST", "/scan", json=body.model_dump(mode="json")
            )
            return _parse_scan(response)
        except RemoteError as e:
            kind = _FAILURE_KINDS.get(type(e), FailureKind.UNKNOWN)
            logger.info("Scan failed (%s): %s", kind.value, e)
            return ScanFailure(kind=kind, message=str(e))

    async def health(self) -> HealthInfo:
        """Probe ``/health``. Any 2xx counts as healthy, whatever its body."""
        response = await self._send("GET", "/health")
        if not response.is_success:
            _raise_for_failure(response, _json_body(response), "Health check failed")
        try:
            payload = HealthPayload.model_validate(response.json())
        except (ValueError, RecursionError):
            logger.debug("Health body not understood: %r", response.text[:200])
            return HealthInfo(status="")
        return HealthInfo(
            status=payload.status,
            service=payload.service,
            version=payload.version,
        )

    async def validate(
        self,
        code: str,
        language: str | None = None,
    ) -> ValidationReport:
        response = await self._send(
            "POST", "/validate", json={"code": code, "language": language}
        )
        body = _json_body(response)
        _raise_for_failure(response, body, "Validation failed")
        try:
            validation = ValidateResponse.model_validate(body).validation
        except PayloadError as e:
            raise UnknownResponse(
                "Unexpected validation response from server"
            ) from e
        return ValidationReport(
            is_valid=validation.is_valid,
            line_count=validation.line_count,
            character_count=validation.character_count,
            language=validation.language,
        )

    async def rules(self) -> RuleCatalog:
        response = await self._send("GET", "/rules")
        body = _json_body(response)
        _raise_for_failure(response, body, "Failed to fetch rules")
        try:
            payload = RulesResponse.model_validate(body)
        except PayloadError as e:
            raise UnknownResponse("Unexpected rules response from server") from e
        return RuleCatalog(
            categories=payload.categories,
            total_rules=payload.total_rules,
        )

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.debug("%s %s: no response (%r)", method, path, e)
            raise Unreachable(NO_RESPONSE_MESSAGE) from e


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (ValueError, RecursionError) as e:
        raise UnknownResponse(
            f"Unexpected response from server (HTTP {response.status_code})"
        ) from e


def _raise_for_failure(response: httpx.Response, body: Any, default: str) -> None:
    """Raise if the body is a structured failure or the status is not 2xx.

    A structured failure is a JSON object carrying a string ``message``
    with ``success: false`` or a non-2xx status. Anything else that is not
    a success is reported as an unknown response.
    """
    failed = not response.is_success
    if isinstance(body, dict) and body.get("success") is False:
        failed = True
    if not failed:
        return

    message = body.get("message") if isinstance(body, dict) else None
    if isinstance(message, str) and message:
        raise ServerRejected(message)
    raise UnknownResponse(f"{default} (HTTP {response.status_code})")


def _parse_scan(response: httpx.Response) -> ScanSuccess:
    body = _json_body(response)
    _raise_for_failure(response, body, "Scan failed")
    try:
        payload = ScanResponse.model_validate(body)
    except PayloadError as e:
        raise UnknownResponse("Unexpected scan response from server") from e
    if not payload.success or payload.summary is None:
        raise UnknownResponse("Unexpected scan response from server")

    findings = tuple(f.to_finding() for f in payload.results)
    summary = payload.summary.to_summary()
    if summary.counts() != summarize(findings).counts():
        raise UnknownResponse("Scan summary does not match the returned findings")
    return ScanSuccess(findings=findings, summary=summary)
