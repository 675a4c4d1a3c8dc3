"""Health monitor — single-shot liveness probe of the scanning service."""

from __future__ import annotations

import enum
import logging
from typing import Protocol

from codeguardian.api.models import HealthInfo
from codeguardian.errors import RemoteError

logger = logging.getLogger(__name__)


class HealthStatus(enum.Enum):
    """Connectivity of the scanning service as last observed."""

    UNKNOWN = "unknown"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class HealthBackend(Protocol):
    async def health(self) -> HealthInfo: ...


class HealthMonitor:
    """Tracks service status; only ``probe()`` changes it.

    Failures are absorbed into DISCONNECTED and never raised.
    """

    def __init__(self, backend: HealthBackend) -> None:
        self._backend = backend
        self._status = HealthStatus.UNKNOWN
        self._info: HealthInfo | None = None

    @property
    def status(self) -> HealthStatus:
        return self._status

    @property
    def info(self) -> HealthInfo | None:
        """Body of the last successful probe, if the service is up."""
        return self._info

    async def probe(self) -> HealthStatus:
        try:
            info = await self._backend.health()
        except RemoteError as e:
            logger.warning("Backend health check failed: %s", e)
            self._set(HealthStatus.DISCONNECTED, None)
        except Exception:
            logger.exception("Backend health check raised")
            self._set(HealthStatus.DISCONNECTED, None)
        else:
            self._set(HealthStatus.CONNECTED, info)
        return self._status

    def _set(self, status: HealthStatus, info: HealthInfo | None) -> None:
        if status != self._status:
            logger.info("Backend status: %s -> %s", self._status.value, status.value)
        self._status = status
        self._info = info
