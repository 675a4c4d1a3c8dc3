"""Scan orchestrator — drives one scan at a time against the service."""

from __future__ import annotations

import dataclasses
import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from codeguardian.errors import ScanInProgress, ValidationError
from codeguardian.scan.models import (
    FailureKind,
    Finding,
    ScanFailure,
    ScanOutcome,
    ScanSuccess,
    ScanSummary,
)
from codeguardian.source.models import SourceArtifact

logger = logging.getLogger(__name__)


class ScanPhase(enum.Enum):
    """Lifecycle state of the current scan."""

    IDLE = "idle"
    SCANNING = "scanning"
    RESULTS_READY = "results_ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ScanState:
    """Immutable snapshot of the orchestrator.

    ``sequence`` identifies the most recently started scan; only a
    response carrying that number may settle the state.
    """

    phase: ScanPhase = ScanPhase.IDLE
    sequence: int = 0
    outcome: ScanOutcome | None = None

    @property
    def findings(self) -> tuple[Finding, ...]:
        if isinstance(self.outcome, ScanSuccess):
            return self.outcome.findings
        return ()

    @property
    def summary(self) -> ScanSummary | None:
        if isinstance(self.outcome, ScanSuccess):
            return self.outcome.summary
        return None

    @property
    def error(self) -> str:
        if isinstance(self.outcome, ScanFailure):
            return self.outcome.message
        return ""


def begin(state: ScanState) -> ScanState:
    """Enter SCANNING with a fresh sequence number and no outcome."""
    if state.phase == ScanPhase.SCANNING:
        raise ScanInProgress("A scan is already in progress")
    return ScanState(phase=ScanPhase.SCANNING, sequence=state.sequence + 1)


def settle(state: ScanState, sequence: int, outcome: ScanOutcome) -> ScanState:
    """Apply a response; stale or unexpected responses leave ``state`` as is."""
    if sequence != state.sequence or state.phase != ScanPhase.SCANNING:
        return state
    phase = ScanPhase.RESULTS_READY if outcome.ok else ScanPhase.FAILED
    return dataclasses.replace(state, phase=phase, outcome=outcome)


def cleared(state: ScanState) -> ScanState:
    """Back to IDLE, keeping the sequence counter."""
    return ScanState(phase=ScanPhase.IDLE, sequence=state.sequence)


class ScanBackend(Protocol):
    """Anything that can run a scan round trip."""

    async def scan(
        self,
        code: str,
        language: str | None = None,
        filename: str | None = None,
    ) -> ScanOutcome: ...


class ScanOrchestrator:
    """Owns the scan state machine.

    All transitions run on the caller's event loop. A response is applied
    only if its sequence number is still current, so ``reset()`` or a new
    ``submit()`` silently supersedes an in-flight scan.
    """

    def __init__(
        self,
        backend: ScanBackend,
        on_change: Callable[[ScanState], None] | None = None,
    ) -> None:
        self._backend = backend
        self._on_change = on_change
        self._state = ScanState()

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def phase(self) -> ScanPhase:
        return self._state.phase

    async def submit(self, artifact: SourceArtifact) -> ScanState:
        """Scan ``artifact`` and return the resulting state.

        Raises ValidationError for blank code and ScanInProgress while
        another scan is running; neither touches the network.
        """
        if artifact.is_blank:
            raise ValidationError("Please enter some code to scan")

        self._transition(begin(self._state))
        sequence = self._state.sequence
        logger.info(
            "Scan #%d started (%d chars, language=%s, filename=%s)",
            sequence,
            artifact.char_count,
            artifact.language,
            artifact.filename,
        )

        try:
            outcome = await self._backend.scan(
                artifact.code,
                language=artifact.language,
                filename=artifact.filename,
            )
        except Exception as e:
            logger.exception("Scan #%d: backend error", sequence)
            outcome = ScanFailure(
                kind=FailureKind.UNKNOWN,
                message=f"Request failed: {e}",
            )
        self.receive(sequence, outcome)
        return self._state

    def receive(self, sequence: int, outcome: ScanOutcome) -> bool:
        """Apply a scan response. Returns False if it was discarded."""
        new_state = settle(self._state, sequence, outcome)
        if new_state is self._state:
            logger.debug(
                "Discarding stale response for scan #%d (current #%d)",
                sequence,
                self._state.sequence,
            )
            return False

        if isinstance(outcome, ScanSuccess):
            logger.info(
                "Scan #%d finished with %d findings",
                sequence,
                len(outcome.findings),
            )
        else:
            logger.warning("Scan #%d failed: %s", sequence, outcome.message)
        self._transition(new_state)
        return True

    def reset(self) -> None:
        """Return to IDLE and drop any stored outcome."""
        self._transition(cleared(self._state))

    def _transition(self, new_state: ScanState) -> None:
        self._state = new_state
        if self._on_change:
            self._on_change(new_state)
