"""Scan lifecycle state machine and orchestration."""

from codeguardian.scan.orchestrator import ScanOrchestrator, ScanPhase, ScanState

__all__ = ["ScanOrchestrator", "ScanPhase", "ScanState"]
