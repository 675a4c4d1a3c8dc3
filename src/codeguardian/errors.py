"""Error taxonomy shared by input handling, the scan client, and export."""

from __future__ import annotations


class CodeGuardianError(Exception):
    """Base class for all Code Guardian errors."""


class ValidationError(CodeGuardianError):
    """Input rejected locally before any network call."""


class SizeExceeded(CodeGuardianError):
    """Uploaded file is larger than the accepted limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"File size must be less than 1MB ({size} bytes > {limit} bytes)"
        )
        self.size = size
        self.limit = limit


class NoDataError(CodeGuardianError):
    """Export attempted on an empty finding set."""


class ScanInProgress(CodeGuardianError):
    """A scan is already in flight."""


class RemoteError(CodeGuardianError):
    """A call to the scanning service did not produce a usable response."""


class ServerRejected(RemoteError):
    """The service answered with a structured failure body."""


class Unreachable(RemoteError):
    """No response was received from the service."""


class UnknownResponse(RemoteError):
    """The service answered with something we could not interpret."""
