"""Export of raw findings to a portable JSON document."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from codeguardian.api.schemas import FindingPayload
from codeguardian.errors import NoDataError
from codeguardian.scan.models import Finding

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "security-scan-results.json"


def export_findings(findings: Sequence[Finding]) -> bytes:
    """Serialize the full finding list to UTF-8 JSON in the wire schema."""
    if not findings:
        raise NoDataError("No findings to export")
    documents = [
        FindingPayload.from_finding(f).model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        for f in findings
    ]
    return json.dumps(documents, indent=2, ensure_ascii=False).encode("utf-8")


def write_export(
    findings: Sequence[Finding],
    path: str | Path = DEFAULT_EXPORT_FILENAME,
) -> Path:
    """Write the exported document to ``path`` and return it."""
    data = export_findings(findings)
    path = Path(path)
    path.write_bytes(data)
    logger.info("Exported %d findings to %s", len(findings), path)
    return path
