"""The code artifact submitted for scanning."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceArtifact:
    """Code under scan plus its declared language and filename.

    Instances are never mutated; every input event produces a new one.
    """

    code: str = ""
    language: str | None = None
    filename: str | None = None

    @property
    def is_blank(self) -> bool:
        return not self.code.strip()

    @property
    def line_count(self) -> int:
        return len(self.code.split("\n")) if self.code else 0

    @property
    def char_count(self) -> int:
        return len(self.code)
