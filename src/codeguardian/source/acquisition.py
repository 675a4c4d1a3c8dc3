"""Input acquisition — turns pasted text, files, and samples into artifacts."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from pathlib import Path

from codeguardian.errors import SizeExceeded, ValidationError
from codeguardian.source.languages import LANGUAGES, language_for_filename
from codeguardian.source.models import SourceArtifact
from codeguardian.source.samples import SAMPLES, get_sample

logger = logging.getLogger(__name__)

# Max upload size (1 MB)
MAX_FILE_SIZE = 1_048_576


class InputAcquisition:
    """Holds the current artifact and the last input error.

    Each input event replaces the artifact with a new immutable
    ``SourceArtifact``; a failed event leaves the previous one in place.
    """

    def __init__(self, artifact: SourceArtifact | None = None) -> None:
        self._artifact = artifact or SourceArtifact()
        self._error = ""

    @property
    def artifact(self) -> SourceArtifact:
        return self._artifact

    @property
    def error(self) -> str:
        return self._error

    def accept_code(self, text: str) -> SourceArtifact:
        """Take pasted or typed code, keeping the chosen language/filename."""
        self._artifact = dataclasses.replace(self._artifact, code=text)
        self._error = ""
        return self._artifact

    async def accept_file(
        self,
        path: str | Path,
        language: str | None = None,
    ) -> SourceArtifact:
        """Load a file as the artifact.

        Raises SizeExceeded (artifact unchanged) when the file is over
        MAX_FILE_SIZE. An explicit ``language`` wins over the one inferred
        from the extension.
        """
        path = Path(path)
        size = path.stat().st_size
        if size > MAX_FILE_SIZE:
            err = SizeExceeded(size, MAX_FILE_SIZE)
            self._error = str(err)
            logger.debug("Rejected %s: %d bytes", path, size)
            raise err

        content = await asyncio.to_thread(
            path.read_text, encoding="utf-8", errors="replace"
        )

        resolved = language or language_for_filename(path.name)
        self._artifact = SourceArtifact(
            code=content,
            language=resolved,
            filename=path.name,
        )
        self._error = ""
        logger.debug(
            "Loaded %s (%d bytes, language=%s)", path.name, size, resolved
        )
        return self._artifact

    def load_sample(self, language: str) -> SourceArtifact:
        """Replace the artifact with the built-in example for ``language``."""
        sample = get_sample(language)
        if sample is None:
            available = ", ".join(sorted(SAMPLES))
            raise ValidationError(
                f"No sample for language '{language}' (available: {available})"
            )
        self._artifact = SourceArtifact(
            code=sample.code,
            language=sample.language,
            filename=sample.filename,
        )
        self._error = ""
        return self._artifact

    def select_language(self, language: str) -> SourceArtifact:
        """Manual language choice for the current artifact."""
        language = language.lower()
        if language not in LANGUAGES:
            raise ValidationError(f"Unsupported language: {language}")
        self._artifact = dataclasses.replace(self._artifact, language=language)
        return self._artifact

    def clear(self) -> SourceArtifact:
        self._artifact = SourceArtifact()
        self._error = ""
        return self._artifact
