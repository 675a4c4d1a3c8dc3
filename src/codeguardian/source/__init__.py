"""Pasted text, uploaded files, and built-in samples as scan input."""

from codeguardian.source.acquisition import MAX_FILE_SIZE, InputAcquisition
from codeguardian.source.models import SourceArtifact

__all__ = ["MAX_FILE_SIZE", "InputAcquisition", "SourceArtifact"]
