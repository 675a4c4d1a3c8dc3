"""Language names understood by the scanner and extension inference."""

from __future__ import annotations

from pathlib import PurePath

# Choices offered for manual selection
LANGUAGES = (
    "javascript",
    "python",
    "java",
    "typescript",
    "cpp",
    "c",
    "php",
    "ruby",
    "go",
    "rust",
)

# File extension → language mapping
_EXTENSIONS = {
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "py": "python",
    "java": "java",
    "cpp": "cpp",
    "c": "c",
    "php": "php",
    "rb": "ruby",
    "go": "go",
    "rs": "rust",
}


def language_for_filename(filename: str) -> str | None:
    """Infer the language from a filename's extension, or None."""
    suffix = PurePath(filename).suffix
    if not suffix:
        return None
    return _EXTENSIONS.get(suffix[1:].lower())
