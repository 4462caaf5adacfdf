"""Static configuration for reference-data locations and text loading."""

from __future__ import annotations

from pathlib import Path

# Default locations used by the Typer CLI; callers may override these.
DEFAULT_RESOURCES_ROOT = Path("resources")
DEFAULT_LANGUAGE_NAMES_FILE = DEFAULT_RESOURCES_ROOT / "languagecode_names.csv"
DEFAULT_TRIGRAMS_ROOT = DEFAULT_RESOURCES_ROOT / "trigrams"

TRIGRAM_FILE_SUFFIX = ".csv"

# Bytes read from a file before the rest is ignored.
MAX_TEXT_BYTES = 10_000_000

# Sentinel printed when the input text could not be loaded.
ERROR = "error"


__all__ = [
    "DEFAULT_LANGUAGE_NAMES_FILE",
    "DEFAULT_RESOURCES_ROOT",
    "DEFAULT_TRIGRAMS_ROOT",
    "ERROR",
    "MAX_TEXT_BYTES",
    "TRIGRAM_FILE_SUFFIX",
]
