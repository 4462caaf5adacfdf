"""Result records for language identification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

UNKNOWN = "unknown"


@dataclass(frozen=True)
class LanguageScore:
    """Similarity between an input text and one reference language."""

    code: str
    score: float


@dataclass(frozen=True)
class IdentificationResult:
    """Outcome of identifying a single text."""

    language: Optional[str]
    best: Optional[LanguageScore] = None
    runner_up: Optional[LanguageScore] = None
    scores: Tuple[LanguageScore, ...] = ()

    @property
    def found(self) -> bool:
        """True if the confidence policy accepted the best match."""
        return self.language is not None

    @property
    def code(self) -> str:
        return self.language if self.language is not None else UNKNOWN


__all__ = ["IdentificationResult", "LanguageScore", "UNKNOWN"]
