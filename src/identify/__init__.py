"""Language identification on top of trigram profiles."""

from .identifier import IdentifierConfig, identify, identify_text, rank_scores, score_languages
from .policy import DEFAULT_THRESHOLD, ConfidencePolicy, MarginPolicy, ThresholdPolicy, make_policy
from .records import UNKNOWN, IdentificationResult, LanguageScore

__all__ = [
    "ConfidencePolicy",
    "DEFAULT_THRESHOLD",
    "IdentificationResult",
    "IdentifierConfig",
    "LanguageScore",
    "MarginPolicy",
    "ThresholdPolicy",
    "UNKNOWN",
    "identify",
    "identify_text",
    "make_policy",
    "rank_scores",
    "score_languages",
]
