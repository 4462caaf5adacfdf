"""Score a text against reference profiles and apply the confidence decision rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Iterable, Optional, Sequence, Tuple

from src.profiles.library import LanguageProfile
from src.trigrams import Text, build_profile, cosine_similarity, normalize_profile

from .policy import DEFAULT_THRESHOLD, ConfidencePolicy, ThresholdPolicy
from .records import IdentificationResult, LanguageScore


@dataclass
class IdentifierConfig:
    """Configuration for `identify_text`."""

    policy: ConfidencePolicy = field(default_factory=lambda: ThresholdPolicy(DEFAULT_THRESHOLD))
    max_lines: Optional[int] = None

    def validate(self) -> None:
        if self.max_lines is not None and self.max_lines < 0:
            raise ValueError("max_lines cannot be negative.")


def score_languages(
    text: Text,
    references: Iterable[LanguageProfile],
    max_lines: Optional[int] = None,
) -> Tuple[LanguageScore, ...]:
    """Return the similarity of ``text`` to every reference, in reference order.

    Returns an empty tuple when the text yields no trigrams.
    """
    profile = build_profile(text, max_lines=max_lines)
    if not profile:
        return ()
    normalize_profile(profile)
    return tuple(LanguageScore(ref.code, cosine_similarity(profile, ref.profile)) for ref in references)


def rank_scores(scores: Sequence[LanguageScore]) -> Tuple[LanguageScore, ...]:
    """Sort by descending score; equal scores keep reference order."""
    return tuple(sorted(scores, key=attrgetter("score"), reverse=True))


def _best_two(scores: Sequence[LanguageScore]) -> Tuple[Optional[LanguageScore], Optional[LanguageScore]]:
    best: Optional[LanguageScore] = None
    runner_up: Optional[LanguageScore] = None
    for candidate in scores:
        if best is None or candidate.score > best.score:
            runner_up = best
            best = candidate
        elif runner_up is None or candidate.score > runner_up.score:
            runner_up = candidate
    return best, runner_up


def identify_text(
    text: Text,
    references: Sequence[LanguageProfile],
    config: Optional[IdentifierConfig] = None,
) -> IdentificationResult:
    """Identify the language of ``text``.

    Args:
        text: Decoded, case-folded lines.
        references: Reference profiles; earlier entries win score ties.
        config: Optional configuration overriding the default threshold policy.

    Returns:
        IdentificationResult whose ``language`` is None when evidence is missing
        or the policy rejects the best match.
    """
    cfg = config or IdentifierConfig()
    cfg.validate()

    if not text or not references:
        return IdentificationResult(language=None)

    scores = score_languages(text, references, max_lines=cfg.max_lines)
    best, runner_up = _best_two(scores)
    if best is None:
        return IdentificationResult(language=None)

    runner_score = runner_up.score if runner_up is not None else None
    accepted = cfg.policy.accepts(best.score, runner_score)
    return IdentificationResult(
        language=best.code if accepted else None,
        best=best,
        runner_up=runner_up,
        scores=scores,
    )


def identify(
    text: Text,
    references: Sequence[LanguageProfile],
    policy: Optional[ConfidencePolicy] = None,
) -> str:
    """Return the language code of ``text`` or ``"unknown"``."""
    config = IdentifierConfig(policy=policy) if policy is not None else None
    return identify_text(text, references, config).code


__all__ = ["IdentifierConfig", "identify", "identify_text", "rank_scores", "score_languages"]
