"""Confidence policies that decide whether a best match is trustworthy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import numpy as np

DEFAULT_THRESHOLD = 0.1


class ConfidencePolicy(Protocol):
    """Strategy object that accepts or rejects the best similarity score."""

    def accepts(self, best: float, runner_up: Optional[float]) -> bool:
        """Return True when ``best`` is strong enough to name a language."""
        return False


@dataclass(frozen=True)
class ThresholdPolicy:
    """Accept any best score strictly above a fixed threshold."""

    threshold: float = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        if not np.isfinite(self.threshold):
            raise ValueError("Similarity threshold must be a finite number.")

    def accepts(self, best: float, runner_up: Optional[float]) -> bool:
        return best > self.threshold


@dataclass(frozen=True)
class MarginPolicy:
    """Require a threshold and a minimum lead over the runner-up.

    Rejects near-ties between closely related languages. A missing runner-up
    counts as a score of zero.
    """

    threshold: float = DEFAULT_THRESHOLD
    margin: float = 0.0

    def __post_init__(self) -> None:
        if not np.isfinite(self.threshold):
            raise ValueError("Similarity threshold must be a finite number.")
        if not np.isfinite(self.margin) or self.margin < 0.0:
            raise ValueError("Confidence margin must be a finite, non-negative number.")

    def accepts(self, best: float, runner_up: Optional[float]) -> bool:
        if best <= self.threshold:
            return False
        return best - (runner_up or 0.0) >= self.margin


def make_policy(threshold: float = DEFAULT_THRESHOLD, margin: Optional[float] = None) -> ConfidencePolicy:
    """Pick the simplest policy matching the requested gates."""
    if margin is None:
        return ThresholdPolicy(threshold)
    return MarginPolicy(threshold, margin)


__all__ = ["ConfidencePolicy", "DEFAULT_THRESHOLD", "MarginPolicy", "ThresholdPolicy", "make_policy"]
