"""Build and normalize sparse trigram frequency profiles."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

import numpy as np

from .packing import TRIGRAM_LENGTH, code_units, is_valid, pack_text, pack_windows

TrigramProfile = Dict[int, float]
Text = Sequence[str]

# Joining lines with NUL puts a zero lane in every window that crosses a line break.
_LINE_SEPARATOR = "\x00"


def _prepare_lines(text: Text, max_lines: Optional[int]) -> list[str]:
    lines = text if max_lines is None else text[:max_lines]
    prepared: list[str] = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        # Length counts UTF-16 code units, so two astral characters already make a trigram.
        if len(line) < TRIGRAM_LENGTH and len(line.encode("utf-16-le", "surrogatepass")) < 2 * TRIGRAM_LENGTH:
            continue
        prepared.append(line)
    return prepared


def build_profile(text: Text, max_lines: Optional[int] = None) -> TrigramProfile:
    """Count every trigram in ``text``.

    Args:
        text: Decoded, case-folded lines.
        max_lines: Optional cap on how many lines are read; ``None`` reads them all.

    Returns:
        Mapping from packed trigram key to its occurrence count. Empty when no
        line holds at least three characters.
    """
    if max_lines is not None and max_lines < 0:
        raise ValueError("max_lines cannot be negative.")

    lines = _prepare_lines(text, max_lines)
    if not lines:
        return {}

    units = code_units(_LINE_SEPARATOR.join(lines))
    keys, valid = pack_windows(units)
    if not valid.any():
        return {}

    unique_keys, counts = np.unique(keys[valid], return_counts=True)
    return dict(zip(unique_keys.tolist(), counts.tolist()))


def build_profile_from_counts(counts: Mapping[str, float]) -> TrigramProfile:
    """Convert a textual trigram table into a packed profile, dropping invalid trigrams."""
    profile: TrigramProfile = {}
    for trigram, frequency in counts.items():
        key = pack_text(trigram)
        if not is_valid(key):
            continue
        profile[key] = profile.get(key, 0.0) + float(frequency)
    return profile


def profile_norm(profile: Mapping[int, float]) -> float:
    """Euclidean norm of the profile values (0.0 for an empty profile)."""
    if not profile:
        return 0.0
    values = np.fromiter(profile.values(), dtype=np.float64, count=len(profile))
    return float(np.linalg.norm(values))


def normalize_profile(profile: TrigramProfile) -> None:
    """Rescale ``profile`` in place to unit Euclidean length.

    Empty and all-zero profiles are left untouched.
    """
    norm = profile_norm(profile)
    if not norm > 0.0:
        return

    values = np.fromiter(profile.values(), dtype=np.float64, count=len(profile))
    profile.update(zip(list(profile), (values / norm).tolist()))


__all__ = [
    "Text",
    "TrigramProfile",
    "build_profile",
    "build_profile_from_counts",
    "normalize_profile",
    "profile_norm",
]
