"""Cosine similarity between unit-normalized trigram profiles."""

from __future__ import annotations

from typing import Mapping


def cosine_similarity(a: Mapping[int, float], b: Mapping[int, float]) -> float:
    """Dot product over the keys shared by ``a`` and ``b``.

    Both profiles are expected to be unit-normalized, so the dot product is the
    cosine similarity. The smaller profile is iterated and the larger probed.
    """
    if not a or not b:
        return 0.0

    small, large = (a, b) if len(a) <= len(b) else (b, a)
    total = 0.0
    for key, value in small.items():
        other = large.get(key)
        if other is not None:
            total += value * other
    return float(total)


__all__ = ["cosine_similarity"]
