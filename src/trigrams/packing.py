"""Pack three UTF-16 code units into one 64-bit trigram key and back."""

from __future__ import annotations

from typing import Tuple

import numpy as np

LANE_BITS = 16
LANE_MASK = 0xFFFF
TRIGRAM_LENGTH = 3

_SHIFT_HIGH = np.uint64(2 * LANE_BITS)
_SHIFT_MID = np.uint64(LANE_BITS)


def pack(c0: int, c1: int, c2: int) -> int:
    """Encode three code units into a single key, ``c0`` in the highest lane."""
    for unit in (c0, c1, c2):
        if not 0 <= unit <= LANE_MASK:
            raise ValueError(f"Code unit {unit!r} does not fit in a 16-bit lane.")
    return (c0 << (2 * LANE_BITS)) | (c1 << LANE_BITS) | c2


def unpack(key: int) -> Tuple[int, int, int]:
    """Exact inverse of :func:`pack`."""
    return (
        (key >> (2 * LANE_BITS)) & LANE_MASK,
        (key >> LANE_BITS) & LANE_MASK,
        key & LANE_MASK,
    )


def is_valid(key: int) -> bool:
    """False for the zero key and for any key with an empty (NUL) lane."""
    if key <= 0 or key >> (3 * LANE_BITS):
        return False
    return all(unpack(key))


def code_units(line: str) -> np.ndarray:
    """Return the UTF-16 code units of ``line``; astral characters yield two surrogates."""
    return np.frombuffer(line.encode("utf-16-le", "surrogatepass"), dtype="<u2")


def pack_text(trigram: str) -> int:
    """Pack a textual trigram, returning 0 unless it is exactly three code units long."""
    units = code_units(trigram)
    if units.size != TRIGRAM_LENGTH:
        return 0
    return pack(int(units[0]), int(units[1]), int(units[2]))


def unpack_text(key: int) -> str:
    """Render a key back into its three-character string."""
    raw = np.asarray(unpack(key), dtype="<u2").tobytes()
    return raw.decode("utf-16-le", "surrogatepass")


def pack_windows(units: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Pack every width-3 window of a code-unit array.

    Returns the ``uint64`` keys and a boolean mask marking windows with no NUL lane.
    """
    if units.size < TRIGRAM_LENGTH:
        empty = np.empty(0, dtype=np.uint64)
        return empty, np.empty(0, dtype=bool)

    wide = units.astype(np.uint64)
    first, second, third = wide[:-2], wide[1:-1], wide[2:]
    keys = (first << _SHIFT_HIGH) | (second << _SHIFT_MID) | third
    valid = (first != 0) & (second != 0) & (third != 0)
    return keys, valid


__all__ = [
    "LANE_BITS",
    "LANE_MASK",
    "TRIGRAM_LENGTH",
    "code_units",
    "is_valid",
    "pack",
    "pack_text",
    "pack_windows",
    "unpack",
    "unpack_text",
]
