"""Line-level decoding with an explicit byte fallback."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import List, Tuple

FALLBACK_ENCODING = "latin-1"


@dataclass(frozen=True)
class DecodeResult:
    """Decoded lines plus the indices of lines that needed the byte fallback."""

    lines: Tuple[str, ...]
    fallback_lines: Tuple[int, ...] = ()

    @property
    def ok(self) -> bool:
        """True when every line decoded cleanly with the requested encoding."""
        return not self.fallback_lines


def split_raw_lines(data: bytes) -> List[bytes]:
    """Split on ``\\n``, dropping a ``\\r`` that directly precedes it. Always yields one line."""
    raw_lines = data.split(b"\n")
    # The last piece has no line feed after it, so its carriage return is kept as data.
    return [line[:-1] if line.endswith(b"\r") else line for line in raw_lines[:-1]] + [raw_lines[-1]]


def decode_lines(data: bytes, encoding: str = "utf-8") -> DecodeResult:
    """Decode ``data`` line by line and lower-case every line.

    A line that cannot be decoded keeps its raw bytes as individual characters
    (latin-1) instead of invalidating the whole text. ``encoding`` must be
    ASCII-compatible so that splitting on ``\\n`` bytes is safe.
    """
    if data.startswith(codecs.BOM_UTF8) and codecs.lookup(encoding).name == "utf-8":
        data = data[len(codecs.BOM_UTF8):]

    lines: List[str] = []
    fallback: List[int] = []
    for index, raw in enumerate(split_raw_lines(data)):
        try:
            decoded = raw.decode(encoding)
        except UnicodeDecodeError:
            decoded = raw.decode(FALLBACK_ENCODING)
            fallback.append(index)
        lines.append(decoded.lower())
    return DecodeResult(lines=tuple(lines), fallback_lines=tuple(fallback))


__all__ = ["DecodeResult", "FALLBACK_ENCODING", "decode_lines", "split_raw_lines"]
