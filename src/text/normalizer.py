"""Turn raw strings, byte strings and files into case-folded lines."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import List, Union

from src.profiles.config import MAX_TEXT_BYTES

from .decoding import decode_lines

PathLike = Union[str, Path]


def text_from_string(s: str) -> List[str]:
    """Lower-case already decoded text and split it into lines."""
    lines = s.lower().split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines[:-1]] + [lines[-1]]


def text_from_bytes(data: bytes, encoding: str = "utf-8", strict: bool = False) -> List[str]:
    """Decode ``data`` into lines.

    Args:
        data: Raw bytes, e.g. file content.
        encoding: ASCII-compatible source encoding.
        strict: Raise instead of falling back when a line cannot be decoded.

    Raises:
        ValueError: In strict mode, when at least one line is not valid ``encoding``.
    """
    result = decode_lines(data, encoding=encoding)
    if strict and not result.ok:
        lines = ", ".join(str(index + 1) for index in result.fallback_lines)
        raise ValueError(f"Input is not valid {encoding} text (lines {lines}).")
    return list(result.lines)


def read_capped(path: PathLike, max_bytes: int = MAX_TEXT_BYTES) -> bytes:
    """Read at most ``max_bytes`` from ``path``; anything beyond the cap is ignored."""
    if max_bytes < 0:
        raise ValueError("max_bytes cannot be negative.")
    with Path(path).open("rb") as handle:
        return handle.read(max_bytes)


def trim_partial_character(data: bytes, encoding: str = "utf-8") -> bytes:
    """Drop an incomplete multi-byte sequence that a byte cap left at the end of ``data``.

    Only the last line is inspected. A tail that is invalid for other reasons is kept
    so the line-level fallback still reports it.
    """
    tail_start = data.rfind(b"\n") + 1
    decoder = codecs.getincrementaldecoder(encoding)()
    try:
        decoder.decode(data[tail_start:], final=False)
    except UnicodeDecodeError:
        return data
    pending, _ = decoder.getstate()
    return data[: len(data) - len(pending)] if pending else data


def text_from_file(
    path: PathLike,
    max_bytes: int = MAX_TEXT_BYTES,
    encoding: str = "utf-8",
    strict: bool = False,
) -> List[str]:
    """Load a text file as case-folded lines. ``OSError`` propagates when the file is unreadable.

    When the file is longer than ``max_bytes`` the character cut by the cap is dropped.
    """
    data = read_capped(path, max_bytes)
    if Path(path).stat().st_size > max_bytes:
        data = trim_partial_character(data, encoding)
    return text_from_bytes(data, encoding=encoding, strict=strict)


__all__ = ["read_capped", "text_from_bytes", "text_from_file", "text_from_string", "trim_partial_character"]
