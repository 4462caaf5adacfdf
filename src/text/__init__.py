from .decoding import DecodeResult, decode_lines
from .normalizer import read_capped, text_from_bytes, text_from_file, text_from_string, trim_partial_character

__all__ = [
    "DecodeResult",
    "decode_lines",
    "read_capped",
    "text_from_bytes",
    "text_from_file",
    "text_from_string",
    "trim_partial_character",
]
