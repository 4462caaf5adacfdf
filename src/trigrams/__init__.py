"""Character-trigram packing, profiling and similarity scoring."""

from .packing import code_units, is_valid, pack, pack_text, pack_windows, unpack, unpack_text
from .profile import (
    Text,
    TrigramProfile,
    build_profile,
    build_profile_from_counts,
    normalize_profile,
    profile_norm,
)
from .similarity import cosine_similarity

__all__ = [
    "Text",
    "TrigramProfile",
    "build_profile",
    "build_profile_from_counts",
    "code_units",
    "cosine_similarity",
    "is_valid",
    "normalize_profile",
    "pack",
    "pack_text",
    "pack_windows",
    "profile_norm",
    "unpack",
    "unpack_text",
]
