"""Reference language profiles and the CSV tables they are loaded from."""

from .library import LanguageLibrary, LanguageProfile, make_library
from .loader import (
    load_language_library,
    load_language_names,
    load_language_profile,
    load_trigram_counts,
    profile_to_frame,
    save_trigram_counts,
)

__all__ = [
    "LanguageLibrary",
    "LanguageProfile",
    "load_language_library",
    "load_language_names",
    "load_language_profile",
    "load_trigram_counts",
    "make_library",
    "profile_to_frame",
    "save_trigram_counts",
]
