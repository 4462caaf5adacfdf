"""Immutable reference profiles shared across identification calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple

from src.trigrams import TrigramProfile, build_profile, build_profile_from_counts, normalize_profile


@dataclass(frozen=True)
class LanguageProfile:
    """A language code paired with its normalized, read-only trigram profile."""

    code: str
    profile: Mapping[int, float]

    @classmethod
    def from_profile(cls, code: str, profile: TrigramProfile) -> "LanguageProfile":
        """Normalize a copy of ``profile`` and freeze it."""
        frozen = dict(profile)
        normalize_profile(frozen)
        return cls(code=code, profile=MappingProxyType(frozen))

    @classmethod
    def from_counts(cls, code: str, counts: Mapping[str, float]) -> "LanguageProfile":
        """Build from a textual trigram → count table."""
        return cls.from_profile(code, build_profile_from_counts(counts))

    @classmethod
    def from_text(cls, code: str, text: Sequence[str]) -> "LanguageProfile":
        """Build from sample lines of the language."""
        return cls.from_profile(code, build_profile(text))

    def __len__(self) -> int:
        return len(self.profile)


@dataclass(frozen=True)
class LanguageLibrary:
    """Ordered reference profiles plus display names; the order breaks score ties."""

    profiles: Tuple[LanguageProfile, ...]
    names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        codes = [profile.code for profile in self.profiles]
        if len(set(codes)) != len(codes):
            raise ValueError("Language codes must be unique within a library.")
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    def __iter__(self) -> Iterator[LanguageProfile]:
        return iter(self.profiles)

    def __len__(self) -> int:
        return len(self.profiles)

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(profile.code for profile in self.profiles)

    def get(self, code: str) -> Optional[LanguageProfile]:
        for profile in self.profiles:
            if profile.code == code:
                return profile
        return None

    def display_name(self, code: str) -> str:
        """Human-readable name for ``code``, falling back to the code itself."""
        return self.names.get(code, code)


def make_library(profiles: Sequence[LanguageProfile], names: Optional[Dict[str, str]] = None) -> LanguageLibrary:
    return LanguageLibrary(profiles=tuple(profiles), names=names or {})


__all__ = ["LanguageLibrary", "LanguageProfile", "make_library"]
