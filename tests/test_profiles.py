"""Tests for reference profiles, the language library and its CSV tables."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path
import sys
from typing import Dict

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.profiles import (
    LanguageLibrary,
    LanguageProfile,
    load_language_library,
    load_language_names,
    load_language_profile,
    load_trigram_counts,
    make_library,
    profile_to_frame,
    save_trigram_counts,
)
from src.text import text_from_string
from src.trigrams import build_profile, pack_text, profile_norm, unpack_text


# ---------------------------------------------------------------------------
# Helper fixtures and utilities


def _write_reference_data(root: Path, samples: Dict[str, str], names: Dict[str, str]) -> tuple[Path, Path]:
    names_path = root / "languagecode_names.csv"
    names_path.write_text("".join(f"{code},{names[code]}\n" for code in samples), encoding="utf-8")
    trigrams_root = root / "trigrams"
    for code, sample in samples.items():
        save_trigram_counts(build_profile(text_from_string(sample)), trigrams_root / f"{code}.csv")
    return names_path, trigrams_root


# ---------------------------------------------------------------------------
# Language profile tests


def test_language_profile_is_normalized_and_read_only() -> None:
    profile = LanguageProfile.from_counts("en", {"the": 3, " th": 4})
    assert profile_norm(profile.profile) == pytest.approx(1.0)
    assert profile.profile[pack_text(" th")] == pytest.approx(0.8)
    with pytest.raises(TypeError):
        profile.profile[pack_text("abc")] = 1.0  # type: ignore[index]
    with pytest.raises(FrozenInstanceError):
        profile.code = "de"  # type: ignore[misc]


def test_language_profile_does_not_mutate_source() -> None:
    raw = build_profile(["abcabc"])
    LanguageProfile.from_profile("xx", raw)
    assert raw[pack_text("abc")] == 2


def test_library_rejects_duplicate_codes() -> None:
    profile = LanguageProfile.from_counts("en", {"the": 1})
    with pytest.raises(ValueError):
        make_library([profile, profile])


def test_library_lookup_and_display_names() -> None:
    en = LanguageProfile.from_counts("en", {"the": 1})
    de = LanguageProfile.from_counts("de", {"der": 1})
    library = make_library([en, de], {"en": "English"})
    assert library.codes == ("en", "de")
    assert library.get("de") is de
    assert library.get("fr") is None
    assert library.display_name("en") == "English"
    assert library.display_name("de") == "de"
    assert len(library) == 2


# ---------------------------------------------------------------------------
# CSV loader tests


def test_load_language_names_preserves_order(tmp_path: Path) -> None:
    path = tmp_path / "names.csv"
    path.write_text("uk,Ukrainian\nen, English\n\nbroken\n", encoding="utf-8")
    assert list(load_language_names(path).items()) == [("uk", "Ukrainian"), ("en", "English")]


def test_load_trigram_counts_keeps_literal_trigrams(tmp_path: Path) -> None:
    path = tmp_path / "xx.csv"
    path.write_text(' th,120\nthe,100\nnan,5\n"a,b",7\nabc,lots\nxyz\nthe,1\n', encoding="utf-8")
    counts = load_trigram_counts(path)
    assert counts == {" th": 120.0, "the": 101.0, "nan": 5.0, "a,b": 7.0}


def test_load_trigram_counts_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert load_trigram_counts(path) == {}


def test_load_language_profile_normalizes(tmp_path: Path) -> None:
    path = tmp_path / "xx.csv"
    path.write_text("abc,3\nbcd,4\n", encoding="utf-8")
    profile = load_language_profile("xx", path)
    assert profile.code == "xx"
    assert profile.profile[pack_text("abc")] == pytest.approx(0.6)
    assert profile_norm(profile.profile) == pytest.approx(1.0)


def test_save_trigram_counts_round_trips(tmp_path: Path) -> None:
    profile = build_profile(["the theme of the thesis"])
    path = tmp_path / "out" / "en.csv"
    save_trigram_counts(profile, path)
    assert load_trigram_counts(path) == {unpack_text(key): float(count) for key, count in profile.items()}


def test_save_trigram_counts_round_trips_astral_characters(tmp_path: Path) -> None:
    # The emoji is two code units, so some windows hold a single surrogate.
    profile = build_profile(["hi \U0001F600 there"])
    path = tmp_path / "emoji.csv"
    save_trigram_counts(profile, path)
    counts = load_trigram_counts(path)
    assert counts == {unpack_text(key): float(count) for key, count in profile.items()}
    assert {pack_text(trigram) for trigram in counts} == set(profile)


def test_load_trigram_counts_drops_negative_counts(tmp_path: Path) -> None:
    path = tmp_path / "xx.csv"
    path.write_text("abc,3\nbcd,-4\ncde,0\n", encoding="utf-8")
    assert load_trigram_counts(path) == {"abc": 3.0, "cde": 0.0}


def test_profile_to_frame_orders_by_count() -> None:
    profile = build_profile(["abab", "cde"])
    frame = profile_to_frame(profile)
    assert list(frame["trigram"]) == ["aba", "bab", "cde"]
    assert list(frame["count"]) == [1, 1, 1]

    frame = profile_to_frame(build_profile(["aaaa", "bbb"]))
    assert list(frame["trigram"]) == ["aaa", "bbb"]
    assert list(frame["count"]) == [2, 1]


def test_load_language_library(tmp_path: Path, samples: Dict[str, str], names: Dict[str, str]) -> None:
    names_path, trigrams_root = _write_reference_data(tmp_path, samples, names)
    library = load_language_library(names_path, trigrams_root)
    assert isinstance(library, LanguageLibrary)
    assert library.codes == tuple(samples)
    assert library.display_name("uk") == "Ukrainian"
    for profile in library:
        assert profile_norm(profile.profile) == pytest.approx(1.0)


def test_load_language_library_missing_profile(tmp_path: Path) -> None:
    names_path = tmp_path / "names.csv"
    names_path.write_text("en,English\n", encoding="utf-8")
    (tmp_path / "trigrams").mkdir()
    with pytest.raises(FileNotFoundError):
        load_language_library(names_path, tmp_path / "trigrams")


def test_load_language_library_requires_languages(tmp_path: Path) -> None:
    names_path = tmp_path / "names.csv"
    names_path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_language_library(names_path, tmp_path)
