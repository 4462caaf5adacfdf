"""Read and write the two-column CSV tables behind the reference library."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Union

import numpy as np
import pandas as pd

from src.trigrams import unpack_text

from .config import DEFAULT_LANGUAGE_NAMES_FILE, DEFAULT_TRIGRAMS_ROOT, TRIGRAM_FILE_SUFFIX
from .library import LanguageLibrary, LanguageProfile

PathLike = Union[str, Path]

_COLUMNS = ["key", "value"]


def _read_table(path: PathLike) -> pd.DataFrame:
    """Load a headerless two-column CSV as strings, skipping malformed rows.

    NA parsing is disabled so trigrams such as ``nan`` or ``n/a`` survive intact.
    Lone surrogates, written for trigrams that split an astral character, are read back as-is.
    """
    try:
        frame = pd.read_csv(
            path,
            header=None,
            names=_COLUMNS,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            on_bad_lines="skip",
            encoding="utf-8-sig",
            encoding_errors="surrogatepass",
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=_COLUMNS, dtype=str)
    frame = frame.dropna()
    return frame[(frame["key"] != "") & (frame["value"] != "")]


def load_language_names(path: PathLike = DEFAULT_LANGUAGE_NAMES_FILE) -> Dict[str, str]:
    """Map language codes to display names, preserving file order."""
    frame = _read_table(path)
    codes = frame["key"].str.strip()
    names = frame["value"].str.strip()
    return {code: name for code, name in zip(codes, names) if code}


def load_trigram_counts(path: PathLike) -> Dict[str, float]:
    """Read a trigram → count table; rows with a non-numeric or negative count are dropped."""
    frame = _read_table(path)
    frame = frame.assign(value=pd.to_numeric(frame["value"], errors="coerce")).dropna(subset=["value"])
    values = frame["value"].astype(float)
    frame = frame[np.isfinite(values) & (values >= 0)]
    totals = frame.groupby("key", sort=False)["value"].sum()
    return {str(trigram): float(count) for trigram, count in totals.items()}


def load_language_profile(code: str, path: PathLike) -> LanguageProfile:
    """Load, pack and normalize the reference profile for one language."""
    return LanguageProfile.from_counts(code, load_trigram_counts(path))


def load_language_library(
    names_path: PathLike = DEFAULT_LANGUAGE_NAMES_FILE,
    trigrams_root: PathLike = DEFAULT_TRIGRAMS_ROOT,
) -> LanguageLibrary:
    """Load every language listed in the name table from ``<trigrams_root>/<code>.csv``."""
    print("[profiles] Reading language codes ...")
    names = load_language_names(names_path)
    if not names:
        raise ValueError(f"No language codes found in {names_path}.")

    root = Path(trigrams_root)
    profiles: List[LanguageProfile] = []
    for code in names:
        profile_path = root / f"{code}{TRIGRAM_FILE_SUFFIX}"
        if not profile_path.exists():
            raise FileNotFoundError(f"Missing trigram profile for '{code}' under {profile_path}.")
        print(f'[profiles] Reading trigram profile for language code "{code}" ...')
        profiles.append(load_language_profile(code, profile_path))

    print(f"[profiles] Loaded {len(profiles)} languages.")
    return LanguageLibrary(profiles=tuple(profiles), names=names)


def profile_to_frame(profile: Mapping[int, float]) -> pd.DataFrame:
    """Tabulate a profile as trigram/count rows, most frequent first."""
    frame = pd.DataFrame(
        {
            "trigram": [unpack_text(key) for key in profile],
            "count": list(profile.values()),
        }
    )
    if frame.empty:
        return frame
    if np.allclose(frame["count"], np.round(frame["count"])):
        frame["count"] = np.round(frame["count"]).astype(np.int64)
    return frame.sort_values(["count", "trigram"], ascending=[False, True], kind="mergesort").reset_index(drop=True)


def save_trigram_counts(profile: Mapping[int, float], path: PathLike) -> None:
    """Write a raw-count profile in the same format `load_trigram_counts` reads."""
    frame = profile_to_frame(profile)
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(target, header=False, index=False, encoding="utf-8", errors="surrogatepass")


__all__ = [
    "load_language_library",
    "load_language_names",
    "load_language_profile",
    "load_trigram_counts",
    "profile_to_frame",
    "save_trigram_counts",
]
