"""Shared sample corpora and reference profiles for the test suite."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Dict, List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.profiles import LanguageLibrary, LanguageProfile, make_library
from src.text import text_from_string

SAMPLES: Dict[str, str] = {
    "en": (
        "the quick brown fox jumps over the lazy dog. it was the best of times and it was the worst of times.\n"
        "there is nothing either good or bad but thinking makes it so.\n"
        "all the world is a stage and all the men and women merely players.\n"
        "they have their exits and their entrances and one man in his time plays many parts.\n"
        "the people of the town went to the market every morning to buy bread and fish\n"
        "and they talked with their neighbours about the weather and the news of the day."
    ),
    "de": (
        "der schnelle braune fuchs springt über den faulen hund.\n"
        "es war einmal ein könig der hatte drei töchter und die jüngste war die schönste von allen.\n"
        "die leute in der stadt gingen jeden morgen auf den markt um brot und fisch zu kaufen\n"
        "und sie sprachen mit ihren nachbarn über das wetter und die neuigkeiten des tages.\n"
        "ich weiß nicht was soll es bedeuten dass ich so traurig bin."
    ),
    "fr": (
        "le renard brun rapide saute par dessus le chien paresseux.\n"
        "il était une fois un roi qui avait trois filles et la plus jeune était la plus belle de toutes.\n"
        "les gens de la ville allaient chaque matin au marché pour acheter du pain et du poisson\n"
        "et ils parlaient avec leurs voisins du temps et des nouvelles du jour."
    ),
    "es": (
        "el rápido zorro marrón salta sobre el perro perezoso.\n"
        "había una vez un rey que tenía tres hijas y la más joven era la más hermosa de todas.\n"
        "la gente del pueblo iba cada mañana al mercado para comprar pan y pescado\n"
        "y hablaban con sus vecinos sobre el tiempo y las noticias del día."
    ),
    "uk": (
        "швидка бура лисиця стрибає через ледачого собаку.\n"
        "жив собі колись король і мав він трьох доньок а наймолодша була найкрасивіша з усіх.\n"
        "люди з міста щоранку ходили на ринок щоб купити хліба та риби\n"
        "і розмовляли з сусідами про погоду та новини дня."
    ),
}

NAMES: Dict[str, str] = {
    "en": "English",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
    "uk": "Ukrainian",
}

UKRAINIAN_TEXT = (
    "Україна має багату історію.\n"
    "Люди в селі щодня ходили до річки і розмовляли про погоду, про новини та про своїх дітей."
)

UPPERCASE_ENGLISH_TEXT = "THE PEOPLE OF THE VILLAGE WENT TO THE RIVER EVERY DAY AND THEY TALKED ABOUT THE WEATHER AND THE NEWS"

SCOTS_TEXT = (
    "the auld man gaed doon tae the toon tae buy breid an fish,\n"
    "an he spak wi his neebors aboot the weather an the news o the day."
)


def sample_lines(code: str) -> List[str]:
    return text_from_string(SAMPLES[code])


@pytest.fixture
def library() -> LanguageLibrary:
    profiles = [LanguageProfile.from_text(code, sample_lines(code)) for code in SAMPLES]
    return make_library(profiles, NAMES)


@pytest.fixture
def samples() -> Dict[str, str]:
    return dict(SAMPLES)


@pytest.fixture
def names() -> Dict[str, str]:
    return dict(NAMES)


@pytest.fixture
def texts() -> Dict[str, str]:
    """Held-out texts that never appear in the reference samples."""
    return {
        "uk": UKRAINIAN_TEXT,
        "en_upper": UPPERCASE_ENGLISH_TEXT,
        "sco": SCOTS_TEXT,
    }
