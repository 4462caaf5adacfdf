"""Accuracy and timing evaluation over a directory of labelled sample texts.

Samples are laid out as ``<samples_root>/<language code>/*.txt``.
"""

from __future__ import annotations

import time
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from src.identify import IdentifierConfig, identify_text
from src.profiles import LanguageLibrary
from src.text import text_from_file

SAMPLE_GLOB = "*.txt"


@dataclass(frozen=True)
class EvaluationRecord:
    """Outcome of identifying one labelled sample."""

    path: Path
    expected: str
    predicted: str
    best_score: float
    elapsed_ms: float

    @property
    def correct(self) -> bool:
        return self.expected == self.predicted


@dataclass(frozen=True)
class EvaluationReport:
    """All sample outcomes of an evaluation run."""

    records: Tuple[EvaluationRecord, ...]

    @property
    def accuracy(self) -> float:
        if not self.records:
            return 0.0
        return sum(record.correct for record in self.records) / len(self.records)

    @property
    def mean_elapsed_ms(self) -> float:
        if not self.records:
            return 0.0
        return sum(record.elapsed_ms for record in self.records) / len(self.records)

    def per_language_accuracy(self) -> Dict[str, float]:
        hits: Dict[str, List[bool]] = defaultdict(list)
        for record in self.records:
            hits[record.expected].append(record.correct)
        return {code: sum(flags) / len(flags) for code, flags in sorted(hits.items())}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "path": [str(record.path) for record in self.records],
                "expected": [record.expected for record in self.records],
                "predicted": [record.predicted for record in self.records],
                "best_score": [record.best_score for record in self.records],
                "elapsed_ms": [record.elapsed_ms for record in self.records],
                "correct": [record.correct for record in self.records],
            }
        )


def collect_samples(samples_root: Path) -> List[Tuple[str, Path]]:
    """List ``(expected code, path)`` pairs in a stable order."""
    if not samples_root.is_dir():
        raise FileNotFoundError(f"Samples directory {samples_root} does not exist.")
    samples: List[Tuple[str, Path]] = []
    for language_dir in sorted(path for path in samples_root.iterdir() if path.is_dir()):
        for sample_path in sorted(language_dir.glob(SAMPLE_GLOB)):
            samples.append((language_dir.name, sample_path))
    return samples


def evaluate_sample(
    expected: str,
    path: Path,
    library: LanguageLibrary,
    config: IdentifierConfig,
) -> EvaluationRecord:
    start = time.perf_counter()
    text = text_from_file(path)
    result = identify_text(text, library.profiles, config)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return EvaluationRecord(
        path=path,
        expected=expected,
        predicted=result.code,
        best_score=result.best.score if result.best is not None else 0.0,
        elapsed_ms=elapsed_ms,
    )


def run_evaluation(
    samples_root: Path,
    library: LanguageLibrary,
    config: Optional[IdentifierConfig] = None,
    languages: Optional[Sequence[str]] = None,
) -> EvaluationReport:
    """Identify every sample under ``samples_root`` and collect the outcomes."""
    cfg = config or IdentifierConfig()
    samples = collect_samples(samples_root)
    if languages:
        wanted = set(languages)
        samples = [(code, path) for code, path in samples if code in wanted]

    print(f"[eval] Evaluating {len(samples)} samples against {len(library)} languages.")
    records: List[EvaluationRecord] = []
    for expected, path in samples:
        record = evaluate_sample(expected, path, library, cfg)
        if not record.correct:
            print(f"[eval] {path.name}: expected {expected}, got {record.predicted} (score={record.best_score:.3f})")
        records.append(record)

    report = EvaluationReport(records=tuple(records))
    print(f"[eval] Accuracy {report.accuracy:.1%}; mean time {report.mean_elapsed_ms:.2f} ms per sample.")
    return report


__all__ = [
    "EvaluationRecord",
    "EvaluationReport",
    "collect_samples",
    "evaluate_sample",
    "run_evaluation",
]
