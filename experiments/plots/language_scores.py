"""Bar chart of the similarity between one text and every reference language."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

import pandas as pd
import plotly.express as px

from src.identify import LanguageScore
from .save_config import PlotSaveDestinations


def scores_frame(scores: Sequence[LanguageScore], names: Optional[Mapping[str, str]] = None) -> pd.DataFrame:
    names = names or {}
    return pd.DataFrame(
        {
            "code": [item.code for item in scores],
            "language": [names.get(item.code, item.code) for item in scores],
            "score": [item.score for item in scores],
        }
    ).sort_values("score", kind="mergesort")


def plot_language_scores(
    scores: Sequence[LanguageScore],
    threshold: float,
    names: Optional[Mapping[str, str]] = None,
    top: Optional[int] = None,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Visualize cosine similarity per language with the acceptance threshold marked."""
    if not scores:
        return

    df = scores_frame(scores, names)
    if top is not None:
        df = df.tail(top)

    fig = px.bar(
        df,
        x="score",
        y="language",
        orientation="h",
        title="Trigram cosine similarity per language",
        labels={"score": "Cosine similarity", "language": "Language"},
    )
    fig.add_vline(x=threshold, line_dash="dash", annotation_text="threshold")
    fig.update_layout(xaxis=dict(range=[0, 1]))

    if save_to:
        save_to.write(fig)
    else:
        fig.show()


__all__ = ["plot_language_scores", "scores_frame"]
