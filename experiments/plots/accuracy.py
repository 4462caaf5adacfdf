"""Per-language accuracy chart for an evaluation run."""

from __future__ import annotations

from typing import Mapping, Optional

import pandas as pd
import plotly.express as px

from experiments.evaluate import EvaluationReport
from .save_config import PlotSaveDestinations


def plot_language_accuracy(
    report: EvaluationReport,
    names: Optional[Mapping[str, str]] = None,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Horizontal bars of identification accuracy per expected language."""
    per_language = report.per_language_accuracy()
    if not per_language:
        return

    names = names or {}
    df = pd.DataFrame(
        {
            "language": [names.get(code, code) for code in per_language],
            "accuracy": list(per_language.values()),
        }
    ).sort_values("accuracy")

    fig = px.bar(
        df,
        x="accuracy",
        y="language",
        orientation="h",
        title=f"Identification accuracy ({report.accuracy:.1%} overall)",
        labels={"accuracy": "Accuracy", "language": "Language"},
    )
    fig.update_layout(xaxis=dict(range=[0, 1], tickformat=".0%"))

    if save_to:
        save_to.write(fig)
    else:
        fig.show()


__all__ = ["plot_language_accuracy"]
