"""Plotting utilities for experiment results."""

from .accuracy import plot_language_accuracy
from .language_scores import plot_language_scores, scores_frame
from .save_config import PlotSaveConfig, PlotSaveDestinations

__all__ = [
    "plot_language_accuracy",
    "plot_language_scores",
    "scores_frame",
    "PlotSaveConfig",
    "PlotSaveDestinations",
]
