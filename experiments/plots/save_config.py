"""Where plotly figures land on disk and which formats get written."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class PlotSaveDestinations:
    """Resolved output paths for a single figure."""

    directory: Path
    slug: str
    save_static: bool
    save_html: bool

    @property
    def png_path(self) -> Path:
        return self.directory / f"{self.slug}.png"

    @property
    def html_path(self) -> Path:
        return self.directory / f"{self.slug}.html"

    def write(self, fig: Any) -> None:
        """Write ``fig`` in every enabled format, creating the directory first."""
        self.directory.mkdir(parents=True, exist_ok=True)
        if self.save_static:
            fig.write_image(str(self.png_path), engine="kaleido")
        if self.save_html:
            fig.write_html(str(self.html_path), include_plotlyjs="cdn", full_html=True)


@dataclass(frozen=True)
class PlotSaveConfig:
    """Groups every figure of one run under ``base_dir / run_tag``."""

    base_dir: Path
    run_tag: str
    save_static: bool = True
    save_html: bool = True

    def for_plot(self, slug: str) -> PlotSaveDestinations:
        return PlotSaveDestinations(
            directory=self.base_dir / self.run_tag,
            slug=slug,
            save_static=self.save_static,
            save_html=self.save_html,
        )


__all__ = ["PlotSaveConfig", "PlotSaveDestinations"]
