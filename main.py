import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from InquirerPy import inquirer

from experiments.evaluate import run_evaluation
from experiments.plots import PlotSaveConfig, plot_language_accuracy, plot_language_scores
from src.identify import IdentifierConfig, identify_text, make_policy, rank_scores
from src.identify.policy import DEFAULT_THRESHOLD
from src.profiles import LanguageLibrary, load_language_library, save_trigram_counts
from src.profiles.config import DEFAULT_LANGUAGE_NAMES_FILE, DEFAULT_TRIGRAMS_ROOT, ERROR, MAX_TEXT_BYTES
from src.text import text_from_file, text_from_string
from src.trigrams import build_profile

app = typer.Typer()


def _load_library(names: Path, trigrams: Path) -> LanguageLibrary:
    try:
        return load_language_library(names, trigrams)
    except (OSError, ValueError) as exc:
        print(f"[profiles] Could not load trigram data: {exc}")
        raise typer.Exit(code=1) from exc


def _build_config(threshold: float, margin: Optional[float], max_lines: Optional[int]) -> IdentifierConfig:
    try:
        config = IdentifierConfig(policy=make_policy(threshold, margin), max_lines=max_lines)
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return config


def _load_text(text: Optional[str], file: Optional[Path], strict: bool) -> List[str]:
    """Resolve the input text, prompting for a file when none was given."""
    if text is not None:
        return text_from_string(text)
    if file is None:
        file = Path(inquirer.filepath(message="Text file to identify:", only_files=True).execute())
    return text_from_file(file, max_bytes=MAX_TEXT_BYTES, strict=strict)


def _plot_config(plots_root: Path, plots_tag: Optional[str], command: str, save_static: bool, save_html: bool) -> PlotSaveConfig:
    tag = plots_tag or datetime.utcnow().strftime("%Y%m%d-%H%M%S")
    base_dir = plots_root / command
    print(f"[plots] Saving figures under {base_dir / tag}")
    return PlotSaveConfig(base_dir=base_dir, run_tag=tag, save_static=save_static, save_html=save_html)


@app.command()
def identify(
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Text to identify."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Text file to identify."),
    names: Path = typer.Option(DEFAULT_LANGUAGE_NAMES_FILE, "--names", help="CSV of language code, display name."),
    trigrams: Path = typer.Option(DEFAULT_TRIGRAMS_ROOT, "--trigrams", help="Directory of <code>.csv trigram tables."),
    threshold: float = typer.Option(DEFAULT_THRESHOLD, "--threshold", help="Minimum similarity to accept a match."),
    margin: Optional[float] = typer.Option(
        None,
        "--margin",
        help="Minimum lead of the best language over the runner-up.",
    ),
    max_lines: Optional[int] = typer.Option(None, "--max-lines", help="Only profile the first N lines."),
    strict: bool = typer.Option(False, "--strict", help="Fail instead of falling back on undecodable lines."),
) -> None:
    """
    Identify the language of a text passed inline, read from a file, or picked interactively.
    """
    config = _build_config(threshold, margin, max_lines)
    library = _load_library(names, trigrams)

    start = time.perf_counter()
    try:
        lines = _load_text(text, file, strict)
    except (OSError, ValueError) as exc:
        print(f"[identify] Could not load text: {exc}")
        print(ERROR)
        raise typer.Exit(code=1) from exc

    result = identify_text(lines, library.profiles, config)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    if result.found:
        print(f"{result.code} ({library.display_name(result.code)})")
    else:
        print(result.code)
    print(f"[identify] Processed in {elapsed_ms:.2f} ms")


@app.command()
def scores(
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Text to score."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Text file to score."),
    names: Path = typer.Option(DEFAULT_LANGUAGE_NAMES_FILE, "--names"),
    trigrams: Path = typer.Option(DEFAULT_TRIGRAMS_ROOT, "--trigrams"),
    threshold: float = typer.Option(DEFAULT_THRESHOLD, "--threshold"),
    margin: Optional[float] = typer.Option(None, "--margin"),
    top: int = typer.Option(10, "--top", min=1, help="Number of languages to list."),
    plots_root: Optional[Path] = typer.Option(
        None,
        "--plots-root",
        help="Directory where the score chart should be saved (subfolders are created automatically).",
    ),
    plots_tag: Optional[str] = typer.Option(None, "--plots-tag", help="Folder suffix for this run (defaults to timestamp)."),
    save_static: bool = typer.Option(True, help="Write a static PNG snapshot when saving plots."),
    save_html: bool = typer.Option(True, help="Write an interactive HTML plot when saving."),
) -> None:
    """
    Print the ranked similarity of a text to every reference language.
    """
    config = _build_config(threshold, margin, None)
    library = _load_library(names, trigrams)
    try:
        lines = _load_text(text, file, strict=False)
    except OSError as exc:
        print(f"[identify] Could not load text: {exc}")
        print(ERROR)
        raise typer.Exit(code=1) from exc

    result = identify_text(lines, library.profiles, config)
    if not result.scores:
        print("[identify] Text has no trigrams to score.")
        print(result.code)
        return

    for rank, item in enumerate(rank_scores(result.scores)[:top], start=1):
        print(f"{rank:>3}. {item.code:<8} {item.score:.4f}  {library.display_name(item.code)}")
    print(f"Decision: {result.code}")

    if plots_root:
        save_config = _plot_config(plots_root, plots_tag, "scores", save_static, save_html)
        plot_language_scores(
            result.scores,
            threshold,
            names=library.names,
            top=top,
            save_to=save_config.for_plot("language_scores"),
        )


@app.command()
def languages(
    names: Path = typer.Option(DEFAULT_LANGUAGE_NAMES_FILE, "--names"),
    trigrams: Path = typer.Option(DEFAULT_TRIGRAMS_ROOT, "--trigrams"),
) -> None:
    """
    List the loaded reference languages with their profile sizes.
    """
    library = _load_library(names, trigrams)
    for profile in library:
        print(f"{profile.code:<8} {len(profile):>7} trigrams  {library.display_name(profile.code)}")


@app.command("build-profile")
def build_profile_command(
    corpus: Path = typer.Argument(..., exists=True, dir_okay=False, help="Sample text of one language."),
    output: Path = typer.Argument(..., dir_okay=False, help="Destination trigram CSV (e.g. resources/trigrams/en.csv)."),
    max_lines: Optional[int] = typer.Option(None, "--max-lines", help="Only profile the first N lines."),
) -> None:
    """
    Count the trigrams of a corpus file and write them as a reference trigram table.
    """
    lines = text_from_file(corpus, max_bytes=MAX_TEXT_BYTES)
    try:
        profile = build_profile(lines, max_lines=max_lines)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    save_trigram_counts(profile, output)
    print(f"[profiles] Wrote {len(profile)} trigrams from {corpus} → {output}")


@app.command()
def evaluate(
    samples_root: Path = typer.Argument(..., file_okay=False, help="Directory laid out as <code>/*.txt."),
    names: Path = typer.Option(DEFAULT_LANGUAGE_NAMES_FILE, "--names"),
    trigrams: Path = typer.Option(DEFAULT_TRIGRAMS_ROOT, "--trigrams"),
    threshold: float = typer.Option(DEFAULT_THRESHOLD, "--threshold"),
    margin: Optional[float] = typer.Option(None, "--margin"),
    max_lines: Optional[int] = typer.Option(None, "--max-lines"),
    language: List[str] = typer.Option([], "--language", help="Restrict the run to these language codes."),
    plots_root: Optional[Path] = typer.Option(None, "--plots-root"),
    plots_tag: Optional[str] = typer.Option(None, "--plots-tag"),
    save_static: bool = typer.Option(True, help="Write a static PNG snapshot when saving plots."),
    save_html: bool = typer.Option(True, help="Write an interactive HTML plot when saving."),
) -> None:
    """
    Measure identification accuracy and processing time over labelled samples.
    """
    config = _build_config(threshold, margin, max_lines)
    library = _load_library(names, trigrams)
    try:
        report = run_evaluation(samples_root, library, config, languages=language)
    except FileNotFoundError as exc:
        raise typer.BadParameter(str(exc)) from exc

    for code, accuracy in report.per_language_accuracy().items():
        print(f"{code:<8} {accuracy:.1%}  {library.display_name(code)}")

    if plots_root:
        save_config = _plot_config(plots_root, plots_tag, "evaluate", save_static, save_html)
        plot_language_accuracy(report, names=library.names, save_to=save_config.for_plot("language_accuracy"))


if __name__ == "__main__":
    app()
