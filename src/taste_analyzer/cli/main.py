"""Main CLI entry point for Taste Analyzer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from taste_analyzer import __version__
from taste_analyzer.analysis import (
    CATEGORY_PROFILES,
    NoGenreSignalError,
    classify_genres,
    get_profile,
)
from taste_analyzer.export import export_result, result_to_json
from taste_analyzer.metadata.genres import normalize_genre
from taste_analyzer.processing import TIME_RANGES, AnalyzerConfig, BranchAnalyzer

if TYPE_CHECKING:
    from taste_analyzer.models.core import ClassificationResult


# ANSI color codes for terminal output
class Colors:
    """ANSI color codes for styled terminal output."""

    HEADER = "\033[95m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    END = "\033[0m"


def color(text: str, *codes: str) -> str:
    """Apply color codes to text."""
    return "".join(codes) + str(text) + Colors.END


def _error(message: str) -> None:
    """Print an error message to stderr."""
    click.echo(color(message, Colors.RED), err=True)


def _print_result(result: ClassificationResult, verbose: bool) -> None:
    """Print a classification result as text."""
    click.echo(f"\n{color(result.determined_category, Colors.BOLD, Colors.GREEN)}")
    click.echo(f"{'=' * 50}")
    click.echo(result.category_description)
    click.echo(f"\n{result.analysis_summary}")
    click.echo(f"\n{color('Top genres:', Colors.BOLD)} {', '.join(result.top_genres)}")
    click.echo(f"{color('Winning score:', Colors.BOLD)} {result.winning_score}")

    if not verbose:
        return

    click.echo(f"\n{color('Score breakdown:', Colors.BOLD)}")
    for name, entry in result.score_breakdown.items():
        marker = "*" if name == result.determined_category else " "
        click.echo(f" {marker} {name:18} {entry.total_score:3d}")
        for match in entry.genre_matches:
            matched = ", ".join(match.category_genres)
            click.echo(
                f"      {color(f'+{match.points}', Colors.CYAN)} "
                f"{match.user_genre} {color(f'({matched})', Colors.DIM)}"
            )


def _emit(result: ClassificationResult, output_format: str, verbose: bool) -> None:
    if output_format == "json":
        click.echo(result_to_json(result))
    else:
        _print_result(result, verbose)


@click.group()
@click.version_option(version=__version__, prog_name="taste-analyzer")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output.")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to JSON configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: Path | None) -> None:
    """Taste Analyzer - Discover your branch of the World End Tree."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        ctx.obj["config"] = AnalyzerConfig.from_file(config) if config else AnalyzerConfig()
    except ValueError as e:
        _error(f"Error loading config {config}: {e}")
        raise SystemExit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-f", "--format", "output_format", type=click.Choice(["text", "json"]), default="text")
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Also write the JSON result here.")
@click.option("-v", "--verbose", is_flag=True, help="Show the per-category score breakdown.")
@click.pass_context
def classify(
    ctx: click.Context,
    path: Path,
    output_format: str,
    output: Path | None,
    verbose: bool,
) -> None:
    """Classify a listening history into a branch.

    PATH is a JSON file of top tracks, either a list of track objects or a
    Spotify paging object with an "items" list. Each artist needs a
    "genres" list for classification to succeed.

    Example:
        taste-analyzer classify top_tracks.json
        taste-analyzer classify top_tracks.json --format json
    """
    verbose = verbose or ctx.obj.get("verbose", False)
    analyzer = BranchAnalyzer(ctx.obj["config"])

    try:
        result = analyzer.analyze_file(path)
    except NoGenreSignalError as e:
        _error(f"Error: {e}. Try again once your artists have genre data.")
        raise SystemExit(1)
    except ValueError as e:
        _error(f"Error reading {path}: {e}")
        raise SystemExit(1)

    _emit(result, output_format, verbose)

    if output:
        export_result(result, output)
        click.echo(f"Saved result to {output}", err=True)


@cli.command()
@click.argument("genres", nargs=-1, required=True)
@click.option("-f", "--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def score(genres: tuple[str, ...], output_format: str) -> None:
    """Score an explicit ranked list of canonical genres.

    GENRES are given most frequent first and are scored as-is, without
    normalization.

    Example:
        taste-analyzer score metal doom ambient
    """
    try:
        result = classify_genres(list(genres))
    except NoGenreSignalError as e:
        _error(f"Error: {e}")
        raise SystemExit(1)

    _emit(result, output_format, verbose=True)


@cli.command()
@click.argument("tags", nargs=-1, required=True)
def normalize(tags: tuple[str, ...]) -> None:
    """Show the canonical genre for each raw genre TAG."""
    for tag in tags:
        click.echo(f"{tag} -> {color(normalize_genre(tag), Colors.CYAN)}")


@cli.command()
@click.option("--category", help="Show a single category.")
@click.option("-f", "--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def categories(category: str | None, output_format: str) -> None:
    """List the branch categories and their genres."""
    if category:
        try:
            profiles = [get_profile(category)]
        except KeyError:
            _error(f"Unknown category: {category}")
            raise SystemExit(1)
    else:
        profiles = list(CATEGORY_PROFILES.values())

    if output_format == "json":
        data = [
            {"name": p.name, "genres": list(p.genres), "description": p.description}
            for p in profiles
        ]
        click.echo(json.dumps(data, indent=2))
        return

    for profile in profiles:
        click.echo(f"\n{color(profile.name, Colors.BOLD, Colors.HEADER)}")
        click.echo(f"  Genres: {', '.join(profile.genres)}")
        click.echo(f"  {color(profile.description, Colors.DIM)}")


@cli.command()
@click.option("-l", "--limit", type=click.IntRange(1, 50), help="Number of top tracks to fetch.")
@click.option(
    "--time-range",
    type=click.Choice(TIME_RANGES),
    help="Listening window.",
)
@click.option("--save", type=click.Path(path_type=Path), help="Save fetched tracks as JSON.")
@click.option("-f", "--format", "output_format", type=click.Choice(["text", "json"]), default="text")
@click.option("-v", "--verbose", is_flag=True, help="Show the per-category score breakdown.")
@click.pass_context
def spotify(
    ctx: click.Context,
    limit: int | None,
    time_range: str | None,
    save: Path | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Fetch your Spotify top tracks and classify them.

    Requires the spotify extra and the SPOTIPY_CLIENT_ID and
    SPOTIPY_REDIRECT_URI environment variables.
    """
    from taste_analyzer.ingest import tracks_to_data
    from taste_analyzer.metadata.spotify import create_client, fetch_top_tracks

    verbose = verbose or ctx.obj.get("verbose", False)
    config: AnalyzerConfig = ctx.obj["config"]

    try:
        sp = create_client()
        tracks = fetch_top_tracks(
            sp,
            limit=limit or config.track_limit,
            time_range=time_range or config.time_range,
        )
    except ImportError as e:
        _error(f"Error: {e}")
        raise SystemExit(1)
    except Exception as e:
        _error(f"Error fetching top tracks from Spotify: {e}")
        raise SystemExit(1)

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save.write_text(json.dumps(tracks_to_data(tracks), indent=2), encoding="utf-8")
        click.echo(f"Saved {len(tracks)} tracks to {save}", err=True)

    try:
        result = BranchAnalyzer(config).analyze(tracks)
    except NoGenreSignalError as e:
        _error(f"Error: {e}")
        raise SystemExit(1)

    _emit(result, output_format, verbose)


if __name__ == "__main__":
    cli()
