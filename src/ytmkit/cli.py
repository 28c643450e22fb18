#!/usr/bin/env python3
"""Command-line interface for ytmkit.

This CLI is primarily for debugging and development.
For production use, import ytmkit as a library.
"""

import json
import logging
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ytmkit import create_client
from ytmkit.client import YTMusicClient
from ytmkit.config import SearchFilter
from ytmkit.exceptions import YTMKitError
from ytmkit.models import CarouselSection, DescriptionSection, HomeSection

logger = logging.getLogger("ytmkit")

_ID_FIELDS = ("video_id", "artist_id", "album_id", "playlist_id")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first, so it can be called more than once.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def format_duration(seconds: int | None) -> str:
    """Format duration in seconds to MM:SS or HH:MM:SS."""
    if seconds is None:
        return ""
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def record_id(record: BaseModel) -> str:
    """ID of a catalog record, whatever its type."""
    for name in _ID_FIELDS:
        if value := getattr(record, name, None):
            return str(value)
    return ""


def record_credit(record: BaseModel) -> str:
    """Artist names credited on a record, '; ' separated."""
    if artists := getattr(record, "artists", None):
        return "; ".join(a.name for a in artists)
    if artist := getattr(record, "artist", None):
        return artist.name
    return ""


def print_results(
    console: Console, records: Sequence[BaseModel], title: str = ""
) -> None:
    """Print catalog records as one table row each.

    Args:
        console: Rich console for output.
        records: Detailed records of any type.
        title: Optional table title.
    """
    table = Table(title=title or None, title_justify="left")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Name", style="bold")
    table.add_column("Artist")
    table.add_column("Duration", justify="right")

    for index, record in enumerate(records, 1):
        table.add_row(
            str(index),
            str(getattr(record, "type", "")),
            record_id(record),
            str(getattr(record, "name", "")),
            record_credit(record),
            format_duration(getattr(record, "duration", None)),
        )

    console.print()
    console.print(table)


def print_record_card(console: Console, record: BaseModel) -> None:
    """Print a single record as a vertical card.

    Scalar fields go in the card; lists of records are printed as tables
    below it.
    """
    table = Table(
        show_header=False,
        padding=(0, 1),
        title=f"[bold yellow]{getattr(record, 'name', '')}[/bold yellow]",
        title_justify="left",
    )
    table.add_column("Field", style="bold cyan", width=16)
    table.add_column("Value", overflow="fold")

    nested: list[tuple[str, tuple[BaseModel, ...]]] = []
    for name in type(record).model_fields:
        value = getattr(record, name)
        if isinstance(value, tuple) and value and isinstance(value[0], BaseModel):
            if name in ("artists", "thumbnails", "formats", "adaptive_formats"):
                table.add_row(name, f"{len(value)} item(s)")
            else:
                nested.append((name, value))
        elif isinstance(value, BaseModel):
            table.add_row(name, str(getattr(value, "name", value)))
        elif name == "duration":
            table.add_row(name, format_duration(value))
        elif value not in (None, (), ""):
            table.add_row(name, str(value))

    console.print()
    console.print(table)
    for name, records in nested:
        print_results(console, records, name.replace("_", " ").capitalize())


def print_home_sections(console: Console, sections: Sequence[HomeSection]) -> None:
    """Print home feed sections one after another."""
    for section in sections:
        match section:
            case CarouselSection():
                print_results(console, section.contents, section.title)
            case DescriptionSection():
                console.print()
                console.rule(section.title, style="dim")
                console.print(section.description)


def dump_json(data: Any) -> None:
    """Write records (or plain values) to stdout as JSON."""

    def encode(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json")
        if isinstance(value, list | tuple):
            return [encode(v) for v in value]
        return value

    json.dump(encode(data), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn library errors into click errors."""
    try:
        yield
    except YTMKitError as e:
        logger.error(e.message)
        raise click.ClickException(e.message) from e
    except click.ClickException:
        raise
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e


def get_client(ctx: click.Context) -> YTMusicClient:
    """Build the client from the group options."""
    return create_client(
        cookies_path=ctx.obj.get("cookies"),
        use_ytmusicapi=ctx.obj.get("use_ytmusicapi", False),
    )


json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON.")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--cookies",
    type=click.Path(exists=True, path_type=Path),
    help="Path to cookies.txt for YouTube Music authentication.",
)
@click.option(
    "--ytmusicapi",
    "use_ytmusicapi",
    is_flag=True,
    help="Send requests through ytmusicapi instead of the built-in session.",
)
@click.pass_context
def main(
    ctx: click.Context, verbose: bool, cookies: Path | None, use_ytmusicapi: bool
) -> None:
    """Browse the YouTube Music catalog."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["cookies"] = cookies
    ctx.obj["use_ytmusicapi"] = use_ytmusicapi
    setup_logging(verbose=verbose)


@main.command(name="search")
@click.argument("query")
@click.option(
    "--filter",
    "result_filter",
    type=click.Choice([f.name.lower() for f in SearchFilter]),
    help="Only return results of one type.",
)
@json_option
@click.pass_context
def search_cmd(
    ctx: click.Context, query: str, result_filter: str | None, as_json: bool
) -> None:
    """Search YouTube Music.

    \b
    Examples:
      ytmkit search "daft punk"
      ytmkit search "discovery" --filter albums
    """
    with handle_errors():
        client = get_client(ctx)
        match result_filter:
            case "songs":
                results: Sequence[BaseModel] = client.search_songs(query)
            case "videos":
                results = client.search_videos(query)
            case "artists":
                results = client.search_artists(query)
            case "albums":
                results = client.search_albums(query)
            case "playlists":
                results = client.search_playlists(query)
            case _:
                results = client.search(query)

    if as_json:
        dump_json(results)
    else:
        print_results(Console(), results, f"Results for {query!r}")


@main.command(name="suggest")
@click.argument("query")
@json_option
@click.pass_context
def suggest_cmd(ctx: click.Context, query: str, as_json: bool) -> None:
    """Show search suggestions for a partial query."""
    with handle_errors():
        suggestions = get_client(ctx).get_search_suggestions(query)

    if as_json:
        dump_json(suggestions)
    else:
        console = Console()
        for suggestion in suggestions:
            console.print(suggestion)


@main.command(name="song")
@click.argument("video_id")
@json_option
@click.pass_context
def song_cmd(ctx: click.Context, video_id: str, as_json: bool) -> None:
    """Show a song and its streaming formats."""
    with handle_errors():
        song = get_client(ctx).get_song(video_id)

    if as_json:
        dump_json(song)
    else:
        print_record_card(Console(), song)


@main.command(name="video")
@click.argument("video_id")
@json_option
@click.pass_context
def video_cmd(ctx: click.Context, video_id: str, as_json: bool) -> None:
    """Show a video."""
    with handle_errors():
        video = get_client(ctx).get_video(video_id)

    if as_json:
        dump_json(video)
    else:
        print_record_card(Console(), video)


@main.command(name="lyrics")
@click.argument("video_id")
@json_option
@click.pass_context
def lyrics_cmd(ctx: click.Context, video_id: str, as_json: bool) -> None:
    """Show the lyrics of a song."""
    with handle_errors():
        lyrics = get_client(ctx).get_lyrics(video_id)

    if as_json:
        dump_json(lyrics)
        return
    console = Console()
    if lyrics is None:
        console.print("[yellow]No lyrics available[/yellow]")
        return
    for line in lyrics:
        console.print(line)


@main.command(name="artist")
@click.argument("artist_id")
@click.option("--songs", is_flag=True, help="List all of the artist's songs.")
@click.option("--albums", is_flag=True, help="List all of the artist's albums.")
@json_option
@click.pass_context
def artist_cmd(
    ctx: click.Context, artist_id: str, songs: bool, albums: bool, as_json: bool
) -> None:
    """Show an artist page, or all of its songs or albums."""
    if songs and albums:
        raise click.UsageError("--songs and --albums are mutually exclusive")

    with handle_errors():
        client = get_client(ctx)
        if songs:
            result: Any = client.get_artist_songs(artist_id)
        elif albums:
            result = client.get_artist_albums(artist_id)
        else:
            result = client.get_artist(artist_id)

    if as_json:
        dump_json(result)
    elif isinstance(result, list):
        print_results(Console(), result, "Songs" if songs else "Albums")
    else:
        print_record_card(Console(), result)


@main.command(name="album")
@click.argument("album_id")
@json_option
@click.pass_context
def album_cmd(ctx: click.Context, album_id: str, as_json: bool) -> None:
    """Show an album and its tracks."""
    with handle_errors():
        album = get_client(ctx).get_album(album_id)

    if as_json:
        dump_json(album)
    else:
        print_record_card(Console(), album)


@main.command(name="playlist")
@click.argument("playlist_id")
@click.option("--videos", is_flag=True, help="List every video of the playlist.")
@json_option
@click.pass_context
def playlist_cmd(
    ctx: click.Context, playlist_id: str, videos: bool, as_json: bool
) -> None:
    """Show a playlist, or all of its videos."""
    with handle_errors():
        client = get_client(ctx)
        if videos:
            result: Any = client.get_playlist_videos(playlist_id)
        else:
            result = client.get_playlist(playlist_id)

    if as_json:
        dump_json(result)
    elif videos:
        print_results(Console(), result, "Videos")
    else:
        print_record_card(Console(), result)


@main.command(name="home")
@json_option
@click.pass_context
def home_cmd(ctx: click.Context, as_json: bool) -> None:
    """Show the home feed."""
    with handle_errors():
        sections = get_client(ctx).get_home_sections()

    if as_json:
        dump_json(sections)
    else:
        print_home_sections(Console(), sections)


if __name__ == "__main__":
    main()
