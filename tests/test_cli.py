"""Tests for the command-line interface."""

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from conftest import (
    ARTIST_ID,
    VIDEO_ID,
    FakeTransport,
    album_response,
    artist_response,
    make_client,
    player_response,
    search_response,
    song_row,
)
from ytmkit import cli
from ytmkit.config import SearchFilter


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def install_client(monkeypatch: pytest.MonkeyPatch):
    """Serve canned responses to the CLI; returns (transport, factory kwargs)."""

    def install(
        *responses: dict[str, Any],
    ) -> tuple[FakeTransport, list[dict[str, Any]]]:
        client, transport = make_client(*responses)
        factory_calls: list[dict[str, Any]] = []

        def fake_create_client(**kwargs: Any) -> Any:
            factory_calls.append(kwargs)
            return client

        monkeypatch.setattr(cli, "create_client", fake_create_client)
        return transport, factory_calls

    return install


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [(None, ""), (0, "0:00"), (213, "3:33"), (3600, "1:00:00"), (5025, "1:23:45")],
    )
    def test_format(self, seconds: int | None, expected: str) -> None:
        assert cli.format_duration(seconds) == expected


class TestSearchCommand:
    """Tests for the search command."""

    def test_json_output(
        self, runner: CliRunner, install_client, mixed_search_data: dict[str, Any]
    ) -> None:
        install_client(mixed_search_data)

        result = runner.invoke(cli.main, ["search", "rick", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [item["type"] for item in data] == ["song", "artist", "album"]
        assert data[0]["video_id"] == VIDEO_ID

    def test_filter(self, runner: CliRunner, install_client) -> None:
        transport, _ = install_client(search_response(song_row()))

        result = runner.invoke(cli.main, ["search", "rick", "--filter", "songs"])

        assert result.exit_code == 0, result.output
        assert transport.calls[0][1]["params"] == SearchFilter.SONGS.value

    def test_unknown_filter_rejected(self, runner: CliRunner, install_client) -> None:
        transport, _ = install_client()

        result = runner.invoke(cli.main, ["search", "rick", "--filter", "podcasts"])

        assert result.exit_code == 2
        assert transport.calls == []


class TestLookupCommands:
    """Tests for the single-record commands."""

    def test_song_card(self, runner: CliRunner, install_client) -> None:
        install_client(player_response())

        result = runner.invoke(cli.main, ["song", VIDEO_ID])

        assert result.exit_code == 0, result.output
        assert "Never Gonna Give You Up" in result.output

    def test_album_json(self, runner: CliRunner, install_client) -> None:
        install_client(album_response())

        result = runner.invoke(cli.main, ["album", "MPREb_BQZvl3BFGay", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["type"] == "album"
        assert [s["video_id"] for s in data["songs"]] == [VIDEO_ID]

    def test_artist_card(self, runner: CliRunner, install_client) -> None:
        install_client(artist_response())

        result = runner.invoke(cli.main, ["artist", ARTIST_ID])

        assert result.exit_code == 0, result.output
        assert "Rick Astley" in result.output

    def test_songs_and_albums_are_exclusive(
        self, runner: CliRunner, install_client
    ) -> None:
        transport, _ = install_client()

        result = runner.invoke(cli.main, ["artist", ARTIST_ID, "--songs", "--albums"])

        assert result.exit_code == 2
        assert transport.calls == []

    def test_no_lyrics(self, runner: CliRunner, install_client) -> None:
        install_client({"contents": {}})

        result = runner.invoke(cli.main, ["lyrics", VIDEO_ID])

        assert result.exit_code == 0, result.output
        assert "No lyrics available" in result.output


class TestErrors:
    """Library errors become click errors."""

    def test_invalid_video_id(self, runner: CliRunner, install_client) -> None:
        install_client()

        result = runner.invoke(cli.main, ["song", "bad"])

        assert result.exit_code == 1
        assert "Invalid video ID" in result.output

    def test_parse_failure(self, runner: CliRunner, install_client) -> None:
        install_client({"playabilityStatus": {"status": "ERROR"}})

        result = runner.invoke(cli.main, ["video", VIDEO_ID])

        assert result.exit_code == 1


class TestGroupOptions:
    """Tests for options shared by every command."""

    def test_cookies_and_transport_forwarded(
        self, runner: CliRunner, install_client, tmp_path: Path
    ) -> None:
        cookies_file = tmp_path / "cookies.txt"
        cookies_file.write_text("# Netscape HTTP Cookie File\n")
        _, factory_calls = install_client({"contents": []})

        result = runner.invoke(
            cli.main,
            ["--cookies", str(cookies_file), "--ytmusicapi", "suggest", "nev"],
        )

        assert result.exit_code == 0, result.output
        assert factory_calls == [
            {"cookies_path": cookies_file, "use_ytmusicapi": True}
        ]

    def test_missing_cookies_file_rejected(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            cli.main, ["--cookies", str(tmp_path / "missing.txt"), "home"]
        )

        assert result.exit_code == 2
