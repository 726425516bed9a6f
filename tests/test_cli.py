"""
test_cli.py — Tests for the `yt-transcript` command group.

Covers:
    - format_error_box() framing
    - `get` output for each format, to stdout and to --output files
    - --lang and --proxy* options (including their environment variables)
    - Error exits for TranscriptError and network failures
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import requests
from click.testing import CliRunner

from yt_transcript_scraper.cli import format_error_box, main
from yt_transcript_scraper.config import ProxyAuth, ProxyConfig
from yt_transcript_scraper.errors import LanguageNotFoundError, VideoUnavailableError


_SAMPLE_JSON = {
    "video_id": "dQw4w9WgXcQ",
    "segment_count": 1,
    "segments": [{"text": "Hello", "offset": 0.0, "duration": 1.5, "lang": "en"}],
}


# ---------------------------------------------------------------------------
# format_error_box
# ---------------------------------------------------------------------------

class TestFormatErrorBox:

    def test_frames_message(self) -> None:
        box = format_error_box("Something broke.\nTry again.")
        lines = box.splitlines()

        assert lines[0].startswith("╭") and lines[0].endswith("╮")
        assert "YouTube Transcript Error" in lines[0]
        assert lines[-1].startswith("╰") and lines[-1].endswith("╯")
        assert "  Something broke." in lines
        assert "  Try again." in lines

    def test_borders_have_equal_width(self) -> None:
        lines = format_error_box("x").splitlines()
        assert len(lines[0]) == len(lines[-1]) == len(lines[1])


# ---------------------------------------------------------------------------
# get — success paths
# ---------------------------------------------------------------------------

class TestGetCommand:

    @patch("yt_transcript_scraper.cli.extract")
    def test_text_to_stdout(self, mock_extract: MagicMock) -> None:
        mock_extract.return_value = "Hello world\nSecond line"

        result = CliRunner().invoke(main, ["get", "dQw4w9WgXcQ"])

        assert result.exit_code == 0
        assert result.output == "Hello world\nSecond line\n"
        mock_extract.assert_called_once_with("dQw4w9WgXcQ", lang=None, fmt="text", transport=None)

    @patch("yt_transcript_scraper.cli.extract")
    def test_json_is_pretty_printed(self, mock_extract: MagicMock) -> None:
        mock_extract.return_value = _SAMPLE_JSON

        result = CliRunner().invoke(main, ["get", "dQw4w9WgXcQ", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == _SAMPLE_JSON

    @patch("yt_transcript_scraper.cli.extract")
    def test_lang_option(self, mock_extract: MagicMock) -> None:
        mock_extract.return_value = ""

        CliRunner().invoke(main, ["get", "dQw4w9WgXcQ", "-l", "es", "-f", "DOC"])

        mock_extract.assert_called_once_with("dQw4w9WgXcQ", lang="es", fmt="doc", transport=None)

    @patch("yt_transcript_scraper.cli.extract")
    def test_proxy_options(self, mock_extract: MagicMock) -> None:
        mock_extract.return_value = ""

        CliRunner().invoke(main, [
            "get", "dQw4w9WgXcQ",
            "--proxy", "http://proxy.example.com:8080",
            "--proxy-user", "user", "--proxy-password", "pass",
        ])

        assert mock_extract.call_args.kwargs["transport"] == ProxyConfig(
            host="http://proxy.example.com:8080",
            auth=ProxyAuth(username="user", password="pass"),
        )

    @patch("yt_transcript_scraper.cli.extract")
    def test_proxy_from_environment(self, mock_extract: MagicMock) -> None:
        mock_extract.return_value = ""

        CliRunner().invoke(
            main, ["get", "dQw4w9WgXcQ"],
            env={"YT_TRANSCRIPT_PROXY": "http://proxy.example.com:8080"},
        )

        assert mock_extract.call_args.kwargs["transport"] == ProxyConfig(host="http://proxy.example.com:8080")

    @patch("yt_transcript_scraper.cli.extract")
    def test_proxy_user_without_proxy_is_ignored(self, mock_extract: MagicMock) -> None:
        mock_extract.return_value = ""

        CliRunner().invoke(main, ["get", "dQw4w9WgXcQ", "--proxy-user", "user"])

        assert mock_extract.call_args.kwargs["transport"] is None

    @patch("yt_transcript_scraper.cli.extract")
    def test_proxy_password_without_user_is_usage_error(self, mock_extract: MagicMock) -> None:
        result = CliRunner().invoke(main, [
            "get", "dQw4w9WgXcQ",
            "--proxy", "http://proxy.example.com:8080",
            "--proxy-password", "pass",
        ])

        assert result.exit_code == 2
        assert "--proxy-password requires --proxy-user" in result.output
        mock_extract.assert_not_called()

    @patch("yt_transcript_scraper.cli.extract")
    def test_output_file(self, mock_extract: MagicMock, tmp_path) -> None:
        mock_extract.return_value = "**[00:00]** Hello"
        out = tmp_path / "transcript.md"

        result = CliRunner().invoke(main, ["get", "dQw4w9WgXcQ", "-f", "doc", "-o", str(out)])

        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "**[00:00]** Hello\n"

    @patch("yt_transcript_scraper.cli.extract")
    def test_verbose_flag(self, mock_extract: MagicMock) -> None:
        mock_extract.return_value = "ok"

        with patch("yt_transcript_scraper.cli.logging.basicConfig") as mock_basic_config:
            result = CliRunner().invoke(main, ["--verbose", "get", "dQw4w9WgXcQ"])

        assert result.exit_code == 0
        mock_basic_config.assert_called_once()


# ---------------------------------------------------------------------------
# get — error paths
# ---------------------------------------------------------------------------

class TestGetErrors:

    @patch("yt_transcript_scraper.cli.extract")
    def test_transcript_error_exits_1_with_box(self, mock_extract: MagicMock) -> None:
        mock_extract.side_effect = VideoUnavailableError("dQw4w9WgXcQ")

        result = CliRunner().invoke(main, ["get", "dQw4w9WgXcQ"])

        assert result.exit_code == 1
        assert "YouTube Transcript Error" in result.output
        assert "dQw4w9WgXcQ is no longer available" in result.output

    @patch("yt_transcript_scraper.cli.extract")
    def test_language_error_lists_languages(self, mock_extract: MagicMock) -> None:
        mock_extract.side_effect = LanguageNotFoundError("fr", ["en", "es"], "dQw4w9WgXcQ")

        result = CliRunner().invoke(main, ["get", "dQw4w9WgXcQ", "-l", "fr"])

        assert result.exit_code == 1
        assert "Available languages: en, es" in result.output

    @patch("yt_transcript_scraper.cli.extract")
    def test_network_error_exits_1(self, mock_extract: MagicMock) -> None:
        mock_extract.side_effect = requests.ConnectionError("connection refused")

        result = CliRunner().invoke(main, ["get", "dQw4w9WgXcQ"])

        assert result.exit_code == 1
        assert "network failure" in result.output
