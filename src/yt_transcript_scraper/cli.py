"""
cli.py — Command-line interface for yt-transcript-scraper.

Provides the `yt-transcript` command group (registered as a console script
in pyproject.toml):

    get       Fetch a transcript from YouTube and print or save it.

Usage examples:
    yt-transcript get "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    yt-transcript get dQw4w9WgXcQ --lang es --format json
    yt-transcript get dQw4w9WgXcQ --proxy http://proxy.example.com:8080 \\
        --proxy-user alice --proxy-password secret
"""

from __future__ import annotations

import json
import logging
import sys

import click
import requests

from yt_transcript_scraper.config import ProxyAuth, ProxyConfig
from yt_transcript_scraper.errors import TranscriptError
from yt_transcript_scraper.extractor import extract


# ---------------------------------------------------------------------------
# Helper functions — error display
# ---------------------------------------------------------------------------

_BOX_TITLE = " YouTube Transcript Error "
_BOX_WIDTH = 56


def format_error_box(message: str) -> str:
    """
    Frame an error message for terminal display.

    The message lines sit between a rounded top border carrying the title
    and a matching bottom border, so errors stand out from transcript text
    that may also be going to the terminal.
    """
    top = "╭" + _BOX_TITLE.center(_BOX_WIDTH, "─") + "╮"
    blank = "│" + " " * _BOX_WIDTH + "│"
    bottom = "╰" + "─" * _BOX_WIDTH + "╯"
    body = "\n".join(f"  {line}" for line in message.splitlines())
    return "\n".join([top, blank, body, blank, bottom])


def _build_proxy(proxy: str | None, user: str | None, password: str | None) -> ProxyConfig | None:
    """Turn the --proxy* options into a ProxyConfig, or None when unset."""
    if not proxy:
        return None
    if password and not user:
        raise click.UsageError("--proxy-password requires --proxy-user.")
    auth = ProxyAuth(username=user, password=password or "") if user else None
    return ProxyConfig(host=proxy, auth=auth)


# ---------------------------------------------------------------------------
# CLI group — the top-level `yt-transcript` command
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log each request and parsing step to stderr.",
)
def main(verbose: bool) -> None:
    """
    YouTube Transcript Scraper — fetch video transcripts from the watch page.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# ---------------------------------------------------------------------------
# Subcommand: get — fetch a transcript from YouTube
# ---------------------------------------------------------------------------

@main.command()
@click.argument("video", metavar="URL_OR_ID")
@click.option(
    "--format", "-f",
    "fmt",                           # avoid shadowing the builtin "format"
    type=click.Choice(["text", "json", "doc"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format: plain text, JSON with timestamps, or readable markdown document.",
)
@click.option(
    "--lang", "-l",
    default=None,
    help="Language code (e.g. 'de').  Defaults to the video's first caption track.",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Write output to a file instead of stdout.",
)
@click.option(
    "--proxy",
    envvar="YT_TRANSCRIPT_PROXY",
    default=None,
    help="Proxy URL to route both requests through (e.g. http://host:8080).",
)
@click.option(
    "--proxy-user",
    envvar="YT_TRANSCRIPT_PROXY_USER",
    default=None,
    help="Proxy username (only used with --proxy).",
)
@click.option(
    "--proxy-password",
    envvar="YT_TRANSCRIPT_PROXY_PASSWORD",
    default=None,
    help="Proxy password (only used with --proxy; requires --proxy-user).",
)
def get(
    video: str,
    fmt: str,
    lang: str | None,
    output: str | None,
    proxy: str | None,
    proxy_user: str | None,
    proxy_password: str | None,
) -> None:
    """
    Fetch a YouTube video transcript.

    VIDEO can be a full YouTube URL or an 11-character video ID.
    """
    try:
        result = extract(
            video,
            lang=lang,
            fmt=fmt.lower(),
            transport=_build_proxy(proxy, proxy_user, proxy_password),
        )
    except TranscriptError as exc:
        # The exception message already says what went wrong; a traceback
        # isn't helpful to end-users.
        click.echo(format_error_box(exc.message), err=True)
        sys.exit(1)
    except requests.RequestException as exc:
        click.echo(f"Error: network failure: {exc}", err=True)
        sys.exit(1)

    # Serialise dict output to a JSON string for display / file writing.
    if isinstance(result, dict):
        text = json.dumps(result, indent=2, ensure_ascii=False)
    else:
        text = result

    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.write("\n")
        click.echo(f"Transcript written to {output}", err=True)
    else:
        click.echo(text)
