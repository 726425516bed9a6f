"""
yt_transcript_scraper — Scrape YouTube video transcripts from the watch page.

Public API:
    fetch_transcript()   Fetch transcript segments for a URL or video ID.
    extract()            High-level one-call interface (URL → formatted output).
    parse_video_id()     Parse a YouTube URL or pass a bare video ID through.
    FetchConfig          Per-call language preference and transport override.
    ProxyConfig          Proxy descriptor (with optional ProxyAuth).
    TranscriptSegment    One caption line: text, offset, duration, lang.

Errors (all importable from this package, all direct subclasses of
TranscriptError and tagged with an ErrorKind):
    VideoIdResolutionError, RateLimitError, VideoUnavailableError,
    TranscriptDisabledError, NoTranscriptError, LanguageNotFoundError

Usage:
    from yt_transcript_scraper import fetch_transcript, FetchConfig
    segments = fetch_transcript("https://youtu.be/dQw4w9WgXcQ", FetchConfig(lang="en"))
"""

from yt_transcript_scraper.config import FetchConfig, ProxyAuth, ProxyConfig
from yt_transcript_scraper.errors import (
    ErrorKind,
    LanguageNotFoundError,
    NoTranscriptError,
    RateLimitError,
    TranscriptDisabledError,
    TranscriptError,
    VideoIdResolutionError,
    VideoUnavailableError,
)
from yt_transcript_scraper.extractor import (
    extract,
    fetch_transcript,
    parse_video_id,
)
from yt_transcript_scraper.models import (
    CaptionsManifest,
    CaptionTrack,
    TranscriptSegment,
)

__all__ = [
    "fetch_transcript",
    "extract",
    "parse_video_id",
    "FetchConfig",
    "ProxyConfig",
    "ProxyAuth",
    "CaptionTrack",
    "CaptionsManifest",
    "TranscriptSegment",
    "ErrorKind",
    "TranscriptError",
    "VideoIdResolutionError",
    "RateLimitError",
    "VideoUnavailableError",
    "TranscriptDisabledError",
    "NoTranscriptError",
    "LanguageNotFoundError",
]
