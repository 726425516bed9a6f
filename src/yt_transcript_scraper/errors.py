"""
errors.py — Error taxonomy for yt-transcript-scraper.

Every exception carries an `http_status` attribute so the FastAPI error
handler can translate library-level errors directly into the correct HTTP
response code without a separate mapping table, and a `kind` tag so callers
can branch on the failure without walking a class hierarchy.

The hierarchy is one level deep:
    TranscriptError (base, 500)
    ├── VideoIdResolutionError (400)
    ├── RateLimitError (429)
    ├── VideoUnavailableError (404)
    ├── TranscriptDisabledError (404)
    ├── NoTranscriptError (404)
    └── LanguageNotFoundError (400)

Messages are plain sentences.  Any decorative framing for terminals is done
by the CLI, never here.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Tag identifying which branch of the taxonomy an error belongs to."""

    UNKNOWN = "unknown"
    RESOLUTION_FAILED = "resolution_failed"
    RATE_LIMITED = "rate_limited"
    VIDEO_UNAVAILABLE = "video_unavailable"
    TRANSCRIPT_DISABLED = "transcript_disabled"
    NO_TRANSCRIPT = "no_transcript"
    LANGUAGE_NOT_FOUND = "language_not_found"


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class TranscriptError(Exception):
    """
    Root exception for all transcript-related errors.

    Attributes:
        message:     Human-readable description of what went wrong.
        http_status: Suggested HTTP status code for the API layer.
        kind:        ErrorKind tag; overridden by each subclass.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status


# ---------------------------------------------------------------------------
# Specific error cases
# ---------------------------------------------------------------------------

class VideoIdResolutionError(TranscriptError):
    """
    Raised when the input is neither an 11-character ID nor a recognised
    YouTube URL.  Maps to HTTP 400.
    """

    kind = ErrorKind.RESOLUTION_FAILED

    def __init__(self, raw_input: str) -> None:
        super().__init__(
            message=f"Could not extract a YouTube video ID from: {raw_input!r}",
            http_status=400,
        )
        self.raw_input = raw_input


class RateLimitError(TranscriptError):
    """
    Raised when YouTube answers the watch page with a CAPTCHA instead of the
    player.  Maps to HTTP 429.
    """

    kind = ErrorKind.RATE_LIMITED

    def __init__(self) -> None:
        super().__init__(
            message="YouTube is receiving too many requests from this IP. "
                    "Try again later or use a different IP address.",
            http_status=429,
        )


class VideoUnavailableError(TranscriptError):
    """
    Raised when the watch page carries no player data at all, which is what
    YouTube serves for removed or private videos.  Maps to HTTP 404.
    """

    kind = ErrorKind.VIDEO_UNAVAILABLE

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"The video {video_id} is no longer available. "
                    "It may have been removed or set to private.",
            http_status=404,
        )
        self.video_id = video_id


class TranscriptDisabledError(TranscriptError):
    """
    Raised when the video plays but its captions block is missing or cannot
    be decoded.  Maps to HTTP 404.
    """

    kind = ErrorKind.TRANSCRIPT_DISABLED

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"Transcripts are disabled for video {video_id}.",
            http_status=404,
        )
        self.video_id = video_id


class NoTranscriptError(TranscriptError):
    """
    Raised when captions exist as a feature but yield no usable track.

    `reference` is the video ID when the manifest has no track list, or the
    track URL when the timed-text download itself failed.
    Maps to HTTP 404.
    """

    kind = ErrorKind.NO_TRANSCRIPT

    def __init__(self, reference: str) -> None:
        super().__init__(
            message=f"No transcripts were found for {reference}.",
            http_status=404,
        )
        self.reference = reference


class LanguageNotFoundError(TranscriptError):
    """
    Raised when the video has caption tracks, but none in the requested
    language.  Maps to HTTP 400 because the resource exists, just not in
    that language.

    Attributes:
        lang:                The language code that was asked for.
        available_languages: Every track's language code, in manifest order.
        video_id:            The video that was queried.
    """

    kind = ErrorKind.LANGUAGE_NOT_FOUND

    def __init__(self, lang: str, available_languages: list[str], video_id: str) -> None:
        available = ", ".join(available_languages) or "none"
        super().__init__(
            message=f"Transcripts in {lang!r} are not available for video {video_id}. "
                    f"Available languages: {available}",
            http_status=400,
        )
        self.lang = lang
        self.available_languages = list(available_languages)
        self.video_id = video_id
