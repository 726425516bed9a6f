"""
extractor.py — Transcript pipeline entry points.

This is the heart of yt-transcript-scraper.  It ties the scraping stages
together and exposes a clean, high-level interface for:

    1. Parsing YouTube URLs / IDs   → parse_video_id()
    2. Fetching transcript segments → fetch_transcript()
    3. Formatting output            → format_text(), format_json(), format_doc()
    4. One-call convenience         → extract()

Only single-video extraction is supported (no playlists).
"""

from __future__ import annotations

import logging
import math
import re

from yt_transcript_scraper.captions import extract_manifest, select_track_url
from yt_transcript_scraper.config import FetchConfig, TransportOverride
from yt_transcript_scraper.errors import VideoIdResolutionError
from yt_transcript_scraper.models import TranscriptSegment
from yt_transcript_scraper.timedtext import fetch_and_parse
from yt_transcript_scraper.transport import WATCH_URL, http_get, open_session

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# A YouTube video ID is always 11 characters long.
_VIDEO_ID_LENGTH = 11

# One pattern covers every URL shape we accept:
#   - https://www.youtube.com/watch?v=VIDEO_ID   (v= anywhere in the query)
#   - https://www.youtube.com/embed/VIDEO_ID
#   - https://www.youtube.com/v/VIDEO_ID
#   - https://www.youtube.com/e/VIDEO_ID
#   - https://youtu.be/VIDEO_ID
#   - https://www.youtube.com/<segment>/<anything>/VIDEO_ID
# The captured ID stops short of '/', '&', '?', '"' and whitespace.
_VIDEO_ID_PATTERN = re.compile(
    r'(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^"&?/\s]{11})',
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# URL / ID parsing
# ---------------------------------------------------------------------------

def parse_video_id(url_or_id: str) -> str:
    """
    Extract a YouTube video ID from a URL string, or pass a raw ID through.

    Any 11-character input is taken to be an ID already and returned as-is,
    without checking its characters.

    Args:
        url_or_id: A YouTube URL or a raw video ID.

    Returns:
        The 11-character video ID.

    Raises:
        VideoIdResolutionError: If the string doesn't match any known format.
    """
    if len(url_or_id) == _VIDEO_ID_LENGTH:
        return url_or_id

    match = _VIDEO_ID_PATTERN.search(url_or_id)
    if match:
        return match.group(1)

    raise VideoIdResolutionError(url_or_id)


# ---------------------------------------------------------------------------
# Transcript fetching
# ---------------------------------------------------------------------------

def fetch_transcript(
    url_or_id: str,
    config: FetchConfig | None = None,
) -> list[TranscriptSegment]:
    """
    Fetch transcript segments for a single YouTube video.

    Runs the full pipeline in order: resolve the ID, download the watch
    page, extract the caption manifest, pick a track, then download and
    parse it.  The first failure aborts the whole call.

    Args:
        url_or_id: A YouTube URL or raw video ID.
        config:    Optional language preference and transport override.

    Returns:
        Segments in document order, each tagged with its language.

    Raises:
        TranscriptError:           (or subclass) on any extraction failure.
        requests.RequestException: On network failure; not wrapped.
    """
    config = config or FetchConfig()
    video_id = parse_video_id(url_or_id)

    # Resolve the transport once so both requests go through the same route.
    session = open_session(config.transport)
    try:
        page = http_get(session, WATCH_URL.format(video_id=video_id), config.lang)
        manifest = extract_manifest(page.text, video_id)
        track_url = select_track_url(manifest, video_id, config.lang)
        return fetch_and_parse(
            track_url,
            requested_lang=config.lang,
            default_lang=manifest.default_language,
            session=session,
        )
    finally:
        # Only close sessions we created; a caller's session stays usable.
        if session is not config.transport:
            session.close()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_text(segments: list[TranscriptSegment]) -> str:
    """
    Convert transcript segments into plain text, one line per segment.

    Useful for feeding into summarisers, search indexes, or reading directly.
    """
    return "\n".join(segment.text for segment in segments)


def format_json(segments: list[TranscriptSegment], video_id: str) -> dict:
    """
    Build a JSON-serialisable dict from transcript segments.

    Returns:
        A dict with keys: video_id, segment_count, segments.
        Each segment has: text, offset, duration, lang.
    """
    return {
        "video_id": video_id,
        "segment_count": len(segments),
        "segments": [segment.to_dict() for segment in segments],
    }


# Paragraph boundary interval for the "doc" format.  A new paragraph starts
# once a segment begins this many seconds after the current paragraph did.
_DOC_PARAGRAPH_INTERVAL_SECS = 30


def _seconds_to_mmss(seconds: float) -> str:
    """Convert seconds to "MM:SS"; minutes keep counting past 59."""
    if math.isnan(seconds):
        return "--:--"
    mins, secs = divmod(int(seconds), 60)
    return f"{mins:02d}:{secs:02d}"


def format_doc(segments: list[TranscriptSegment]) -> str:
    """
    Convert transcript segments into a readable markdown document.

    Segments are joined with spaces into flowing paragraphs, with a new
    paragraph starting every ~30 seconds.  Each paragraph is prefixed with
    a bold **[MM:SS]** timestamp marking the start of that time window, and
    paragraphs are separated by blank lines.

    Returns:
        A markdown string, or an empty string if there are no segments.
    """
    paragraphs: list[str] = []
    current_texts: list[str] = []
    paragraph_start: float | None = None

    for segment in segments:
        if paragraph_start is None:
            paragraph_start = segment.offset
            current_texts.append(segment.text)
        elif segment.offset - paragraph_start >= _DOC_PARAGRAPH_INTERVAL_SECS:
            paragraphs.append(f"**[{_seconds_to_mmss(paragraph_start)}]** {' '.join(current_texts)}")
            paragraph_start = segment.offset
            current_texts = [segment.text]
        else:
            current_texts.append(segment.text)

    if current_texts and paragraph_start is not None:
        paragraphs.append(f"**[{_seconds_to_mmss(paragraph_start)}]** {' '.join(current_texts)}")

    return "\n\n".join(paragraphs)


# ---------------------------------------------------------------------------
# High-level convenience function (main public API)
# ---------------------------------------------------------------------------

def extract(
    url_or_id: str,
    lang: str | None = None,
    fmt: str = "text",
    *,
    transport: TransportOverride = None,
) -> str | dict:
    """
    One-call interface: parse URL → fetch transcript → format output.

    Args:
        url_or_id: A YouTube URL or raw video ID.
        lang:      Optional language code (e.g. "de").
        fmt:       "text" for plain text, "json" for a dict with timings,
                   "doc" for a markdown document with timestamped paragraphs.
        transport: Optional ProxyConfig or pre-built requests.Session.

    Returns:
        A plain-text string (fmt="text"), a dict (fmt="json"), or a markdown
        string (fmt="doc").

    Raises:
        ValueError:      If fmt is not "text", "json", or "doc".
        TranscriptError: (or subclass) on any extraction failure.
    """
    if fmt not in ("text", "json", "doc"):
        raise ValueError(f"Unknown format {fmt!r}; expected 'text', 'json', or 'doc'")

    segments = fetch_transcript(url_or_id, FetchConfig(lang=lang, transport=transport))

    if fmt == "json":
        return format_json(segments, parse_video_id(url_or_id))

    if fmt == "doc":
        return format_doc(segments)

    return format_text(segments)
