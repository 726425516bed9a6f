"""
timedtext.py — Download and parse YouTube's timed-text XML.

The payload is treated as a flat token stream, not a DOM: a regex picks out
every `<text start=".." dur="..">..</text>` element.  Documents with
unescaped entities or trailing garbage still yield whatever elements match,
which a strict XML parser would reject outright.
"""

from __future__ import annotations

import logging
import math
import re

import requests

from yt_transcript_scraper.errors import NoTranscriptError
from yt_transcript_scraper.models import TranscriptSegment
from yt_transcript_scraper.transport import http_get, open_session

logger = logging.getLogger(__name__)

_TEXT_ELEMENT = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')


def _parse_seconds(value: str) -> float:
    # Malformed attributes become NaN rather than failing the whole transcript.
    try:
        return float(value)
    except ValueError:
        return math.nan


def parse_timedtext(payload: str, lang: str | None = None) -> list[TranscriptSegment]:
    """
    Extract segments from a timed-text document, in document order.

    Args:
        payload: The XML body as text.
        lang:    Language code to tag each segment with.

    Returns:
        One TranscriptSegment per matching element.  An empty list means the
        transcript exists but has no text.
    """
    return [
        TranscriptSegment(
            text=match.group(3),
            offset=_parse_seconds(match.group(1)),
            duration=_parse_seconds(match.group(2)),
            lang=lang,
        )
        for match in _TEXT_ELEMENT.finditer(payload)
    ]


def fetch_and_parse(
    track_url: str,
    requested_lang: str | None = None,
    default_lang: str | None = None,
    session: requests.Session | None = None,
) -> list[TranscriptSegment]:
    """
    Download a caption track and parse it into segments.

    Args:
        track_url:      Absolute timed-text URL taken from the manifest.
        requested_lang: Language the caller asked for (also sent as
                        Accept-Language).
        default_lang:   Tag used when no language was requested.
        session:        Session to send the request on; a throwaway one is
                        used when None.

    Raises:
        NoTranscriptError: The track URL answered with a non-2xx status.
    """
    own_session = session is None
    if own_session:
        session = open_session()

    try:
        response = http_get(session, track_url, requested_lang)
    finally:
        if own_session:
            session.close()

    # A manifest track that doesn't resolve is reported the same as a video
    # with no transcript; the body is ignored.
    if not response.ok:
        raise NoTranscriptError(track_url)

    segments = parse_timedtext(response.text, requested_lang or default_lang)
    logger.debug("Parsed %d segment(s) from %s", len(segments), track_url)
    return segments
