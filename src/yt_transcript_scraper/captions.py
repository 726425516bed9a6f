"""
captions.py — Caption-track manifest extraction and track selection.

The watch page embeds the player response as a large JSON blob.  Rather than
parse the whole page, we carve out only the `"captions":{...}` object, which
always sits directly before `,"videoDetails"`, and decode that.

When the captions marker is missing, the page itself tells us why:
    - a reCAPTCHA widget        → we've been rate-limited
    - no playabilityStatus      → the video doesn't exist / is private
    - anything else             → the video plays but has captions disabled
"""

from __future__ import annotations

import json
import logging

from yt_transcript_scraper.errors import (
    LanguageNotFoundError,
    NoTranscriptError,
    RateLimitError,
    TranscriptDisabledError,
    VideoUnavailableError,
)
from yt_transcript_scraper.models import CaptionsManifest, CaptionTrack

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page markers
# ---------------------------------------------------------------------------

_CAPTIONS_MARKER = '"captions":'
_VIDEO_DETAILS_MARKER = ',"videoDetails'
_RECAPTCHA_MARKER = 'class="g-recaptcha"'
_PLAYABILITY_MARKER = '"playabilityStatus":'

_TRACKLIST_KEY = "playerCaptionsTracklistRenderer"
_TRACKS_KEY = "captionTracks"


# ---------------------------------------------------------------------------
# Manifest extraction
# ---------------------------------------------------------------------------

def _classify_page(page_html: str, video_id: str) -> TranscriptDisabledError | RateLimitError | VideoUnavailableError:
    """Pick the error for a page that has no captions block at all."""
    # A CAPTCHA page never carries player data, so check it first.
    if _RECAPTCHA_MARKER in page_html:
        return RateLimitError()
    if _PLAYABILITY_MARKER not in page_html:
        return VideoUnavailableError(video_id)
    return TranscriptDisabledError(video_id)


def _decode_captions_json(captions_section: str) -> dict | None:
    """Cut the captions object out of the page tail and decode it, or None."""
    json_str = captions_section.split(_VIDEO_DETAILS_MARKER, 1)[0].replace("\n", "")
    try:
        data = json.loads(json_str)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def extract_manifest(page_html: str, video_id: str) -> CaptionsManifest:
    """
    Extract the caption-track manifest from a watch page's HTML.

    Args:
        page_html: Raw body of https://www.youtube.com/watch?v=<id>.
        video_id:  The resolved video ID (used in error messages).

    Returns:
        A CaptionsManifest with the tracks in page order.

    Raises:
        RateLimitError:           No captions block and a CAPTCHA on the page.
        VideoUnavailableError:    No captions block and no playability status.
        TranscriptDisabledError:  Captions block missing for a playable video,
                                  or present but not decodable.
        NoTranscriptError:        Captions block decoded but lists no tracks.
    """
    parts = page_html.split(_CAPTIONS_MARKER, 1)
    if len(parts) == 1:
        raise _classify_page(page_html, video_id)

    captions = _decode_captions_json(parts[1])
    if captions is None:
        raise TranscriptDisabledError(video_id)

    tracklist = captions.get(_TRACKLIST_KEY)
    if not isinstance(tracklist, dict) or _TRACKS_KEY not in tracklist:
        raise NoTranscriptError(video_id)

    try:
        tracks = tuple(
            CaptionTrack(base_url=raw["baseUrl"], language_code=raw["languageCode"])
            for raw in tracklist[_TRACKS_KEY]
        )
    except (KeyError, TypeError) as exc:
        # Tracks without the expected shape count as an undecodable block.
        raise TranscriptDisabledError(video_id) from exc

    logger.debug("Video %s lists %d caption track(s): %s",
                 video_id, len(tracks), [t.language_code for t in tracks])
    return CaptionsManifest(tracks=tracks)


# ---------------------------------------------------------------------------
# Track selection
# ---------------------------------------------------------------------------

def select_track_url(
    manifest: CaptionsManifest,
    video_id: str,
    lang: str | None = None,
) -> str:
    """
    Choose the timed-text URL to download.

    Args:
        manifest: The video's caption manifest.
        video_id: The resolved video ID (used in error messages).
        lang:     Requested language code, or None for YouTube's default
                  (the first listed track).

    Returns:
        The chosen track's base URL.

    Raises:
        LanguageNotFoundError: `lang` matches none of the tracks.
        NoTranscriptError:     The manifest has no tracks at all.
    """
    if lang and lang not in manifest.language_codes:
        raise LanguageNotFoundError(lang, manifest.language_codes, video_id)

    if lang:
        track = next((t for t in manifest.tracks if t.language_code == lang), None)
    else:
        track = manifest.tracks[0] if manifest.tracks else None

    if track is None:
        raise NoTranscriptError(video_id)

    logger.debug("Selected %s track for video %s", track.language_code, video_id)
    return track.base_url
