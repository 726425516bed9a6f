"""
models.py — Immutable records passed between the pipeline stages.

Nothing here is cached or shared: every fetch_transcript() call builds its
own manifest and segments from scratch.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Caption manifest
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CaptionTrack:
    """
    One language-specific timed-text resource listed on the watch page.

    Attributes:
        base_url:      Absolute URL of the timed-text XML, used verbatim.
        language_code: Short language tag (e.g. "en", "pt-BR").
    """
    base_url: str
    language_code: str


@dataclass(frozen=True)
class CaptionsManifest:
    """
    Every caption track advertised for a video, in page order.

    Order matters: the first track is what YouTube itself would show, so it
    is the default when the caller doesn't ask for a language.
    """
    tracks: tuple[CaptionTrack, ...]

    @property
    def language_codes(self) -> list[str]:
        return [track.language_code for track in self.tracks]

    @property
    def default_language(self) -> str | None:
        return self.tracks[0].language_code if self.tracks else None


# ---------------------------------------------------------------------------
# Transcript output
# ---------------------------------------------------------------------------

def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class TranscriptSegment:
    """
    A single caption line with its timing.

    Attributes:
        text:     Caption text exactly as it appears in the XML (not
                  entity-decoded).
        offset:   Start time in seconds.
        duration: Length in seconds.
        lang:     Language code of the track the segment came from.
    """
    text: str
    offset: float
    duration: float
    lang: str | None = None

    def to_dict(self) -> dict:
        """JSON-ready dict; a NaN timing (malformed source attribute) becomes None."""
        return {
            "text": self.text,
            "offset": _finite_or_none(self.offset),
            "duration": _finite_or_none(self.duration),
            "lang": self.lang,
        }
