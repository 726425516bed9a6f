"""
transport.py — The two HTTP GETs the pipeline makes, via requests.

The core never retries and never sets a timeout; callers that need either
can hand in their own requests.Session (e.g. with an HTTPAdapter mounted).
Exceptions raised by requests propagate unchanged.
"""

from __future__ import annotations

import logging

import requests

from yt_transcript_scraper.config import ProxyConfig, TransportOverride

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Desktop Chrome UA.  YouTube serves a page without the embedded player JSON
# to unrecognised clients, so this must look like a real browser.
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)"
)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


# ---------------------------------------------------------------------------
# Session handling
# ---------------------------------------------------------------------------

def open_session(transport: TransportOverride = None) -> requests.Session:
    """
    Resolve a transport override into a concrete requests.Session.

    Args:
        transport: None, a ProxyConfig, or a pre-built session.

    Returns:
        The caller's own session when one was given, otherwise a new one
        (routed through the proxy if a ProxyConfig was given).  Callers are
        responsible for closing sessions that this function created.
    """
    if transport is None:
        return requests.Session()

    if isinstance(transport, ProxyConfig):
        session = requests.Session()
        proxy_url = transport.url
        session.proxies.update({"http": proxy_url, "https": proxy_url})
        logger.debug("Routing requests through proxy %s", transport.host)
        return session

    if not isinstance(transport, requests.Session):
        raise TypeError(
            f"transport must be a ProxyConfig or requests.Session, not {type(transport).__name__}"
        )
    return transport


def request_headers(lang: str | None = None) -> dict[str, str]:
    """Headers sent with every request; Accept-Language only when asked for."""
    headers = {"User-Agent": USER_AGENT}
    if lang:
        headers["Accept-Language"] = lang
    return headers


def http_get(session: requests.Session, url: str, lang: str | None = None) -> requests.Response:
    """Issue one GET with the standard headers and return the raw response."""
    logger.debug("GET %s", url)
    response = session.get(url, headers=request_headers(lang))
    logger.debug("GET %s -> %s", url, response.status_code)
    return response
