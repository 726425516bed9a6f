"""
config.py — Read-only per-call configuration.

A FetchConfig travels unchanged through the whole pipeline.  Its transport
override is one of three things:

    None              plain requests.Session, direct connection
    ProxyConfig       a new session routed through the described proxy
    requests.Session  a caller-built session, used as-is

Because the pre-built session and the proxy descriptor share one field, the
"pre-built handle wins" rule holds by construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote, urlsplit, urlunsplit

import requests


@dataclass(frozen=True)
class ProxyAuth:
    """Credentials embedded into the proxy URL's userinfo component."""
    username: str
    password: str


@dataclass(frozen=True)
class ProxyConfig:
    """
    Declarative proxy descriptor.

    Attributes:
        host: Proxy server URL, e.g. "http://proxy.example.com:8080".  A
              bare "host:port" is treated as http.
        auth: Optional username/password for the proxy.
    """
    host: str
    auth: ProxyAuth | None = None

    @property
    def url(self) -> str:
        """The proxy URL with credentials (percent-encoded) in the userinfo."""
        host = self.host if "://" in self.host else f"http://{self.host}"
        if self.auth is None:
            return host

        parts = urlsplit(host)
        # Drop any userinfo already present in host; auth takes its place.
        hostport = parts.netloc.rpartition("@")[2]
        userinfo = f"{quote(self.auth.username, safe='')}:{quote(self.auth.password, safe='')}"
        return urlunsplit(parts._replace(netloc=f"{userinfo}@{hostport}"))


TransportOverride = Union[ProxyConfig, requests.Session, None]


@dataclass(frozen=True)
class FetchConfig:
    """
    Options for a single fetch_transcript() call.

    Attributes:
        lang:      Preferred language code (e.g. "en").  When None, the
                   video's first caption track is used.
        transport: Optional ProxyConfig or pre-built requests.Session.
    """
    lang: str | None = None
    transport: TransportOverride = None
