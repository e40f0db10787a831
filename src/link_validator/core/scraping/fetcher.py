"""HTTP fetcher with a fixed timeout, bounded redirects and a static UA.

Provides a small `Fetcher` object exposing `get`. Every status code is a
valid answer; only transport problems raise (as `TransportError`).
"""

from __future__ import annotations

from typing import Dict, Optional

import requests

from link_validator.core.errors import TransportError

DEFAULT_TIMEOUT = 30
DEFAULT_MAX_REDIRECTS = 5


class Fetcher:
    """Small HTTP client used for discovery, validation and title lookup.

    Usage:
        f = Fetcher(user_agent="MyBot/1.0")
        resp = f.get(url)

    A single attempt is made per call. Each call opens its own session so
    cookies set by one site never leak into the next request.
    """

    def __init__(
        self,
        user_agent: str,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ) -> None:
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_redirects = max_redirects

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        base = {"User-Agent": self.user_agent}
        if headers:
            base.update(headers)
        return base

    def _session(self) -> requests.Session:
        session = requests.Session()
        session.max_redirects = self.max_redirects
        return session

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        try:
            with self._session() as session:
                return session.get(
                    url,
                    headers=self._headers(headers),
                    timeout=self.timeout,
                    allow_redirects=True,
                    **kwargs,
                )
        except requests.RequestException as e:
            raise TransportError(url, str(e)) from e
