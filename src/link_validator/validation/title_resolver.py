"""Resolve a display title for a link.

`resolve_title` always returns a string: the first non-empty page title,
or the link's hostname when the page cannot be fetched, does not answer
200, or has no usable <title>.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, TypeVar

from link_validator.core.logging import get_logger
from link_validator.core.scraping.fetcher import Fetcher
from link_validator.core.scraping.normalizer import get_host_from_url
from link_validator.core.scraping.parser import SoupDocument, extract_titles

T = TypeVar("T")


def attempt(
    func: Callable[[], T], fallback: T, logger: Optional[logging.Logger] = None
) -> T:
    """Run `func` and return its value, or `fallback` if it raises.

    The failure is logged at debug level.
    """
    try:
        return func()
    except Exception as e:
        (logger or get_logger()).debug("Falling back after error: %s", e)
        return fallback


def fetch_titles(url: str, fetcher: Fetcher) -> List[str]:
    """Return the titles of the page at `url`; empty if it did not answer 200."""
    resp = fetcher.get(url)
    if resp.status_code != 200:
        return []
    return extract_titles(SoupDocument.from_markup(resp.content))


def resolve_title(
    url: str, fetcher: Fetcher, logger: Optional[logging.Logger] = None
) -> str:
    titles = attempt(lambda: fetch_titles(url, fetcher), [], logger)
    if titles:
        return titles[0]
    return get_host_from_url(url)
