"""URL and text normalizer utilities.

`get_host_from_url` turns a link into a short display name and
`decode_entities` cleans the handful of HTML entities that show up in page
titles. Both are total: they never raise.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

ENTITY_MAP = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&nbsp;": " ",
    "&#8211;": "-",  # en dash
}

_ENTITY_RE = re.compile("|".join(re.escape(e) for e in ENTITY_MAP))
_HOST_RE = re.compile(r"https?://(?P<host>[^/]+)")


def decode_entities(text: str) -> str:
    """Replace the known HTML entities with their characters.

    Passes repeat until nothing changes, so double-encoded text such as
    ``&amp;lt;`` ends up as ``<`` and decoding again is a no-op. Unknown
    entities are left as they are.
    """
    while True:
        decoded = _ENTITY_RE.sub(lambda m: ENTITY_MAP[m.group(0)], text)
        if decoded == text:
            return decoded
        text = decoded


def _strip_www(host: str) -> str:
    return re.sub(r"^www\.", "", host)


def get_host_from_url(url: str) -> str:
    """Return the hostname of `url` without a leading ``www.``.

    Falls back to a regex when the URL cannot be parsed, and to `url`
    itself (minus ``www.``) when that fails too.
    """
    try:
        host = urlparse(url).hostname
    except ValueError:
        host = None
    if host:
        return _strip_www(host)

    match = _HOST_RE.match(url)
    if match:
        return _strip_www(match.group("host"))
    return _strip_www(url)
