"""Error taxonomy for the link validator.

Discovery errors (`FetchError`, `TableNotFoundError`) abort a run. A
`TransportError` raised while validating a single link is converted into a
result row by the link validator and never reaches the caller.
"""

from __future__ import annotations

from typing import Optional


class LinkValidatorError(Exception):
    """Base class for every error raised by this package."""


class FetchError(LinkValidatorError):
    """The discovery page answered with a status other than 200."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: HTTP {status_code}")


class TableNotFoundError(LinkValidatorError):
    """No table with the requested id exists in the discovery page."""

    def __init__(self, table_id: str):
        self.table_id = table_id
        super().__init__(f'Table with ID "{table_id}" not found')


class TransportError(LinkValidatorError):
    """No HTTP response could be received (timeout, DNS, redirects, ...).

    The underlying `requests` exception is kept as `__cause__`.
    """

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        super().__init__(message or f"Request to {url} failed")
