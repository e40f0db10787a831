"""Core scraping primitives exported for reuse across extractors and flows.

This package contains small building blocks: Fetcher, SoupDocument, the
table/title parsers and the URL/text normalizers. Prefect task wrappers
live in `prefect_tasks` and are imported from there.
"""

from .fetcher import Fetcher
from .normalizer import decode_entities, get_host_from_url
from .parser import SoupDocument, extract_table_links, extract_titles

__all__ = [
    "Fetcher",
    "SoupDocument",
    "extract_table_links",
    "extract_titles",
    "decode_entities",
    "get_host_from_url",
]
