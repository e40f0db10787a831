"""HTML parsing helpers: BeautifulSoup-backed documents, table links, titles.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from link_validator.core.errors import TableNotFoundError
from link_validator.core.interfaces import StructuredDocument
from link_validator.core.scraping.normalizer import decode_entities

LINK_PREFIXES = ("http://", "https://")


class SoupDocument(StructuredDocument):
    """`StructuredDocument` implemented on top of a BeautifulSoup tree."""

    def __init__(self, node: Union[BeautifulSoup, Tag]):
        self.node = node

    @classmethod
    def from_markup(cls, markup: Union[str, bytes]) -> "SoupDocument":
        # bytes let BeautifulSoup sniff the charset from <meta> tags
        return cls(BeautifulSoup(markup, "html.parser"))

    def find_by_id(self, tag: str, element_id: str) -> Optional["SoupDocument"]:
        found = self.node.find(tag, attrs={"id": element_id})
        return SoupDocument(found) if found is not None else None

    def find_all(self, tag: str) -> Iterator["SoupDocument"]:
        for el in self.node.find_all(tag):
            yield SoupDocument(el)

    def text_content(self) -> str:
        return self.node.get_text()


def extract_table_links(document: StructuredDocument, table_id: str) -> List[str]:
    """Return the cell texts of table `table_id` that look like absolute URLs.

    - Cell texts are trimmed before the prefix check.
    - Document order is kept and duplicates are not removed.
    """
    table = document.find_by_id("table", table_id)
    if table is None:
        raise TableNotFoundError(table_id)

    links: List[str] = []
    for cell in table.find_all("td"):
        text = cell.text_content().strip()
        if text.startswith(LINK_PREFIXES):
            links.append(text)
    return links


def extract_titles(document: StructuredDocument) -> List[str]:
    """Return all non-empty, entity-decoded <title> texts in document order."""
    titles: List[str] = []
    for el in document.find_all("title"):
        title = decode_entities(el.text_content().strip())
        if len(title) > 0:
            titles.append(title)
    return titles
