from __future__ import annotations

import logging
from typing import List, Optional

from link_validator.core.config import DEFAULT_CONFIG, ValidatorConfig
from link_validator.core.errors import FetchError
from link_validator.core.interfaces import BaseExtractor
from link_validator.core.logging import get_logger
from link_validator.core.scraping.fetcher import Fetcher
from link_validator.core.scraping.parser import SoupDocument, extract_table_links


class TableLinkExtractor(BaseExtractor):
    """Extractor for links listed inside one HTML table.

    Responsibilities:
    - fetch the discovery page (must answer exactly 200)
    - locate the table by its id (`params["table_id"]`)
    - return every cell text starting with http:// or https://

    Every failure here is fatal for the run and is raised to the caller.
    """

    def __init__(
        self,
        url: str,
        params: dict | None = None,
        fetcher: Optional[Fetcher] = None,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(url=url, params=params)
        if not self.params.get("table_id"):
            raise ValueError("TableLinkExtractor requires params['table_id']")
        self.fetcher = fetcher or Fetcher(
            user_agent=self.params.get("user_agent", DEFAULT_CONFIG.user_agent)
        )
        self.logger = logger or get_logger()

    @classmethod
    def from_config(
        cls,
        config: ValidatorConfig,
        fetcher: Optional[Fetcher] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "TableLinkExtractor":
        return cls(
            url=config.source_url,
            params={"table_id": config.table_id, "user_agent": config.user_agent},
            fetcher=fetcher or Fetcher(user_agent=config.user_agent),
            logger=logger or get_logger(config.debug),
        )

    def fetch_document(self) -> SoupDocument:
        self.logger.debug("Fetching URL: %s", self.url)
        resp = self.fetcher.get(self.url)
        if resp.status_code != 200:
            raise FetchError(self.url, resp.status_code)
        return SoupDocument.from_markup(resp.content)

    def find_links(self) -> List[str]:
        document = self.fetch_document()
        links = extract_table_links(document, self.params["table_id"])
        self.logger.debug("Extracted %d links from table", len(links))
        return links
