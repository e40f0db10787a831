"""Drive a full validation run: discover the links, then check each one.

Stages run in a fixed order (DISCOVERING -> VALIDATING -> DONE). Any error
while discovering aborts the run; link-level problems are already turned
into result rows by `validate_link`, so the validating stage always ends
with one result per discovered link.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from link_validator.core.config import DEFAULT_CONFIG, ValidatorConfig
from link_validator.core.logging import get_logger
from link_validator.core.models import LinkValidationResult
from link_validator.core.scraping.fetcher import Fetcher
from link_validator.extractors.table_links import TableLinkExtractor
from link_validator.validation.link_validator import validate_link


class ValidationStage(str, Enum):
    DISCOVERING = "discovering"
    VALIDATING = "validating"
    DONE = "done"


def validate_links(
    config: ValidatorConfig = DEFAULT_CONFIG,
    fetcher: Optional[Fetcher] = None,
    logger: Optional[logging.Logger] = None,
    on_stage: Optional[Callable[[ValidationStage], None]] = None,
) -> List[LinkValidationResult]:
    """Validate every link of the configured table, in table order.

    `on_stage` is called on each stage change (useful for progress display).
    """
    logger = logger or get_logger(config.debug)
    fetcher = fetcher or Fetcher(user_agent=config.user_agent)

    def enter(stage: ValidationStage) -> None:
        logger.debug("Stage: %s", stage.value)
        if on_stage:
            on_stage(stage)

    enter(ValidationStage.DISCOVERING)
    logger.info("Discovering links on %s", config.source_url)
    extractor = TableLinkExtractor.from_config(config, fetcher=fetcher, logger=logger)
    links = extractor.find_links()

    enter(ValidationStage.VALIDATING)
    logger.info("Validating %d links...", len(links))
    results: List[LinkValidationResult] = []
    for url in links:
        results.append(validate_link(url, fetcher, logger))

    enter(ValidationStage.DONE)
    logger.info("Validation completed.")
    return results
