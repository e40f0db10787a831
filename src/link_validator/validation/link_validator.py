from __future__ import annotations

import logging
from typing import Optional

from link_validator.core.logging import get_logger
from link_validator.core.models import LinkValidationResult
from link_validator.core.scraping.fetcher import Fetcher
from link_validator.validation.title_resolver import resolve_title


def validate_link(
    url: str, fetcher: Fetcher, logger: Optional[logging.Logger] = None
) -> LinkValidationResult:
    """Fetch one link and describe what happened.

    A failed fetch (usually a `TransportError`) does not propagate: it
    becomes a result with status code 0, the original URL as effective URL
    and an ``Error: ...`` title.
    """
    logger = logger or get_logger()
    logger.info("Validating: %s", url)

    try:
        resp = fetcher.get(url)
    except Exception as e:
        logger.debug("  Error: %s", e)
        return LinkValidationResult(
            url=url, status_code=0, effective_url=url, title=f"Error: {e}"
        )

    # requests reports the URL after redirects; keep the original if it is empty
    effective_url = getattr(resp, "url", None) or url
    title = resolve_title(effective_url, fetcher, logger)
    logger.debug("  Status: %s, Effective: %s", resp.status_code, effective_url)

    return LinkValidationResult(
        url=url,
        status_code=resp.status_code,
        effective_url=effective_url,
        title=title,
    )
