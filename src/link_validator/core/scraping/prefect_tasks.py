"""Tarefas Prefect que usam os componentes de validação.

Cada task é uma unidade de trabalho do Prefect com logs próprios. As tasks
rodam com `retries=0`: uma falha de rede vira dado (status 0) no nível do
link, e uma falha na descoberta deve abortar o flow, sem nova tentativa.
"""

from __future__ import annotations

from typing import List, Optional

from prefect import get_run_logger, task

from link_validator.core.config import ValidatorConfig
from link_validator.core.logging import get_logger
from link_validator.core.models import LinkValidationResult
from link_validator.core.scraping.fetcher import Fetcher
from link_validator.extractors.table_links import TableLinkExtractor
from link_validator.services.storage import save_results
from link_validator.validation.link_validator import validate_link


@task(name="extract_links", retries=0)
def extract_links_task(config: ValidatorConfig) -> List[str]:
    logger = get_run_logger()
    logger.info("Fetching URL: %s", config.source_url)
    links = TableLinkExtractor.from_config(config).find_links()
    logger.info("Extracted %d links from table #%s", len(links), config.table_id)
    return links


@task(name="validate_link", retries=0)
def validate_link_task(
    url: str, user_agent: str, debug: bool = False
) -> LinkValidationResult:
    result = validate_link(url, Fetcher(user_agent=user_agent), get_logger(debug))
    get_run_logger().info(
        "%s -> status=%s effective=%s", url, result.status_code, result.effective_url
    )
    return result


@task(name="save_results", retries=0)
def save_results_task(
    results: List[LinkValidationResult],
    path: str,
    config: ValidatorConfig,
    include_bom: bool = True,
) -> Optional[str]:
    logger = get_run_logger()
    saved = save_results(
        results,
        path,
        delimiter=config.csv_delimiter,
        quote=config.csv_quote,
        include_bom=include_bom,
    )
    logger.info("Results written to: %s", saved)
    return saved
