"""
Fluxo de validação de links (Prefect)

1. Valida a configuração (source_url, table_id, user_agent, ...).
2. Busca a página de descoberta e extrai os links da tabela configurada.
3. Valida cada link, um de cada vez, na ordem da tabela.
4. Opcionalmente grava o CSV em `output_path`.

A lógica de cada passo fica nos componentes do pacote; o flow só encadeia
as tasks e registra logs.
"""

from __future__ import annotations

from typing import List, Optional

from prefect import flow, get_run_logger

from link_validator.core.config import DEFAULT_CONFIG
from link_validator.core.models import LinkValidationResult
from link_validator.core.scraping.prefect_tasks import (
    extract_links_task,
    save_results_task,
    validate_link_task,
)


@flow(name="Link Validation")
def link_validation_flow(
    config_dict: Optional[dict] = None, output_path: Optional[str] = None
) -> List[LinkValidationResult]:
    """Validate the links of the configured table.

    config_dict: overrides for `DEFAULT_CONFIG`; must conform to `ValidatorConfig`.
    """
    logger = get_run_logger()
    try:
        config = DEFAULT_CONFIG.with_overrides(**(config_dict or {}))
        logger.info("Config valid for: %s #%s", config.source_url, config.table_id)
    except Exception as e:
        logger.error("Invalid config: %s", e)
        raise

    links = extract_links_task(config)
    logger.info("Validating %d links...", len(links))

    # one link at a time, keeping table order
    results: List[LinkValidationResult] = []
    for url in links:
        results.append(validate_link_task(url, config.user_agent, config.debug))

    if output_path:
        save_results_task(results, output_path, config)

    logger.info("Validation completed.")
    return results


if __name__ == "__main__":
    for r in link_validation_flow():
        print(";".join(r.to_row()))
