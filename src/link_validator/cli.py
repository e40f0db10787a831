"""validate-links-sts: check the links of the Stadtteilschulen table.

Usage:
    validate-links-sts                   # CSV on STDOUT
    validate-links-sts -f links.csv      # CSV file (with BOM)
    validate-links-sts -f links.csv --no-bom --debug

Only links inside the table with id `tablepress-stadtteilschulen` on
https://gest-hamburg.de/stadtteilschulen/ are checked unless overridden.
Logs go to STDERR so STDOUT only carries CSV.
"""

from __future__ import annotations

from typing import Optional

import typer

from link_validator import __version__
from link_validator.core.config import DEFAULT_CONFIG
from link_validator.core.errors import LinkValidatorError
from link_validator.core.logging import get_logger
from link_validator.services.storage import save_results
from link_validator.validation.orchestrator import validate_links

app = typer.Typer(
    name="validate-links-sts",
    help="Validate links to Stadtteilschulen at gest-hamburg.de.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def main(
    file: str = typer.Option(
        "-", "--file", "-f", help='File to write the CSV output to ("-" for STDOUT).'
    ),
    bom: bool = typer.Option(
        True, "--bom/--no-bom", help="Write a BOM (Byte Order Mark) to the output file."
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Page to discover links on."),
    table_id: Optional[str] = typer.Option(
        None, "--table-id", help="id of the table holding the links."
    ),
    user_agent: Optional[str] = typer.Option(
        None, "--user-agent", help="User-Agent header for every request."
    ),
    debug: bool = typer.Option(False, "--debug", help="Print debug messages."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Validate every link of the table and write the results as CSV."""
    logger = get_logger(debug)

    try:
        config = DEFAULT_CONFIG.with_overrides(
            source_url=url, table_id=table_id, user_agent=user_agent, debug=debug
        )
        results = validate_links(config, logger=logger)
        saved = save_results(
            results,
            file,
            delimiter=config.csv_delimiter,
            quote=config.csv_quote,
            include_bom=bom,
        )
    except (LinkValidatorError, ValueError, OSError) as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)

    if saved != "-":
        logger.info("Results written to: %s", saved)


if __name__ == "__main__":
    app()
