import csv
import sys
from pathlib import Path
from typing import Iterable

import pandas as pd

from link_validator.core.models import CSV_HEADER, LinkValidationResult

# BOM (Byte Order Mark) para o Excel reconhecer o arquivo como UTF-8
BOM = "\ufeff"


def results_to_dataframe(results: Iterable[LinkValidationResult]) -> pd.DataFrame:
    """Uma linha por resultado, todas as colunas como texto."""
    rows = [r.to_row() for r in results]
    return pd.DataFrame(rows, columns=CSV_HEADER, dtype=str)


def results_to_csv(
    results: Iterable[LinkValidationResult],
    delimiter: str = ";",
    quote: str = '"',
    include_bom: bool = False,
) -> str:
    """
    Gera o CSV (com cabeçalho) dos resultados.

    Behavior:
    - every field is quoted, empty ones included
    - lines end with "\\n"
    - `include_bom` prefixes the text with U+FEFF
    """
    df = results_to_dataframe(results)
    text = df.to_csv(
        index=False,
        sep=delimiter,
        quotechar=quote,
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )
    return BOM + text if include_bom else text


def save_results(
    results: Iterable[LinkValidationResult],
    path: str,
    delimiter: str = ";",
    quote: str = '"',
    include_bom: bool = True,
) -> str:
    """
    Grava o CSV em `path` ("-" = STDOUT) e devolve o destino.

    The BOM is only written to files; STDOUT never gets one.
    """
    if path == "-":
        sys.stdout.write(results_to_csv(results, delimiter, quote, include_bom=False))
        sys.stdout.flush()
        return path

    out_file = Path(path)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(
        results_to_csv(results, delimiter, quote, include_bom=include_bom),
        encoding="utf-8",
        newline="",
    )
    return str(out_file)
