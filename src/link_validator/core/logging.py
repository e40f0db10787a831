"""Logger construction.

The debug switch is passed in explicitly (usually from
`ValidatorConfig.debug`) instead of being read from the environment.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from prefect.logging import get_logger as get_prefect_logger

LOGGER_NAME = "link_validator"


def get_logger(debug: Optional[bool] = None) -> logging.Logger:
    """Return the package logger.

    `debug=True/False` sets the level to DEBUG/INFO; `None` keeps whatever
    an earlier call configured (INFO on first use).

    The logger lives under Prefect's logger tree, so inside a flow run the
    messages are handled like the rest of Prefect's logs. Outside a run a
    stderr handler is attached when nothing else would print them; stdout
    stays reserved for CSV output.
    """
    logger = get_prefect_logger(LOGGER_NAME)
    if debug is not None:
        logger.setLevel(logging.DEBUG if debug else logging.INFO)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    return logger
