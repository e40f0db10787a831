"""Validate the links listed in an HTML table and report status, final URL and title."""

from link_validator.core.config import DEFAULT_CONFIG, ValidatorConfig
from link_validator.core.errors import (
    FetchError,
    LinkValidatorError,
    TableNotFoundError,
    TransportError,
)
from link_validator.core.models import LinkValidationResult
from link_validator.services.storage import results_to_csv
from link_validator.validation.orchestrator import validate_links

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ValidatorConfig",
    "LinkValidationResult",
    "LinkValidatorError",
    "FetchError",
    "TableNotFoundError",
    "TransportError",
    "results_to_csv",
    "validate_links",
]
