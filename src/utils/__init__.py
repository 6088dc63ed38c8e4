"""
Utility modules for the quiz engine.

This module contains utility functions:
- validation: numeric answer validation and catalog schema validation
- presenter: display text for questions, validation failures and results
- logger: package logging setup
"""

from .validation import (
    CatalogValidator,
    FailureReason,
    ValidationFailure,
    ValidationResult,
    parse_number,
    validate_catalog,
    validate_numeric_input,
)
from .logger import setup_logging
from .presenter import (
    format_question,
    format_result,
    format_size,
    progress_percent,
    validation_message,
)

__all__ = [
    # Validation
    "CatalogValidator",
    "FailureReason",
    "ValidationFailure",
    "ValidationResult",
    "parse_number",
    "validate_catalog",
    "validate_numeric_input",
    # Logging
    "setup_logging",
    # Display
    "format_question",
    "format_result",
    "format_size",
    "progress_percent",
    "validation_message",
]
