"""
relaykit utilities.

This module provides the concurrency primitive, logging and validation
helpers shared by the rest of the package.
"""

from relaykit.utils.logging import (
    StructuredFormatter,
    configure_logging,
    get_logger,
    set_level,
)
from relaykit.utils.race import RaceOutcome, wait_for_success
from relaykit.utils.validation import (
    is_valid_address,
    is_valid_relay_url,
    parse_quantity,
    validate_url,
)

__all__ = [
    # Race
    "RaceOutcome",
    "wait_for_success",
    # Structured logging
    "get_logger",
    "configure_logging",
    "set_level",
    "StructuredFormatter",
    # Validation
    "is_valid_address",
    "is_valid_relay_url",
    "validate_url",
    "parse_quantity",
]
