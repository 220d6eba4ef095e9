"""
starkcall SDK Utilities.

This module provides field-element helpers and logging utilities.
"""

from starkcall.utils.felt import (
    FeltLike,
    chain_id_to_felt,
    parse_felt,
    selector_from_name,
    string_to_felt,
    to_hex,
)
from starkcall.utils.logging import (
    LogContext,
    configure_logging,
    disable_logging,
    enable_debug,
    get_logger,
    set_level,
)

__all__ = [
    # Field elements
    "FeltLike",
    "chain_id_to_felt",
    "parse_felt",
    "selector_from_name",
    "string_to_felt",
    "to_hex",
    # Structured logging
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
    "LogContext",
]
