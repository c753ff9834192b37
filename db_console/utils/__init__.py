"""
Utilities module for the Database Admin Console.

This module contains helper functions and the logging setup
used throughout the application.
"""

from db_console.utils.helpers import (
    load_config_file,
    normalize_uri,
    check_uri,
    validate_uri,
    sanitize_dict,
)
from db_console.utils.logging import (
    setup_logging,
    get_logger,
)

__all__ = [
    # Helper functions
    "load_config_file",
    "normalize_uri",
    "check_uri",
    "validate_uri",
    "sanitize_dict",
    # Logging utilities
    "setup_logging",
    "get_logger",
]
