"""
Core module for the Database Admin Console.

This module contains the exception hierarchy shared by the wizard,
its collaborators and the command-line entry point.
"""

from db_console.core.exceptions import (
    DbConsoleError,
    ConfigurationError,
    ValidationError,
    UserCancelledError,
    TaskExecutionError,
)

__all__ = [
    "DbConsoleError",
    "ConfigurationError",
    "ValidationError",
    "UserCancelledError",
    "TaskExecutionError",
]
