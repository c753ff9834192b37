"""
Custom exceptions for the Database Admin Console.

This module defines the exception classes raised by the wizard and
its collaborators so callers can tell a user-initiated exit apart
from a real fault.
"""

from typing import Any, Dict, List, Optional


class DbConsoleError(Exception):
    """Base exception class for Database Admin Console errors."""
    
    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(DbConsoleError):
    """Raised when settings are invalid or the wizard state is incomplete."""
    pass


class ValidationError(DbConsoleError):
    """Raised when user input fails validation."""
    
    def __init__(
        self,
        message: str,
        failed_checks: Optional[List[str]] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.failed_checks = failed_checks or []


class UserCancelledError(DbConsoleError):
    """Raised when the user picks Cancel. This is an expected exit, not a fault."""
    
    def __init__(self, message: str = "Operation cancelled by user", **kwargs):
        super().__init__(message, **kwargs)


class TaskExecutionError(DbConsoleError):
    """Raised when the task runner cannot launch a task."""
    
    def __init__(
        self,
        message: str,
        task: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.task = task
