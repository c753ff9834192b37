"""
Data models for the Database Admin Console.

This module contains the Pydantic models for console settings and
the per-run wizard state.
"""

from db_console.models.config import (
    CANCEL,
    BackupType,
    ConsoleSettings,
    DatabaseAction,
    load_settings,
)
from db_console.models.state import WizardState

__all__ = [
    # Configuration models
    "CANCEL",
    "BackupType",
    "ConsoleSettings",
    "DatabaseAction",
    "load_settings",
    # Runtime state
    "WizardState",
]
