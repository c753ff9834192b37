"""
Database Admin Console

An interactive console wizard that collects the parameters of a database
backup or restore and hands them to the task runner.
"""

__version__ = "0.1.0"
__author__ = "Database Admin Console Team"

from db_console.models.config import BackupType, ConsoleSettings, DatabaseAction
from db_console.models.state import WizardState

__all__ = [
    "BackupType",
    "ConsoleSettings",
    "DatabaseAction",
    "WizardState",
]
