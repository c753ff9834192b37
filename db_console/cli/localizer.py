"""
Header text lookup for the database wizards.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from db_console.models.config import DatabaseAction


class Localizer(ABC):
    """Looks up user-facing strings the wizard does not own."""
    
    @abstractmethod
    def header_for(self, action: DatabaseAction) -> str:
        pass


class HeaderLocalizer(Localizer):
    """Fixed English headers, optionally overridden from settings."""
    
    DEFAULT_HEADERS = {
        DatabaseAction.BACKUP.value: "Create Database Backup",
        DatabaseAction.RESTORE.value: "Restore Database From Backup",
    }
    
    def __init__(self, overrides: Optional[Dict[str, str]] = None):
        self.headers = {**self.DEFAULT_HEADERS, **(overrides or {})}
    
    def header_for(self, action: DatabaseAction) -> str:
        return self.headers[DatabaseAction(action).value]
