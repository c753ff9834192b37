"""
File system access used by the wizard.
"""

from abc import ABC, abstractmethod
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


class FileSystem(ABC):
    """Abstract interface for the file operations the wizard needs."""
    
    @abstractmethod
    def exists(self, path: str) -> bool:
        pass
    
    @abstractmethod
    def delete(self, path: str) -> None:
        pass


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk."""
    
    def exists(self, path: str) -> bool:
        return Path(path).is_file()
    
    def delete(self, path: str) -> None:
        Path(path).unlink()
        logger.debug(f"Deleted {path}")
