"""
Configuration models for the Database Admin Console.

This module defines the action and transport enums used by the wizard
and the Pydantic settings model loaded from the console's YAML file.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from db_console.core.exceptions import ConfigurationError


DEFAULT_RESTORE_FILE = "/tmp/evm_db.backup"

SAMPLE_URLS = {
    "nfs": "nfs://host.mydomain.com/exported/my_exported_folder/db.backup",
    "smb": "smb://host.mydomain.com/my_share/daily_backup/db.backup",
}


class DatabaseAction(str, Enum):
    """Operations the wizard can drive."""
    BACKUP = "backup"
    RESTORE = "restore"


class BackupType(str, Enum):
    """Where the backup file lives. Values double as menu labels."""
    LOCAL = "Local file"
    NFS = "Network File System (NFS)"
    SMB = "Samba (SMB)"

    @property
    def scheme(self) -> Optional[str]:
        """URI scheme expected for remote transports."""
        return {BackupType.NFS: "nfs", BackupType.SMB: "smb"}.get(self)


CANCEL = "Cancel"


class ConsoleSettings(BaseModel):
    """Settings for the console and its default collaborators."""
    restore_file: str = DEFAULT_RESTORE_FILE
    task_namespace: str = "evm:db"
    sample_urls: Dict[str, str] = Field(default_factory=lambda: dict(SAMPLE_URLS))
    rake_command: str = "rake"
    working_directory: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator('sample_urls')
    @classmethod
    def sample_urls_cover_remote_transports(cls, v):
        missing = [scheme for scheme in SAMPLE_URLS if scheme not in v]
        if missing:
            raise ValueError(f"Missing sample URLs for: {', '.join(missing)}")
        return v

    @field_validator('task_namespace')
    @classmethod
    def task_namespace_must_not_be_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('Task namespace cannot be empty')
        return v.strip().rstrip(':')

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level

    def sample_url(self, scheme: str) -> str:
        """Example URI shown at the remote file prompt."""
        return self.sample_urls[scheme]

    def task_name(self, action: DatabaseAction, target: str) -> str:
        """Build a task identifier such as ``evm:db:restore:local``."""
        return f"{self.task_namespace}:{action.value}:{target}"


def load_settings(path: Optional[Union[str, Path]] = None) -> ConsoleSettings:
    """
    Load console settings.
    
    Args:
        path: Optional YAML settings file. Defaults are used when omitted.
    
    Returns:
        Validated ConsoleSettings
    
    Raises:
        ConfigurationError: If the file cannot be read or fails validation
    """
    if path is None:
        return ConsoleSettings()
    
    from db_console.utils.helpers import load_config_file
    
    try:
        data = load_config_file(path) or {}
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Failed to load settings from {path}: {e}")
    
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a mapping")
    
    try:
        return ConsoleSettings(**data)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid settings in {path}",
            details={"errors": e.errors()}
        )
