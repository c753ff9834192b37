"""
Wizard state for the Database Admin Console.

One WizardState is created per wizard run and filled in left to right
as the user answers each prompt.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from db_console.models.config import BackupType, DatabaseAction


class WizardState(BaseModel):
    """Mutable state collected during a backup or restore wizard."""
    action: DatabaseAction = Field(..., frozen=True)
    backup_type: Optional[BackupType] = None
    uri: Optional[str] = None
    task: Optional[str] = None
    task_params: Dict[str, str] = Field(default_factory=dict)
    delete_agree: Optional[bool] = None

    model_config = ConfigDict(validate_assignment=True)

    @property
    def is_restore(self) -> bool:
        return self.action == DatabaseAction.RESTORE

    @property
    def ready(self) -> bool:
        """True once a transport handler has filled in uri and task."""
        return bool(self.uri and self.task)
