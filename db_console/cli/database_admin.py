"""
Interactive database backup and restore wizard.

This module drives the prompt flow that picks where a backup file lives,
collects the transport-specific parameters, confirms destructive restores
and hands the result to the task runner.
"""

import logging
from typing import Optional, Tuple, Union

from db_console.cli.localizer import HeaderLocalizer, Localizer
from db_console.cli.prompter import ConsolePrompter, Prompter, Validator
from db_console.core.exceptions import ConfigurationError, UserCancelledError
from db_console.models.config import CANCEL, BackupType, ConsoleSettings, DatabaseAction
from db_console.models.state import WizardState
from db_console.tasks.filesystem import FileSystem, LocalFileSystem
from db_console.tasks.runner import RakeTaskRunner, TaskRunner
from db_console.utils.helpers import normalize_uri, validate_uri

logger = logging.getLogger(__name__)


FILE_OPTIONS = (BackupType.LOCAL.value, BackupType.NFS.value, BackupType.SMB.value, CANCEL)

LOCAL_FILE_PROMPT = "location of the local restore file"
REMOTE_FILE_PROMPT = "location of the remote backup file\nExample: {example}"
USER_PROMPT = "username with access to this file.\nExample: 'mydomain.com/user'"


class DatabaseAdmin:
    """Wizard that collects backup/restore parameters and runs the task."""

    def __init__(
        self,
        action: Union[DatabaseAction, str] = DatabaseAction.RESTORE,
        prompter: Optional[Prompter] = None,
        task_runner: Optional[TaskRunner] = None,
        filesystem: Optional[FileSystem] = None,
        localizer: Optional[Localizer] = None,
        settings: Optional[ConsoleSettings] = None
    ):
        self.settings = settings or ConsoleSettings()
        self.prompter = prompter or ConsolePrompter()
        self.task_runner = task_runner or RakeTaskRunner(
            rake_command=self.settings.rake_command,
            working_directory=self.settings.working_directory
        )
        self.filesystem = filesystem or LocalFileSystem()
        self.localizer = localizer or HeaderLocalizer(self.settings.headers)
        self.state = WizardState(action=DatabaseAction(action))

        # Swappable so callers can accept paths the file system can't see yet
        self.local_file_validator: Validator = self.filesystem.exists

    @classmethod
    def run_action(cls, action: Union[DatabaseAction, str], **kwargs) -> WizardState:
        """Build a wizard for ``action`` and run it to completion."""
        admin = cls(action, **kwargs)
        admin.run()
        return admin.state

    @property
    def action(self) -> DatabaseAction:
        return self.state.action

    def run(self) -> None:
        """
        Run the whole wizard.

        Raises:
            UserCancelledError: If the user picks Cancel at the file menu
        """
        logger.debug(f"Starting database {self.action.value} wizard")
        self.setting_header()
        self.ask_file_location()

        self.prompter.clear_screen()
        self.setting_header()

        self.ask_to_delete_backup_after_restore()
        self.confirm_and_execute()

    def setting_header(self) -> None:
        self.prompter.say(f"{self.localizer.header_for(self.action)}\n")

    def file_menu_args(self) -> Tuple[str, Tuple[str, ...], str]:
        title = "Restore Database File" if self.state.is_restore else "Backup File Location"
        return title, FILE_OPTIONS, BackupType.LOCAL.value

    def ask_file_location(self) -> None:
        """Ask where the backup file lives and collect that transport's parameters."""
        if self.state.backup_type is not None:
            raise ConfigurationError("Backup file location has already been selected")

        choice = self.prompter.select_from_menu(*self.file_menu_args())
        if choice == CANCEL:
            logger.debug(f"Database {self.action.value} cancelled at file location menu")
            raise UserCancelledError(f"Database {self.action.value} cancelled")

        self.state.backup_type = BackupType(choice)
        logger.debug(f"Selected backup location: {self.state.backup_type.value}")

        if self.state.backup_type == BackupType.LOCAL:
            self.ask_local_file_options()
        elif self.state.backup_type == BackupType.NFS:
            self.ask_nfs_file_options()
        else:
            self.ask_smb_file_options()

    def ask_local_file_options(self) -> None:
        self.state.uri = self.prompter.ask_text(
            LOCAL_FILE_PROMPT,
            default=self.settings.restore_file,
            validator=self.local_file_validator,
            error_label="file that exists"
        )
        self.state.task = self.settings.task_name(self.action, "local")
        self.state.task_params = {"local_file": self.state.uri}

    def ask_nfs_file_options(self) -> None:
        self.state.uri = self.ask_for_uri(BackupType.NFS.scheme)
        self.state.task = self.settings.task_name(self.action, "remote")
        self.state.task_params = {"uri": self.state.uri}

    def ask_smb_file_options(self) -> None:
        self.state.uri = self.ask_for_uri(BackupType.SMB.scheme)
        user = self.prompter.ask_text(USER_PROMPT)
        password = self.prompter.ask_password(f"password for {user}")

        self.state.task = self.settings.task_name(self.action, "remote")
        self.state.task_params = {
            "uri": self.state.uri,
            "uri_username": user,
            "uri_password": password,
        }

    def ask_for_uri(self, scheme: str) -> str:
        """Ask for a remote file URI until it is valid for ``scheme``."""
        uri = self.prompter.ask_text(
            REMOTE_FILE_PROMPT.format(example=self.settings.sample_url(scheme)),
            validator=lambda answer: validate_uri(answer, scheme),
            error_label="a valid URI"
        )
        return normalize_uri(uri)

    def ask_to_delete_backup_after_restore(self) -> None:
        """Offer to remove a local restore file once the restore succeeds."""
        if self.state.is_restore and self.state.backup_type == BackupType.LOCAL:
            self.prompter.say(f"The local database restore file is located at: '{self.state.uri}'.\n")
            self.state.delete_agree = self.prompter.ask_yes_no(
                "Should this file be deleted after completing the restore?"
            )

    def confirm_and_execute(self) -> None:
        """
        Confirm a restore, run the task, and clean up afterwards.

        A backup runs without confirmation. Every path, including a declined
        restore, ends by waiting for a key press.
        """
        if not self.state.ready:
            raise ConfigurationError(
                "Backup file location must be collected before running the task",
                details={"uri": self.state.uri, "task": self.state.task}
            )

        if self.action == DatabaseAction.BACKUP or self.agree_to_restore():
            if self.state.is_restore:
                self.prompter.say("\nRestoring the database...")
            else:
                self.prompter.say(f"\nRunning Database backup to {self.state.uri}...")

            success = self.task_runner.run(self.state.task, dict(self.state.task_params))
            logger.debug(f"Task {self.state.task} finished: {'success' if success else 'failure'}")

            if success and self.state.is_restore and self.state.delete_agree:
                self.prompter.say(f"\nRemoving the database restore file {self.state.uri}...")
                self.filesystem.delete(self.state.uri)
            elif not success:
                self.prompter.say(f"\nDatabase {self.action.value} failed. Check the logs for more information")
        else:
            logger.debug("Database restore declined at confirmation")

        self.prompter.wait_for_key()

    def agree_to_restore(self) -> bool:
        self.prompter.say(
            f"\nNote: A database restore cannot be undone.  "
            f"The restore will use the file: {self.state.uri}.\n"
        )
        return self.prompter.ask_yes_no("Are you sure you would like to restore the database?")
