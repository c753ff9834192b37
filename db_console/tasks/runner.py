"""
Task runner used to execute database backup and restore jobs.

The wizard only knows the abstract TaskRunner. RakeTaskRunner shells out
to ``rake`` the way the appliance runs its database tasks.
"""

from abc import ABC, abstractmethod
from typing import List, Mapping, Optional
import logging
import shutil
import subprocess

from db_console.core.exceptions import TaskExecutionError
from db_console.utils.helpers import sanitize_dict

logger = logging.getLogger(__name__)


class TaskRunner(ABC):
    """Abstract interface for running a named task with parameters."""
    
    @abstractmethod
    def run(self, task: str, params: Mapping[str, str]) -> bool:
        """
        Run a task and block until it finishes.
        
        Args:
            task: Task identifier, e.g. ``evm:db:restore:local``
            params: Ordered task parameters
            
        Returns:
            True if the task succeeded
        """
        pass


class RakeTaskRunner(TaskRunner):
    """Run tasks through rake in a subprocess."""
    
    def __init__(self, rake_command: str = "rake", working_directory: Optional[str] = None):
        self.rake_command = rake_command
        self.working_directory = working_directory
    
    @staticmethod
    def build_arguments(params: Mapping[str, str]) -> List[str]:
        """Convert ``{"uri_username": "x"}`` into ``["--uri-username", "x"]``."""
        args: List[str] = []
        for key, value in params.items():
            args.append(f"--{key.replace('_', '-')}")
            args.append(str(value))
        return args
    
    def build_command(self, task: str, params: Mapping[str, str]) -> List[str]:
        command = [self.rake_command, task]
        if params:
            command.append("--")
            command.extend(self.build_arguments(params))
        return command
    
    def run(self, task: str, params: Mapping[str, str]) -> bool:
        masked = self.build_command(task, sanitize_dict(dict(params)))
        logger.debug(f"Running task: {' '.join(masked)}")
        
        try:
            result = self._execute(task, params)
        except TaskExecutionError as e:
            logger.error(f"Task {e.task} could not be started: {e.message}")
            return False
        
        if result.stdout:
            logger.debug(result.stdout.strip())
        
        if result.returncode != 0:
            logger.error(
                f"Task {task} failed with exit code {result.returncode}: "
                f"{(result.stderr or '').strip()}"
            )
            return False
        
        logger.debug(f"Task {task} completed successfully")
        return True
    
    def _execute(self, task: str, params: Mapping[str, str]) -> subprocess.CompletedProcess:
        if not shutil.which(self.rake_command):
            raise TaskExecutionError(
                f"{self.rake_command} not found on PATH",
                task=task
            )
        
        try:
            return subprocess.run(
                self.build_command(task, params),
                cwd=self.working_directory,
                capture_output=True,
                text=True
            )
        except OSError as e:
            raise TaskExecutionError(str(e), task=task)
