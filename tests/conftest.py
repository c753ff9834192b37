"""
Pytest configuration and fixtures for the Database Admin Console tests.

This module provides settings, mocked collaborators and a Rich console
that records output so wizard transcripts can be asserted on.
"""

import io
from unittest.mock import Mock

import pytest
from rich.console import Console

from db_console.cli.database_admin import DatabaseAdmin
from db_console.cli.localizer import HeaderLocalizer
from db_console.cli.prompter import ConsolePrompter, Prompter
from db_console.models.config import ConsoleSettings, DatabaseAction
from db_console.tasks.filesystem import FileSystem
from db_console.tasks.runner import TaskRunner


@pytest.fixture
def settings() -> ConsoleSettings:
    """Default console settings."""
    return ConsoleSettings()


@pytest.fixture
def mock_prompter() -> Mock:
    """Prompter double; configure return values per test."""
    return Mock(spec=Prompter)


@pytest.fixture
def mock_task_runner() -> Mock:
    runner = Mock(spec=TaskRunner)
    runner.run.return_value = True
    return runner


@pytest.fixture
def mock_filesystem() -> Mock:
    filesystem = Mock(spec=FileSystem)
    filesystem.exists.return_value = True
    return filesystem


@pytest.fixture
def output() -> io.StringIO:
    """Buffer that receives everything the recording console prints."""
    return io.StringIO()


@pytest.fixture
def recording_console(output: io.StringIO) -> Console:
    return Console(file=output, force_terminal=False, color_system=None, width=200)


@pytest.fixture
def console_prompter(recording_console: Console) -> ConsolePrompter:
    return ConsolePrompter(console=recording_console)


@pytest.fixture
def make_admin(settings, mock_prompter, mock_task_runner, mock_filesystem):
    """Factory for a DatabaseAdmin wired to mocked collaborators."""
    def _make_admin(action=DatabaseAction.RESTORE, **overrides) -> DatabaseAdmin:
        kwargs = {
            "prompter": mock_prompter,
            "task_runner": mock_task_runner,
            "filesystem": mock_filesystem,
            "localizer": HeaderLocalizer(),
            "settings": settings,
        }
        kwargs.update(overrides)
        return DatabaseAdmin(action, **kwargs)
    
    return _make_admin
