"""
Collaborators that carry out the work the wizard collects parameters for.
"""

from db_console.tasks.filesystem import FileSystem, LocalFileSystem
from db_console.tasks.runner import RakeTaskRunner, TaskRunner

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "RakeTaskRunner",
    "TaskRunner",
]
