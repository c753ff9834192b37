"""
CLI module for the Database Admin Console.

This module provides the command-line interface and the interactive
backup/restore wizard, using Click and Rich for terminal I/O.
"""

from db_console.cli.main import main

__all__ = ["main"]
