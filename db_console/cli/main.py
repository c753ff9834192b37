"""
Main CLI entry point for the Database Admin Console.

This module provides the ``db-console`` command group using Click, with
Rich formatting for messages that sit outside the wizard itself.
"""

import sys
from typing import Optional

import click
from rich.console import Console

from db_console import __version__
from db_console.core.exceptions import ConfigurationError, UserCancelledError
from db_console.models.config import DatabaseAction, load_settings
from db_console.utils.logging import get_logger, setup_logging

console = Console()
logger = get_logger("cli")

EXIT_OK = 0
EXIT_CANCELLED = 1
EXIT_CONFIG_ERROR = 2


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version information')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False),
              help='Settings file (YAML)')
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool, config: Optional[str]):
    """
    Database Admin Console

    Interactive wizards for backing up and restoring the application database.
    """
    ctx.ensure_object(dict)
    
    if version:
        console.print(f"Database Admin Console version {__version__}")
        sys.exit(EXIT_OK)
    
    try:
        settings = load_settings(config)
    except ConfigurationError as e:
        console.print(f"[red]Error loading settings: {e.message}[/red]")
        for error in e.details.get("errors", []):
            location = ".".join(str(part) for part in error.get("loc", ()))
            console.print(f"  • [red]{location}: {error.get('msg')}[/red]")
        sys.exit(EXIT_CONFIG_ERROR)
    
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file
    )
    ctx.obj['settings'] = settings
    ctx.obj['verbose'] = verbose
    
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def run_wizard(ctx: click.Context, action: DatabaseAction) -> None:
    """Run the database wizard for ``action`` and map its outcome to an exit code."""
    from db_console.cli.database_admin import DatabaseAdmin
    
    settings = ctx.obj['settings']
    
    try:
        DatabaseAdmin.run_action(action, settings=settings)
    except (UserCancelledError, click.Abort, KeyboardInterrupt):
        logger.debug(f"Database {action.value} cancelled by user")
        console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(EXIT_CANCELLED)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e.message}[/red]")
        sys.exit(EXIT_CONFIG_ERROR)


@main.command()
@click.pass_context
def backup(ctx: click.Context):
    """Back up the database to a local file, NFS or SMB share."""
    run_wizard(ctx, DatabaseAction.BACKUP)


@main.command()
@click.pass_context
def restore(ctx: click.Context):
    """Restore the database from a local file, NFS or SMB share."""
    run_wizard(ctx, DatabaseAction.RESTORE)


if __name__ == '__main__':
    main()
