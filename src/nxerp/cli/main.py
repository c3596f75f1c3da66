"""Main CLI entry point."""

import sys
from pathlib import Path

import click
from loguru import logger

from nxerp import __version__
from nxerp.app import create_services
from nxerp.cli.error_handling import handle_domain_error
from nxerp.database.factories import default_database_path, default_log_path
from nxerp.domain.errors import StorageError
from nxerp.utils.logging_config import setup_logging

# Import and register all commands at module level
from nxerp.cli.commands import customer, supplier, category


@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help="Path to database file (defaults to NxERP/nxerp-local.db in the user data directory)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    help="Log file for startup and crash entries (defaults to nxerp.log next to the database)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, log_file: str | None, verbose: bool):
    """NxERP - customers, suppliers and categories.

    The database is created and filled with demo records on first use.
    """
    ctx.ensure_object(dict)

    # Open the database only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    database_path = Path(db_path) if db_path else default_database_path()
    setup_logging(
        "DEBUG" if verbose else "WARNING",
        log_file=log_file or default_log_path(database_path),
        file_level="DEBUG" if verbose else "INFO",
    )
    logger.info(f"nxerp {__version__} starting '{ctx.invoked_subcommand}' on {database_path}")

    try:
        services = create_services(database_path=database_path)
    except StorageError as e:
        logger.error(f"Startup failure: {e}")
        handle_domain_error(ctx, e)
    ctx.obj["services"] = services
    ctx.call_on_close(services.close)


# Register all commands
customer.register_commands(cli)
supplier.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI.

    Anything not handled by a command is logged with its traceback (to
    stderr and the log file) and the process exits with status 1.
    """
    try:
        cli()
    except Exception:
        logger.exception("Unhandled error, exiting")
        sys.exit(1)


if __name__ == "__main__":
    main()
