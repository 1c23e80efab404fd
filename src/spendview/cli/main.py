"""Main CLI entry point."""

import click

from spendview.cli.notifier import create_cli_notifier
from spendview.database.factories import create_sqlite_database
from spendview.utils.logger import configure_logging

# Import and register all commands at module level
from spendview.cli.commands import add, categories, expense, summary

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SPENDVIEW_DB_PATH environment variable)",
    envvar="SPENDVIEW_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    default="local",
    show_default=True,
    envvar="SPENDVIEW_USER",
    help="ID of the signed-in user whose expenses are shown",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="SPENDVIEW_LOG_LEVEL",
    help="Logging level",
)
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str, log_level: str):
    """Spendview - Personal expense tracker.

    Record expenses and view spending totals by category and month.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db
        ctx.obj["user_id"] = user_id
        ctx.obj["notifier"] = create_cli_notifier()


# Register all commands
add.register_commands(cli)
expense.register_commands(cli)
summary.register_commands(cli)
categories.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
