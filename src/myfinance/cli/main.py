"""Main CLI entry point."""

import click

from myfinance.database.factories import create_sqlite_database
from myfinance.domain.errors import StorageUnavailableError
from myfinance.logging_setup import configure_logging

# Import and register all commands at module level
from myfinance.cli.commands import serve, transfer


@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help="Path to database file (overrides MYFINANCE_DB_PATH environment variable)",
    envvar="MYFINANCE_DB_PATH",
)
@click.option(
    "--log-level",
    help="Logging level for stderr output (default: MYFINANCE_LOG_LEVEL or INFO)",
    envvar="MYFINANCE_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """MyFinance - personal ledger of incomes and expenses.

    Record transfers from the command line, or serve them to an AI agent
    as MCP tools with `myfinance serve`.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        ctx.call_on_close(db.disconnect)
        try:
            db.initialize_schema()
        except StorageUnavailableError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        ctx.obj["db"] = db


# Register all commands
transfer.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
