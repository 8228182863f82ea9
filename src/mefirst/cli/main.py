"""Main CLI entry point."""

import click
from mefirst import __version__
from mefirst.database.base import StoreError
from mefirst.database.factories import create_sqlite_store
from mefirst.logging_setup import configure_logging

# Import and register all commands at module level
from mefirst.cli.commands import (
    add,
    budget,
    category,
    clear,
    goal,
    overview,
    recurring,
    settings,
    transaction,
    wishlist,
)


@click.group()
@click.version_option(version=__version__, prog_name="mefirst")
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides MEFIRST_DB_PATH environment variable)",
    envvar="MEFIRST_DB_PATH",
)
@click.option(
    "--log-level",
    help="Log level (overrides MEFIRST_LOG_LEVEL environment variable)",
    envvar="MEFIRST_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """MeFirst - pay-cycle budgeting.

    Track spending per pay period, split income into budget buckets, fund
    savings goals and cool down wishlist impulses.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            store = create_sqlite_store(database_path=db_path)
        except StoreError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        store.connect()
        ctx.obj["store"] = store
        ctx.call_on_close(store.disconnect)


# Register all commands
settings.register_commands(cli)
category.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
recurring.register_commands(cli)
budget.register_commands(cli)
goal.register_commands(cli)
wishlist.register_commands(cli)
overview.register_commands(cli)
clear.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
