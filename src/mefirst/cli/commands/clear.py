"""Clear all data command."""

import click
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.settings import SettingsService


@click.command("clear")
@click.confirmation_option(prompt="Delete all transactions, goals, wishlist and settings?")
@click.pass_context
def clear(ctx):
    """Delete all data and restore the default categories and buckets."""
    service = SettingsService(ctx.obj["store"])
    try:
        service.clear_all()
    except StoreError as e:
        handle_domain_error(ctx, e)
    click.echo("All data cleared")


def register_commands(cli):
    """Register clear command with main CLI."""
    cli.add_command(clear)
