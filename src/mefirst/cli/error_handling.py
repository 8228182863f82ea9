"""CLI error handling helpers."""

import click

from mefirst.database.base import StoreError
from mefirst.domain.errors import DomainError
from mefirst.logging_setup import get_logger

logger = get_logger("mefirst.cli")


def handle_domain_error(ctx: click.Context, error: DomainError | StoreError | ValueError) -> None:
    """Render a domain or store error and exit with failure.

    Nothing has been written when a service raises, so exiting is always safe.
    """
    logger.debug("%s failed: %r", ctx.command_path, error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
