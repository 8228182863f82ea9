"""Spending category commands."""

import click
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.allocation import category_index
from mefirst.domain.budget import BudgetService
from mefirst.domain.errors import DomainError
from mefirst.domain.settings import SettingsService


@click.group()
def category_group():
    """Manage spending categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List spending categories and the bucket each belongs to."""
    store = ctx.obj["store"]
    categories = SettingsService(store).list_categories()
    buckets = BudgetService(store).list_buckets()
    labels = {b.id: b.label for b in buckets}
    index = category_index(buckets)

    if not categories:
        click.echo("No categories found. Add one with 'category add'.")
        return

    click.echo("\nCategories:")
    for name in categories:
        bucket_id = index.get(name)
        bucket_str = labels[bucket_id] if bucket_id is not None else "(no bucket)"
        click.echo(f"  {name:<20} {bucket_str}")


@category_group.command("add")
@click.argument("name")
@click.pass_context
def add_category(ctx, name: str):
    """Add a spending category."""
    service = SettingsService(ctx.obj["store"])
    try:
        name = service.add_category(name)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created category '{name}'")


@category_group.command("remove")
@click.argument("name")
@click.pass_context
def remove_category(ctx, name: str):
    """Remove a spending category (existing transactions keep it)."""
    service = SettingsService(ctx.obj["store"])
    try:
        service.remove_category(name)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Removed category '{name}'")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
