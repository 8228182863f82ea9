"""Recurring expense commands."""

import click
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.errors import DomainError, NotFoundError, recurring_not_found
from mefirst.domain.recurring import RecurringService
from mefirst.utils.amount_parser import format_amount, parse_amount


def _parse_amount_or_exit(ctx, amount: str):
    try:
        return parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


@click.group()
def recurring_group():
    """Manage recurring monthly bills."""
    pass


@recurring_group.command("list")
@click.pass_context
def list_recurring(ctx):
    """List recurring bills and their monthly total."""
    service = RecurringService(ctx.obj["store"])
    recurring = service.list_recurring()
    if not recurring:
        click.echo("No recurring expenses.")
        return

    for r in recurring:
        click.echo(
            f"{r.id:<4} day {r.day_of_month:<3} {r.name:<20} {r.category:<15} "
            f"{format_amount(r.amount):>10}"
        )
    click.echo(f"\nTotal per month: {format_amount(service.total())}")


@recurring_group.command("add")
@click.option("--name", required=True, help="Bill name (e.g., 'Rent')")
@click.option("--category", required=True, help="Spending category")
@click.option("--amount", required=True, help="Monthly amount")
@click.option("--day", "day_of_month", type=int, default=1, show_default=True, help="Due day (1-28)")
@click.pass_context
def add_recurring(ctx, name: str, category: str, amount: str, day_of_month: int):
    """Add a recurring bill."""
    service = RecurringService(ctx.obj["store"])
    value = _parse_amount_or_exit(ctx, amount)
    try:
        expense = service.add_recurring(name, category, value, day_of_month)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created recurring expense '{expense.name}' (ID: {expense.id})")


@recurring_group.command("edit")
@click.argument("recurring_id", type=int)
@click.option("--name", help="Bill name")
@click.option("--category", help="Spending category")
@click.option("--amount", help="Monthly amount")
@click.option("--day", "day_of_month", type=int, help="Due day (1-28)")
@click.pass_context
def edit_recurring(
    ctx,
    recurring_id: int,
    name: str | None,
    category: str | None,
    amount: str | None,
    day_of_month: int | None,
):
    """Edit a recurring bill."""
    service = RecurringService(ctx.obj["store"])
    existing = service.get_recurring(recurring_id)
    if existing is None:
        handle_domain_error(ctx, NotFoundError(recurring_not_found(recurring_id)))

    try:
        service.update_recurring(
            recurring_id,
            name=name if name is not None else existing.name,
            category=category if category is not None else existing.category,
            amount=_parse_amount_or_exit(ctx, amount) if amount is not None else existing.amount,
            day_of_month=day_of_month if day_of_month is not None else existing.day_of_month,
        )
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated recurring expense {recurring_id}")


@recurring_group.command("delete")
@click.argument("recurring_id", type=int)
@click.pass_context
def delete_recurring(ctx, recurring_id: int):
    """Delete a recurring bill."""
    service = RecurringService(ctx.obj["store"])
    try:
        service.delete_recurring(recurring_id)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted recurring expense {recurring_id}")


def register_commands(cli):
    """Register recurring commands with main CLI."""
    cli.add_command(recurring_group, name="recurring")
