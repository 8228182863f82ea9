"""Add transaction command."""

import click
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.entities import TransactionKind
from mefirst.domain.errors import DomainError
from mefirst.domain.transaction import TransactionService
from mefirst.utils.amount_parser import format_amount, parse_amount
from mefirst.utils.date_parser import parse_date

KIND_CHOICES = [kind.value for kind in TransactionKind]


@click.command("add")
@click.option("--category", required=True, help="Spending category (e.g., 'Groceries')")
@click.option("--amount", required=True, help="Amount spent or moved (e.g., 42.50)")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--name", help="Description (defaults to the category)")
@click.option(
    "--kind",
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    default=TransactionKind.EXPENSE.value,
    show_default=True,
    help="Expense, transfer to savings, or investment",
)
@click.option("--goal", "goal_id", type=int, help="Goal ID funded by a transfer or investment")
@click.pass_context
def add_transaction(
    ctx,
    category: str,
    amount: str,
    date: str,
    name: str | None,
    kind: str,
    goal_id: int | None,
):
    """Add a transaction.

    Examples:
        mefirst add --category Groceries --amount 42.50
        mefirst add --category Other --amount 200 --kind transfer --goal 1
    """
    service = TransactionService(ctx.obj["store"])

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = service.add_transaction(
            category=category,
            amount=txn_amount,
            date=txn_date,
            name=name,
            kind=kind.lower(),
            linked_goal_id=goal_id,
        )
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {format_amount(txn.amount)}")
    click.echo(f"  Category: {txn.category}")
    if txn.kind != TransactionKind.EXPENSE:
        click.echo(f"  Kind: {txn.kind.value}")
    if txn.linked_goal_id is not None:
        click.echo(f"  Goal: {txn.linked_goal_id}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
