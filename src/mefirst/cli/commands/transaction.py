"""Transaction management commands."""

import click
from datetime import date as date_type
from mefirst.cli.commands.add import KIND_CHOICES
from mefirst.cli.date_filters import resolve_cli_date_range, resolve_today
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.entities import TransactionKind
from mefirst.domain.errors import DomainError, NotFoundError, transaction_not_found
from mefirst.domain.overview import OverviewService
from mefirst.domain.transaction import TransactionService
from mefirst.utils.amount_parser import format_amount, parse_amount
from mefirst.utils.date_parser import parse_date


def print_transactions(transactions) -> None:
    click.echo(f"{'ID':<5} {'Date':<12} {'Category':<15} {'Kind':<11} {'Amount':>10}  Name")
    click.echo("-" * 70)
    for txn in transactions:
        kind = txn.kind.value if txn.kind else TransactionKind.EXPENSE.value
        click.echo(
            f"{txn.id:<5} {txn.date.isoformat():<12} {txn.category:<15} "
            f"{kind:<11} {format_amount(txn.amount):>10}  {txn.name}"
        )


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--period", type=int, help="Pay period index (0 = current, 1 = previous, ...)")
@click.option("--today", help="Treat this date as today when resolving pay periods")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--category", help="Only this category")
@click.option("--kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Only this kind")
@click.pass_context
def list_transactions(
    ctx,
    period: int | None,
    today: str | None,
    start_date: str | None,
    end_date: str | None,
    category: str | None,
    kind: str | None,
):
    """List transactions, newest first.

    Examples:
        mefirst transaction list --period 0
        mefirst transaction list --start-date "last month" --category Dining
    """
    store = ctx.obj["store"]
    service = TransactionService(store)

    if period is not None and (start_date or end_date):
        click.echo("Error: --period cannot be combined with --start-date or --end-date.", err=True)
        ctx.exit(1)

    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date)
    if period is not None:
        overview = OverviewService(store).build_overview(resolve_today(ctx, today), period)
        start, end = overview.period.start_date, overview.period.end_date
        click.echo(f"Pay period: {overview.period.label}")

    transactions = service.list_transactions(
        start_date=start,
        end_date=end,
        category=category,
        kind=TransactionKind(kind.lower()) if kind else None,
    )
    if not transactions:
        click.echo("No transactions found.")
        return
    print_transactions(transactions)


@transaction_group.command("edit")
@click.argument("transaction_id", type=int)
@click.option("--category", help="Spending category")
@click.option("--amount", help="Amount")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--name", help="Description")
@click.option("--kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Kind")
@click.option("--goal", "goal_id", type=int, help="Linked goal ID")
@click.pass_context
def edit_transaction(
    ctx,
    transaction_id: int,
    category: str | None,
    amount: str | None,
    date: str | None,
    name: str | None,
    kind: str | None,
    goal_id: int | None,
):
    """Edit a transaction.

    Fields not given keep their current value; the record is then replaced as a whole.

    Examples:
        mefirst transaction edit 3 --amount 55
    """
    service = TransactionService(ctx.obj["store"])
    existing = service.get_transaction(transaction_id)
    if existing is None:
        handle_domain_error(ctx, NotFoundError(transaction_not_found(transaction_id)))

    txn_date: date_type = existing.date
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    txn_amount = existing.amount
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id,
            category=category if category is not None else existing.category,
            amount=txn_amount,
            date=txn_date,
            name=name if name is not None else existing.name,
            kind=kind.lower() if kind is not None else existing.kind,
            linked_goal_id=goal_id if goal_id is not None else existing.linked_goal_id,
        )
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int):
    """Delete a transaction."""
    service = TransactionService(ctx.obj["store"])
    try:
        service.delete_transaction(transaction_id)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
