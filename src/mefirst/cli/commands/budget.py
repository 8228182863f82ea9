"""Budget bucket commands."""

import click
from mefirst.cli.date_filters import resolve_today
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.budget import BudgetService
from mefirst.domain.errors import DomainError
from mefirst.domain.overview import OverviewService
from mefirst.utils.amount_parser import format_amount, parse_amount


def print_allocation_warning(allocation) -> None:
    if allocation is None:
        return
    if not allocation.balanced:
        click.echo(f"Total: {allocation.total_pct}% (should add up to 100%)")
    else:
        click.echo(f"Total: {allocation.total_pct}%")


def print_bucket_statuses(statuses) -> None:
    for status in statuses:
        bucket = status.bucket
        flag = "OVER" if status.over else ""
        click.echo(
            f"{bucket.id:<3} {bucket.label:<16} {bucket.pct:>5}%  "
            f"{format_amount(status.actual):>9} / {format_amount(status.ideal):<9} {flag}"
        )
        categories = ", ".join(bucket.categories) if bucket.categories else "(no categories)"
        click.echo(f"      {categories}")


@click.group()
def budget_group():
    """Manage budget buckets."""
    pass


@budget_group.command("show")
@click.option("--period", type=int, default=0, show_default=True, help="Pay period index")
@click.option("--today", help="Treat this date as today (YYYY-MM-DD)")
@click.pass_context
def show_budget(ctx, period: int, today: str | None):
    """Show ideal vs. actual spend per bucket for a pay period."""
    overview = OverviewService(ctx.obj["store"]).build_overview(resolve_today(ctx, today), period)
    click.echo(f"Pay period: {overview.period.label}\n")
    print_bucket_statuses(overview.bucket_statuses)
    click.echo()
    print_allocation_warning(overview.allocation)


@budget_group.command("assign")
@click.argument("bucket_id", type=int)
@click.argument("category")
@click.pass_context
def assign_category(ctx, bucket_id: int, category: str):
    """Move CATEGORY into bucket BUCKET_ID (it leaves any other bucket)."""
    service = BudgetService(ctx.obj["store"])
    try:
        service.assign_category(bucket_id, category)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Assigned '{category}' to bucket {bucket_id}")


@budget_group.command("unassign")
@click.argument("bucket_id", type=int)
@click.argument("category")
@click.pass_context
def unassign_category(ctx, bucket_id: int, category: str):
    """Remove CATEGORY from bucket BUCKET_ID."""
    service = BudgetService(ctx.obj["store"])
    try:
        service.unassign_category(bucket_id, category)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Removed '{category}' from bucket {bucket_id}")


@budget_group.command("set")
@click.argument("bucket_id", type=int)
@click.option("--label", help="New bucket label")
@click.option("--pct", help="Share of income in percent (0-100)")
@click.pass_context
def set_bucket(ctx, bucket_id: int, label: str | None, pct: str | None):
    """Change a bucket's label or percentage."""
    service = BudgetService(ctx.obj["store"])
    try:
        bucket = service.update_bucket(
            bucket_id,
            label=label,
            pct=parse_amount(pct) if pct is not None else None,
        )
    except (DomainError, StoreError, ValueError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated bucket {bucket.id}: {bucket.label} {bucket.pct}%")
    print_allocation_warning(service.allocation_status())


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
