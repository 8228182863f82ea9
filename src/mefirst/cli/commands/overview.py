"""Overview and payday commands."""

import click
from mefirst.cli.date_filters import resolve_today
from mefirst.cli.commands.budget import print_allocation_warning, print_bucket_statuses
from mefirst.domain.aggregates import largest_category_total
from mefirst.domain.overview import OverviewService
from mefirst.utils.amount_parser import format_amount
from mefirst.utils.date_parser import format_short

BAR_WIDTH = 20


@click.command("overview")
@click.option("--period", type=int, default=0, show_default=True, help="Pay period index (0 = current)")
@click.option("--today", help="Treat this date as today (YYYY-MM-DD)")
@click.option("--buckets", "show_buckets", is_flag=True, help="Also show budget buckets")
@click.pass_context
def overview(ctx, period: int, today: str | None, show_buckets: bool):
    """Show spending for a pay period against what is free to spend."""
    snapshot = OverviewService(ctx.obj["store"]).build_overview(resolve_today(ctx, today), period)

    click.echo(f"Pay period: {snapshot.period.label}")
    click.echo(
        f"Next payday: {format_short(snapshot.next_payday)} "
        f"({snapshot.days_until_payday} days)"
    )
    click.echo(f"Recurring bills: {format_amount(snapshot.recurring_total)}")
    click.echo(f"Free to spend:   {format_amount(snapshot.free_to_spend)}")
    click.echo(f"Spent:           {format_amount(snapshot.period_expense_total)}")
    if snapshot.remaining >= 0:
        click.echo(f"{format_amount(snapshot.remaining)} remaining")
    else:
        click.echo(f"{format_amount(abs(snapshot.remaining))} over budget")

    if snapshot.category_totals:
        click.echo("\nBy category:")
        scale = largest_category_total(snapshot.category_totals)
        totals = sorted(snapshot.category_totals.items(), key=lambda kv: (-kv[1], kv[0]))
        for name, total in totals:
            bar = "#" * int(total / scale * BAR_WIDTH)
            click.echo(f"  {name:<15} {format_amount(total):>9}  {bar}")

    if show_buckets:
        click.echo()
        print_bucket_statuses(snapshot.bucket_statuses)
        print_allocation_warning(snapshot.allocation)


@click.command("payday")
@click.option("--today", help="Treat this date as today (YYYY-MM-DD)")
@click.pass_context
def payday(ctx, today: str | None):
    """Show the next payday."""
    snapshot = OverviewService(ctx.obj["store"]).build_overview(resolve_today(ctx, today))
    click.echo(
        f"Next payday: {snapshot.next_payday.isoformat()} "
        f"({snapshot.next_payday.strftime('%A')}, in {snapshot.days_until_payday} days)"
    )


def register_commands(cli):
    """Register overview commands with main CLI."""
    cli.add_command(overview)
    cli.add_command(payday)
