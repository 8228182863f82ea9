"""Savings goal commands."""

import click
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.errors import DomainError, NotFoundError, goal_not_found
from mefirst.domain.goal import GoalService, days_to_goal, goal_progress_pct, overall_progress
from mefirst.utils.amount_parser import format_amount, parse_amount


def _parse_amount_or_exit(ctx, amount: str, label: str):
    try:
        return parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group()
def goal_group():
    """Manage savings goals."""
    pass


@goal_group.command("list")
@click.pass_context
def list_goals(ctx):
    """List goals with progress."""
    goals = GoalService(ctx.obj["store"]).list_goals()
    if not goals:
        click.echo("No goals yet. Create one with 'goal add'.")
        return

    for goal in goals:
        pct = goal_progress_pct(goal)
        days = days_to_goal(goal)
        eta = "reached" if days == 0 else f"~{days} days to go"
        click.echo(
            f"{goal.id:<4} {goal.name:<20} {format_amount(goal.current):>9} / "
            f"{format_amount(goal.target):<9} {pct:>4.0f}%  {eta}"
        )

    saved, target, pct = overall_progress(goals)
    click.echo(f"\nSaved {format_amount(saved)} of {format_amount(target)} ({pct:.0f}% of all goals)")


@goal_group.command("add")
@click.option("--name", required=True, help="Goal name")
@click.option("--target", required=True, help="Amount to save")
@click.option("--current", default="0", show_default=True, help="Amount already saved")
@click.pass_context
def add_goal(ctx, name: str, target: str, current: str):
    """Create a savings goal."""
    service = GoalService(ctx.obj["store"])
    target_value = _parse_amount_or_exit(ctx, target, "target")
    current_value = _parse_amount_or_exit(ctx, current, "current amount")
    try:
        goal = service.add_goal(name, target_value, current_value)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created goal '{goal.name}' (ID: {goal.id})")


@goal_group.command("edit")
@click.argument("goal_id", type=int)
@click.option("--name", help="Goal name")
@click.option("--target", help="Amount to save")
@click.option("--current", help="Amount already saved")
@click.pass_context
def edit_goal(ctx, goal_id: int, name: str | None, target: str | None, current: str | None):
    """Edit a savings goal."""
    service = GoalService(ctx.obj["store"])
    existing = service.get_goal(goal_id)
    if existing is None:
        handle_domain_error(ctx, NotFoundError(goal_not_found(goal_id)))

    try:
        service.update_goal(
            goal_id,
            name=name if name is not None else existing.name,
            target=_parse_amount_or_exit(ctx, target, "target") if target is not None else existing.target,
            current=(
                _parse_amount_or_exit(ctx, current, "current amount")
                if current is not None
                else existing.current
            ),
        )
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated goal {goal_id}")


@goal_group.command("delete")
@click.argument("goal_id", type=int)
@click.pass_context
def delete_goal(ctx, goal_id: int):
    """Delete a savings goal."""
    service = GoalService(ctx.obj["store"])
    try:
        service.delete_goal(goal_id)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted goal {goal_id}")


def register_commands(cli):
    """Register goal commands with main CLI."""
    cli.add_command(goal_group, name="goal")
