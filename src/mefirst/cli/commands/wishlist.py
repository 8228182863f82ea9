"""Wishlist commands."""

import click
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.defaults import WISHLIST_CATEGORIES
from mefirst.domain.errors import DomainError
from mefirst.domain.impulse import DEFAULT_QUIZ, NO, YES
from mefirst.domain.wishlist import WishlistService
from mefirst.utils.amount_parser import format_amount, parse_amount


def parse_quiz_answers(answers: tuple[str, ...]) -> dict[int, str]:
    """Parse "1=yes" style answers (1-based question numbers) into index -> answer."""
    parsed: dict[int, str] = {}
    for answer in answers:
        number, sep, value = answer.partition("=")
        value = value.strip().lower()
        if not sep or not number.strip().isdigit() or value not in (YES, NO):
            raise click.BadParameter(f"'{answer}' should look like 1=yes or 2=no")
        parsed[int(number) - 1] = value
    return parsed


@click.group()
def wishlist_group():
    """Manage the wishlist."""
    pass


@wishlist_group.command("list")
@click.pass_context
def list_items(ctx):
    """List wishlist items with their impulse verdict."""
    verdicts = WishlistService(ctx.obj["store"]).evaluate_items()
    if not verdicts:
        click.echo("Your wishlist is empty.")
        return

    for verdict in verdicts:
        item = verdict.item
        hours = f"{verdict.work_hours}h of work" if verdict.work_hours is not None else ""
        click.echo(
            f"{item.id:<4} {item.name:<24} {format_amount(item.price):>9}  "
            f"{verdict.score:>3.0f} {verdict.label:<15} {item.days_wanted} days  {hours}"
        )


@wishlist_group.command("add")
@click.option("--name", required=True, help="Item name")
@click.option("--price", required=True, help="Price")
@click.option(
    "--category",
    type=click.Choice(WISHLIST_CATEGORIES),
    default="Other",
    show_default=True,
    help="Wishlist category",
)
@click.pass_context
def add_item(ctx, name: str, price: str, category: str):
    """Add an item to the wishlist."""
    service = WishlistService(ctx.obj["store"])
    try:
        item = service.add_item(name, parse_amount(price), category)
    except (DomainError, StoreError, ValueError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added '{item.name}' to wishlist (ID: {item.id})")


@wishlist_group.command("days")
@click.argument("item_id", type=int)
@click.argument("days", type=int)
@click.pass_context
def set_days(ctx, item_id: int, days: int):
    """Set how many days ITEM_ID has been wanted."""
    service = WishlistService(ctx.obj["store"])
    try:
        service.set_days_wanted(item_id, days)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Item {item_id} wanted for {days} days")


@wishlist_group.command("quiz")
@click.argument("item_id", type=int)
@click.option("--answer", "answers", multiple=True, help="Answer as NUMBER=yes|no, once per question")
@click.pass_context
def take_quiz(ctx, item_id: int, answers: tuple[str, ...]):
    """Answer the impulse quiz for ITEM_ID.

    Without --answer the questions are asked interactively.

    Examples:
        mefirst wishlist quiz 1 --answer 1=yes --answer 2=no --answer 3=yes --answer 4=no --answer 5=yes
    """
    service = WishlistService(ctx.obj["store"])
    if answers:
        parsed = parse_quiz_answers(answers)
    else:
        parsed = {
            index: YES if click.confirm(question.text, default=False) else NO
            for index, question in enumerate(DEFAULT_QUIZ)
        }

    try:
        item = service.submit_quiz(item_id, parsed)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Quiz score for '{item.name}': {item.quiz_score:.0f}/10")


@wishlist_group.command("delete")
@click.argument("item_id", type=int)
@click.pass_context
def delete_item(ctx, item_id: int):
    """Remove an item from the wishlist."""
    service = WishlistService(ctx.obj["store"])
    try:
        service.delete_item(item_id)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted wishlist item {item_id}")


def register_commands(cli):
    """Register wishlist commands with main CLI."""
    cli.add_command(wishlist_group, name="wishlist")
