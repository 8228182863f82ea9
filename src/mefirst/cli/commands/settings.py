"""Pay settings commands."""

import click
from decimal import Decimal
from mefirst.cli.error_handling import handle_domain_error
from mefirst.database.base import StoreError
from mefirst.domain.errors import DomainError
from mefirst.domain.settings import SettingsService
from mefirst.utils.amount_parser import format_amount, parse_amount


def print_pay_settings(settings) -> None:
    click.echo(f"Monthly income: {format_amount(settings.monthly_income)}")
    click.echo(f"Monthly hours:  {settings.monthly_hours}")
    hourly_rate = settings.hourly_rate.quantize(Decimal("0.01"))
    click.echo(f"Hourly rate:    {format_amount(hourly_rate)}")
    click.echo(f"Payday:         day {settings.payday_day_of_month} of each month")


@click.group()
def settings_group():
    """Manage income and payday settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show pay settings."""
    service = SettingsService(ctx.obj["store"])
    print_pay_settings(service.get_pay_settings())


@settings_group.command("set")
@click.option("--income", help="Monthly take-home income")
@click.option("--hours", help="Hours worked per month")
@click.option("--payday-day", type=int, help="Payday day of month (clamped to 1-28)")
@click.pass_context
def set_settings(ctx, income: str | None, hours: str | None, payday_day: int | None):
    """Update pay settings.

    Examples:
        mefirst settings set --income 3200 --hours 160 --payday-day 25
    """
    service = SettingsService(ctx.obj["store"])
    try:
        settings = service.update_pay_settings(
            monthly_income=parse_amount(income) if income is not None else None,
            monthly_hours=parse_amount(hours) if hours is not None else None,
            payday_day_of_month=payday_day,
        )
    except (DomainError, StoreError, ValueError) as e:
        handle_domain_error(ctx, e)
    click.echo("Updated pay settings")
    print_pay_settings(settings)


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
