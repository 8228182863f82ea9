"""CLI helpers for date resolution."""

from datetime import date

import click

from mefirst.utils.date_parser import parse_date


def resolve_cli_date(ctx, value: str | None, label: str) -> date | None:
    """Parse an optional CLI date, or exit with an error."""
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def resolve_today(ctx, today: str | None) -> date:
    """Resolve the --today override, defaulting to the real date."""
    return resolve_cli_date(ctx, today, "today date") or date.today()


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
) -> tuple[date | None, date | None]:
    """Resolve an inclusive CLI date range from explicit dates."""
    start = resolve_cli_date(ctx, start_date, "start date")
    end = resolve_cli_date(ctx, end_date, "end date")

    if start is not None and end is not None and start > end:
        click.echo("Error: --start-date must not be after --end-date.", err=True)
        ctx.exit(1)

    return start, end
