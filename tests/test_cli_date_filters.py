"""Tests for CLI date helpers."""

from datetime import date

import click
import pytest

from mefirst.cli.date_filters import resolve_cli_date, resolve_cli_date_range, resolve_today


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(_ctx(), start_date="2026-01-02", end_date="2026-01-05")

    assert start == date(2026, 1, 2)
    assert end == date(2026, 1, 5)


def test_resolve_cli_date_range_open_ended():
    assert resolve_cli_date_range(_ctx(), start_date=None, end_date=None) == (None, None)


def test_resolve_cli_date_range_rejects_reversed_range(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), start_date="2026-02-01", end_date="2026-01-01")

    assert excinfo.value.exit_code == 1
    assert "must not be after" in capsys.readouterr().err


def test_resolve_cli_date_rejects_garbage(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date(_ctx(), "2026-02-30", "start date")

    assert "Invalid start date" in capsys.readouterr().err


def test_resolve_today():
    assert resolve_today(_ctx(), None) == date.today()
    assert resolve_today(_ctx(), "2026-10-19") == date(2026, 10, 19)
