"""Tests for budget buckets."""

from datetime import date
from decimal import Decimal

import pytest

from mefirst.cli.main import cli
from mefirst.database.base import StoreError
from mefirst.domain.allocation import category_index
from mefirst.domain.errors import NotFoundError, ValidationError


def test_default_buckets(budget_service):
    buckets = budget_service.list_buckets()
    assert [b.label for b in buckets] == [
        "Savings",
        "Home & Bills",
        "Transport",
        "Groceries",
        "Personal & Fun",
        "Investments",
    ]
    assert budget_service.allocation_status().balanced


def test_assign_moves_and_persists(budget_service):
    budget_service.assign_category(3, "Dining")

    index = category_index(budget_service.list_buckets())
    assert index["Dining"] == 3
    assert "Dining" not in budget_service.get_bucket(5).categories


def test_assign_unknown_bucket(budget_service):
    with pytest.raises(NotFoundError):
        budget_service.assign_category(99, "Dining")


def test_assign_unknown_category(budget_service):
    with pytest.raises(ValidationError):
        budget_service.assign_category(1, "Yachts")


def test_unassign(budget_service):
    budget_service.unassign_category(2, "Home")
    assert budget_service.get_bucket(2).categories == ()
    assert 2 in budget_service.allocation_status().empty_bucket_ids


def test_update_bucket_pct(budget_service):
    bucket = budget_service.set_percentage(1, "25")
    assert bucket.pct == Decimal("25")
    assert bucket.label == "Savings"

    status = budget_service.allocation_status()
    assert status.total_pct == Decimal("105")
    assert not status.balanced


def test_update_bucket_rejects_out_of_range(budget_service):
    with pytest.raises(ValidationError):
        budget_service.update_bucket(1, pct="120")
    assert budget_service.get_bucket(1).pct == Decimal("20")


def test_bucket_statuses(budget_service, settings_service, transaction_service):
    settings_service.update_pay_settings(monthly_income="2000")
    transaction_service.add_transaction("Transport", "250", date(2026, 3, 1))

    statuses = {s.bucket.id: s for s in budget_service.bucket_statuses(transaction_service.list_transactions())}
    assert statuses[3].ideal == Decimal("200")
    assert statuses[3].actual == Decimal("250")
    assert statuses[3].over
    assert not statuses[4].over


def test_budget_show_command(cli_runner, temp_store, settings_service):
    settings_service.update_pay_settings(monthly_income="3000")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_store.database_path, "budget", "show", "--today", "2026-10-19"]
    )

    assert result.exit_code == 0
    assert "Pay period: 1 Oct – 30 Oct" in result.output
    assert "Home & Bills" in result.output
    assert "€900" in result.output
    assert "Total: 100%" in result.output


def test_budget_assign_command(cli_runner, temp_store, budget_service):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_store.database_path, "budget", "assign", "4", "Dining"]
    )

    assert result.exit_code == 0
    assert "Dining" in budget_service.get_bucket(4).categories


def test_budget_set_command_warns(cli_runner, temp_store):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_store.database_path, "budget", "set", "6", "--pct", "5"]
    )

    assert result.exit_code == 0
    assert "should add up to 100%" in result.output


def test_assign_refuses_malformed_buckets(temp_store, budget_service):
    temp_store.set("budget", [{"id": "x"}])

    with pytest.raises(StoreError):
        budget_service.assign_category(1, "Dining")

    assert temp_store.get("budget") == [{"id": "x"}]
    assert budget_service.allocation_status().balanced


def test_budget_set_command_reports_malformed_buckets(cli_runner, temp_store):
    temp_store.set("budget", {"not": "a list"})

    result = cli_runner.invoke(
        cli, ["--db-path", temp_store.database_path, "budget", "set", "1", "--pct", "25"]
    )

    assert result.exit_code == 1
    assert "Error: Stored 'budget' is malformed" in result.output
