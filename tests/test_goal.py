"""Tests for savings goals."""

from datetime import date
from decimal import Decimal

import pytest

from mefirst.cli.main import cli
from mefirst.database.base import StoreError
from mefirst.domain.entities import Goal, TransactionKind
from mefirst.domain.errors import NotFoundError, ValidationError
from mefirst.domain.goal import (
    apply_contribution,
    days_to_goal,
    goal_progress_pct,
    overall_progress,
    replace_contribution,
    revert_contribution,
)


def test_goal_progress_pct():
    assert goal_progress_pct(Goal(1, "Trip", Decimal("1000"), Decimal("250"))) == Decimal("25")
    assert goal_progress_pct(Goal(1, "Trip", Decimal("1000"), Decimal("1500"))) == Decimal("100")


def test_days_to_goal_rounds_up():
    assert days_to_goal(Goal(1, "Trip", Decimal("1000"), Decimal("990"))) == 1
    assert days_to_goal(Goal(1, "Trip", Decimal("300"), Decimal("0"))) == 20
    assert days_to_goal(Goal(1, "Trip", Decimal("300"), Decimal("300"))) == 0


def test_overall_progress():
    goals = [Goal(1, "A", Decimal("1000"), Decimal("500")), Goal(2, "B", Decimal("1000"), Decimal("0"))]
    saved, target, pct = overall_progress(goals)
    assert saved == Decimal("500")
    assert target == Decimal("2000")
    assert pct == Decimal("25")
    assert overall_progress([]) == (0, 0, 0)


def test_apply_and_revert_contribution(make_transaction):
    goals = [Goal(1, "Trip", Decimal("1000"), Decimal("100"))]
    txn = make_transaction(
        date(2026, 3, 1), "200", "Other", TransactionKind.TRANSFER_TO_SAVINGS, linked_goal_id=1
    )

    applied = apply_contribution(goals, txn)
    assert applied[0].current == Decimal("300")
    assert revert_contribution(applied, txn)[0].current == Decimal("100")
    assert goals[0].current == Decimal("100")


def test_revert_never_goes_below_zero(make_transaction):
    goals = [Goal(1, "Trip", Decimal("1000"), Decimal("50"))]
    txn = make_transaction(date(2026, 3, 1), "200", "Other", TransactionKind.INVESTMENT, linked_goal_id=1)
    assert revert_contribution(goals, txn)[0].current == Decimal("0")


def test_expense_never_touches_goals(make_transaction):
    goals = [Goal(1, "Trip", Decimal("1000"), Decimal("50"))]
    txn = make_transaction(date(2026, 3, 1), "200", "Other", linked_goal_id=1)
    assert apply_contribution(goals, txn) == goals


def test_missing_goal_is_skipped_with_warning(make_transaction, caplog):
    goals = [Goal(1, "Trip", Decimal("1000"), Decimal("50"))]
    txn = make_transaction(date(2026, 3, 1), "200", "Other", TransactionKind.INVESTMENT, linked_goal_id=9)

    assert apply_contribution(goals, txn) == goals
    assert "missing goal 9" in caplog.text


def test_replace_contribution_applies_net_change(make_transaction):
    goals = [Goal(1, "Trip", Decimal("1000"), Decimal("50"))]
    old = make_transaction(date(2026, 3, 1), "200", "Other", TransactionKind.INVESTMENT, linked_goal_id=1)
    new = make_transaction(date(2026, 3, 1), "250", "Other", TransactionKind.INVESTMENT, linked_goal_id=1)

    assert replace_contribution(goals, old, new)[0].current == Decimal("100")
    # revert then apply would reset to zero first
    assert apply_contribution(revert_contribution(goals, old), new)[0].current == Decimal("250")


def test_replace_contribution_moves_between_goals(make_transaction):
    goals = [Goal(1, "Trip", Decimal("1000"), Decimal("300")), Goal(2, "Car", Decimal("5000"))]
    old = make_transaction(date(2026, 3, 1), "200", "Other", TransactionKind.INVESTMENT, linked_goal_id=1)
    new = make_transaction(date(2026, 3, 1), "150", "Other", TransactionKind.INVESTMENT, linked_goal_id=2)

    moved = replace_contribution(goals, old, new)
    assert [g.current for g in moved] == [Decimal("100"), Decimal("150")]


def test_replace_contribution_floors_at_zero(make_transaction):
    goals = [Goal(1, "Trip", Decimal("1000"), Decimal("20"))]
    old = make_transaction(date(2026, 3, 1), "200", "Other", TransactionKind.INVESTMENT, linked_goal_id=1)
    new = make_transaction(date(2026, 3, 1), "50", "Dining")

    assert replace_contribution(goals, old, new)[0].current == Decimal("0")


def test_add_and_list_goals(goal_service):
    goal = goal_service.add_goal("Emergency fund", "3000")
    assert goal.id == 1
    assert goal.current == 0
    assert goal_service.list_goals() == [goal]
    assert goal_service.get_goal(1) == goal


def test_add_goal_validates(goal_service):
    with pytest.raises(ValidationError):
        goal_service.add_goal("", "100")
    with pytest.raises(ValidationError):
        goal_service.add_goal("Trip", "0")
    with pytest.raises(ValidationError):
        goal_service.add_goal("Trip", "100", "-5")
    assert goal_service.list_goals() == []


def test_update_and_delete_goal(goal_service):
    goal = goal_service.add_goal("Trip", "1000")
    updated = goal_service.update_goal(goal.id, "Japan trip", "2000", "150")
    assert updated.name == "Japan trip"
    assert goal_service.get_goal(goal.id).current == Decimal("150")

    goal_service.delete_goal(goal.id)
    assert goal_service.get_goal(goal.id) is None
    with pytest.raises(NotFoundError):
        goal_service.delete_goal(goal.id)


def test_goal_commands(cli_runner, temp_store):
    db = ["--db-path", temp_store.database_path]
    result = cli_runner.invoke(cli, [*db, "goal", "add", "--name", "Trip", "--target", "1000"])
    assert result.exit_code == 0
    assert "Created goal 'Trip' (ID: 1)" in result.output

    result = cli_runner.invoke(
        cli,
        [*db, "add", "--category", "Other", "--amount", "250", "--kind", "transfer", "--goal", "1"],
    )
    assert result.exit_code == 0

    result = cli_runner.invoke(cli, [*db, "goal", "list"])
    assert result.exit_code == 0
    assert "€250 / €1,000" in result.output
    assert "~50 days to go" in result.output
    assert "25% of all goals" in result.output


def test_transfer_command_without_goal_fails(cli_runner, temp_store, goal_service):
    goal_service.add_goal("Trip", "1000")

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_store.database_path, "add", "--category", "Other", "--amount", "5", "--kind", "investment"],
    )

    assert result.exit_code == 1
    assert "must be linked to a goal" in result.output


def test_add_goal_refuses_malformed_goals(temp_store, goal_service):
    temp_store.set("goals", [{"id": 1, "name": "Trip"}])

    with pytest.raises(StoreError):
        goal_service.add_goal("Car", "5000")

    assert temp_store.get("goals") == [{"id": 1, "name": "Trip"}]
    assert goal_service.list_goals() == []


def test_goal_add_command_reports_malformed_goals(cli_runner, temp_store):
    temp_store.set("goals", "oops")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_store.database_path, "goal", "add", "--name", "Car", "--target", "5000"]
    )

    assert result.exit_code == 1
    assert "Error: Stored 'goals' is malformed" in result.output
    assert temp_store.get("goals") == "oops"
