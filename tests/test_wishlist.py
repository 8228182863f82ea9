"""Tests for the wishlist."""

import pytest

from mefirst.cli.main import cli
from mefirst.domain.errors import NotFoundError, ValidationError

ALL_ANSWERED = {0: "yes", 1: "yes", 2: "yes", 3: "no", 4: "no"}


def test_new_item_starts_unscored(wishlist_service):
    item = wishlist_service.add_item("Boots", "180", "Fashion")

    assert item.days_wanted == 0
    assert item.quiz_score is None
    verdict = wishlist_service.evaluate_items()[0]
    assert verdict.score == pytest.approx(15)
    assert verdict.label == "Impulse buy"


def test_add_item_validation(wishlist_service):
    with pytest.raises(ValidationError):
        wishlist_service.add_item("Boots", "0")
    with pytest.raises(ValidationError):
        wishlist_service.add_item("Boots", "10", "Groceries")


def test_quiz_stores_score_and_answers(wishlist_service):
    item = wishlist_service.add_item("Boots", "180", "Fashion")
    updated = wishlist_service.submit_quiz(item.id, ALL_ANSWERED)

    assert updated.quiz_score == 8
    assert wishlist_service.get_item(item.id).last_quiz_answers == ALL_ANSWERED


def test_incomplete_quiz_rejected(wishlist_service):
    item = wishlist_service.add_item("Boots", "180", "Fashion")
    with pytest.raises(ValidationError):
        wishlist_service.submit_quiz(item.id, {0: "yes"})
    assert wishlist_service.get_item(item.id).quiz_score is None


def test_days_wanted_and_score(wishlist_service):
    item = wishlist_service.add_item("Boots", "180", "Fashion")
    wishlist_service.set_days_wanted(item.id, 45)
    wishlist_service.submit_quiz(item.id, ALL_ANSWERED)

    verdict = wishlist_service.evaluate_items()[0]
    assert verdict.score == pytest.approx(65)
    assert verdict.label == "Getting there"

    with pytest.raises(ValidationError):
        wishlist_service.set_days_wanted(item.id, -1)


def test_work_hours_from_pay_settings(wishlist_service, settings_service):
    settings_service.update_pay_settings(monthly_income="3200", monthly_hours="160")
    wishlist_service.add_item("Boots", "150", "Fashion")
    assert str(wishlist_service.evaluate_items()[0].work_hours) == "7.5"


def test_delete_item(wishlist_service):
    item = wishlist_service.add_item("Boots", "180", "Fashion")
    wishlist_service.delete_item(item.id)
    assert wishlist_service.list_items() == []
    with pytest.raises(NotFoundError):
        wishlist_service.delete_item(item.id)


def test_quiz_command_with_answers(cli_runner, temp_store, wishlist_service):
    wishlist_service.add_item("Boots", "180", "Fashion")

    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_store.database_path,
            "wishlist",
            "quiz",
            "1",
            "--answer",
            "1=yes",
            "--answer",
            "2=yes",
            "--answer",
            "3=yes",
            "--answer",
            "4=no",
            "--answer",
            "5=no",
        ],
    )

    assert result.exit_code == 0
    assert "8/10" in result.output


def test_quiz_command_interactive(cli_runner, temp_store, wishlist_service):
    wishlist_service.add_item("Boots", "180", "Fashion")

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_store.database_path, "wishlist", "quiz", "1"],
        input="n\nn\nn\nn\nn\n",
    )

    assert result.exit_code == 0
    assert "5/10" in result.output


def test_quiz_command_bad_answer(cli_runner, temp_store, wishlist_service):
    wishlist_service.add_item("Boots", "180", "Fashion")

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_store.database_path, "wishlist", "quiz", "1", "--answer", "1=maybe"],
    )
    assert result.exit_code == 2


def test_wishlist_list_command(cli_runner, temp_store, wishlist_service):
    wishlist_service.add_item("Boots", "180", "Fashion")

    result = cli_runner.invoke(cli, ["--db-path", temp_store.database_path, "wishlist", "list"])
    assert result.exit_code == 0
    assert "Boots" in result.output
    assert "Impulse buy" in result.output
