"""Mapper functions to convert between domain entities and stored JSON values.

Money is stored as strings so Decimal amounts survive a round trip; plain JSON
numbers are accepted on the way in. Mappers raise on malformed input and leave
the decision to fall back to defaults to the caller.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from mefirst.domain import entities as domain
from mefirst.utils.date_parser import parse_local_date


def _decimal(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Expected a number, got {value!r}")
    try:
        result = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Expected a number, got {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return result


def _money(value: Decimal) -> str:
    return str(value)


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def pay_settings_to_json(settings: domain.PaySettings) -> dict[str, Any]:
    return {
        "monthlyIncome": _money(settings.monthly_income),
        "monthlyHours": _money(settings.monthly_hours),
        "paydayDayOfMonth": settings.payday_day_of_month,
    }


def pay_settings_to_domain(data: dict[str, Any]) -> domain.PaySettings:
    """Convert stored pay settings to a PaySettings entity."""
    return domain.PaySettings(
        monthly_income=_decimal(data["monthlyIncome"]),
        monthly_hours=_decimal(data["monthlyHours"]),
        payday_day_of_month=int(data["paydayDayOfMonth"]),
    )


def transaction_to_json(txn: domain.Transaction) -> dict[str, Any]:
    return {
        "id": txn.id,
        "name": txn.name,
        "category": txn.category,
        "amount": _money(txn.amount),
        "date": txn.date.isoformat(),
        "kind": txn.kind.value if txn.kind is not None else None,
        "linkedGoalId": txn.linked_goal_id,
    }


def transaction_to_domain(data: dict[str, Any]) -> domain.Transaction:
    """Convert a stored transaction to a Transaction entity.

    A missing kind is read as an expense.
    """
    kind = data.get("kind")
    return domain.Transaction(
        id=int(data["id"]),
        name=str(data.get("name") or ""),
        category=str(data["category"]),
        amount=_decimal(data["amount"]),
        date=parse_local_date(data["date"]),
        kind=domain.TransactionKind(kind) if kind else domain.TransactionKind.EXPENSE,
        linked_goal_id=_optional_int(data.get("linkedGoalId")),
    )


def bucket_to_json(bucket: domain.BudgetBucket) -> dict[str, Any]:
    return {
        "id": bucket.id,
        "label": bucket.label,
        "pct": _money(bucket.pct),
        "color": bucket.color,
        "categories": list(bucket.categories),
    }


def bucket_to_domain(data: dict[str, Any]) -> domain.BudgetBucket:
    """Convert a stored bucket to a BudgetBucket entity."""
    categories = data.get("categories") or []
    if not isinstance(categories, list):
        raise ValueError(f"Bucket categories must be a list, got {categories!r}")
    return domain.BudgetBucket(
        id=int(data["id"]),
        label=str(data["label"]),
        pct=_decimal(data["pct"]),
        color=str(data.get("color") or ""),
        categories=tuple(str(c) for c in categories),
    )


def recurring_to_json(recurring: domain.RecurringExpense) -> dict[str, Any]:
    return {
        "id": recurring.id,
        "name": recurring.name,
        "category": recurring.category,
        "amount": _money(recurring.amount),
        "dayOfMonth": recurring.day_of_month,
    }


def recurring_to_domain(data: dict[str, Any]) -> domain.RecurringExpense:
    """Convert a stored recurring expense to a RecurringExpense entity."""
    return domain.RecurringExpense(
        id=int(data["id"]),
        name=str(data["name"]),
        category=str(data["category"]),
        amount=_decimal(data["amount"]),
        day_of_month=domain.clamp_payday_day(data.get("dayOfMonth", 1)),
    )


def goal_to_json(goal: domain.Goal) -> dict[str, Any]:
    return {
        "id": goal.id,
        "name": goal.name,
        "target": _money(goal.target),
        "current": _money(goal.current),
    }


def goal_to_domain(data: dict[str, Any]) -> domain.Goal:
    """Convert a stored goal to a Goal entity."""
    return domain.Goal(
        id=int(data["id"]),
        name=str(data["name"]),
        target=_decimal(data["target"]),
        current=_decimal(data.get("current", 0)),
    )


def wishlist_item_to_json(item: domain.WishlistItem) -> dict[str, Any]:
    answers = None
    if item.last_quiz_answers is not None:
        answers = {str(k): v for k, v in item.last_quiz_answers.items()}
    return {
        "id": item.id,
        "name": item.name,
        "price": _money(item.price),
        "category": item.category,
        "daysWanted": item.days_wanted,
        "quizScore": item.quiz_score,
        "lastQuizAnswers": answers,
    }


def wishlist_item_to_domain(data: dict[str, Any]) -> domain.WishlistItem:
    """Convert a stored wishlist item to a WishlistItem entity.

    JSON object keys are strings, so quiz answer indexes are turned back into ints.
    """
    answers = data.get("lastQuizAnswers")
    quiz_score = data.get("quizScore")
    return domain.WishlistItem(
        id=int(data["id"]),
        name=str(data["name"]),
        price=_decimal(data["price"]),
        category=str(data.get("category") or ""),
        days_wanted=max(int(data.get("daysWanted", 0)), 0),
        quiz_score=None if quiz_score is None else float(quiz_score),
        last_quiz_answers=(
            {int(k): str(v) for k, v in answers.items()} if answers else None
        ),
    )
