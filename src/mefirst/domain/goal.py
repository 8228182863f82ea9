"""Savings goals: progress figures and the goal service."""

import math
from dataclasses import replace
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from mefirst.database.base import Store
from mefirst.database.records import Records, next_id
from mefirst.domain.entities import Goal, Transaction
from mefirst.domain.errors import NotFoundError, goal_not_found
from mefirst.domain.validation import require_name, require_non_negative, require_positive
from mefirst.logging_setup import get_logger

logger = get_logger("mefirst.domain.goal")

DAILY_SAVING_PACE = Decimal("15")
ZERO = Decimal("0")


def goal_progress_pct(goal: Goal) -> Decimal:
    """Percentage of the target reached, capped at 100."""
    if goal.target <= 0:
        return ZERO
    return min(goal.current / goal.target * 100, Decimal("100"))


def days_to_goal(goal: Goal, daily_saving: Decimal = DAILY_SAVING_PACE) -> int:
    """Days left at a steady daily saving pace; 0 once the goal is reached."""
    if goal.current >= goal.target or daily_saving <= 0:
        return 0
    return math.ceil((goal.target - goal.current) / daily_saving)


def overall_progress(goals: Iterable[Goal]) -> tuple[Decimal, Decimal, Decimal]:
    """Total saved, total target, and percentage across all goals."""
    goals = list(goals)
    saved = sum((g.current for g in goals), ZERO)
    target = sum((g.target for g in goals), ZERO)
    pct = min(saved / target * 100, Decimal("100")) if target > 0 else ZERO
    return saved, target, pct


def _shift_goal(goals: Sequence[Goal], txn: Transaction, sign: int) -> list[Goal]:
    goals = list(goals)
    if txn.is_expense or txn.linked_goal_id is None:
        return goals
    if not any(g.id == txn.linked_goal_id for g in goals):
        logger.warning(
            "Transaction %s links to missing goal %s; goal balance not updated",
            txn.id,
            txn.linked_goal_id,
        )
        return goals
    return [
        replace(g, current=max(g.current + sign * txn.amount, ZERO))
        if g.id == txn.linked_goal_id
        else g
        for g in goals
    ]


def apply_contribution(goals: Sequence[Goal], txn: Transaction) -> list[Goal]:
    """Add a transfer or investment to its linked goal.

    Expenses never touch goals. A link to a goal that does not exist is skipped.
    """
    return _shift_goal(goals, txn, 1)


def revert_contribution(goals: Sequence[Goal], txn: Transaction) -> list[Goal]:
    """Undo apply_contribution, never taking a goal below zero."""
    return _shift_goal(goals, txn, -1)


def _contribution(txn: Transaction) -> dict[int, Decimal]:
    if txn.is_expense or txn.linked_goal_id is None:
        return {}
    return {txn.linked_goal_id: txn.amount}


def replace_contribution(
    goals: Sequence[Goal], old: Transaction, new: Transaction
) -> list[Goal]:
    """Swap old's goal contribution for new's as one net change per goal.

    Goals are moved by the difference between the two contributions, so a
    balance edited below the old contribution is not reset to zero first.
    The result is still floored at zero.
    """
    delta = {goal_id: -amount for goal_id, amount in _contribution(old).items()}
    for goal_id, amount in _contribution(new).items():
        delta[goal_id] = delta.get(goal_id, ZERO) + amount

    known = {g.id for g in goals}
    for goal_id in delta.keys() - known:
        logger.warning(
            "Transaction %s links to missing goal %s; goal balance not updated",
            new.id,
            goal_id,
        )
    return [
        replace(g, current=max(g.current + delta[g.id], ZERO)) if delta.get(g.id) else g
        for g in goals
    ]


class GoalService:
    """Service for managing savings goals."""

    def __init__(self, store: Store):
        """Initialize goal service.

        Args:
            store: Store instance
        """
        self.store = store
        self.records = Records(store)

    def add_goal(self, name: str, target, current=0) -> Goal:
        """Create a goal.

        Args:
            name: Goal name
            target: Amount to save (must be positive)
            current: Amount already saved

        Returns:
            Created goal

        Raises:
            ValidationError: If the name is empty or the amounts are invalid
        """
        name = require_name(name, "Goal")
        target = require_positive(target, "Target")
        current = require_non_negative(current or 0, "Current")

        goals = self.records.load_goals(strict=True)
        goal = Goal(id=next_id(goals), name=name, target=target, current=current)
        self.records.save_goals([*goals, goal])
        return goal

    def get_goal(self, goal_id: int) -> Optional[Goal]:
        return next((g for g in self.records.load_goals() if g.id == goal_id), None)

    def list_goals(self) -> list[Goal]:
        return self.records.load_goals()

    def update_goal(self, goal_id: int, name: str, target, current) -> Goal:
        """Replace a goal record.

        Raises:
            NotFoundError: If the goal doesn't exist
            ValidationError: If the new values are invalid
        """
        goals = self.records.load_goals(strict=True)
        if not any(g.id == goal_id for g in goals):
            raise NotFoundError(goal_not_found(goal_id))

        goal = Goal(
            id=goal_id,
            name=require_name(name, "Goal"),
            target=require_positive(target, "Target"),
            current=require_non_negative(current, "Current"),
        )
        self.records.save_goals([goal if g.id == goal_id else g for g in goals])
        return goal

    def delete_goal(self, goal_id: int) -> None:
        """Delete a goal.

        Raises:
            NotFoundError: If the goal doesn't exist
        """
        goals = self.records.load_goals(strict=True)
        if not any(g.id == goal_id for g in goals):
            raise NotFoundError(goal_not_found(goal_id))
        self.records.save_goals([g for g in goals if g.id != goal_id])
