"""Wishlist impulse scoring."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Optional, Sequence

from mefirst.domain.entities import (
    ImpulseVerdict,
    PaySettings,
    QuizQuestion,
    WishlistItem,
)

FULL_DESIRE_DAYS = 90
NO_QUIZ_WEIGHT = 0.3
QUIZ_BASE_SCORE = 5
QUIZ_MIN_SCORE = 0
QUIZ_MAX_SCORE = 10
YES = "yes"
NO = "no"

DEFAULT_QUIZ: tuple[QuizQuestion, ...] = (
    QuizQuestion("Will you use this at least once a week?", 3),
    QuizQuestion("Do you already own something similar?", -2),
    QuizQuestion("Will it improve your daily life?", 2),
    QuizQuestion("Is this replacing something broken?", 2),
    QuizQuestion("Would you still want it in 3 months?", 3),
)

# (exclusive upper bound, label), checked in order
LABEL_TIERS: tuple[tuple[float, str], ...] = (
    (30, "Impulse buy"),
    (55, "Think it over"),
    (75, "Getting there"),
)
TOP_LABEL = "You deserve it"


def impulse_score(days_wanted: int, quiz_score: Optional[float]) -> float:
    """Score 0-100: half from time wanted (capped at 90 days), half from the quiz.

    Items without a quiz count as 0.3 on the quiz half.
    """
    time_component = min(max(days_wanted, 0) / FULL_DESIRE_DAYS, 1)
    quiz_component = quiz_score / QUIZ_MAX_SCORE if quiz_score is not None else NO_QUIZ_WEIGHT
    score = (time_component * 0.5 + quiz_component * 0.5) * 100
    return max(0.0, min(score, 100.0))


def impulse_label(score: float) -> str:
    for upper, label in LABEL_TIERS:
        if score < upper:
            return label
    return TOP_LABEL


def quiz_verdict(
    answers: Mapping[int, str],
    questions: Sequence[QuizQuestion] = DEFAULT_QUIZ,
) -> int:
    """Base 5 plus the weight of every "yes", clamped to 0-10.

    Unanswered questions count as "no", so a partial answer set is accepted.
    """
    score = QUIZ_BASE_SCORE
    for index, question in enumerate(questions):
        if answers.get(index) == YES:
            score += question.weight
    return max(QUIZ_MIN_SCORE, min(score, QUIZ_MAX_SCORE))


def quiz_complete(
    answers: Mapping[int, str],
    questions: Sequence[QuizQuestion] = DEFAULT_QUIZ,
) -> bool:
    """True when every question has a yes/no answer."""
    return all(answers.get(index) in (YES, NO) for index in range(len(questions)))


def work_hours(price: Decimal, pay_settings: PaySettings) -> Optional[Decimal]:
    """Price expressed in hours of work, or None without an hourly rate."""
    rate = pay_settings.hourly_rate
    if rate <= 0:
        return None
    return (Decimal(price) / rate).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def evaluate(item: WishlistItem, pay_settings: Optional[PaySettings] = None) -> ImpulseVerdict:
    score = impulse_score(item.days_wanted, item.quiz_score)
    return ImpulseVerdict(
        item=item,
        score=score,
        label=impulse_label(score),
        work_hours=work_hours(item.price, pay_settings) if pay_settings else None,
    )
