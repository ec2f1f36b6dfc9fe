from datetime import datetime, timedelta
from typing import Sequence

from prlens.core.schema.metrics import PRAge, TimeInReview
from prlens.core.schema.pr import Review, ReviewState

SUBSTANTIVE_REVIEW_STATES = frozenset(
    {ReviewState.APPROVED, ReviewState.CHANGES_REQUESTED}
)

_HOUR = timedelta(hours=1)
_DAY = timedelta(days=1)


def whole_hours_between(start: datetime, end: datetime) -> int:
    return int((end - start) / _HOUR)


def whole_days_between(start: datetime, end: datetime) -> int:
    return int((end - start) / _DAY)


def calculate_pr_age(created_at: datetime, now: datetime) -> PRAge:
    # Truncates toward zero; future timestamps yield negative values.
    return PRAge(
        days=whole_days_between(created_at, now),
        hours=whole_hours_between(created_at, now),
    )


def is_substantive(review: Review) -> bool:
    return review.state in SUBSTANTIVE_REVIEW_STATES


def calculate_time_in_review(
    created_at: datetime,
    reviews: Sequence[Review],
) -> TimeInReview:
    substantive = [review for review in reviews if is_substantive(review)]
    if not substantive:
        return TimeInReview(hours=None, first_review_at=None)

    first_review = min(substantive, key=lambda review: review.submitted_at)
    return TimeInReview(
        hours=whole_hours_between(created_at, first_review.submitted_at),
        first_review_at=first_review.submitted_at,
    )
