from datetime import date, datetime, timedelta
from typing import List, Sequence, Tuple

from prlens.core.schema.metrics import (
    ApprovalTrendPoint,
    EnrichedPR,
    ReviewStatus,
)

DEFAULT_TREND_DAYS = 30


def _calendar_date(value: datetime, now: datetime) -> date:
    if value.tzinfo is not None and now.tzinfo is not None:
        value = value.astimezone(now.tzinfo)
    return value.date()


def calculate_approval_trends(
    closed_prs: Sequence[EnrichedPR],
    now: datetime,
    days: int = DEFAULT_TREND_DAYS,
) -> Tuple[ApprovalTrendPoint, ...]:
    """Daily approval counts and mean approval time, oldest day first.

    Always returns exactly ``days`` points. A PR lands on the calendar day
    of its last update, in the timezone of ``now``.
    """
    approved_by_day = {}
    for pr in closed_prs:
        if pr.review_status is not ReviewStatus.APPROVED:
            continue
        day = _calendar_date(pr.updated_at, now)
        approved_by_day.setdefault(day, []).append(pr)

    today = now.date()
    points: List[ApprovalTrendPoint] = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        approved = approved_by_day.get(day, [])
        total = len(approved)
        average = (
            sum(pr.time_in_review_hours or 0 for pr in approved) / total
            if total
            else 0
        )
        points.append(
            ApprovalTrendPoint(
                date=day,
                average_approval_time=average,
                total_approved=total,
            )
        )
    return tuple(points)
