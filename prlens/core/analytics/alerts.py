from typing import List, Optional, Sequence, Tuple

from prlens.core.schema.metrics import AlertType, EnrichedPR, ReviewStatus
from prlens.core.schema.pr import CheckConclusion, CheckRun, CheckStatus, Review

STALE_THRESHOLD_DAYS = 3


def is_stale(pr: EnrichedPR) -> bool:
    return pr.age_in_days > STALE_THRESHOLD_DAYS


def has_no_reviewers(pr: EnrichedPR) -> bool:
    return len(pr.requested_reviewers) == 0


def has_failing_checks(checks: Sequence[CheckRun]) -> bool:
    # Queued and in-progress runs carry no signal either way.
    return any(
        check.status is CheckStatus.COMPLETED
        and check.conclusion is CheckConclusion.FAILURE
        for check in checks
    )


def most_recent_review(reviews: Sequence[Review]) -> Optional[Review]:
    if not reviews:
        return None
    return max(reviews, key=lambda review: review.submitted_at)


def has_unaddressed_change_request(pr: EnrichedPR) -> bool:
    if pr.review_status is not ReviewStatus.CHANGES_REQUESTED:
        return False
    last_review = most_recent_review(pr.reviews)
    if last_review is None:
        return False
    return pr.updated_at < last_review.submitted_at


def identify_alerts(pr: EnrichedPR) -> Tuple[AlertType, ...]:
    alerts: List[AlertType] = []
    if is_stale(pr):
        alerts.append(AlertType.STALE)
    if has_no_reviewers(pr):
        alerts.append(AlertType.NO_REVIEWERS)
    if has_failing_checks(pr.checks):
        alerts.append(AlertType.FAILING_CI)
    if has_unaddressed_change_request(pr):
        alerts.append(AlertType.CHANGES_REQUESTED)
    return tuple(alerts)
