from typing import Dict, Iterable, Sequence

from prlens.core.schema.metrics import ReviewStatus
from prlens.core.schema.pr import Review, ReviewState


def latest_reviews_by_user(reviews: Iterable[Review]) -> Dict[str, Review]:
    """Keep each reviewer's most recent review.

    A later review replaces the kept one only when it is strictly newer, so
    equal timestamps keep whichever review was seen first.
    """
    latest: Dict[str, Review] = {}
    for review in reviews:
        kept = latest.get(review.user.login)
        if kept is None or review.submitted_at > kept.submitted_at:
            latest[review.user.login] = review
    return latest


def determine_review_status(reviews: Sequence[Review]) -> ReviewStatus:
    if not reviews:
        return ReviewStatus.NO_REVIEWS

    states = {review.state for review in latest_reviews_by_user(reviews).values()}
    if ReviewState.CHANGES_REQUESTED in states:
        return ReviewStatus.CHANGES_REQUESTED
    if ReviewState.APPROVED in states:
        return ReviewStatus.APPROVED
    return ReviewStatus.PENDING
