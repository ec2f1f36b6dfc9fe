from dataclasses import replace
from datetime import datetime
from typing import Sequence

from prlens.core.analytics.alerts import identify_alerts
from prlens.core.analytics.review_state import determine_review_status
from prlens.core.analytics.time_metrics import (
    calculate_pr_age,
    calculate_time_in_review,
)
from prlens.core.schema.metrics import EnrichedPR
from prlens.core.schema.pr import CheckRun, PullRequest, RepositoryRef, Review


def enrich_pr(
    pr: PullRequest,
    repository: RepositoryRef,
    reviews: Sequence[Review],
    checks: Sequence[CheckRun],
    now: datetime,
) -> EnrichedPR:
    age = calculate_pr_age(pr.created_at, now)
    time_in_review = calculate_time_in_review(pr.created_at, reviews)
    enriched = EnrichedPR(
        pull_request=pr,
        repository=repository.name,
        owner=repository.owner,
        age_in_days=age.days,
        age_in_hours=age.hours,
        time_in_review_hours=time_in_review.hours,
        first_review_at=time_in_review.first_review_at,
        review_status=determine_review_status(reviews),
        reviews=tuple(reviews),
        checks=tuple(checks),
    )
    return replace(enriched, alerts=identify_alerts(enriched))
