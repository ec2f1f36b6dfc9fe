import datetime as dt
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Mapping, Optional, Tuple

from prlens.core.schema.pr import CheckRun, GitHubUser, PullRequest, Review


class ReviewStatus(str, Enum):
    NO_REVIEWS = "no_reviews"
    CHANGES_REQUESTED = "changes_requested"
    APPROVED = "approved"
    PENDING = "pending"


class AlertType(str, Enum):
    STALE = "stale"
    NO_REVIEWERS = "no_reviewers"
    FAILING_CI = "failing_ci"
    CHANGES_REQUESTED = "changes_requested"


@dataclass(frozen=True, slots=True)
class PRAge:
    days: int
    hours: int


@dataclass(frozen=True, slots=True)
class TimeInReview:
    hours: Optional[int]
    first_review_at: Optional[datetime]


@dataclass(frozen=True, slots=True)
class EnrichedPR:
    pull_request: PullRequest
    repository: str
    owner: str
    age_in_days: int
    age_in_hours: int
    time_in_review_hours: Optional[int]
    first_review_at: Optional[datetime]
    review_status: ReviewStatus
    reviews: Tuple[Review, ...]
    checks: Tuple[CheckRun, ...]
    alerts: Tuple[AlertType, ...] = ()

    @property
    def number(self) -> int:
        return self.pull_request.number

    @property
    def updated_at(self) -> datetime:
        return self.pull_request.updated_at

    @property
    def requested_reviewers(self) -> Tuple[GitHubUser, ...]:
        return self.pull_request.requested_reviewers


@dataclass(frozen=True, slots=True)
class AgingDistribution:
    less_than_one_day: int = 0
    one_to_three_days: int = 0
    three_to_seven_days: int = 0
    more_than_seven_days: int = 0

    @property
    def total(self) -> int:
        return (
            self.less_than_one_day
            + self.one_to_three_days
            + self.three_to_seven_days
            + self.more_than_seven_days
        )


@dataclass(frozen=True, slots=True)
class ApprovalTrendPoint:
    date: dt.date
    average_approval_time: float
    total_approved: int


@dataclass(frozen=True, slots=True)
class ReviewStats:
    average_review_time_hours: float
    average_review_time_by_repo: Mapping[str, float]
    pr_aging_distribution: AgingDistribution
    review_load_by_member: Mapping[str, int]
    approval_trends: Tuple[ApprovalTrendPoint, ...]
    total_open_prs: int
    total_alerts: int
    alerts_by_type: Mapping[AlertType, int]
