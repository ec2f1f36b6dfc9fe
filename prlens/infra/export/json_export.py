import json
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from prlens.core.schema.metrics import (
    AgingDistribution,
    ApprovalTrendPoint,
    EnrichedPR,
    ReviewStats,
)
from prlens.core.schema.pr import CheckRun, GitHubUser, PullRequest, Review


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def user_to_dict(user: GitHubUser) -> Dict[str, Any]:
    return {"login": user.login, "avatar_url": user.avatar_url}


def review_to_dict(review: Review) -> Dict[str, Any]:
    return {
        "id": review.id,
        "user": user_to_dict(review.user),
        "state": review.state.value,
        "submitted_at": _timestamp(review.submitted_at),
    }


def check_run_to_dict(check: CheckRun) -> Dict[str, Any]:
    return {
        "status": check.status.value,
        "conclusion": check.conclusion.value if check.conclusion else None,
        "name": check.name,
    }


def pull_request_to_dict(pr: PullRequest) -> Dict[str, Any]:
    return {
        "id": pr.id,
        "number": pr.number,
        "title": pr.title,
        "html_url": pr.html_url,
        "state": pr.state.value,
        "created_at": _timestamp(pr.created_at),
        "updated_at": _timestamp(pr.updated_at),
        "user": user_to_dict(pr.user),
        "requested_reviewers": [user_to_dict(u) for u in pr.requested_reviewers],
        "assignees": [user_to_dict(u) for u in pr.assignees],
        "labels": [{"name": label.name, "color": label.color} for label in pr.labels],
        "comments": pr.comments,
        "head": {"ref": pr.head.ref, "sha": pr.head.sha},
        "base": {"ref": pr.base.ref, "sha": pr.base.sha},
    }


def enriched_pr_to_dict(pr: EnrichedPR) -> Dict[str, Any]:
    data = pull_request_to_dict(pr.pull_request)
    data.update(
        {
            "repository": pr.repository,
            "owner": pr.owner,
            "ageInDays": pr.age_in_days,
            "ageInHours": pr.age_in_hours,
            "timeInReviewHours": pr.time_in_review_hours,
            "firstReviewAt": _timestamp(pr.first_review_at),
            "reviewStatus": pr.review_status.value,
            "reviews": [review_to_dict(review) for review in pr.reviews],
            "checks": [check_run_to_dict(check) for check in pr.checks],
            "alerts": [alert.value for alert in pr.alerts],
        }
    )
    return data


def aging_distribution_to_dict(distribution: AgingDistribution) -> Dict[str, int]:
    return {
        "lessThanOneDay": distribution.less_than_one_day,
        "oneToThreeDays": distribution.one_to_three_days,
        "threeToSevenDays": distribution.three_to_seven_days,
        "moreThanSevenDays": distribution.more_than_seven_days,
    }


def trend_point_to_dict(point: ApprovalTrendPoint) -> Dict[str, Any]:
    return {
        "date": point.date.isoformat(),
        "averageApprovalTime": point.average_approval_time,
        "totalApproved": point.total_approved,
    }


def review_stats_to_dict(stats: ReviewStats) -> Dict[str, Any]:
    return {
        "averageReviewTimeHours": stats.average_review_time_hours,
        "averageReviewTimeByRepo": dict(stats.average_review_time_by_repo),
        "prAgingDistribution": aging_distribution_to_dict(
            stats.pr_aging_distribution
        ),
        "reviewLoadByMember": dict(stats.review_load_by_member),
        "approvalTrends": [trend_point_to_dict(p) for p in stats.approval_trends],
        "totalOpenPRs": stats.total_open_prs,
        "totalAlerts": stats.total_alerts,
        "alertsByType": {
            alert.value: count for alert, count in stats.alerts_by_type.items()
        },
    }


def dump_json(payload: Any, indent: int | None = 2) -> str:
    return json.dumps(payload, indent=indent)


def dump_stats(stats: ReviewStats) -> str:
    return dump_json({"stats": review_stats_to_dict(stats)})


def dump_prs(prs: Sequence[EnrichedPR]) -> str:
    return dump_json({"prs": [enriched_pr_to_dict(pr) for pr in prs]})


def dump_reviews(reviews: Sequence[Review]) -> str:
    return dump_json({"reviews": [review_to_dict(review) for review in reviews]})
