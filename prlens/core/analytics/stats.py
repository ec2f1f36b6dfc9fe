from datetime import datetime
from types import MappingProxyType
from typing import Dict, Sequence

from prlens.core.analytics.distribution import (
    average_review_time,
    average_review_time_by_repo,
    calculate_aging_distribution,
    calculate_review_load,
)
from prlens.core.analytics.trends import DEFAULT_TREND_DAYS, calculate_approval_trends
from prlens.core.schema.metrics import AlertType, EnrichedPR, ReviewStats


def count_alerts_by_type(prs: Sequence[EnrichedPR]) -> Dict[AlertType, int]:
    counts = {alert_type: 0 for alert_type in AlertType}
    for pr in prs:
        for alert in pr.alerts:
            counts[alert] += 1
    return counts


def calculate_stats(
    open_prs: Sequence[EnrichedPR],
    now: datetime,
    closed_prs: Sequence[EnrichedPR] = (),
    trend_days: int = DEFAULT_TREND_DAYS,
) -> ReviewStats:
    alerts_by_type = count_alerts_by_type(open_prs)
    return ReviewStats(
        average_review_time_hours=average_review_time(open_prs),
        average_review_time_by_repo=MappingProxyType(
            average_review_time_by_repo(open_prs)
        ),
        pr_aging_distribution=calculate_aging_distribution(open_prs),
        review_load_by_member=MappingProxyType(calculate_review_load(open_prs)),
        approval_trends=calculate_approval_trends(closed_prs, now, trend_days),
        total_open_prs=len(open_prs),
        total_alerts=sum(len(pr.alerts) for pr in open_prs),
        alerts_by_type=MappingProxyType(alerts_by_type),
    )
