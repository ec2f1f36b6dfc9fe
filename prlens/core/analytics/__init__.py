from prlens.core.analytics.alerts import STALE_THRESHOLD_DAYS, identify_alerts
from prlens.core.analytics.distribution import (
    average_review_time,
    average_review_time_by_repo,
    calculate_aging_distribution,
    calculate_review_load,
)
from prlens.core.analytics.enrichment import enrich_pr
from prlens.core.analytics.review_state import (
    determine_review_status,
    latest_reviews_by_user,
)
from prlens.core.analytics.stats import calculate_stats, count_alerts_by_type
from prlens.core.analytics.time_metrics import (
    calculate_pr_age,
    calculate_time_in_review,
)
from prlens.core.analytics.trends import DEFAULT_TREND_DAYS, calculate_approval_trends

__all__ = [
    "STALE_THRESHOLD_DAYS",
    "DEFAULT_TREND_DAYS",
    "calculate_pr_age",
    "calculate_time_in_review",
    "determine_review_status",
    "latest_reviews_by_user",
    "identify_alerts",
    "calculate_review_load",
    "calculate_aging_distribution",
    "average_review_time",
    "average_review_time_by_repo",
    "calculate_approval_trends",
    "count_alerts_by_type",
    "calculate_stats",
    "enrich_pr",
]
