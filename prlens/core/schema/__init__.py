from prlens.core.schema.metrics import (
    AgingDistribution,
    AlertType,
    ApprovalTrendPoint,
    EnrichedPR,
    PRAge,
    ReviewStats,
    ReviewStatus,
    TimeInReview,
)
from prlens.core.schema.pr import (
    BranchRef,
    CheckConclusion,
    CheckRun,
    CheckStatus,
    GitHubUser,
    Label,
    PRState,
    PullRequest,
    RepositoryRef,
    Review,
    ReviewState,
)

__all__ = [
    "PRState",
    "ReviewState",
    "CheckStatus",
    "CheckConclusion",
    "RepositoryRef",
    "GitHubUser",
    "BranchRef",
    "Label",
    "PullRequest",
    "Review",
    "CheckRun",
    "ReviewStatus",
    "AlertType",
    "PRAge",
    "TimeInReview",
    "EnrichedPR",
    "AgingDistribution",
    "ApprovalTrendPoint",
    "ReviewStats",
]
