from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta
from typing import Callable, List, Sequence, TypeVar

from prlens.core.analytics import calculate_stats, enrich_pr
from prlens.core.exceptions import ConfigurationError, SourceError
from prlens.core.ports.clock import Clock
from prlens.core.ports.logger import Logger
from prlens.core.ports.pr_source import PRSource
from prlens.core.schema.metrics import EnrichedPR, ReviewStats
from prlens.core.schema.pr import CheckRun, PullRequest, RepositoryRef, Review

T = TypeVar("T")

DEFAULT_LOOKBACK_DAYS = 30
DEFAULT_MAX_WORKERS = 4


class ReviewDashboard:
    """Fetches PRs through a ``PRSource`` and runs them through the analytics core.

    Fetch failures for reviews, check runs and closed PRs degrade to empty
    lists so a single flaky call never drops a whole repository. Failures
    listing open PRs propagate to the caller.
    """

    def __init__(
        self,
        pr_source: PRSource,
        clock: Clock,
        logger: Logger,
        *,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._pr_source = pr_source
        self._clock = clock
        self._logger = logger
        self._lookback_days = lookback_days
        self._max_workers = max(1, max_workers)

    def enrich_open_prs(
        self,
        repositories: Sequence[RepositoryRef],
        now: datetime | None = None,
    ) -> List[EnrichedPR]:
        self._require_repositories(repositories)
        now = now or self._clock.now()
        return self._map_repositories(
            repositories,
            lambda repository: self._enrich_open_for_repo(repository, now),
        )

    def enrich_closed_prs(
        self,
        repositories: Sequence[RepositoryRef],
        since: datetime,
        now: datetime | None = None,
    ) -> List[EnrichedPR]:
        self._require_repositories(repositories)
        now = now or self._clock.now()
        return self._map_repositories(
            repositories,
            lambda repository: self._enrich_closed_for_repo(repository, since, now),
        )

    def fetch_reviews(
        self,
        repository: RepositoryRef,
        pr_number: int,
    ) -> List[Review]:
        return self._safe_reviews(repository, pr_number)

    def build_stats(self, repositories: Sequence[RepositoryRef]) -> ReviewStats:
        self._require_repositories(repositories)
        now = self._clock.now()
        since = now - timedelta(days=self._lookback_days)
        self._logger.info(
            "Building review stats",
            repositories=len(repositories),
            since=since.isoformat(),
        )

        open_prs = self.enrich_open_prs(repositories, now)
        closed_prs = self.enrich_closed_prs(repositories, since, now)
        stats = calculate_stats(
            open_prs,
            now,
            closed_prs=closed_prs,
            trend_days=self._lookback_days,
        )
        self._logger.info(
            "Review stats built",
            open_prs=stats.total_open_prs,
            closed_prs=len(closed_prs),
            alerts=stats.total_alerts,
        )
        return stats

    def _enrich_open_for_repo(
        self,
        repository: RepositoryRef,
        now: datetime,
    ) -> List[EnrichedPR]:
        pulls = self._pr_source.fetch_open_prs(repository)
        self._logger.debug(
            "Fetched open pull requests",
            repository=repository.full_name,
            count=len(pulls),
        )
        return [
            enrich_pr(
                pr,
                repository,
                self._safe_reviews(repository, pr.number),
                self._safe_checks(repository, pr),
                now,
            )
            for pr in pulls
        ]

    def _enrich_closed_for_repo(
        self,
        repository: RepositoryRef,
        since: datetime,
        now: datetime,
    ) -> List[EnrichedPR]:
        try:
            pulls = self._pr_source.fetch_closed_prs(repository, since)
        except SourceError as error:
            self._logger.warning(
                "Failed to fetch closed pull requests",
                repository=repository.full_name,
                error=str(error),
            )
            return []
        return [
            enrich_pr(
                pr,
                repository,
                self._safe_reviews(repository, pr.number),
                (),
                now,
            )
            for pr in pulls
        ]

    def _safe_reviews(
        self,
        repository: RepositoryRef,
        pr_number: int,
    ) -> List[Review]:
        try:
            return self._pr_source.fetch_reviews(repository, pr_number)
        except SourceError as error:
            self._logger.warning(
                "Failed to fetch reviews",
                repository=repository.full_name,
                pr_number=pr_number,
                error=str(error),
            )
            return []

    def _safe_checks(
        self,
        repository: RepositoryRef,
        pr: PullRequest,
    ) -> List[CheckRun]:
        try:
            return self._pr_source.fetch_check_runs(repository, pr.head.sha)
        except SourceError as error:
            self._logger.warning(
                "Failed to fetch check runs",
                repository=repository.full_name,
                ref=pr.head.sha,
                error=str(error),
            )
            return []

    def _map_repositories(
        self,
        repositories: Sequence[RepositoryRef],
        task: Callable[[RepositoryRef], List[T]],
    ) -> List[T]:
        workers = min(self._max_workers, len(repositories))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(task, repositories))
        return [item for repo_items in results for item in repo_items]

    def _require_repositories(self, repositories: Sequence[RepositoryRef]) -> None:
        if not repositories:
            raise ConfigurationError("Missing repositories")
