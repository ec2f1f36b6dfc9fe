from datetime import datetime
from typing import List, Protocol, runtime_checkable

from prlens.core.schema.pr import CheckRun, PullRequest, RepositoryRef, Review


@runtime_checkable
class PRSource(Protocol):
    def fetch_open_prs(self, repository: RepositoryRef) -> List[PullRequest]:
        ...

    def fetch_closed_prs(
        self,
        repository: RepositoryRef,
        since: datetime,
    ) -> List[PullRequest]:
        ...

    def fetch_reviews(
        self,
        repository: RepositoryRef,
        pr_number: int,
    ) -> List[Review]:
        ...

    def fetch_check_runs(
        self,
        repository: RepositoryRef,
        ref: str,
    ) -> List[CheckRun]:
        ...
