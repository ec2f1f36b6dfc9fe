from datetime import datetime, timezone
from typing import Dict, List, Optional

from github import GithubException
from github.Repository import Repository

from prlens.core.exceptions import (
    PRFetchError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)
from prlens.core.ports.pr_source import PRSource
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
from prlens.infra.github.client import GitHubClient


STATUS_OPEN = "open"
STATUS_CLOSED = "closed"


class GitHubPRSource(PRSource):
    def __init__(self, client: GitHubClient) -> None:
        self._client = client
        self._repos: Dict[str, Repository] = {}

    def fetch_open_prs(self, repository: RepositoryRef) -> List[PullRequest]:
        repo = self._get_repo(repository)
        try:
            return [
                self._to_pull_request(pr)
                for pr in repo.get_pulls(state=STATUS_OPEN)
            ]
        except GithubException as error:
            self._translate_exception(
                "Failed to fetch pull requests",
                error,
                resource=repository.full_name,
            )

    def fetch_closed_prs(
        self,
        repository: RepositoryRef,
        since: datetime,
    ) -> List[PullRequest]:
        repo = self._get_repo(repository)
        try:
            pulls = repo.get_pulls(
                state=STATUS_CLOSED,
                sort="updated",
                direction="desc",
            )
            closed = []
            for pr in pulls:
                # Sorted by last update, so everything after this is older.
                if pr.updated_at < since:
                    break
                closed.append(self._to_pull_request(pr))
            return closed
        except GithubException as error:
            self._translate_exception(
                "Failed to fetch closed pull requests",
                error,
                resource=repository.full_name,
            )

    def fetch_reviews(
        self,
        repository: RepositoryRef,
        pr_number: int,
    ) -> List[Review]:
        repo = self._get_repo(repository)
        try:
            reviews = repo.get_pull(pr_number).get_reviews()
            # Draft reviews have not been submitted yet.
            return [
                self._to_review(review)
                for review in reviews
                if review.submitted_at is not None
            ]
        except GithubException as error:
            raise PRFetchError(
                "Failed to fetch pull request reviews",
                repository,
                pr_number,
            ) from error

    def fetch_check_runs(
        self,
        repository: RepositoryRef,
        ref: str,
    ) -> List[CheckRun]:
        repo = self._get_repo(repository)
        try:
            return [
                self._to_check_run(check)
                for check in repo.get_commit(ref).get_check_runs()
            ]
        except GithubException as error:
            self._translate_exception(
                "Failed to fetch check runs",
                error,
                resource=f"{repository.full_name}@{ref}",
            )

    def _to_pull_request(self, pr) -> PullRequest:  # noqa: ANN001
        return PullRequest(
            id=pr.id,
            number=pr.number,
            title=pr.title or "",
            html_url=pr.html_url,
            state=PRState(pr.state),
            created_at=pr.created_at,
            updated_at=pr.updated_at,
            user=self._to_user(pr.user),
            requested_reviewers=tuple(
                self._to_user(user) for user in pr.requested_reviewers or ()
            ),
            head=BranchRef(ref=pr.head.ref, sha=pr.head.sha),
            base=BranchRef(ref=pr.base.ref, sha=pr.base.sha),
            assignees=tuple(self._to_user(user) for user in pr.assignees or ()),
            labels=tuple(
                Label(name=label.name, color=label.color) for label in pr.labels or ()
            ),
            comments=pr.comments or 0,
        )

    def _to_review(self, review) -> Review:  # noqa: ANN001
        return Review(
            id=review.id,
            user=self._to_user(review.user),
            state=ReviewState(review.state),
            submitted_at=review.submitted_at,
        )

    def _to_check_run(self, check) -> CheckRun:  # noqa: ANN001
        return CheckRun(
            status=self._to_status(check.status),
            conclusion=self._to_conclusion(check.conclusion),
            name=check.name,
        )

    def _to_status(self, value: str) -> CheckStatus:
        # waiting, requested and pending runs have not started yet.
        try:
            return CheckStatus(value)
        except ValueError:
            return CheckStatus.QUEUED

    def _to_conclusion(self, value: Optional[str]) -> Optional[CheckConclusion]:
        if value is None:
            return None
        try:
            return CheckConclusion(value)
        except ValueError:
            return None

    def _to_user(self, user) -> GitHubUser:  # noqa: ANN001
        if user is None:
            return GitHubUser(login="")
        return GitHubUser(login=user.login, avatar_url=user.avatar_url or "")

    def _get_repo(self, repository: RepositoryRef) -> Repository:
        repo = self._repos.get(repository.full_name)
        if repo is None:
            try:
                repo = self._client.get_repo(repository.owner, repository.name)
            except GithubException as error:
                self._translate_exception(
                    "Failed to access repository",
                    error,
                    resource=repository.full_name,
                )
            self._repos[repository.full_name] = repo
        return repo

    def _translate_exception(
        self,
        message: str,
        error: GithubException,
        resource: str | None = None,
    ) -> None:
        status = getattr(error, "status", None)
        headers = getattr(error, "headers", {}) or {}
        if status == 401:
            raise SourceAuthenticationError(message) from error
        if status == 404:
            raise SourceNotFoundError(
                message,
                resource or "resource",
            ) from error
        if status == 403:
            retry_after = self._retry_after_from_headers(headers)
            if retry_after:
                raise SourceRateLimitError(message, retry_after) from error
        raise SourceError(message) from error

    def _retry_after_from_headers(self, headers) -> datetime | None:  # noqa: ANN001
        reset = headers.get("Retry-After") or headers.get("X-RateLimit-Reset")
        if reset is None:
            return None
        try:
            reset_time = float(reset)
            return datetime.fromtimestamp(reset_time, tz=timezone.utc)
        except (TypeError, ValueError):
            return None
