from tests.fakes.clock import FakeClock
from tests.fakes.github import (
    FakeCheckRun,
    FakeCommit,
    FakeGitHubClient,
    FakeLabel,
    FakePullRequest,
    FakePullRequestPart,
    FakeRepository,
    FakeReview,
    FakeUser,
)
from tests.fakes.logger import FakeLogger
from tests.fakes.pr_source import FakePRSource

__all__ = [
    "FakeCheckRun",
    "FakeClock",
    "FakeCommit",
    "FakeGitHubClient",
    "FakeLabel",
    "FakeLogger",
    "FakePRSource",
    "FakePullRequest",
    "FakePullRequestPart",
    "FakeRepository",
    "FakeReview",
    "FakeUser",
]
