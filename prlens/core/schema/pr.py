from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class PRState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class ReviewState(str, Enum):
    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    COMMENTED = "COMMENTED"
    DISMISSED = "DISMISSED"
    PENDING = "PENDING"


class CheckStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class CheckConclusion(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"
    ACTION_REQUIRED = "action_required"
    SKIPPED = "skipped"
    STALE = "stale"


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True, slots=True)
class GitHubUser:
    login: str
    avatar_url: str = ""


@dataclass(frozen=True, slots=True)
class BranchRef:
    ref: str
    sha: str


@dataclass(frozen=True, slots=True)
class Label:
    name: str
    color: str


@dataclass(frozen=True, slots=True)
class PullRequest:
    id: int
    number: int
    title: str
    html_url: str
    state: PRState
    created_at: datetime
    updated_at: datetime
    user: GitHubUser
    requested_reviewers: Tuple[GitHubUser, ...]
    head: BranchRef
    base: BranchRef
    assignees: Tuple[GitHubUser, ...] = ()
    labels: Tuple[Label, ...] = ()
    comments: int = 0


@dataclass(frozen=True, slots=True)
class Review:
    id: int
    user: GitHubUser
    state: ReviewState
    submitted_at: datetime


@dataclass(frozen=True, slots=True)
class CheckRun:
    status: CheckStatus
    conclusion: Optional[CheckConclusion]
    name: str
