import os
from dataclasses import dataclass
from typing import Optional, Tuple

from prlens.core.exceptions import ConfigurationError
from prlens.core.schema.pr import RepositoryRef

REPORT_STATS = "stats"
REPORT_PRS = "prs"
REPORT_REVIEWS = "reviews"
REPORTS = (REPORT_STATS, REPORT_PRS, REPORT_REVIEWS)


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: str
    repositories: Tuple[RepositoryRef, ...]


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class AnalyticsSettings:
    lookback_days: int
    max_workers: int


@dataclass(frozen=True, slots=True)
class ReportSettings:
    kind: str
    pr_number: Optional[int]
    repository: Optional[RepositoryRef] = None


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    logging: LoggingSettings
    analytics: AnalyticsSettings
    report: ReportSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    github_token = _env_or_default("GITHUB_TOKEN")
    if not github_token:
        raise ConfigurationError("GITHUB_TOKEN is not set")
    repositories = parse_repositories(_env_or_default("PRLENS_REPOSITORIES", ""))
    if not repositories:
        raise ConfigurationError("PRLENS_REPOSITORIES is not set")

    report_kind = _env_or_default("PRLENS_REPORT", REPORT_STATS).lower()
    if report_kind not in REPORTS:
        raise ConfigurationError(f"Unknown report {report_kind}")

    return Settings(
        github=GitHubSettings(token=github_token, repositories=repositories),
        logging=LoggingSettings(
            backend=_env_or_default("PRLENS_LOGGER_BACKEND", "console").lower(),
            name=_env_or_default("PRLENS_LOGGER_NAME", "prlens"),
            level=_env_or_default("PRLENS_LOG_LEVEL", "INFO"),
            logfire_token=_env_or_default("PRLENS_LOGFIRE_TOKEN"),
        ),
        analytics=AnalyticsSettings(
            lookback_days=_env_int("PRLENS_LOOKBACK_DAYS", 30),
            max_workers=_env_int("PRLENS_MAX_WORKERS", 4),
        ),
        report=ReportSettings(
            kind=report_kind,
            pr_number=_env_optional_int("PRLENS_PR_NUMBER"),
            repository=_env_optional_repository("PRLENS_REVIEW_REPOSITORY"),
        ),
    )


def parse_repositories(value: str) -> Tuple[RepositoryRef, ...]:
    repositories = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        owner, _, name = entry.partition("/")
        if not owner or not name or "/" in name:
            raise ConfigurationError(f"Invalid repository {entry!r}, expected owner/name")
        repositories.append(RepositoryRef(owner=owner, name=name))
    return tuple(repositories)


def _env_optional_repository(name: str) -> Optional[RepositoryRef]:
    repositories = parse_repositories(_env_or_default(name, ""))
    if not repositories:
        return None
    if len(repositories) > 1:
        raise ConfigurationError(f"{name} must name a single repository")
    return repositories[0]


def _env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_int(name: str, default: int) -> int:
    value = _env_or_default(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be an integer") from error


def _env_optional_int(name: str) -> Optional[int]:
    value = _env_or_default(name)
    if value is None:
        return None
    return _env_int(name, 0)
