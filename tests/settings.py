from prlens.config.settings import (
    REPORT_STATS,
    AnalyticsSettings,
    GitHubSettings,
    LoggingSettings,
    ReportSettings,
    Settings,
)
from prlens.core.schema import RepositoryRef


def get_test_settings(
    report: str = REPORT_STATS,
    pr_number: int | None = None,
    repositories: tuple[RepositoryRef, ...] = (RepositoryRef(owner="acme", name="app"),),
    review_repository: RepositoryRef | None = None,
) -> Settings:
    return Settings(
        github=GitHubSettings(
            token="test-token",
            repositories=repositories,
        ),
        logging=LoggingSettings(
            backend="console",
            name="prlens-test",
            level="DEBUG",
            logfire_token=None,
        ),
        analytics=AnalyticsSettings(lookback_days=30, max_workers=2),
        report=ReportSettings(
            kind=report,
            pr_number=pr_number,
            repository=review_repository,
        ),
    )
