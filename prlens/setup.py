import sys

from prlens.config import (
    REPORT_PRS,
    REPORT_REVIEWS,
    Settings,
    load_settings,
)
from prlens.core.exceptions import ConfigurationError, PrlensError
from prlens.core.ports.logger import Logger
from prlens.core.schema import RepositoryRef
from prlens.core.services import ReviewDashboard
from prlens.infra import (
    ConsoleLogger,
    GitHubClient,
    GitHubPRSource,
    LogfireLogger,
    SystemClock,
    configure_logfire,
    dump_prs,
    dump_reviews,
    dump_stats,
)


def main() -> int:
    try:
        settings = load_settings()
        logger = _build_logger(settings)
    except ConfigurationError as error:
        print(f'prlens: {error.message}', file=sys.stderr)
        return 2

    try:
        with GitHubClient(settings.github.token) as github_client:
            dashboard = ReviewDashboard(
                GitHubPRSource(github_client),
                SystemClock(),
                logger,
                lookback_days=settings.analytics.lookback_days,
                max_workers=settings.analytics.max_workers,
            )
            print(run_report(dashboard, settings))
    except PrlensError as error:
        logger.exception('Report failed', error=error.message)
        return 1
    return 0


def run_report(dashboard: ReviewDashboard, settings: Settings) -> str:
    repositories = settings.github.repositories
    if settings.report.kind == REPORT_PRS:
        return dump_prs(dashboard.enrich_open_prs(repositories))
    if settings.report.kind == REPORT_REVIEWS:
        if settings.report.pr_number is None:
            raise ConfigurationError('PRLENS_PR_NUMBER is required for the reviews report')
        repository = _review_repository(settings)
        return dump_reviews(
            dashboard.fetch_reviews(repository, settings.report.pr_number)
        )
    return dump_stats(dashboard.build_stats(repositories))


def _review_repository(settings: Settings) -> RepositoryRef:
    if settings.report.repository is not None:
        return settings.report.repository
    repositories = settings.github.repositories
    if len(repositories) != 1:
        raise ConfigurationError(
            'PRLENS_REVIEW_REPOSITORY is required when several repositories are configured'
        )
    return repositories[0]


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, settings.logging.level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                'Logfire backend selected but PRLENS_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f'Unknown logging backend {settings.logging.backend}')


if __name__ == '__main__':
    sys.exit(main())
