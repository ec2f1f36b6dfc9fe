from prlens.infra.clock import SystemClock
from prlens.infra.export import dump_prs, dump_reviews, dump_stats
from prlens.infra.github import GitHubClient, GitHubPRSource
from prlens.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire

__all__ = [
    'GitHubClient',
    'GitHubPRSource',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'SystemClock',
    'dump_prs',
    'dump_reviews',
    'dump_stats',
]
