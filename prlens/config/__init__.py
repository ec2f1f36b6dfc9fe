from prlens.config.settings import (
    REPORT_PRS,
    REPORT_REVIEWS,
    REPORT_STATS,
    AnalyticsSettings,
    GitHubSettings,
    LoggingSettings,
    ReportSettings,
    Settings,
    load_settings,
    parse_repositories,
)

__all__ = [
    'Settings',
    'GitHubSettings',
    'LoggingSettings',
    'AnalyticsSettings',
    'ReportSettings',
    'REPORT_STATS',
    'REPORT_PRS',
    'REPORT_REVIEWS',
    'load_settings',
    'parse_repositories',
]
