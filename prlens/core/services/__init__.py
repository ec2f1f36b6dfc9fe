from prlens.core.services.dashboard import (
    DEFAULT_LOOKBACK_DAYS,
    DEFAULT_MAX_WORKERS,
    ReviewDashboard,
)

__all__ = [
    "ReviewDashboard",
    "DEFAULT_LOOKBACK_DAYS",
    "DEFAULT_MAX_WORKERS",
]
