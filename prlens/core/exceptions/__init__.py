from prlens.core.exceptions.errors import (
    ConfigurationError,
    PRFetchError,
    PrlensError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)

__all__ = [
    "PrlensError",
    "ConfigurationError",
    "SourceError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "PRFetchError",
]
