from datetime import datetime

from prlens.core.schema.pr import RepositoryRef


class PrlensError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(PrlensError):
    pass


class SourceError(PrlensError):
    pass


class SourceAuthenticationError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    def __init__(self, message: str, retry_after: datetime) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class SourceNotFoundError(SourceError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class PRFetchError(SourceError):
    def __init__(
        self,
        message: str,
        repository: RepositoryRef,
        pr_number: int,
    ) -> None:
        self.repository = repository
        self.pr_number = pr_number
        super().__init__(message)
