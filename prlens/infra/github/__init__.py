from prlens.infra.github.client import GitHubClient
from prlens.infra.github.pr_source import GitHubPRSource

__all__ = ["GitHubClient", "GitHubPRSource"]
