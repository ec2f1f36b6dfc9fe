from github import Auth, Github

DEFAULT_USER_AGENT = "prlens"


class GitHubClient:
    def __init__(self, token: str, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self._client = Github(auth=Auth.Token(token), user_agent=user_agent)

    def get_repo(self, owner: str, name: str):
        return self._client.get_repo(f'{owner}/{name}')

    def close(self) -> None:
        try:
            self._client.close()
        except AttributeError:
            return

    def __enter__(self) -> 'GitHubClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
