import logging

from GitHubIssuesBrowser.classes.Settings import Settings
from GitHubIssuesBrowser.constants import (
    GITHUB_GRAPHQL_URL,
    REQUEST_TIMEOUT_SECONDS,
    USER_AGENT,
)

logger = logging.getLogger(__name__)


class ClientSession:
    """Represents a Client Session with the GitHub GraphQL API: where to send requests and how to authenticate."""

    def __init__(
        self,
        access_token: str,
        url: str = GITHUB_GRAPHQL_URL,
        user_agent: str = USER_AGENT,
        timeout_seconds: int = REQUEST_TIMEOUT_SECONDS,
    ):
        self.access_token = access_token
        self.url = url
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientSession":
        return cls(
            access_token=settings.access_token,
            url=settings.graphql_url,
            timeout_seconds=settings.request_timeout_seconds,
        )

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"bearer {self.access_token}",
            "User-Agent": self.user_agent,
        }
