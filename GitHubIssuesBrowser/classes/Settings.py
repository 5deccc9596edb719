import logging
import os
from enum import Enum

from dotenv import load_dotenv

from GitHubIssuesBrowser.classes.Exceptions import EnvVarNotSetException
from GitHubIssuesBrowser.constants import (
    DEFAULT_PATH,
    GITHUB_GRAPHQL_URL,
    ISSUES_PAGE_SIZE,
    REACTIONS_LIMIT,
    REQUEST_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class StarPolicy(Enum):
    """How the stargazer count moves when the viewer stars or unstars a repository."""

    NAIVE = "NAIVE"
    """Always +1, unstarring included."""
    SYMMETRIC = "SYMMETRIC"
    """+1 when starring, -1 when unstarring."""

    def __str__(self):
        return self.value


def check_env_var(key: str) -> str:
    value = os.getenv(key)
    if not value:
        logger.error(f"{key} environment variable is not defined. Set it in the .env file.")
        raise EnvVarNotSetException(f"{key} environment variable is not defined. Set it in the .env file.")
    logger.debug(f"{key} environment variable is set.")
    return value


def int_env_var(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got '{value}'")
    if parsed <= 0:
        raise ValueError(f"{key} must be positive, got {parsed}")
    return parsed


class Settings:
    """Configuration for a browsing session, normally read from the environment (and a `.env` file)."""

    def __init__(
        self,
        access_token: str,
        graphql_url: str = GITHUB_GRAPHQL_URL,
        issues_page_size: int = ISSUES_PAGE_SIZE,
        reactions_limit: int = REACTIONS_LIMIT,
        request_timeout_seconds: int = REQUEST_TIMEOUT_SECONDS,
        star_policy: StarPolicy = StarPolicy.SYMMETRIC,
        default_path: str = DEFAULT_PATH,
        log_level: str = "INFO",
    ):
        self.access_token = access_token
        self.graphql_url = graphql_url
        self.issues_page_size = issues_page_size
        self.reactions_limit = reactions_limit
        self.request_timeout_seconds = request_timeout_seconds
        self.star_policy = star_policy
        self.default_path = default_path
        self.log_level = log_level

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Builds Settings from environment variables, loading a `.env` file first unless `dotenv` is False.
        :raises EnvVarNotSetException: if GITHUB_ACCESS_TOKEN is missing.
        :raises ValueError: if a numeric or enum variable has an invalid value.
        """
        if dotenv:
            load_dotenv()
        star_policy = os.getenv("STAR_POLICY", StarPolicy.SYMMETRIC.value).upper()
        if star_policy not in StarPolicy.__members__:
            raise ValueError(
                f"STAR_POLICY must be one of {', '.join(StarPolicy.__members__)}, got '{star_policy}'"
            )
        return cls(
            access_token=check_env_var("GITHUB_ACCESS_TOKEN"),
            graphql_url=os.getenv("GITHUB_GRAPHQL_URL", GITHUB_GRAPHQL_URL),
            issues_page_size=int_env_var("ISSUES_PAGE_SIZE", ISSUES_PAGE_SIZE),
            reactions_limit=int_env_var("REACTIONS_LIMIT", REACTIONS_LIMIT),
            request_timeout_seconds=int_env_var("REQUEST_TIMEOUT_SECONDS", REQUEST_TIMEOUT_SECONDS),
            star_policy=StarPolicy[star_policy],
            default_path=os.getenv("DEFAULT_PATH", DEFAULT_PATH),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def __repr__(self):
        # Never print the token
        values = {key: value for key, value in self.__dict__.items() if key != "access_token"}
        return f"Settings({values})"
