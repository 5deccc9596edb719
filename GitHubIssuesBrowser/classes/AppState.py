import copy
from enum import Enum

from GitHubIssuesBrowser.classes.gql.data.response import (
    Connection,
    Error,
    Issue,
    Organization,
    Repository,
)


class Status(Enum):
    """Enum representing the States a browsing session can be in."""

    EMPTY = 0
    """No organization loaded, either a new session or the path just changed."""
    LOADING = 1
    """The first page is being fetched, there is no cursor."""
    READY = 2
    """A connection is displayed. More pages can be fetched if the cursor isn't exhausted."""
    LOADING_MORE = 3
    """A further page is being fetched with the tracked cursor."""
    ERROR = 4
    """The last fetch failed or its payload carried errors. Not terminal, the next successful fetch leaves it."""

    def __repr__(self):
        return self.name.capitalize()

    def __str__(self):
        return repr(self)


class AppState:
    """
    Snapshot of what is currently displayed. Snapshots are never mutated: every change produces a new AppState, see
    `replace`.
    """

    def __init__(
        self,
        path: str,
        organization: Organization | None = None,
        errors: list[Error] | None = None,
    ):
        self.path = path
        """The "organization/repository" path of the session."""
        self.organization = organization
        """The accumulated organization tree, None until the first page arrives."""
        self.errors = errors
        """Errors of the latest response, None if it had none."""

    @property
    def repository(self) -> Repository | None:
        return self.organization.repository if self.organization is not None else None

    @property
    def issues(self) -> Connection[Issue] | None:
        repository = self.repository
        return repository.issues if repository is not None else None

    def replace(self, **changes) -> "AppState":
        """Returns a shallow copy of this AppState with the given attributes changed."""
        state = copy.copy(self)
        for name, value in changes.items():
            if not hasattr(state, name):
                raise AttributeError(f"AppState has no attribute '{name}'")
            setattr(state, name, value)
        return state

    def __repr__(self):
        return f"AppState({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, AppState)
            and self.path == other.path
            and self.organization == other.organization
            and self.errors == other.errors
        )
