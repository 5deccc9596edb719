import copy
import logging

from GitHubIssuesBrowser.classes.AppState import AppState
from GitHubIssuesBrowser.classes.Settings import StarPolicy
from GitHubIssuesBrowser.classes.gql.data.response import (
    Repository,
    StarMutationResponse,
)

logger = logging.getLogger(__name__)


class PendingStar:
    """A star or unstar that has been applied locally and is waiting for the server."""

    def __init__(
        self,
        repository_id: str,
        base_total_count: int,
        base_viewer_has_starred: bool,
        delta: int,
    ):
        self.repository_id = repository_id
        """The node id of the repository being starred or unstarred."""
        self.base_total_count = base_total_count
        """The stargazer count before the optimistic update."""
        self.base_viewer_has_starred = base_viewer_has_starred
        """Whether the viewer had starred the repository before the optimistic update."""
        self.delta = delta
        """How much the stargazer count moves."""

    @property
    def starring(self) -> bool:
        """True for a star, False for an unstar."""
        return not self.base_viewer_has_starred

    def __repr__(self):
        return f"PendingStar({self.__dict__})"


def with_stargazers(
    state: AppState, repository_id: str, total_count: int, viewer_has_starred: bool
) -> AppState:
    """
    Returns a new AppState with the stargazer count and starred flag of the repository replaced together. The state is
    returned as is if it doesn't hold the repository, e.g. the path changed while the mutation was in flight.
    """
    repository = state.repository
    if repository is None or repository.id != repository_id:
        logger.debug(f"Repository {repository_id} is no longer displayed, leaving the state as is")
        return state
    repository = copy.copy(repository)
    repository.stargazers = Repository.Stargazers(total_count)
    repository.viewer_has_starred = viewer_has_starred
    organization = copy.copy(state.organization)
    organization.repository = repository
    return state.replace(organization=organization)


class OptimisticMutator:
    """Applies star toggles locally before the server confirms them, then reconciles or rolls back."""

    def __init__(self, policy: StarPolicy = StarPolicy.SYMMETRIC):
        self.policy = policy

    def delta(self, viewer_has_starred: bool) -> int:
        if self.policy == StarPolicy.NAIVE:
            return 1
        return -1 if viewer_has_starred else 1

    def apply_optimistic(
        self, state: AppState, viewer_has_starred: bool
    ) -> tuple[AppState, PendingStar]:
        """
        Moves the stargazer count ahead of the server. `viewer_has_starred` is left as is until the server confirms.
        :param state: The current state, must hold a repository.
        :param viewer_has_starred: Whether the viewer currently stars the repository.
        :return: The provisional state and the pending star needed to reconcile or roll it back.
        :raises ValueError: If the state holds no repository.
        """
        repository = state.repository
        if repository is None:
            raise ValueError("Cannot star without a repository")
        pending = PendingStar(
            repository.id,
            repository.stargazers.total_count,
            viewer_has_starred,
            self.delta(viewer_has_starred),
        )
        logger.debug(f"Optimistic {'star' if pending.starring else 'unstar'}: {pending}")
        provisional = with_stargazers(
            state,
            pending.repository_id,
            pending.base_total_count + pending.delta,
            repository.viewer_has_starred,
        )
        return provisional, pending

    @staticmethod
    def reconcile(
        mutation_result: StarMutationResponse, state: AppState, pending: PendingStar
    ) -> AppState:
        """Writes the server's `viewer_has_starred` along with the count derived from the pre-mutation count."""
        return with_stargazers(
            state,
            pending.repository_id,
            pending.base_total_count + pending.delta,
            mutation_result.viewer_has_starred,
        )

    @staticmethod
    def rollback(state: AppState, pending: PendingStar) -> AppState:
        """Restores the stargazer count and starred flag from before the optimistic update."""
        return with_stargazers(
            state,
            pending.repository_id,
            pending.base_total_count,
            pending.base_viewer_has_starred,
        )
