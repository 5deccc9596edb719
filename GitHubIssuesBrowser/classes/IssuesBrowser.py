import logging
import threading
from typing import Callable

from GitHubIssuesBrowser.classes.AppState import AppState, Status
from GitHubIssuesBrowser.classes.Exceptions import (
    InvalidStateException,
    StaleResponseError,
)
from GitHubIssuesBrowser.classes.OptimisticMutator import (
    OptimisticMutator,
    with_stargazers,
)
from GitHubIssuesBrowser.classes.PageMerger import merge
from GitHubIssuesBrowser.classes.PaginationCursor import PaginationCursor
from GitHubIssuesBrowser.classes.gql import GQL
from GitHubIssuesBrowser.classes.gql.Errors import (
    GQLError,
    GQLResponseErrors,
    InvalidJsonShapeException,
)
from GitHubIssuesBrowser.classes.gql.data.response import Error, FetchedPage
from GitHubIssuesBrowser.utils import split_path

logger = logging.getLogger(__name__)


def as_errors(e: Exception) -> list[Error]:
    """Maps a failed request onto the `errors` channel of the AppState."""
    if isinstance(e, GQLResponseErrors):
        return e.errors
    return [Error(str(e))]


class IssuesBrowser:
    """
    Owns the AppState of a browsing session: the issues of one "organization/repository" path, fetched page by page,
    and the star toggle of that repository.

    Every change of the AppState is committed under `commit_lock` by applying a function to the state that is current
    at commit time. A response for a session that has since been replaced by `fetch` is discarded.
    """

    def __init__(self, gql: GQL, mutator: OptimisticMutator | None = None):
        self.gql = gql
        """The GraphQL client."""
        self.mutator = mutator if mutator is not None else OptimisticMutator()
        """Applies and reconciles star toggles."""
        self.commit_lock = threading.Lock()
        """A lock so that only one response is committed at a time."""

        self.__state = AppState("")
        self.__status = Status.EMPTY
        self.__cursor = PaginationCursor()
        self.__session = 0
        self.__star_sequence = 0

    @property
    def state(self) -> AppState:
        return self.__state

    @property
    def status(self) -> Status:
        return self.__status

    @property
    def cursor(self) -> PaginationCursor:
        return self.__cursor

    @property
    def has_more(self) -> bool:
        """True if a further page of issues can be fetched."""
        return self.__state.issues is not None and not self.__cursor.exhausted

    def fetch(self, path: str) -> AppState:
        """
        Starts a new session for the given path and fetches its first page of issues. Anything previously loaded is
        discarded, including responses still in flight for the previous session.
        :param path: An "organization/repository" path.
        :return: The state after the page was committed.
        :raises InvalidPathException: If the path is malformed.
        """
        organization, repository = split_path(path)
        with self.commit_lock:
            self.__session += 1
            session = self.__session
            self.__state = AppState(path)
            self.__cursor = PaginationCursor()
            self.__status = Status.LOADING
            star_sequence = self.__star_sequence
        logger.info(f"Fetching issues of {path}")
        return self.__fetch_page(session, star_sequence, path, organization, repository, None)

    def fetch_more(self) -> AppState:
        """
        Fetches the next page of issues and appends it. Does nothing once the last page has been fetched or while
        another page is loading.
        :return: The state after the page was committed.
        :raises InvalidStateException: If no issues have been loaded yet.
        """
        with self.commit_lock:
            state = self.__state
            if state.issues is None:
                raise InvalidStateException("Fetch a path before fetching more issues")
            if self.__cursor.exhausted:
                logger.info(f"All {state.issues.total_count} issues of {state.path} are loaded")
                return state
            if self.__status in (Status.LOADING, Status.LOADING_MORE):
                logger.debug(f"A page of {state.path} is already loading")
                return state
            session = self.__session
            cursor = self.__cursor.cursor
            self.__status = Status.LOADING_MORE
            star_sequence = self.__star_sequence
        organization, repository = split_path(state.path)
        logger.debug(f"Fetching more issues of {state.path} after {cursor}")
        return self.__fetch_page(session, star_sequence, state.path, organization, repository, cursor)

    def toggle_star(self, repo_id: str, currently_starred: bool) -> AppState:
        """
        Stars the repository if `currently_starred` is False, unstars it otherwise. The stargazer count is updated
        before the request is sent, the starred flag once the server confirms it. A failed request restores both and
        records the errors.
        :param repo_id: The node id of the displayed repository.
        :param currently_starred: Whether the viewer currently stars the repository.
        :return: The state after the mutation was reconciled or rolled back.
        :raises InvalidStateException: If the session isn't ready or displays another repository.
        """
        with self.commit_lock:
            repository = self.__state.repository
            if self.__status != Status.READY or repository is None:
                raise InvalidStateException(f"Cannot toggle a star while {self.__status}")
            if repository.id != repo_id:
                raise InvalidStateException(f"Repository {repo_id} is not displayed")
            session = self.__session
            path = self.__state.path
            self.__state, pending = self.mutator.apply_optimistic(self.__state, currently_starred)
            self.__star_sequence += 1

        def rollback(errors: list[Error]) -> Callable[[AppState], AppState]:
            return lambda state: self.mutator.rollback(state, pending).replace(errors=errors)

        try:
            if pending.starring:
                result = self.gql.add_star(repo_id)
            else:
                result = self.gql.remove_star(repo_id)
        except (GQLError, InvalidJsonShapeException) as e:
            logger.warning(f"Unable to {'star' if pending.starring else 'unstar'} {path}, rolling back: {e}")
            update = rollback(as_errors(e))
        except Exception as e:
            logger.error(f"Error while {'starring' if pending.starring else 'unstarring'} {path}", exc_info=True)
            self.__commit_star(session, path, rollback(as_errors(e)))
            raise
        else:
            logger.info(f"{'Starred' if result.viewer_has_starred else 'Unstarred'} {path}")

            def update(state: AppState) -> AppState:
                return self.mutator.reconcile(result, state, pending)

        return self.__commit_star(session, path, update)

    def __fetch_page(
        self,
        session: int,
        star_sequence: int,
        path: str,
        organization: str,
        repository: str,
        cursor: str | None,
    ) -> AppState:
        try:
            fetched = self.gql.get_issues_of_repository(organization, repository, cursor)
        except (GQLError, InvalidJsonShapeException) as e:
            logger.warning(f"Unable to fetch issues of {path}: {e}")
            fetched = FetchedPage(organization=None, errors=as_errors(e))
        except Exception as e:
            logger.error(f"Error while fetching issues of {path}", exc_info=True)
            self.__commit_page(session, star_sequence, path, cursor, FetchedPage(None, as_errors(e)))
            raise

        if fetched.errors:
            logger.warning(f"Fetching issues of {path} returned errors: {fetched.errors}")

        return self.__commit_page(session, star_sequence, path, cursor, fetched)

    def __check_session(self, session: int, path: str):
        """
        :param session: The session the response was requested in.
        :param path: The path the response was requested for, only used in the error message.
        :raises StaleResponseError: If `fetch` has started another session since.
        """
        if session != self.__session:
            raise StaleResponseError(path, self.__state.path)

    def __commit_page(
        self,
        session: int,
        star_sequence: int,
        path: str,
        cursor: str | None,
        fetched: FetchedPage,
    ) -> AppState:
        with self.commit_lock:
            try:
                self.__check_session(session, path)
            except StaleResponseError as e:
                logger.warning(f"Discarding issues page: {e}")
                return self.__state

            merged = merge(self.__state, cursor, fetched)
            current = self.__state.repository
            if star_sequence != self.__star_sequence and current is not None:
                # The page was read before a star that has been applied since
                merged = with_stargazers(
                    merged,
                    current.id,
                    current.stargazers.total_count,
                    current.viewer_has_starred,
                )
            self.__state = merged

            if fetched.organization is not None and fetched.organization.repository is not None:
                self.__cursor = PaginationCursor.next(fetched.organization.repository.issues)
            if fetched.errors or self.__state.issues is None:
                self.__status = Status.ERROR
            else:
                self.__status = Status.READY
            logger.debug(f"{path} is {self.__status}, {self.__cursor}")
            return self.__state

    def __commit_star(
        self, session: int, path: str, update: Callable[[AppState], AppState]
    ) -> AppState:
        with self.commit_lock:
            try:
                self.__check_session(session, path)
            except StaleResponseError as e:
                logger.warning(f"Discarding star response: {e}")
                return self.__state

            self.__state = update(self.__state)
            self.__star_sequence += 1
            return self.__state
