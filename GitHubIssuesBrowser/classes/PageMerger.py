import copy
import logging

from GitHubIssuesBrowser.classes.AppState import AppState
from GitHubIssuesBrowser.classes.gql.data.response import Connection, FetchedPage

logger = logging.getLogger(__name__)


def merge(previous: AppState | None, cursor: str | None, fetched: FetchedPage) -> AppState:
    """
    Combines a fetched page with the previously accumulated state.

    Without a cursor the fetched page replaces everything: this is the first page of a path. With a cursor the fetched
    page's issue edges are appended to the previous ones, and everything else (repository metadata, total count, page
    info) is taken from the fetched page. A page without an organization, e.g. an error payload, keeps the previous
    organization. `errors` always comes from the fetched page.

    :param previous: The current state, or None if there is none.
    :param cursor: The cursor the page was fetched with.
    :param fetched: The fetched page.
    :return: A new AppState. `previous` is left untouched.
    :raises ValueError: If a cursor is given but `previous` holds no issues to append to.
    """
    path = previous.path if previous is not None else ""
    if cursor is None:
        return AppState(path, fetched.organization, fetched.errors)

    if previous is None or previous.issues is None:
        raise ValueError(f"Cannot merge a page fetched with cursor '{cursor}' into a state without issues")

    if fetched.organization is None or fetched.organization.repository is None:
        logger.debug(f"Page for cursor '{cursor}' has no repository, keeping the accumulated organization")
        return previous.replace(errors=fetched.errors)

    fetched_issues = fetched.organization.repository.issues
    repository = copy.copy(fetched.organization.repository)
    repository.issues = Connection(
        previous.issues.edges + fetched_issues.edges,
        fetched_issues.total_count,
        fetched_issues.page_info,
    )
    organization = copy.copy(fetched.organization)
    organization.repository = repository
    logger.debug(
        f"Merged {len(fetched_issues.edges)} issues into {len(previous.issues.edges)}, "
        f"{len(repository.issues.edges)}/{repository.issues.total_count} loaded"
    )
    return AppState(path, organization, fetched.errors)
