import copy
import logging
from typing import Callable, Any, TypeVar

import requests

from GitHubIssuesBrowser.classes.ClientSession import ClientSession
from GitHubIssuesBrowser.classes.gql.Errors import TransportError
from GitHubIssuesBrowser.classes.gql.data.Parser import Parser
from GitHubIssuesBrowser.classes.gql.data.response import (
    FetchedPage,
    StarMutationResponse,
)
from GitHubIssuesBrowser.constants import (
    GQLOperations,
    ISSUES_PAGE_SIZE,
    REACTIONS_LIMIT,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GQL:
    """
    Integration with GitHub's GraphQL API. Each request is a single attempt, failures are raised to the caller.
    """

    def __init__(
        self,
        client_session: ClientSession,
        parser: Parser = Parser(),
        post_request=requests.post,
        issues_page_size: int = ISSUES_PAGE_SIZE,
        reactions_limit: int = REACTIONS_LIMIT,
    ):
        self.client_session = client_session
        """The client session for making requests."""
        self.parser = parser
        """The parser for parsing GQL responses."""
        self.post_request = post_request
        """Function for posting GQL requests."""
        self.issues_page_size = issues_page_size
        """The number of issues requested per page."""
        self.reactions_limit = reactions_limit
        """The number of most recent reactions requested per issue."""

    def execute(
        self, operation_name: str, request_json: dict, parse: Callable[[Any], T]
    ) -> T:
        """
        Posts the given GQL request and parses the response.
        :param operation_name: The name of the GQL operation.
        :param request_json: The data to send: `operationName`, `query` and `variables`.
        :param parse: The function to use to parse the data.
        :return: The parsed response.
        :raises TransportError: If the request failed or returned a non-2xx status.
        :raises InvalidJsonShapeException: If the response has an unexpected shape.
        :raises GQLResponseErrors: If `parse` rejects a response containing errors.
        """
        try:
            response = self.post_request(
                self.client_session.url,
                json=request_json,
                headers=self.client_session.headers(),
                timeout=self.client_session.timeout_seconds,
            )
            logger.debug(
                f"Data: {request_json['variables']}, Status code: {response.status_code}, Content: {response.text}"
            )
            response.raise_for_status()
            response_json = response.json()
        except requests.exceptions.RequestException as e:
            logger.debug(f"{operation_name} request failed: {e}")
            raise TransportError(operation_name, e) from e
        return parse(response_json)

    def get_issues_of_repository(
        self, organization: str, repository: str, cursor: str | None = None
    ) -> FetchedPage:
        """
        Gets a page of open issues of the given repository.
        :param organization: The login of the organization.
        :param repository: The name of the repository.
        :param cursor: The end cursor of the previous page, or None for the first page.
        :return: The fetched page. Errors in the payload are returned in the page.
        :raises TransportError: If the request failed.
        """
        json_data = copy.deepcopy(GQLOperations.GetIssuesOfRepository)
        json_data["variables"] = {
            "org": organization,
            "repo": repository,
            "cursor": cursor,
            "issuesLimit": self.issues_page_size,
            "reactionsLimit": self.reactions_limit,
        }
        return self.execute(
            GQLOperations.GetIssuesOfRepository["operationName"],
            json_data,
            self.parser.parse_issues_of_repository_response,
        )

    def add_star(self, repo_id: str) -> StarMutationResponse:
        """
        Stars the repository with the given id.
        :param repo_id: The node id of the repository.
        :return: The starrable as confirmed by the server.
        :raises GQLResponseErrors: If the response contains errors.
        :raises TransportError: If the request failed.
        """
        json_data = copy.deepcopy(GQLOperations.AddStar)
        json_data["variables"] = {"repoId": repo_id}
        return self.execute(
            GQLOperations.AddStar["operationName"],
            json_data,
            self.parser.parse_add_star_response,
        )

    def remove_star(self, repo_id: str) -> StarMutationResponse:
        """
        Unstars the repository with the given id.
        :param repo_id: The node id of the repository.
        :return: The starrable as confirmed by the server.
        :raises GQLResponseErrors: If the response contains errors.
        :raises TransportError: If the request failed.
        """
        json_data = copy.deepcopy(GQLOperations.RemoveStar)
        json_data["variables"] = {"repoId": repo_id}
        return self.execute(
            GQLOperations.RemoveStar["operationName"],
            json_data,
            self.parser.parse_remove_star_response,
        )
