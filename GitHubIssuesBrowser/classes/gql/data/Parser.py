from typing import Callable, Any, ContextManager, TypeVar

from GitHubIssuesBrowser.classes.gql.Errors import (
    InvalidJsonShapeException,
    GQLResponseErrors,
)
from GitHubIssuesBrowser.classes.gql.data.response.Error import Error
from GitHubIssuesBrowser.classes.gql.data.response.Organization import (
    FetchedPage,
    Issue,
    Organization,
    Reaction,
    Repository,
)
from GitHubIssuesBrowser.classes.gql.data.response.Pagination import (
    Connection,
    Edge,
    PageInfo,
)
from GitHubIssuesBrowser.classes.gql.data.response.Star import StarMutationResponse

T = TypeVar("T")


class JsonParentContext(ContextManager):
    """Context Manager that appends the parent name to InvalidJsonShapeExceptions"""

    def __init__(self, name: str | int):
        self.name = name

    def __exit__(self, exc_type, exc_val, exc_tb):
        if isinstance(exc_val, InvalidJsonShapeException):
            exc_val.path.append(self.name)


def expect_dict(value: Any) -> dict:
    """
    Parser that checks that the value is a dict then returns it.
    :raises InvalidJsonShapeException: if the value is not a dict
    """
    if not isinstance(value, dict):
        raise InvalidJsonShapeException([], "dict expected")
    return value


def expect_list(value: Any) -> list:
    """
    Parser that checks that the value is a list then returns it.
    :raises InvalidJsonShapeException: if the value is not a list.
    """
    if not isinstance(value, list):
        raise InvalidJsonShapeException([], "list expected")
    return value


def expect_str(value: Any) -> str:
    """
    Parser that checks that the value is a string then returns it.
    :raises InvalidJsonShapeException: if the value is not a string.
    """
    if not isinstance(value, str):
        raise InvalidJsonShapeException([], "str expected")
    return value


def expect_int(value: Any) -> int:
    """
    Parser that checks that the value is an int then returns it.
    :raises InvalidJsonShapeException: if the value is not an int.
    """
    # bool is a subclass of int
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidJsonShapeException([], "int expected")
    return value


def expect_bool(value: Any) -> bool:
    """
    Parser that checks that the value is a bool then returns it.
    :raises InvalidJsonShapeException: if the value is not a bool.
    """
    if not isinstance(value, bool):
        raise InvalidJsonShapeException([], "bool expected")
    return value


def expect_str_or_int(value: Any) -> str | int:
    if isinstance(value, str):
        return value
    return expect_int(value)


def parse_expected_value(
    source: dict, property_name: str, type_parser: Callable[[Any], T]
) -> T:
    """
    Parses a value, with the given property name, in the given dict, and parses it using the given parser.
    :param source: The parent object, containing the value to parse.
    :param property_name: The property name of the value to parse.
    :param type_parser: A parser for the type of the value.
    :return: The parsed value.
    :raises InvalidJsonShapeException: if the property is not in the dict or the value cannot be parsed.
    """
    if property_name not in source:
        raise InvalidJsonShapeException([property_name], "value should not be None")
    with JsonParentContext(property_name):
        return type_parser(source[property_name])


def parse_value(
    source: dict,
    property_name: str,
    type_parser: Callable[[Any], T],
    default: T | None = None,
) -> T | None:
    """
    Parses a value, with the given property name, in the given dict, and parses it using the given parser. The property
    may not exist in the source, in which case we return the default value.
    :param source: The parent object, containing the value to parse.
    :param property_name: The property name of the value to parse.
    :param type_parser: A parser for the type of the value.
    :param default: The default value to return if the value cannot be found (defaults to None).
    :return: The parsed value or the default if the property cannot be found.
    """
    if property_name not in source:
        return default
    with JsonParentContext(property_name):
        return type_parser(source[property_name])


def list_parser(value_type_parser: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """
    Returns a parser function that parses a value as a list and each item in the list using the given parser.
    The source list is left untouched.
    :param value_type_parser: The parser for each value in the list.
    :return: The list parser function.
    """

    def inner_parser(source: Any) -> list[T]:
        expect_list(source)

        parsed = []
        for index, item in enumerate(source):
            with JsonParentContext(index):
                parsed.append(value_type_parser(item))
        return parsed

    return inner_parser


def optional_parser(
    value_type_parser: Callable[[Any], T],
) -> Callable[[Any], T | None]:
    """
    Returns a parser function that parses a value as either None or using the given parser.
    :param value_type_parser: The parser for the type of the value.
    :return: The parser function.
    """

    def inner_parser(value: Any) -> T | None:
        if value is None:
            return None
        else:
            return value_type_parser(value)

    return inner_parser


# Parsers for GQL response types


def error_parser(value: Any) -> Error:
    expect_dict(value)
    return Error(
        message=parse_expected_value(value, "message", expect_str),
        _type=parse_value(value, "type", optional_parser(expect_str)),
        path=parse_value(value, "path", optional_parser(list_parser(expect_str_or_int))),
    )


def page_info_parser(value: Any) -> PageInfo:
    expect_dict(value)
    return PageInfo(
        has_next_page=parse_expected_value(value, "hasNextPage", expect_bool),
        end_cursor=parse_value(value, "endCursor", optional_parser(expect_str)),
    )


def connection_parser(
    value_parser: Callable[[Any], T],
) -> Callable[[Any], Connection[T]]:
    """
    Gets a parser for Connection values.
    :param value_parser: The parser for the `node` of the paginated data.
    :return: The Connection parser.
    """

    def edge_parser(edge: Any) -> Edge[T]:
        expect_dict(edge)
        node = parse_expected_value(edge, "node", value_parser)
        return Edge(node)

    def inner_parser(container: Any) -> Connection[T]:
        expect_dict(container)
        edges = parse_expected_value(container, "edges", list_parser(edge_parser))
        total_count = parse_expected_value(container, "totalCount", expect_int)
        page_info = parse_expected_value(container, "pageInfo", page_info_parser)
        return Connection(edges, total_count, page_info)

    return inner_parser


def reaction_parser(value: Any) -> Reaction:
    expect_dict(value)
    return Reaction(
        _id=parse_expected_value(value, "id", expect_str),
        content=parse_expected_value(value, "content", expect_str),
    )


def issue_parser(value: Any) -> Issue:
    expect_dict(value)
    return Issue(
        _id=parse_expected_value(value, "id", expect_str),
        title=parse_expected_value(value, "title", expect_str),
        url=parse_expected_value(value, "url", expect_str),
        reactions=parse_expected_value(
            value, "reactions", connection_parser(reaction_parser)
        ),
    )


def stargazers_parser(value: Any) -> Repository.Stargazers:
    expect_dict(value)
    return Repository.Stargazers(
        total_count=parse_expected_value(value, "totalCount", expect_int)
    )


def repository_parser(value: Any) -> Repository:
    expect_dict(value)
    return Repository(
        _id=parse_expected_value(value, "id", expect_str),
        name=parse_expected_value(value, "name", expect_str),
        url=parse_expected_value(value, "url", expect_str),
        viewer_has_starred=parse_expected_value(value, "viewerHasStarred", expect_bool),
        stargazers=parse_expected_value(value, "stargazers", stargazers_parser),
        issues=parse_expected_value(value, "issues", connection_parser(issue_parser)),
    )


def organization_parser(value: Any) -> Organization:
    expect_dict(value)
    return Organization(
        name=parse_expected_value(value, "name", expect_str),
        url=parse_expected_value(value, "url", expect_str),
        repository=parse_expected_value(
            value, "repository", optional_parser(repository_parser)
        ),
    )


def starrable_parser(value: Any) -> StarMutationResponse:
    expect_dict(value)
    return StarMutationResponse(
        viewer_has_starred=parse_expected_value(value, "viewerHasStarred", expect_bool)
    )


class Parser:
    """Class that can parse responses from the GitHub GraphQL API."""

    def parse_base_response(
        self, response: Any, operation_name: str, expect_no_errors: bool
    ) -> tuple[list[Error], dict]:
        """
        Minimal parser for a base GQL response. Gets the `errors` and `data` fields.
        :param response: The response to parse.
        :param operation_name: The name of the operation, used when raising.
        :param expect_no_errors: Whether to expect errors.
        :return: A tuple of a list of any errors and the data dict.
        :raises GQLResponseErrors: If `expect_no_errors` is True and errors were found.
        """
        response_dict = expect_dict(response)
        if response_dict == {}:
            raise InvalidJsonShapeException([], "response was empty")
        errors = parse_value(
            response_dict, "errors", optional_parser(list_parser(error_parser)), []
        )
        data = parse_value(response_dict, "data", optional_parser(expect_dict))
        if expect_no_errors and errors:
            raise GQLResponseErrors(operation_name, errors)
        return errors or [], data or {}

    def parse_issues_of_repository_response(self, response: Any) -> FetchedPage:
        """
        Parses responses to GetIssuesOfRepository requests. Errors in the payload are returned, not raised, since a
        page with errors is still committed to the AppState.
        :param response: The response to parse.
        :return: The fetched page.
        :raises InvalidJsonShapeException: If there is an issue parsing the response.
        """
        errors, data = self.parse_base_response(response, "GetIssuesOfRepository", False)
        with JsonParentContext("data"):
            organization = parse_value(
                data, "organization", optional_parser(organization_parser)
            )
        return FetchedPage(organization=organization, errors=errors or None)

    def __parse_star_response(self, response: Any, operation_name: str, field: str):
        _, data = self.parse_base_response(response, operation_name, True)
        with JsonParentContext("data"):
            mutation = parse_expected_value(data, field, expect_dict)
            with JsonParentContext(field):
                return parse_expected_value(mutation, "starrable", starrable_parser)

    def parse_add_star_response(self, response: Any) -> StarMutationResponse:
        """
        Parses responses to AddStar requests.
        :param response: The response to parse.
        :return: The parsed response.
        :raises: GQLResponseErrors: If the response contains errors.
        :raises: InvalidJsonShapeException: If there is an issue parsing the response.
        """
        return self.__parse_star_response(response, "AddStar", "addStar")

    def parse_remove_star_response(self, response: Any) -> StarMutationResponse:
        """
        Parses responses to RemoveStar requests.
        :param response: The response to parse.
        :return: The parsed response.
        :raises: GQLResponseErrors: If the response contains errors.
        :raises: InvalidJsonShapeException: If there is an issue parsing the response.
        """
        return self.__parse_star_response(response, "RemoveStar", "removeStar")
