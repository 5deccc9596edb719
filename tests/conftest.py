import pytest

from GitHubIssuesBrowser.classes.gql.data.Parser import Parser


def issue_json(_id: str) -> dict:
    return {
        "id": _id,
        "title": f"Issue {_id}",
        "url": f"https://github.com/facebook/react/issues/{_id}",
        "reactions": {
            "edges": [{"node": {"id": f"RE_{_id}", "content": "THUMBS_UP"}}],
            "totalCount": 1,
            "pageInfo": {"endCursor": f"r{_id}", "hasNextPage": False},
        },
    }


def page_json(
    issue_ids: list[str],
    end_cursor: str | None = None,
    has_next_page: bool = False,
    total_count: int = 3,
    stars: int = 42,
    starred: bool = False,
    repo_id: str = "R_react",
) -> dict:
    return {
        "data": {
            "organization": {
                "name": "Meta",
                "url": "https://github.com/facebook",
                "repository": {
                    "id": repo_id,
                    "name": "react",
                    "url": "https://github.com/facebook/react",
                    "stargazers": {"totalCount": stars},
                    "viewerHasStarred": starred,
                    "issues": {
                        "edges": [{"node": issue_json(_id)} for _id in issue_ids],
                        "totalCount": total_count,
                        "pageInfo": {"endCursor": end_cursor, "hasNextPage": has_next_page},
                    },
                },
            }
        }
    }


def not_found_json() -> dict:
    return {
        "data": {"organization": None},
        "errors": [
            {
                "type": "NOT_FOUND",
                "path": ["organization"],
                "locations": [{"line": 2, "column": 3}],
                "message": "Not Found",
            }
        ],
    }


def star_json(field: str, starred: bool) -> dict:
    return {"data": {field: {"starrable": {"viewerHasStarred": starred}}}}


@pytest.fixture
def parser():
    return Parser()


@pytest.fixture
def page(parser):
    """Builds a parsed FetchedPage."""

    def build(issue_ids, end_cursor=None, has_next_page=False, **kwargs):
        return parser.parse_issues_of_repository_response(
            page_json(issue_ids, end_cursor, has_next_page, **kwargs)
        )

    return build


@pytest.fixture
def not_found_page(parser):
    return parser.parse_issues_of_repository_response(not_found_json())


@pytest.fixture
def raw_page():
    """Builds an unparsed issues page payload."""
    return page_json


@pytest.fixture
def raw_not_found():
    return not_found_json()


@pytest.fixture
def raw_star():
    """Builds an unparsed addStar or removeStar payload."""
    return star_json
