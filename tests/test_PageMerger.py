import pytest

from GitHubIssuesBrowser.classes.AppState import AppState
from GitHubIssuesBrowser.classes.PageMerger import merge
from GitHubIssuesBrowser.classes.gql.data.response import Error, FetchedPage


def ids(state: AppState) -> list[str]:
    return [issue.id for issue in state.issues.nodes]


class TestReplacement:
    def test_no_previous_state(self, page):
        fetched = page(["1", "2"], "c1", True)

        state = merge(None, None, fetched)

        assert state.organization == fetched.organization
        assert state.errors is None
        assert state.path == ""

    def test_replaces_previous_state(self, page):
        # Without a cursor nothing of the previous state survives, not even its edges
        previous = merge(AppState("facebook/react"), None, page(["1", "2"], "c1", True))
        fetched = page(["9"], "c9", False, stars=7)

        state = merge(previous, None, fetched)

        assert state.path == "facebook/react"
        assert state.organization == fetched.organization
        assert ids(state) == ["9"]
        assert state.repository.stargazers.total_count == 7

    def test_replacement_with_errors(self, not_found_page, page):
        previous = merge(AppState("facebook/nope"), None, page(["1"]))

        state = merge(previous, None, not_found_page)

        assert state.organization is None
        assert state.errors == [Error("Not Found", "NOT_FOUND", ["organization"])]


class TestIncrementalMerge:
    def test_appends_edges_in_fetch_order(self, page):
        # Scenario: two pages of facebook/react
        state = merge(AppState("facebook/react"), None, page(["1", "2"], "c1", True))
        state = merge(state, "c1", page(["3"], None, False))

        assert ids(state) == ["1", "2", "3"]
        assert state.issues.page_info.has_next_page is False

    test_many_pages_data = [
        ([["1"]]),
        ([["1", "2"], ["3", "4"], ["5"]]),
        ([["a"], ["b"], ["c"], ["d"], ["e", "f", "g"]]),
    ]

    @pytest.mark.parametrize("pages", test_many_pages_data)
    def test_concatenation_of_many_pages(self, page, pages):
        state = AppState("facebook/react")
        cursor = None
        for index, issue_ids in enumerate(pages):
            state = merge(state, cursor, page(issue_ids, f"c{index}", index < len(pages) - 1))
            cursor = f"c{index}"

        assert ids(state) == [_id for issue_ids in pages for _id in issue_ids]

    def test_counts_and_metadata_from_fetched_page(self, page):
        state = merge(AppState("facebook/react"), None, page(["1"], "c1", True, total_count=5, stars=42))
        state = merge(state, "c1", page(["2"], "c2", True, total_count=6, stars=50, starred=True))

        assert state.issues.total_count == 6
        assert state.issues.page_info.end_cursor == "c2"
        assert state.repository.stargazers.total_count == 50
        assert state.repository.viewer_has_starred is True

    def test_empty_page(self, page):
        previous = merge(AppState("facebook/react"), None, page(["1", "2"], "c1", True, total_count=3))

        state = merge(previous, "c1", page([], None, False, total_count=2))

        assert state.issues.edges == previous.issues.edges
        assert state.issues.total_count == 2
        assert state.issues.page_info.has_next_page is False

    def test_previous_state_is_not_mutated(self, page):
        previous = merge(AppState("facebook/react"), None, page(["1", "2"], "c1", True))
        previous_edges = list(previous.issues.edges)
        previous_organization = previous.organization

        merge(previous, "c1", page(["3"]))

        assert previous.issues.edges == previous_edges
        assert previous.organization is previous_organization
        assert ids(previous) == ["1", "2"]

    def test_error_page_keeps_organization(self, page, not_found_page):
        previous = merge(AppState("facebook/react"), None, page(["1", "2"], "c1", True))

        state = merge(previous, "c1", not_found_page)

        assert state.organization == previous.organization
        assert [error.message for error in state.errors] == ["Not Found"]

    def test_successful_page_clears_errors(self, page):
        previous = AppState("facebook/react")
        previous = merge(previous, None, page(["1"], "c1", True))
        previous = previous.replace(errors=[Error("Something went wrong")])

        state = merge(previous, "c1", page(["2"]))

        assert state.errors is None

    test_missing_issues_data = [
        (None),
        (AppState("facebook/react")),
    ]

    @pytest.mark.parametrize("previous", test_missing_issues_data)
    def test_cursor_without_previous_issues(self, page, previous):
        with pytest.raises(ValueError):
            merge(previous, "c1", page(["1"]))

    def test_page_without_repository(self, page):
        previous = merge(AppState("facebook/react"), None, page(["1"], "c1", True))
        fetched = FetchedPage(organization=None, errors=None)

        state = merge(previous, "c1", fetched)

        assert state.organization == previous.organization
        assert state.errors is None
