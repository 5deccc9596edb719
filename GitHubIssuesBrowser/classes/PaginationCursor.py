from GitHubIssuesBrowser.classes.gql.data.response import Connection


class PaginationCursor:
    """Where the next page of a Connection starts, and whether there is one."""

    def __init__(self, cursor: str | None = None, has_more: bool = True):
        self.cursor = cursor
        """The opaque end cursor of the last page, None before the first page."""
        self.has_more = has_more
        """False once the server reported there is no next page. Terminal."""

    @classmethod
    def next(cls, connection: Connection) -> "PaginationCursor":
        """Derives the cursor for the page after the given one."""
        return cls(connection.page_info.end_cursor, connection.page_info.has_next_page)

    @property
    def exhausted(self) -> bool:
        return not self.has_more

    def __repr__(self):
        return f"PaginationCursor({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, PaginationCursor)
            and self.cursor == other.cursor
            and self.has_more == other.has_more
        )
