from typing import Generic, TypeVar


class PageInfo:
    """Information about the current pagination state."""

    def __init__(self, has_next_page: bool, end_cursor: str | None = None):
        self.has_next_page = has_next_page
        """Whether there are more pages available."""
        self.end_cursor = end_cursor
        """The cursor at the end of the page. Opaque, only ever passed back to the API."""

    def __repr__(self) -> str:
        return f"PageInfo({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, PageInfo)
            and self.has_next_page == other.has_next_page
            and self.end_cursor == other.end_cursor
        )


T = TypeVar("T")


class Edge(Generic[T]):
    """Representation of a Connection Edge."""

    def __init__(self, node: T):
        self.node = node
        """The entity at this point of the Connection."""

    def __repr__(self) -> str:
        return f"Edge({self.__dict__})"

    def __eq__(self, other):
        return isinstance(other, Edge) and self.node == other.node


class Connection(Generic[T]):
    """Representation of a GQL Connection: a page of edges, the total count and the pagination state."""

    def __init__(self, edges: list[Edge[T]], total_count: int, page_info: PageInfo):
        self.edges = edges
        """The "edges" are a wrapper containing the actual value we want. Append-only across pages."""
        self.total_count = total_count
        """The total number of nodes in the Connection, not just in this page."""
        self.page_info = page_info
        """Information about the current pagination state."""

    @property
    def nodes(self) -> list[T]:
        return [edge.node for edge in self.edges]

    def __repr__(self) -> str:
        return f"Connection({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, Connection)
            and self.edges == other.edges
            and self.total_count == other.total_count
            and self.page_info == other.page_info
        )
