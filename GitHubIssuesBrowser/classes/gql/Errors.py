import abc

from GitHubIssuesBrowser.classes.gql.data.response import Error


class GQLError(abc.ABC, Exception):
    """Abstract base class for GQL errors."""


class GQLResponseErrors(GQLError):
    """Raised when a GQL response contained Errors."""

    def __init__(self, operation_name: str, errors: list[Error]):
        self.operation_name = operation_name
        """The name of the GQL operation."""
        self.errors = errors
        """The list of errors in the response."""

    def __str__(self):
        return f"GQL Operation '{self.operation_name}' returned errors: {self.errors}"


class TransportError(GQLError):
    """Raised when the request itself failed: no connection, a timeout or a non-2xx status."""

    def __init__(self, operation_name: str, cause: Exception):
        self.operation_name = operation_name
        """The name of the GQL operation."""
        self.cause = cause
        """The underlying requests exception."""

    def __str__(self):
        return f"GQL Operation '{self.operation_name}' failed: {self.cause}"


class InvalidJsonShapeException(Exception):
    """Raised when a GQL response has an unexpected shape."""

    def __init__(self, path: list[str | int], message: str):
        self.path = path
        """The path in the JSON to the unexpected value."""
        self.message = message
        """Information about the unexpected value."""

    def __str__(self):
        def render_path_item(item: int | str) -> str:
            if isinstance(item, int):
                return str(item)
            else:
                return f'"{item}"'

        return f'JSON at [{", ".join(map(render_path_item, reversed(self.path)))}] has an invalid shape: {self.message}'
