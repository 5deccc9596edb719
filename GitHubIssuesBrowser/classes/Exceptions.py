class StaleResponseError(Exception):
    """Raised when a response arrives for a path that is no longer the current one."""

    def __init__(self, response_path: str, current_path: str):
        self.response_path = response_path
        self.current_path = current_path

    def __str__(self):
        return f"Response for '{self.response_path}' arrived after the path changed to '{self.current_path}'"


class InvalidPathException(Exception):
    pass


class InvalidStateException(Exception):
    pass


class EnvVarNotSetException(Exception):
    pass
