class Error:
    def __init__(self, message: str, _type: str | None = None, path: list[str | int] | None = None):
        self.message = message
        self.type = _type
        self.path = path

    def __repr__(self):
        return f"Error({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, Error)
            and self.message == other.message
            and self.type == other.type
            and self.path == other.path
        )
