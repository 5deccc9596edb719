from GitHubIssuesBrowser.classes.Exceptions import InvalidPathException


def split_path(path: str) -> tuple[str, str]:
    """
    Splits an "organization/repository" path into its two parts.
    :raises InvalidPathException: if the path doesn't have exactly two non-empty parts.
    """
    parts = path.strip().split("/") if isinstance(path, str) else []
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise InvalidPathException(f"Expected a path like 'organization/repository', got '{path}'")
    return parts[0].strip(), parts[1].strip()
