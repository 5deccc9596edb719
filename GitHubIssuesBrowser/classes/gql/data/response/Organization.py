from GitHubIssuesBrowser.classes.gql.data.response.Pagination import Connection


class Reaction:
    def __init__(self, _id: str, content: str):
        self.id = _id
        self.content = content

    def __repr__(self):
        return f"Reaction({self.__dict__})"

    def __eq__(self, other):
        return isinstance(other, Reaction) and self.id == other.id and self.content == other.content


class Issue:
    def __init__(self, _id: str, title: str, url: str, reactions: Connection[Reaction]):
        self.id = _id
        self.title = title
        self.url = url
        self.reactions = reactions

    def __repr__(self):
        return f"Issue({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, Issue)
            and self.id == other.id
            and self.title == other.title
            and self.url == other.url
            and self.reactions == other.reactions
        )


class Repository:
    class Stargazers:
        def __init__(self, total_count: int):
            self.total_count = total_count

        def __repr__(self):
            return f"Stargazers({self.__dict__})"

        def __eq__(self, other):
            return isinstance(other, Repository.Stargazers) and self.total_count == other.total_count

    def __init__(
        self,
        _id: str,
        name: str,
        url: str,
        viewer_has_starred: bool,
        stargazers: Stargazers,
        issues: Connection[Issue],
    ):
        self.id = _id
        self.name = name
        self.url = url
        self.viewer_has_starred = viewer_has_starred
        """Written together with `stargazers.total_count`, never on its own."""
        self.stargazers = stargazers
        self.issues = issues

    def __repr__(self):
        return f"Repository({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, Repository)
            and self.id == other.id
            and self.name == other.name
            and self.url == other.url
            and self.viewer_has_starred == other.viewer_has_starred
            and self.stargazers == other.stargazers
            and self.issues == other.issues
        )


class Organization:
    def __init__(self, name: str, url: str, repository: Repository | None):
        self.name = name
        self.url = url
        self.repository = repository

    def __repr__(self):
        return f"Organization({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, Organization)
            and self.name == other.name
            and self.url == other.url
            and self.repository == other.repository
        )


class FetchedPage:
    """The parsed response to an issues page request. `organization` is None when the API could not resolve it."""

    def __init__(self, organization: Organization | None, errors: list | None):
        self.organization = organization
        self.errors = errors

    def __repr__(self):
        return f"FetchedPage({self.__dict__})"
