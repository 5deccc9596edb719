class StarMutationResponse:
    """The `starrable` returned by the addStar and removeStar mutations."""

    def __init__(self, viewer_has_starred: bool):
        self.viewer_has_starred = viewer_has_starred

    def __repr__(self):
        return f"StarMutationResponse({self.__dict__})"

    def __eq__(self, other):
        return isinstance(other, StarMutationResponse) and self.viewer_has_starred == other.viewer_has_starred
