"""Exceptions raised by the AniList layer."""


class AniListError(RuntimeError):
    """Base error for anilist-mcp."""


class GraphQLError(AniListError):
    """Upstream answered with errors and no data, or with an unreadable body."""


class MissingDataError(AniListError):
    """Upstream returned no object where the tool cannot fall back to a message."""
