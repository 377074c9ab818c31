"""Core functionality for anilist-mcp."""

from .errors import AniListError, GraphQLError, MissingDataError
from .formatter import text_response
from .graphql import gql
from .http_client import http_post
from .normalizers import (
    norm_user, norm_media, norm_search, norm_media_list,
    flatten_lists, dedupe_recommendations,
)
from .variables import (
    media_type_for, collapse,
    user_variables, media_variables, media_list_variables, search_variables,
)

__all__ = [
    "AniListError", "GraphQLError", "MissingDataError",
    "text_response",
    "gql", "http_post",
    "norm_user", "norm_media", "norm_search", "norm_media_list",
    "flatten_lists", "dedupe_recommendations",
    "media_type_for", "collapse",
    "user_variables", "media_variables", "media_list_variables", "search_variables",
]
