"""User profile tool for anilist-mcp."""

from ..core.formatter import text_response
from ..core.graphql import gql
from ..core.normalizers import norm_user
from ..core.variables import user_variables
from ..queries import USER_QUERY
from ..utils.logger import get_logger

logger = get_logger("tools")

DESCRIPTION = "Gets user data for a provided username from Anilist"


def get_anilist_user(username: str):
    logger.debug("tool_call", extra={"tool": "get-anilist-user", "username": username})
    data = gql(USER_QUERY, user_variables({"username": username}))
    return text_response(norm_user(data))
