"""User anime/manga list tool for anilist-mcp."""

from ..config import get_settings
from ..core.formatter import text_response
from ..core.graphql import gql
from ..core.normalizers import norm_media_list
from ..core.variables import media_list_variables
from ..models.types import Kind
from ..queries import MEDIA_LIST_COLLECTION_QUERY
from ..utils.logger import get_logger

logger = get_logger("tools")

DESCRIPTION = """
Gets the anime or manga that a specific user has watched/read. Includes user-specific data such as score, notes, and general information such as genres, tags and recommendations.
Recommendations already present on the returned list are left out.
You can optionally provide a chunk and perChunk parameter to get a specific chunk of the data. Use this for pagination: when hasNextChunk is true, call again with chunk + 1.
If you do not provide a chunk, it will default to 1.
If you do not provide a perChunk, it will default to 10.
"""


def get_anilist_user_media(username: str, type: Kind, chunk: int = 1, perChunk: int = 10):
    logger.debug("tool_call", extra={"tool": "get-anilist-user-media", "username": username, "chunk": chunk})
    variables = media_list_variables({"username": username, "type": type, "chunk": chunk, "perChunk": perChunk})
    data = gql(MEDIA_LIST_COLLECTION_QUERY, variables)
    payload = norm_media_list(data, dedupe=get_settings().dedupe_recommendations)
    return text_response(payload)
