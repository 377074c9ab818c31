"""Media detail tool for anilist-mcp."""

from ..core.formatter import text_response
from ..core.graphql import gql
from ..core.normalizers import norm_media
from ..core.variables import media_variables
from ..models.types import Kind
from ..queries import MEDIA_QUERY
from ..utils.logger import get_logger

logger = get_logger("tools")

DESCRIPTION = "Gets information about a specific media item on Anilist from its id"


def get_anilist_media(id: int, type: Kind):
    logger.debug("tool_call", extra={"tool": "get-anilist-media", "id": id, "type": type})
    data = gql(MEDIA_QUERY, media_variables({"id": id, "type": type}))
    return text_response(norm_media(data))
