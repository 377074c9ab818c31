"""Search tool for anilist-mcp."""

from typing import List, Optional

from ..core.formatter import text_response
from ..core.graphql import gql
from ..core.normalizers import norm_search
from ..core.variables import search_variables
from ..models.types import Kind, MediaFormat, MediaSeason, MediaSort, MediaSource, MediaStatus
from ..queries import SEARCH_QUERY
from ..utils.logger import get_logger

logger = get_logger("tools")

DESCRIPTION = (
    "Searches for anime or manga on Anilist with provided criteria. Genres and tags must be valid "
    "Anilist tags; if you have access to genres and tags from previously fetched media, reference "
    "those directly as they are guaranteed to exist. As a general rule of thumb, genres are general "
    "categories (ex: Romance), while tags are more specific, so if unsure, guess genre strings but "
    "not tag strings. If no format is given, anime searches are limited to TV and ONA and manga "
    "searches to MANGA."
)


def search_anilist(
    type: Kind,
    page: Optional[int] = None,
    id: Optional[int] = None,
    isAdult: Optional[bool] = None,
    search: Optional[str] = None,
    format: Optional[List[MediaFormat]] = None,
    status: Optional[MediaStatus] = None,
    countryOfOrigin: Optional[str] = None,
    source: Optional[MediaSource] = None,
    season: Optional[MediaSeason] = None,
    seasonYear: Optional[int] = None,
    year: Optional[str] = None,
    onList: Optional[bool] = None,
    yearLesser: Optional[int] = None,
    yearGreater: Optional[int] = None,
    episodeLesser: Optional[int] = None,
    episodeGreater: Optional[int] = None,
    durationLesser: Optional[int] = None,
    durationGreater: Optional[int] = None,
    chapterLesser: Optional[int] = None,
    chapterGreater: Optional[int] = None,
    volumeLesser: Optional[int] = None,
    volumeGreater: Optional[int] = None,
    licensedBy: Optional[List[int]] = None,
    isLicensed: Optional[bool] = None,
    genres: Optional[List[str]] = None,
    excludedGenres: Optional[List[str]] = None,
    tags: Optional[List[str]] = None,
    excludedTags: Optional[List[str]] = None,
    minimumTagRank: Optional[int] = None,
    sort: Optional[List[MediaSort]] = None,
    perPage: Optional[int] = None,
):
    # argument names are the GraphQL variable names
    args = dict(locals())
    logger.debug("tool_call", extra={"tool": "search-anilist", "type": type})
    data = gql(SEARCH_QUERY, search_variables(args))
    return text_response(norm_search(data))
