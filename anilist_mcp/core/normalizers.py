"""Reshape AniList responses into tool payloads."""

import copy
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from ..models.types import MediaListPayload
from .errors import MissingDataError

USER_NOT_FOUND = "Failed to fetch user data."
MEDIA_NOT_FOUND = "Failed to fetch media data."
SEARCH_NOT_FOUND = "Failed to fetch search results."
MEDIA_LIST_NOT_FOUND = "Failed to fetch data"


def norm_user(data: Dict[str, Any]) -> Union[Dict[str, Any], str]:
    user = data.get("User")
    return USER_NOT_FOUND if user is None else user


def norm_media(data: Dict[str, Any]) -> Union[Dict[str, Any], str]:
    media = data.get("Media")
    return MEDIA_NOT_FOUND if media is None else media


def norm_search(data: Dict[str, Any]) -> Union[List[Dict[str, Any]], str]:
    media = (data.get("Page") or {}).get("media")
    # an empty page is a valid answer, only a missing one falls back
    return SEARCH_NOT_FOUND if media is None else media


def flatten_lists(collection: Dict[str, Any]) -> List[Optional[Dict[str, Any]]]:
    """Concatenate the entries of every list, keeping upstream order."""
    out: List[Optional[Dict[str, Any]]] = []
    for lst in collection.get("lists") or []:
        if not lst:
            continue
        out.extend(lst.get("entries") or [])
    return out


def _media_id(entry: Optional[Dict[str, Any]]) -> Optional[int]:
    return ((entry or {}).get("media") or {}).get("id")


def _rec_id(node: Optional[Dict[str, Any]]) -> Optional[int]:
    return ((node or {}).get("mediaRecommendation") or {}).get("id")


def _without_known(entry: Dict[str, Any], known: Set[int]) -> Dict[str, Any]:
    new = copy.deepcopy(entry)
    recs = (new.get("media") or {}).get("recommendations")
    if not recs or recs.get("nodes") is None:
        return new
    recs["nodes"] = [n for n in recs["nodes"] if _rec_id(n) not in known]
    return new


def dedupe_recommendations(entries: Iterable[Optional[Dict[str, Any]]]) -> List[Optional[Dict[str, Any]]]:
    """Drop recommendation nodes that point at media already on the list.

    Works on deep copies; every entry is filtered on its own against the ids
    of the whole list. Nodes without an id are kept.
    """
    entries = list(entries)
    known = {i for i in (_media_id(e) for e in entries) if i is not None}
    return [_without_known(e, known) if e else e for e in entries]


def norm_media_list(data: Dict[str, Any], dedupe: bool = True) -> MediaListPayload:
    collection = data.get("MediaListCollection")
    if collection is None:
        raise MissingDataError(MEDIA_LIST_NOT_FOUND)

    entries = flatten_lists(collection)
    if dedupe:
        entries = dedupe_recommendations(entries)
    return {"showsWatched": entries, "hasNextChunk": collection.get("hasNextChunk")}
