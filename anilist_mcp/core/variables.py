"""Tool arguments -> GraphQL variables.

Pure functions: they never mutate their input, never raise on validated
arguments and only fill behavioural defaults (page sizes, sort order, format
whitelist) the caller left unset.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..models.types import Kind, MediaFormat, MediaListSort, MediaSort, MediaType

DEFAULT_CHUNK = 1
DEFAULT_PER_CHUNK = 10
MEDIA_LIST_SORT = [MediaListSort.STARTED_ON_DESC.value]

DEFAULT_FORMATS: Dict[str, List[str]] = {
    "anime": [MediaFormat.TV.value, MediaFormat.ONA.value],
    "manga": [MediaFormat.MANGA.value],
}
DEFAULT_SEARCH_SORT = [MediaSort.POPULARITY_DESC.value, MediaSort.SCORE_DESC.value]

# fields the search normalizer rewrites instead of passing through
_SEARCH_SPECIAL = ("type", "format", "sort")

_MEDIA_TYPES: Dict[str, MediaType] = {
    "anime": MediaType.ANIME,
    "manga": MediaType.MANGA,
}


def media_type_for(kind: Kind) -> str:
    """Map the tool's kind selector onto AniList's MediaType."""
    mt = _MEDIA_TYPES.get(kind)
    # schema validation only lets "anime" | "manga" through
    assert mt is not None, f"unknown media kind: {kind!r}"
    return mt.value


def _plain(v: Any) -> Any:
    if isinstance(v, Enum):
        return v.value
    if isinstance(v, (list, tuple)):
        return [_plain(x) for x in v]
    return v


def collapse(values: Sequence[Any]) -> Optional[Any]:
    """AniList accepts a bare value or a list here: [] -> None, [x] -> x, else list."""
    values = _plain(list(values))
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return values


def user_variables(args: Mapping[str, Any]) -> Dict[str, Any]:
    return {"username": args["username"]}


def media_variables(args: Mapping[str, Any]) -> Dict[str, Any]:
    return {"id": args["id"], "type": media_type_for(args["type"])}


def media_list_variables(args: Mapping[str, Any]) -> Dict[str, Any]:
    chunk = args.get("chunk")
    per_chunk = args.get("perChunk")
    return {
        "username": args["username"],
        "type": media_type_for(args["type"]),
        "chunk": DEFAULT_CHUNK if chunk is None else chunk,
        "perChunk": DEFAULT_PER_CHUNK if per_chunk is None else per_chunk,
        "sort": list(MEDIA_LIST_SORT),
    }


def search_variables(args: Mapping[str, Any]) -> Dict[str, Any]:
    """Build SearchQuery variables.

    `format` defaults per kind and `sort` to popularity/score; both are then
    collapsed. Everything else passes through, and unset fields are left out
    so AniList applies its own defaults.
    """
    kind = args["type"]
    out: Dict[str, Any] = {
        k: _plain(v) for k, v in args.items()
        if k not in _SEARCH_SPECIAL and v is not None
    }
    out["type"] = media_type_for(kind)

    formats = args.get("format")
    if formats is None:
        formats = DEFAULT_FORMATS[kind]
    fmt = collapse(formats)
    if fmt is not None:
        out["format"] = fmt

    sort = args.get("sort")
    if sort is None:
        sort = DEFAULT_SEARCH_SORT
    srt = collapse(sort)
    if srt is not None:
        out["sort"] = srt

    return out
