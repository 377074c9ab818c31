"""Models and type definitions for anilist-mcp."""

from .types import (
    Kind, MediaType, MediaFormat, MediaStatus, MediaSource, MediaSeason,
    MediaSort, MediaListSort, MediaListPayload,
)

__all__ = [
    "Kind", "MediaType", "MediaFormat", "MediaStatus", "MediaSource", "MediaSeason",
    "MediaSort", "MediaListSort", "MediaListPayload",
]
