"""MCP tools for anilist-mcp.

`TOOLS` is the dispatch table: tool name -> description + handler. It is
built once at import and bound into the FastMCP app by `register_tools`.
"""

from typing import Callable, NamedTuple, Tuple

from . import media, media_list, search, user


class ToolBinding(NamedTuple):
    name: str
    description: str
    handler: Callable


TOOLS: Tuple[ToolBinding, ...] = (
    ToolBinding("get-anilist-user", user.DESCRIPTION, user.get_anilist_user),
    ToolBinding("get-anilist-user-media", media_list.DESCRIPTION, media_list.get_anilist_user_media),
    ToolBinding("search-anilist", search.DESCRIPTION, search.search_anilist),
    ToolBinding("get-anilist-media", media.DESCRIPTION, media.get_anilist_media),
)


def register_tools(mcp):
    """Bind every entry of TOOLS to a FastMCP instance."""
    for t in TOOLS:
        # handlers already return content blocks
        mcp.tool(name=t.name, description=t.description, structured_output=False)(t.handler)


__all__ = ["ToolBinding", "TOOLS", "register_tools", "media", "media_list", "search", "user"]
