"""anilist-mcp package.

Exports the FastMCP app factory `create_app`; tools live under `anilist_mcp.tools`.
"""
from .server import create_app

__all__ = ["create_app"]
