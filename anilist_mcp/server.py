# SPDX-License-Identifier: MIT
"""
anilist-mcp server entrypoint.

Wires FastMCP (stdio transport) with the tool table under anilist_mcp/tools/.
"""

from __future__ import annotations

import sys

from mcp.server.fastmcp import FastMCP

from .config import get_settings
from .tools import register_tools
from .utils.logger import get_logger, setup_logging

logger = get_logger("server")


def create_app() -> FastMCP:
    mcp = FastMCP("anilist-mcp")
    register_tools(mcp)
    return mcp


def main() -> None:
    setup_logging()
    try:
        setup_logging(get_settings().log_level)
        app = create_app()
        logger.info("Anilist MCP Server running on stdio")
        app.run()
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
