"""Wrap tool payloads in the MCP response envelope."""

import json
from typing import Any, List

from mcp.types import TextContent


def text_response(value: Any) -> List[TextContent]:
    """One text item holding `value` as JSON; strings become JSON string literals."""
    return [TextContent(type="text", text=json.dumps(value, ensure_ascii=False))]
