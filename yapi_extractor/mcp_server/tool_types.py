from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, List

from mcp.types import TextContent

ToolResponse = List[TextContent]


class ErrorToolResponse(List[TextContent]):
    """Tool response whose payload has ``"status": "error"``."""


ToolHandler = Callable[[Dict[str, Any]], Awaitable[ToolResponse]]
