"""Health check tool handler."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from yapi_extractor.mcp_server.responses import _model_dump, _success
from yapi_extractor.mcp_server.state import ensure_session
from yapi_extractor.mcp_server.tool_types import ToolResponse
from yapi_extractor.validation.models import PingOutput

SERVICE_NAME = "yapi-extractor"


async def _tool_ping(arguments: Dict[str, Any]) -> ToolResponse:
    output = PingOutput(
        status="ok",
        service=SERVICE_NAME,
        timestamp=datetime.now(timezone.utc).isoformat(),
        session_active=ensure_session().is_valid,
    )
    return _success(_model_dump(output))
