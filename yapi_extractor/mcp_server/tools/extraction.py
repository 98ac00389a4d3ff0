"""Interface extraction tool handler."""

from __future__ import annotations

from typing import Any, Dict

from yapi_extractor.mcp_server.responses import _model_dump, _success
from yapi_extractor.mcp_server.state import ensure_extractor
from yapi_extractor.mcp_server.tool_types import ToolResponse
from yapi_extractor.validation.models import ExtractInterfaceInput


async def _tool_extract_interface(arguments: Dict[str, Any]) -> ToolResponse:
    payload = ExtractInterfaceInput.model_validate(arguments)
    extractor = ensure_extractor()
    output = await extractor.extract(payload.interface_id, payload.generate_type)
    return _success(_model_dump(output))
