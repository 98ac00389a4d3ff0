"""Local file persistence tool handler."""

from __future__ import annotations

from typing import Any, Dict

from yapi_extractor.mcp_server.responses import _model_dump, _success
from yapi_extractor.mcp_server.state import ensure_persister
from yapi_extractor.mcp_server.tool_types import ToolResponse
from yapi_extractor.validation.models import SaveGeneratedFilesInput, SaveGeneratedFilesOutput


async def _tool_save_generated_files(arguments: Dict[str, Any]) -> ToolResponse:
    payload = SaveGeneratedFilesInput.model_validate(arguments)
    persister = ensure_persister()
    written = persister.persist(
        payload.interface_id,
        mock_data=payload.mock_data,
        type_definitions=payload.type_definitions,
    )
    output = SaveGeneratedFilesOutput(
        interface_id=payload.interface_id,
        files=[str(path) for path in written],
    )
    return _success(_model_dump(output), message=f"Files saved: {payload.interface_id}")
