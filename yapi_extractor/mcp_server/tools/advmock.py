"""Advanced mock registration tool handler."""

from __future__ import annotations

from typing import Any, Dict

from yapi_extractor.mcp_server.responses import _model_dump, _success
from yapi_extractor.mcp_server.state import ensure_registrar, ensure_session
from yapi_extractor.mcp_server.tool_types import ToolResponse
from yapi_extractor.validation.models import SaveAdvancedMockInput, SaveAdvancedMockOutput


async def _tool_save_advanced_mock(arguments: Dict[str, Any]) -> ToolResponse:
    payload = SaveAdvancedMockInput.model_validate(arguments)
    await ensure_session().ensure_session()
    scenario = await ensure_registrar().register_mock(
        interface_id=payload.interface_id,
        project_id=payload.project_id,
        name=payload.name,
        mock_data=payload.mock_data,
    )
    output = SaveAdvancedMockOutput(
        interface_id=payload.interface_id,
        project_id=payload.project_id,
        name=payload.name,
        registered_name=scenario.name,
    )
    return _success(_model_dump(output), message=f"Advanced mock saved: {payload.name}")
