"""MCP server response helpers.

This module holds low-level helpers used by MCP tool handlers and routing:
- JSON serialization helpers
- success/error response formatting
- Pydantic validation error formatting
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from mcp.types import TextContent
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from yapi_extractor.mcp_server.tool_types import ErrorToolResponse, ToolResponse
from yapi_extractor.validation.models import ErrorResponse


def _json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for non-standard types."""
    # Handle Pydantic models
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json", by_alias=True)
    # Fallback
    return str(obj)


def _json_text(payload: Dict[str, Any]) -> TextContent:
    return TextContent(
        type="text",
        text=json.dumps(payload, indent=2, ensure_ascii=False, default=_json_serializer),
    )


def _success(data: Any, message: Optional[str] = None) -> ToolResponse:
    payload: Dict[str, Any] = {"status": "success", "data": data}
    if message:
        payload["message"] = message
    return [_json_text(payload)]


def _error(
    code: str, message: str, recovery: str, details: Optional[Dict[str, Any]] = None
) -> ToolResponse:
    error_model = ErrorResponse(
        error_code=code,
        message=message,
        recovery_strategy=recovery,
        details=details,
    )
    payload = {"status": "error", **error_model.model_dump(mode="json")}
    return ErrorToolResponse([_json_text(payload)])


def _handle_validation_error(exc: PydanticValidationError, tool: str) -> ToolResponse:
    errors = exc.errors(include_url=False, include_context=False)
    details = {"validation_errors": errors}

    # Build helpful recovery message based on error types
    missing_fields = [e["loc"][0] for e in errors if e["type"] == "missing"]
    invalid_fields = [e["loc"][0] for e in errors if e["type"] != "missing"]

    recovery_msg = "Input validation failed. "
    if missing_fields:
        recovery_msg += f"MISSING REQUIRED FIELDS: {', '.join(str(f) for f in missing_fields)}. "
    if invalid_fields:
        recovery_msg += f"INVALID VALUES: {', '.join(str(f) for f in invalid_fields)}. "
    recovery_msg += "Check the tool's inputSchema for required parameters and their types, correct your input, and retry."

    return _error(
        code="INVALID_ARGUMENTS",
        message=f"{tool} failed: input payload failed validation. {len(errors)} error(s) found.",
        recovery=recovery_msg,
        details=details,
    )


def _model_dump(model: BaseModel) -> Dict[str, Any]:
    """Convert a Pydantic model to a JSON-ready dictionary using the wire (camelCase) names."""
    return model.model_dump(mode="json", by_alias=True)
