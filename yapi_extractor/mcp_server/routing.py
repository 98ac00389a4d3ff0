"""Tool routing and dispatch for MCP server."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from yapi_extractor.errors import map_error_for_mcp
from yapi_extractor.exceptions import YapiExtractorError
from yapi_extractor.logger import Logger

from yapi_extractor.mcp_server.responses import _error, _handle_validation_error
from yapi_extractor.mcp_server.tool_types import ToolHandler, ToolResponse

from yapi_extractor.mcp_server.tools.advmock import _tool_save_advanced_mock
from yapi_extractor.mcp_server.tools.discovery import _tool_ping
from yapi_extractor.mcp_server.tools.extraction import _tool_extract_interface
from yapi_extractor.mcp_server.tools.files import _tool_save_generated_files


HANDLERS: Dict[str, ToolHandler] = {
    "ping": _tool_ping,
    "extract_yapi_interface": _tool_extract_interface,
    "save_generated_files": _tool_save_generated_files,
    "save_advanced_mock": _tool_save_advanced_mock,
}


async def dispatch_tool_call(
    *,
    name: str,
    arguments: Dict[str, Any],
    logger: Logger,
) -> ToolResponse:
    logger.info("Tool invocation started", tool=name, args_keys=list(arguments.keys()))

    handler = HANDLERS.get(name)
    if handler is None:
        logger.error("Unknown tool requested", tool=name, available_tools=list(HANDLERS.keys()))
        available_tools = list(HANDLERS.keys())
        return _error(
            code="UNKNOWN_TOOL",
            message=f"Tool '{name}' does not exist in this service.",
            recovery=(
                f"Available tools: {', '.join(available_tools)}. "
                "Call list_tools() to see detailed descriptions and schemas. "
                "Check for typos in the tool name."
            ),
        )

    try:
        result = await handler(arguments)
        logger.info("Tool completed successfully", tool=name)
        return result
    except PydanticValidationError as exc:
        logger.error(
            "Validation error",
            tool=name,
            error_count=len(exc.errors()),
            errors=[{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()],
        )
        return _handle_validation_error(exc, tool=name)
    except YapiExtractorError as exc:
        logger.error(
            "Domain error",
            tool=name,
            error_code=exc.code,
            error_kind=exc.kind.value,
            error_message=str(exc),
        )
        error_response = map_error_for_mcp(exc, tool=name)
        return _error(
            code=error_response["error_code"],
            message=error_response["message"],
            recovery=error_response["recovery_strategy"],
            details=error_response["details"],
        )
    except Exception as exc:  # pragma: no cover
        logger.error(
            "Unexpected tool failure",
            tool=name,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return _error(
            code="UNEXPECTED_ERROR",
            message=f"{name} failed: unexpected error: {exc}",
            recovery="Check server logs for details and retry the request.",
        )
