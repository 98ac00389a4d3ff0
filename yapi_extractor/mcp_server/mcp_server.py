#!/usr/bin/env python3
"""YApi extraction MCP server.

This server implements the Model Context Protocol (MCP) bridge between a
tool-calling agent and the YApi interface-documentation platform.

Tools:
- extract_yapi_interface: log in (once per session), fetch the interface,
  isolate the business data schema and return it with a generation prompt
- save_generated_files: write the agent's mock data / type definitions to disk
- save_advanced_mock: register the agent's mock data as a YApi advanced mock
- ping: health check

Session Model:
- One YApi account per process, configured through the environment
- The session cookie is held by a single YapiSession shared by all tools
- errcode 40011 (session expired) invalidates it; extraction logs in again
  and retries once, the other tools log in again on their next call
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from mcp.server import Server
from mcp.types import Tool

from yapi_extractor.config import YapiSettings, get_config_summary
from yapi_extractor.logger import Logger, server_logger
from yapi_extractor.mcp_server.components import initialize_components
from yapi_extractor.mcp_server.routing import dispatch_tool_call
from yapi_extractor.mcp_server.state import set_components
from yapi_extractor.mcp_server.tool_schemas import build_tools
from yapi_extractor.mcp_server.tool_types import ErrorToolResponse, ToolResponse

app = Server("yapi-extractor")
logger: Logger = server_logger


def initialize_server(
    settings: YapiSettings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> None:
    """Initialize server components from validated settings."""
    logger.info("Initialising YApi extractor MCP server", **get_config_summary(settings))
    set_components(initialize_components(settings=settings, logger=logger, transport=transport))


@app.list_tools()
async def handle_list_tools() -> List[Tool]:
    return await build_tools()


class ToolCallFailed(Exception):
    """Carries an error payload out of a tool call.

    The low-level server turns any exception raised by the call_tool handler
    into a ``CallToolResult`` with ``isError`` set and ``str(exc)`` as its
    text, so the JSON error payload reaches the client unchanged.
    """

    def __init__(self, response: ToolResponse):
        self.response = response
        super().__init__("\n".join(item.text for item in response))


@app.call_tool()
async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> ToolResponse:
    response = await dispatch_tool_call(name=name, arguments=dict(arguments or {}), logger=logger)
    if isinstance(response, ErrorToolResponse):
        raise ToolCallFailed(response)
    return response
