"""MCP server package: tool schemas, routing, handlers and transports."""

from yapi_extractor.mcp_server.mcp_server import app, handle_call_tool, handle_list_tools, initialize_server

__all__ = ["app", "handle_call_tool", "handle_list_tools", "initialize_server"]
