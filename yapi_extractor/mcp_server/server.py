"""Server lifecycle: stdio and StreamableHTTP wiring for the MCP server."""

from __future__ import annotations

import contextlib
from typing import AsyncIterator

from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Mount

from yapi_extractor.config import DEFAULT_MCP_HOST, DEFAULT_MCP_PORT
from yapi_extractor.mcp_server.mcp_server import app, logger


async def run_stdio() -> None:
    """Serve MCP over stdin/stdout, the way MCP clients launch local servers."""
    logger.info("YApi extractor MCP server running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


session_manager_http = StreamableHTTPSessionManager(
    app=app,
    event_store=None,
    json_response=False,
    stateless=False,
)


async def handle_streamable_http(scope, receive, send) -> None:
    await session_manager_http.handle_request(scope, receive, send)


@contextlib.asynccontextmanager
async def lifespan(starlette_app) -> AsyncIterator[None]:
    logger.info("Starting StreamableHTTP session manager")
    async with session_manager_http.run():
        logger.info("StreamableHTTP session manager ready")
        yield


starlette_app = Starlette(
    debug=False,
    routes=[Mount("/mcp/", app=handle_streamable_http)],
    lifespan=lifespan,
)

http_app = CORSMiddleware(
    starlette_app,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE"],
    expose_headers=["Mcp-Session-Id"],
)


async def run_http(host: str = DEFAULT_MCP_HOST, port: int = DEFAULT_MCP_PORT) -> None:
    import uvicorn

    logger.info("Starting YApi extractor MCP server", host=host, port=port, transport="Streamable HTTP")
    config = uvicorn.Config(http_app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    await server.serve()
