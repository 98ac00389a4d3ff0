import argparse
import asyncio
import os
import sys
from typing import List, Optional

from yapi_extractor.config import DEFAULT_MCP_HOST, DEFAULT_MCP_PORT, YapiSettings
from yapi_extractor.exceptions import ConfigurationError
from yapi_extractor.logger import Logger, server_logger

logger: Logger = server_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="YApi extractor MCP Server - interface schemas and mock registration via Model Context Protocol"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default=os.environ.get("YAPI_MCP_TRANSPORT", "stdio"),
        help="MCP transport (default: stdio, or YAPI_MCP_TRANSPORT env var)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_MCP_HOST,
        help=f"Host address to bind to in http mode (default: {DEFAULT_MCP_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("YAPI_MCP_PORT", str(DEFAULT_MCP_PORT))),
        help=f"Port number to listen on in http mode (default: {DEFAULT_MCP_PORT}, or YAPI_MCP_PORT env var)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    # Missing credentials are fatal: no tool call may be served without them
    try:
        settings = YapiSettings.from_env(os.environ)
    except ConfigurationError as e:
        logger.critical("FATAL: Configuration invalid", error=str(e), **e.details)
        sys.exit(1)

    from yapi_extractor.mcp_server import initialize_server
    from yapi_extractor.mcp_server.server import run_http, run_stdio

    initialize_server(settings)

    try:
        if args.transport == "http":
            asyncio.run(run_http(host=args.host, port=args.port))
        else:
            asyncio.run(run_stdio())
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        sys.exit(0)
    except Exception as e:
        logger.critical("Failed to run server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
