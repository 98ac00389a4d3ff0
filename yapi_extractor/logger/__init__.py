"""
Logger module for yapi-extractor

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from yapi_extractor.logger import Logger, ConsoleLogger

    # Use the shared console logger
    server_logger.info("Server started", transport="stdio")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging
import os

from .console_logger import ConsoleLogger
from .interface import Logger

# Unknown level names fall back to INFO
_level = logging.getLevelName(os.environ.get("YAPI_LOG_LEVEL", "INFO").upper())

# Shared logger instance for modules that just need basic console logging
server_logger: ConsoleLogger = ConsoleLogger(
    level=_level if isinstance(_level, int) else logging.INFO
)

__all__ = [
    "Logger",
    "ConsoleLogger",
    "server_logger",
]
