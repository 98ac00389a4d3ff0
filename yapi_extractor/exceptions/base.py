"""Base exception classes for yapi-extractor.

All exceptions carry a machine-readable ``code``, a human-readable message
written for LLM consumption, optional ``details`` and the ``kind`` taken from
a closed taxonomy. The kind decides the recovery advice given to the caller.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Closed set of failure categories."""

    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    NETWORK = "network"
    EXTRACTION = "extraction"
    SCHEMA = "schema"
    PERSISTENCE = "persistence"
    REGISTRATION = "registration"


class YapiExtractorError(Exception):
    """Base exception for every domain failure."""

    kind: ErrorKind = ErrorKind.EXTRACTION
    default_code: str = "YAPI_EXTRACTOR_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details: Dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ConfigurationError(YapiExtractorError):
    """Required settings are missing or invalid."""

    kind = ErrorKind.CONFIGURATION
    default_code = "CONFIGURATION_ERROR"
