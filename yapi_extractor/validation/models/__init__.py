"""Pydantic models for the extraction service, organized by logical grouping:
- common.py: Shared enums, the JSON Schema alias and the error response
- yapi.py: Envelope and entity models exchanged with the YApi platform
- inputs.py: Input models for MCP tools
- outputs.py: Output models for MCP tools
"""

from .common import ErrorResponse, GenerateType, JsonSchema
from .inputs import ExtractInterfaceInput, SaveAdvancedMockInput, SaveGeneratedFilesInput
from .outputs import (
    ExtractInterfaceOutput,
    PingOutput,
    ResponseSchemas,
    SaveAdvancedMockOutput,
    SaveGeneratedFilesOutput,
)
from .yapi import SESSION_EXPIRED_ERRCODE, InterfaceRecord, MockScenario, ResponseEnvelope

__all__ = [
    # Common
    "ErrorResponse",
    "GenerateType",
    "JsonSchema",
    # YApi models
    "SESSION_EXPIRED_ERRCODE",
    "InterfaceRecord",
    "MockScenario",
    "ResponseEnvelope",
    # Input models
    "ExtractInterfaceInput",
    "SaveAdvancedMockInput",
    "SaveGeneratedFilesInput",
    # Output models
    "ExtractInterfaceOutput",
    "PingOutput",
    "ResponseSchemas",
    "SaveAdvancedMockOutput",
    "SaveGeneratedFilesOutput",
]
