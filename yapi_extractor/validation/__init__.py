"""Validation module for the extraction service.

Validation happens via Pydantic models: tool arguments are validated before
dispatch and YApi responses are validated as they are decoded.
"""

from yapi_extractor.validation.models import (
    ExtractInterfaceInput,
    GenerateType,
    SaveAdvancedMockInput,
    SaveGeneratedFilesInput,
)

__all__ = [
    "ExtractInterfaceInput",
    "GenerateType",
    "SaveAdvancedMockInput",
    "SaveGeneratedFilesInput",
]
