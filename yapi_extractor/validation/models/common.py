"""Common models and enums used across the extraction service."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

# Parsed JSON Schema node. Kept as a plain mapping so key order and any
# platform-specific keywords (mock, enumDesc, ...) survive verbatim.
JsonSchema = Dict[str, Any]


class GenerateType(str, Enum):
    """What the calling agent should generate from the schema."""

    MOCK = "mock"
    TYPES = "types"
    BOTH = "both"

    @property
    def includes_mock(self) -> bool:
        return self in (GenerateType.MOCK, GenerateType.BOTH)

    @property
    def includes_types(self) -> bool:
        return self in (GenerateType.TYPES, GenerateType.BOTH)


class ErrorResponse(BaseModel):
    """Error response structure."""

    model_config = ConfigDict(extra="ignore")

    error_code: str
    message: str
    recovery_strategy: str
    details: Optional[dict] = None
