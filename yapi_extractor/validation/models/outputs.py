"""Output models for MCP server tools."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .common import JsonSchema


class ToolOutput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseSchemas(ToolOutput):
    response: JsonSchema


class ExtractInterfaceOutput(ToolOutput):
    """Everything the agent needs to generate mock data and types."""

    interface_id: str
    project_id: str
    interface_name: str
    method: str
    path: str
    schemas: ResponseSchemas
    prompt: str
    should_save_files: bool
    output_dir: Optional[str]


class SaveGeneratedFilesOutput(ToolOutput):
    interface_id: str
    files: List[str]


class SaveAdvancedMockOutput(ToolOutput):
    interface_id: str
    project_id: str
    name: str
    registered_name: str


class PingOutput(ToolOutput):
    status: str
    service: str
    timestamp: str
    session_active: bool
