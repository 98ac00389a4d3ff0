"""Input models for MCP server tools.

Tool arguments arrive in camelCase (``interfaceId``); the models expose
snake_case attributes and accept either spelling.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .common import GenerateType


class ToolInput(BaseModel):
    model_config = ConfigDict(
        extra="ignore",  # Ignore extra fields from MCP
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,  # agents often send ids as numbers
    )


class ExtractInterfaceInput(ToolInput):
    """Input for extract_yapi_interface.

    Args:
        interface_id: YApi interface id, e.g. 9084 in /project/63/interface/api/9084
        generate_type: mock, types or both
    """

    interface_id: str = Field(min_length=1)
    generate_type: GenerateType = GenerateType.BOTH


class SaveGeneratedFilesInput(ToolInput):
    """Input for save_generated_files.

    Args:
        interface_id: Interface id used as the file name prefix
        mock_data: Mock JSON text
        type_definitions: TypeScript type definition text
    """

    interface_id: str = Field(min_length=1)
    mock_data: Optional[str] = None
    type_definitions: Optional[str] = None


class SaveAdvancedMockInput(ToolInput):
    """Input for save_advanced_mock.

    Args:
        interface_id: YApi interface id
        project_id: YApi project id
        name: Scenario name, usually the interface title
        mock_data: The data part of the mock as JSON text, without code and msg
    """

    interface_id: str = Field(min_length=1)
    project_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    mock_data: str = Field(min_length=1)
