"""Build the generation instruction handed to the calling agent."""

import json
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from yapi_extractor.validation.models import GenerateType, InterfaceRecord, JsonSchema

TEMPLATES_DIR = Path(__file__).parent / "templates"
INSTRUCTION_TEMPLATE = "instruction.j2"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,  # plain text prompt, not HTML
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def build_instruction(
    record: InterfaceRecord,
    schema: JsonSchema,
    mode: GenerateType,
    save_files: bool,
) -> str:
    """Render the instruction for one interface.

    Pure string assembly: identical inputs always produce identical text.

    Args:
        record: Interface metadata (title, method, path, ids)
        schema: Business schema, embedded as indented JSON
        mode: Which artifacts the agent must generate
        save_files: Whether the agent should call save_generated_files afterwards

    Returns:
        The instruction text
    """
    mode = GenerateType(mode)
    template = _environment().get_template(INSTRUCTION_TEMPLATE)
    return template.render(
        title=record.title,
        method=record.method,
        path=record.path,
        interface_id=record.id,
        project_id=record.project_id,
        schema_json=json.dumps(schema, indent=2, ensure_ascii=False),
        mode=mode.value,
        include_mock=mode.includes_mock,
        include_types=mode.includes_types,
        save_files=save_files,
    )
