"""Parse YApi response schemas and isolate the business payload."""

import json
from typing import Any

from yapi_extractor.exceptions import SchemaError
from yapi_extractor.validation.models import JsonSchema


def parse_schema(raw_schema: str) -> JsonSchema:
    """Parse the ``res_body`` text of an interface into a JSON Schema object.

    Raises:
        SchemaError: If the text is not JSON or not a JSON object
    """
    try:
        schema: Any = json.loads(raw_schema)
    except (TypeError, ValueError) as exc:
        raise SchemaError(
            f"Failed to parse response schema: {exc}",
            details={"length": len(raw_schema or "")},
            cause=exc,
        ) from exc

    if not isinstance(schema, dict):
        raise SchemaError(
            f"Response schema must be a JSON object, got {type(schema).__name__}",
            code="SCHEMA_NOT_OBJECT",
        )
    return schema


def extract_business_schema(schema: JsonSchema) -> JsonSchema:
    """Return the ``data`` property when the schema models the envelope.

    Interfaces that wrap their payload as ``{code, msg, data}`` describe the
    business data under ``properties.data``; anything else is returned as is.
    """
    properties = schema.get("properties")
    if isinstance(properties, dict):
        data = properties.get("data")
        if isinstance(data, dict):
            return data
    return schema
