"""Exceptions for schema parsing and local persistence."""

from yapi_extractor.exceptions.base import ErrorKind, YapiExtractorError


class SchemaError(YapiExtractorError):
    """Text that should hold JSON could not be parsed."""

    kind = ErrorKind.SCHEMA
    default_code = "SCHEMA_PARSE_FAILED"


class PersistenceError(YapiExtractorError):
    """Writing generated files failed or the payload was malformed."""

    kind = ErrorKind.PERSISTENCE
    default_code = "PERSISTENCE_FAILED"
