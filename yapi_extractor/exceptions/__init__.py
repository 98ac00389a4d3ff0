"""Custom exceptions for the YApi extraction pipeline.

All exceptions include detailed error messages designed for LLM processing,
enabling intelligent error recovery and decision-making.
"""

from yapi_extractor.exceptions.base import ConfigurationError, ErrorKind, YapiExtractorError
from yapi_extractor.exceptions.data import PersistenceError, SchemaError
from yapi_extractor.exceptions.remote import (
    AuthenticationError,
    ExtractionError,
    NetworkError,
    RegistrationError,
    SessionExpiredError,
)

__all__ = [
    "ErrorKind",
    "YapiExtractorError",
    "ConfigurationError",
    "AuthenticationError",
    "NetworkError",
    "ExtractionError",
    "SessionExpiredError",
    "SchemaError",
    "PersistenceError",
    "RegistrationError",
]
