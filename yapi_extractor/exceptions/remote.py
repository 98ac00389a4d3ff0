"""Exceptions raised while talking to the YApi platform."""

from typing import Any, Dict, Optional

from yapi_extractor.exceptions.base import ErrorKind, YapiExtractorError


class AuthenticationError(YapiExtractorError):
    """Login was rejected or yielded no usable session tokens."""

    kind = ErrorKind.AUTHENTICATION
    default_code = "AUTHENTICATION_FAILED"


class NetworkError(YapiExtractorError):
    """Timeout, transport failure or unreadable response on a remote call."""

    kind = ErrorKind.NETWORK
    default_code = "NETWORK_ERROR"


class ExtractionError(YapiExtractorError):
    """The platform answered but reported a domain error for an interface read."""

    kind = ErrorKind.EXTRACTION
    default_code = "EXTRACTION_FAILED"


class SessionExpiredError(ExtractionError):
    """The platform rejected the session tokens; the session has been invalidated."""

    default_code = "SESSION_EXPIRED"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class RegistrationError(YapiExtractorError):
    """The platform rejected an advanced mock registration."""

    kind = ErrorKind.REGISTRATION
    default_code = "REGISTRATION_FAILED"
