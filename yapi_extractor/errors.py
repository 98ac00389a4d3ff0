"""Map domain exceptions to MCP error payloads.

Every domain failure becomes ``{error_code, message, recovery_strategy,
details}``. The recovery strategy depends only on the error kind and tells
the calling agent what it can do next.
"""

from typing import Any, Dict, Optional

from yapi_extractor.exceptions import ErrorKind, SessionExpiredError, YapiExtractorError

RECOVERY_STRATEGIES: Dict[ErrorKind, str] = {
    ErrorKind.CONFIGURATION: (
        "The server is misconfigured. Ask the user to check YAPI_BASE_URL, YAPI_EMAIL, "
        "YAPI_PASSWORD and OUTPUT_DIR in the MCP server environment. Do not retry."
    ),
    ErrorKind.AUTHENTICATION: (
        "YApi refused the configured account. Ask the user to verify YAPI_EMAIL, "
        "YAPI_PASSWORD and YAPI_LOGIN_PATH. Retrying with the same settings will fail again."
    ),
    ErrorKind.NETWORK: (
        "YApi could not be reached or answered with something that is not a YApi response. "
        "Check YAPI_BASE_URL and network connectivity, then retry once."
    ),
    ErrorKind.EXTRACTION: (
        "YApi reported an error for this interface. Verify the interfaceId (the number at the "
        "end of the interface URL, e.g. /project/63/interface/api/9084) and retry."
    ),
    ErrorKind.SCHEMA: (
        "The JSON text could not be parsed. For extract_yapi_interface the interface has no "
        "valid response schema in YApi; for save_advanced_mock pass mockData as a valid JSON string."
    ),
    ErrorKind.PERSISTENCE: (
        "Files could not be written. Make sure mockData is a valid JSON string and that "
        "OUTPUT_DIR is writable, then retry."
    ),
    ErrorKind.REGISTRATION: (
        "YApi rejected the advanced mock. Verify interfaceId and projectId, and that the "
        "advanced mock plugin is enabled for the project, then retry."
    ),
}

SESSION_EXPIRED_RECOVERY = (
    "The YApi session expired and has been reset. Call the same tool again; "
    "the server will log in before the next request."
)


def map_error_for_mcp(exc: YapiExtractorError, tool: Optional[str] = None) -> Dict[str, Any]:
    """Convert a domain exception to an error payload.

    Args:
        exc: Domain exception
        tool: Tool name prefixed to the message when given

    Returns:
        Dictionary with error_code, message, recovery_strategy and details
    """
    message = f"{tool} failed: {exc.message}" if tool else exc.message
    if isinstance(exc, SessionExpiredError):
        recovery = SESSION_EXPIRED_RECOVERY
    else:
        recovery = RECOVERY_STRATEGIES.get(
            exc.kind, "Review the error message, adjust the request, and try again."
        )
    details: Dict[str, Any] = {"kind": exc.kind.value, **exc.details}
    if exc.cause is not None:
        details["cause"] = f"{type(exc.cause).__name__}: {exc.cause}"
    return {
        "error_code": exc.code,
        "message": message,
        "recovery_strategy": recovery,
        "details": details,
    }
