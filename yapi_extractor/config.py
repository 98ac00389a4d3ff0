"""Configuration for the YApi extractor service.

Settings are read once at startup from the environment that the MCP client
passes to the server process.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================
#
# YApi connection (required)
# --------------------------
# YAPI_BASE_URL: Base URL of the YApi deployment, e.g. http://yapi.example.com:3000
# YAPI_EMAIL: Account email used to log in
# YAPI_PASSWORD: Account password used to log in
#
# YApi connection (optional)
# --------------------------
# YAPI_LOGIN_PATH: Login route (default: /api/user/login_by_ldap).
#   Use /api/user/login for deployments without LDAP.
# YAPI_TIMEOUT_SECONDS: Timeout applied to every outbound call (default: 10)
# YAPI_VERIFY_TLS: Verify TLS certificates (default: false, for self-signed
#   internal deployments)
#
# Generated files
# ---------------
# SAVE_FILES: "true" tells the agent to call save_generated_files (default: false)
# OUTPUT_DIR: Output directory for generated files (default: mock).
#   Relative paths (including "~/...") resolve against the project root, the
#   directory holding the yapi_extractor package, never the working directory.
#   That root is the source checkout for "pip install -e ." but site-packages
#   for a regular install, so set an absolute OUTPUT_DIR when not running from
#   a checkout.
#
# Logging
# -------
# YAPI_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)

from pathlib import Path
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from yapi_extractor.exceptions import ConfigurationError

# Project root (the directory above the package); site-packages when installed
PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_OUTPUT_DIR = "mock"
DEFAULT_LOGIN_PATH = "/api/user/login_by_ldap"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MCP_HOST = "0.0.0.0"
DEFAULT_MCP_PORT = 8010

REQUIRED_ENV_VARS = ("YAPI_BASE_URL", "YAPI_EMAIL", "YAPI_PASSWORD")

_TRUE_VALUES = {"true", "1", "yes"}


class YapiSettings(BaseModel):
    """Validated service settings."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    email: str
    password: str = Field(repr=False)
    save_files: bool = False
    output_dir: Optional[str] = DEFAULT_OUTPUT_DIR
    login_path: str = DEFAULT_LOGIN_PATH
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    verify_tls: bool = False

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("login_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "YapiSettings":
        """Build settings from environment variables.

        Raises:
            ConfigurationError: If a required variable is missing or a value
                cannot be interpreted.
        """
        missing: List[str] = [key for key in REQUIRED_ENV_VARS if not environ.get(key)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                code="MISSING_CONFIGURATION",
                details={"missing": missing},
            )

        values: Dict[str, object] = {
            "base_url": environ["YAPI_BASE_URL"],
            "email": environ["YAPI_EMAIL"],
            "password": environ["YAPI_PASSWORD"],
            "save_files": environ.get("SAVE_FILES", "").strip().lower() in _TRUE_VALUES,
            "output_dir": environ.get("OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
            "login_path": environ.get("YAPI_LOGIN_PATH") or DEFAULT_LOGIN_PATH,
            "verify_tls": environ.get("YAPI_VERIFY_TLS", "").strip().lower() in _TRUE_VALUES,
        }
        if environ.get("YAPI_TIMEOUT_SECONDS"):
            values["timeout_seconds"] = environ["YAPI_TIMEOUT_SECONDS"]

        try:
            return cls.model_validate(values)
        except PydanticValidationError as exc:
            fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
            raise ConfigurationError(
                f"Invalid configuration values: {', '.join(fields)}",
                code="INVALID_CONFIGURATION",
                details={"fields": fields},
                cause=exc,
            ) from exc


def get_config_summary(settings: YapiSettings) -> Dict[str, object]:
    """Loggable view of the settings (credentials omitted)."""
    return {
        "base_url": settings.base_url,
        "login_path": settings.login_path,
        "save_files": settings.save_files,
        "output_dir": settings.output_dir,
        "timeout_seconds": settings.timeout_seconds,
        "verify_tls": settings.verify_tls,
    }
