"""JSON transport for the YApi platform.

Every outbound call goes through ``YapiHttpClient``: it applies the fixed
timeout, the TLS posture and the optional session cookie, decodes the
``{errcode, errmsg, data}`` envelope and turns transport failures into
``NetworkError``. Interpreting ``errcode`` is left to the callers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from yapi_extractor.config import DEFAULT_TIMEOUT_SECONDS
from yapi_extractor.exceptions import NetworkError
from yapi_extractor.logger import Logger, server_logger
from yapi_extractor.validation.models import ResponseEnvelope


@dataclass
class YapiResponse:
    """Decoded envelope plus the raw Set-Cookie headers of the response."""

    envelope: ResponseEnvelope
    status_code: int
    set_cookies: List[str] = field(default_factory=list)


class YapiHttpClient:
    """Issues JSON calls against one YApi deployment.

    A short-lived ``httpx.AsyncClient`` is opened per call, so no connection
    or cookie jar outlives a request. Session cookies are passed explicitly by
    the caller.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        verify_tls: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Args:
            base_url: YApi base URL, e.g. http://yapi.example.com:3000
            timeout_seconds: Timeout applied to the whole call
            verify_tls: Verify server certificates
            transport: Optional httpx transport (tests use httpx.MockTransport)
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.verify_tls = verify_tls
        self._transport = transport
        self.logger: Logger = logger or server_logger

    async def get(
        self,
        path: str,
        *,
        operation: str,
        params: Optional[Dict[str, Any]] = None,
        cookie: Optional[str] = None,
    ) -> YapiResponse:
        return await self._request("GET", path, operation=operation, params=params, cookie=cookie)

    async def post(
        self,
        path: str,
        *,
        operation: str,
        payload: Dict[str, Any],
        cookie: Optional[str] = None,
    ) -> YapiResponse:
        return await self._request("POST", path, operation=operation, payload=payload, cookie=cookie)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
        cookie: Optional[str] = None,
    ) -> YapiResponse:
        headers = {"Accept": "application/json"}
        if cookie:
            headers["Cookie"] = cookie

        self.logger.debug("YApi request", operation=operation, method=method, path=path)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout_seconds,
                verify=self.verify_tls,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method, path, params=params, json=payload, headers=headers
                )
        except httpx.TimeoutException as exc:
            self.logger.error(
                "YApi request timed out", operation=operation, timeout=self.timeout_seconds
            )
            raise NetworkError(
                f"{operation}: request timed out after {self.timeout_seconds} seconds",
                code="NETWORK_TIMEOUT",
                details={"path": path, "timeout_seconds": self.timeout_seconds},
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            self.logger.error("YApi request failed", operation=operation, error=str(exc))
            raise NetworkError(
                f"{operation}: request failed: {exc}",
                details={"path": path, "error_type": type(exc).__name__},
                cause=exc,
            ) from exc

        try:
            envelope = ResponseEnvelope.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            self.logger.error(
                "YApi returned an unreadable response",
                operation=operation,
                status_code=response.status_code,
            )
            raise NetworkError(
                f"{operation}: unreadable response from YApi (HTTP {response.status_code})",
                code="INVALID_RESPONSE",
                details={"path": path, "status_code": response.status_code},
                cause=exc,
            ) from exc

        self.logger.debug(
            "YApi response",
            operation=operation,
            status_code=response.status_code,
            errcode=envelope.errcode,
        )
        return YapiResponse(
            envelope=envelope,
            status_code=response.status_code,
            set_cookies=response.headers.get_list("set-cookie"),
        )
