"""Read interface definitions from YApi."""

from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from yapi_extractor.client.http import YapiHttpClient
from yapi_extractor.client.session import YapiSession
from yapi_extractor.exceptions import ExtractionError, SessionExpiredError
from yapi_extractor.logger import Logger, server_logger
from yapi_extractor.validation.models import InterfaceRecord

INTERFACE_GET_PATH = "/api/interface/get"


class InterfaceFetcher:
    """Fetches one interface record with the current session.

    The caller is responsible for ensuring the session first. No retry
    happens here: an expired session is invalidated and reported as
    ``SessionExpiredError`` so the caller can log in again.
    """

    def __init__(self, http: YapiHttpClient, session: YapiSession, logger: Optional[Logger] = None):
        self.http = http
        self.session = session
        self.logger: Logger = logger or server_logger

    async def fetch_interface(self, interface_id: str) -> InterfaceRecord:
        response = await self.http.get(
            INTERFACE_GET_PATH,
            operation="fetch interface",
            params={"id": interface_id},
            cookie=self.session.cookie_header,
        )
        envelope = response.envelope

        if not envelope.ok:
            details = {"interface_id": interface_id, "errcode": envelope.errcode}
            if envelope.session_expired:
                self.logger.warning("YApi session expired", interface_id=interface_id)
                self.session.invalidate()
                raise SessionExpiredError(
                    f"Failed to fetch interface {interface_id}: {envelope.errmsg}",
                    details=details,
                )
            self.logger.warning(
                "YApi rejected interface fetch",
                interface_id=interface_id,
                errcode=envelope.errcode,
            )
            raise ExtractionError(
                f"Failed to fetch interface {interface_id}: {envelope.errmsg}",
                details=details,
            )

        try:
            record = InterfaceRecord.model_validate(envelope.data)
        except PydanticValidationError as exc:
            raise ExtractionError(
                f"Interface {interface_id} returned an incomplete definition",
                code="INVALID_INTERFACE_DATA",
                details={"interface_id": interface_id, "errors": len(exc.errors())},
                cause=exc,
            ) from exc

        self.logger.info(
            "Interface fetched",
            interface_id=interface_id,
            project_id=record.project_id,
            method=record.method,
            path=record.path,
        )
        return record
