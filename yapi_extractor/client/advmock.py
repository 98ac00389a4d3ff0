"""Register advanced mock scenarios in YApi."""

import json
import time
from typing import Callable, Optional

from yapi_extractor.client.http import YapiHttpClient
from yapi_extractor.client.session import YapiSession
from yapi_extractor.exceptions import RegistrationError, SchemaError
from yapi_extractor.logger import Logger, server_logger
from yapi_extractor.validation.models import MockScenario

ADVMOCK_SAVE_PATH = "/api/plugin/advmock/case/save"

# Status code the registered scenario answers with
MOCK_SUCCESS_CODE = 200


def current_millis() -> int:
    return int(time.time() * 1000)


def wrap_mock_data(mock_data: str) -> str:
    """Wrap a data fragment in the success envelope ``{code, msg, data}``.

    Raises:
        SchemaError: If the fragment is not valid JSON
    """
    try:
        fragment = json.loads(mock_data)
    except (TypeError, ValueError) as exc:
        raise SchemaError(f"Failed to parse mock data: {exc}", cause=exc) from exc

    return json.dumps(
        {"code": MOCK_SUCCESS_CODE, "msg": "", "data": fragment},
        indent=2,
        ensure_ascii=False,
    )


class MockRegistrar:
    """Saves mock data as a named advanced mock case of an interface.

    The caller ensures the session first. Scenario names get a millisecond
    timestamp suffix so a repeated name never overwrites an earlier case.
    """

    def __init__(
        self,
        http: YapiHttpClient,
        session: YapiSession,
        logger: Optional[Logger] = None,
        clock: Callable[[], int] = current_millis,
    ):
        self.http = http
        self.session = session
        self.logger: Logger = logger or server_logger
        self._clock = clock

    async def register_mock(
        self, interface_id: str, project_id: str, name: str, mock_data: str
    ) -> MockScenario:
        scenario = MockScenario(
            name=f"{name}{self._clock()}",
            interface_id=interface_id,
            project_id=project_id,
            res_body=wrap_mock_data(mock_data),
        )

        response = await self.http.post(
            ADVMOCK_SAVE_PATH,
            operation="register advanced mock",
            payload=scenario.model_dump(mode="json"),
            cookie=self.session.cookie_header,
        )
        envelope = response.envelope
        if not envelope.ok:
            if envelope.session_expired:
                self.session.invalidate()
            self.logger.warning(
                "YApi rejected advanced mock",
                interface_id=interface_id,
                errcode=envelope.errcode,
            )
            raise RegistrationError(
                f"Failed to save advanced mock '{name}': {envelope.errmsg}",
                details={"interface_id": interface_id, "errcode": envelope.errcode},
            )

        self.logger.info(
            "Advanced mock saved",
            interface_id=interface_id,
            project_id=project_id,
            name=scenario.name,
        )
        return scenario
