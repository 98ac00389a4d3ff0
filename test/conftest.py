"""Pytest configuration and fixtures

Provides shared fixtures for all tests: validated settings, a fake YApi
platform served through httpx.MockTransport, and wired server components.
No test talks to a real YApi deployment.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from yapi_extractor.client import InterfaceFetcher, MockRegistrar, YapiHttpClient, YapiSession
from yapi_extractor.config import YapiSettings
from yapi_extractor.logger import Logger, server_logger
from yapi_extractor.mcp_server.components import initialize_components
from yapi_extractor.mcp_server.state import set_components


BASE_URL = "http://yapi.test"
LOGIN_PATH = "/api/user/login_by_ldap"
INTERFACE_PATH = "/api/interface/get"
ADVMOCK_PATH = "/api/plugin/advmock/case/save"

SESSION_COOKIES = [
    "_yapi_token=token-abc; path=/; expires=Wed, 01 Jan 2031 00:00:00 GMT; httponly",
    "_yapi_uid=11; path=/; httponly",
]

# Envelope-shaped response schema: {code, msg, data: {code, msg}}
ENVELOPE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "properties": {
        "code": {"type": "number"},
        "msg": {"type": "string"},
        "data": {
            "type": "object",
            "properties": {
                "code": {"type": "number", "description": "business code"},
                "msg": {"type": "string", "description": "business message"},
            },
        },
    },
}


def interface_data(
    interface_id: int = 9769,
    res_body: Optional[str] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Build the ``data`` payload of a successful /api/interface/get response."""
    data: Dict[str, Any] = {
        "_id": interface_id,
        "project_id": 63,
        "title": "Order detail",
        "method": "GET",
        "path": "/order/detail",
        "res_body": json.dumps(ENVELOPE_SCHEMA) if res_body is None else res_body,
        "res_body_type": "json",
        "uid": 11,
        "catid": 120,
    }
    data.update(overrides)
    return data


class FakeYapi:
    """In-memory stand-in for the YApi HTTP API.

    Responses for each endpoint can be queued; once a queue is empty the
    default (successful) response is returned.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.login_responses: List[Dict[str, Any]] = []
        self.login_cookies: List[str] = list(SESSION_COOKIES)
        self.interface_responses: List[Dict[str, Any]] = []
        self.interface_default: Dict[str, Any] = {
            "errcode": 0,
            "errmsg": "成功！",
            "data": interface_data(),
        }
        self.advmock_responses: List[Dict[str, Any]] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in (LOGIN_PATH, "/api/user/login"):
            body = self._next(self.login_responses, {"errcode": 0, "errmsg": "logout success...", "data": {"uid": 11}})
            headers = [("set-cookie", cookie) for cookie in self.login_cookies] if body["errcode"] == 0 else []
            return httpx.Response(200, json=body, headers=headers)

        if path == INTERFACE_PATH:
            return httpx.Response(200, json=self._next(self.interface_responses, self.interface_default))

        if path == ADVMOCK_PATH:
            return httpx.Response(200, json=self._next(self.advmock_responses, {"errcode": 0, "errmsg": "成功！", "data": {}}))

        return httpx.Response(404, text="not found")

    @staticmethod
    def _next(queue: List[Dict[str, Any]], default: Dict[str, Any]) -> Dict[str, Any]:
        return queue.pop(0) if queue else default

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.path == path]

    @property
    def login_count(self) -> int:
        return len(self.requests_to(LOGIN_PATH))


@pytest.fixture
def logger() -> Logger:
    return server_logger


@pytest.fixture
def fake_yapi() -> FakeYapi:
    return FakeYapi()


@pytest.fixture
def settings(tmp_path) -> YapiSettings:
    return YapiSettings(
        base_url=f"{BASE_URL}/",
        email="dev@example.com",
        password="secret",
        save_files=False,
        output_dir=str(tmp_path / "mock"),
    )


@pytest.fixture
def http_client(fake_yapi, logger) -> YapiHttpClient:
    return YapiHttpClient(base_url=BASE_URL, transport=fake_yapi.transport, logger=logger)


@pytest.fixture
def yapi_session(http_client, logger) -> YapiSession:
    return YapiSession(http=http_client, email="dev@example.com", password="secret", logger=logger)


@pytest.fixture
def fetcher(http_client, yapi_session, logger) -> InterfaceFetcher:
    return InterfaceFetcher(http=http_client, session=yapi_session, logger=logger)


@pytest.fixture
def registrar(http_client, yapi_session, logger) -> MockRegistrar:
    return MockRegistrar(http=http_client, session=yapi_session, logger=logger, clock=lambda: 1700000000000)


@pytest.fixture
def server_components(settings, fake_yapi, logger, tmp_path):
    """Wire the MCP server state against the fake platform for one test."""
    components = initialize_components(
        settings=settings,
        logger=logger,
        transport=fake_yapi.transport,
        anchor=tmp_path,
    )
    set_components(components)
    yield components
    set_components(None)
