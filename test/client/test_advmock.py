"""Tests for MockRegistrar and the success-envelope wrapping."""

import json

import pytest

from conftest import ADVMOCK_PATH
from yapi_extractor.client.advmock import MockRegistrar, wrap_mock_data
from yapi_extractor.exceptions import RegistrationError, SchemaError


class TestWrapMockData:
    def test_wraps_fragment_in_success_envelope(self):
        wrapped = wrap_mock_data('{"x":1}')

        assert json.loads(wrapped) == {"code": 200, "msg": "", "data": {"x": 1}}
        assert list(json.loads(wrapped).keys()) == ["code", "msg", "data"]
        assert json.dumps(json.loads(wrapped), separators=(",", ":")) == '{"code":200,"msg":"","data":{"x":1}}'

    def test_output_is_indented(self):
        assert wrap_mock_data('{"x":1}') == '{\n  "code": 200,\n  "msg": "",\n  "data": {\n    "x": 1\n  }\n}'

    def test_non_object_fragments_are_allowed(self):
        assert json.loads(wrap_mock_data("[1, 2]"))["data"] == [1, 2]

    def test_invalid_json_is_schema_error(self):
        with pytest.raises(SchemaError):
            wrap_mock_data("{not json")


class TestRegisterMock:
    @pytest.mark.asyncio
    async def test_posts_scenario_fields(self, yapi_session, registrar, fake_yapi):
        await yapi_session.ensure_session()

        scenario = await registrar.register_mock("9769", "63", "Order detail", '{"x":1}')

        request = fake_yapi.requests_to(ADVMOCK_PATH)[0]
        body = json.loads(request.content)
        assert body == {
            "name": "Order detail1700000000000",
            "interface_id": "9769",
            "project_id": "63",
            "res_body": '{\n  "code": 200,\n  "msg": "",\n  "data": {\n    "x": 1\n  }\n}',
            "code": "200",
            "delay": 0,
            "headers": [],
            "params": {},
            "ip_enable": False,
        }
        assert request.headers["cookie"] == "_yapi_token=token-abc; _yapi_uid=11"
        assert scenario.name == "Order detail1700000000000"

    @pytest.mark.asyncio
    async def test_same_name_gets_distinct_suffixes(self, yapi_session, http_client, fake_yapi):
        ticks = iter([1700000000000, 1700000000001])
        registrar = MockRegistrar(http=http_client, session=yapi_session, clock=lambda: next(ticks))
        await yapi_session.ensure_session()

        first = await registrar.register_mock("9769", "63", "Order detail", "{}")
        second = await registrar.register_mock("9769", "63", "Order detail", "{}")

        assert first.name != second.name
        sent = [json.loads(r.content)["name"] for r in fake_yapi.requests_to(ADVMOCK_PATH)]
        assert sent == ["Order detail1700000000000", "Order detail1700000000001"]

    @pytest.mark.asyncio
    async def test_default_clock_appends_millisecond_timestamp(self, yapi_session, http_client):
        registrar = MockRegistrar(http=http_client, session=yapi_session)
        await yapi_session.ensure_session()

        scenario = await registrar.register_mock("9769", "63", "case", "{}")

        suffix = scenario.name[len("case"):]
        assert suffix.isdigit()
        assert len(suffix) >= 13

    @pytest.mark.asyncio
    async def test_invalid_fragment_sends_nothing(self, yapi_session, registrar, fake_yapi):
        await yapi_session.ensure_session()

        with pytest.raises(SchemaError):
            await registrar.register_mock("9769", "63", "case", "not json")

        assert fake_yapi.requests_to(ADVMOCK_PATH) == []

    @pytest.mark.asyncio
    async def test_rejected_registration_raises(self, yapi_session, registrar, fake_yapi):
        await yapi_session.ensure_session()
        fake_yapi.advmock_responses.append({"errcode": 400, "errmsg": "没有权限", "data": None})

        with pytest.raises(RegistrationError) as exc_info:
            await registrar.register_mock("9769", "63", "case", "{}")

        assert "没有权限" in str(exc_info.value)
        assert yapi_session.is_valid

    @pytest.mark.asyncio
    async def test_expired_session_is_invalidated(self, yapi_session, registrar, fake_yapi):
        await yapi_session.ensure_session()
        fake_yapi.advmock_responses.append({"errcode": 40011, "errmsg": "请登录...", "data": None})

        with pytest.raises(RegistrationError):
            await registrar.register_mock("9769", "63", "case", "{}")

        assert not yapi_session.is_valid
