"""Tests for InterfaceFetcher."""

import pytest

from conftest import INTERFACE_PATH
from yapi_extractor.exceptions import ExtractionError, SessionExpiredError


class TestFetchInterface:
    @pytest.mark.asyncio
    async def test_returns_record_with_session_cookie(self, yapi_session, fetcher, fake_yapi):
        await yapi_session.ensure_session()

        record = await fetcher.fetch_interface("9769")

        assert record.id == 9769
        assert record.project_id == 63
        assert record.title == "Order detail"
        assert record.method == "GET"
        assert record.path == "/order/detail"

        request = fake_yapi.requests_to(INTERFACE_PATH)[0]
        assert request.url.params["id"] == "9769"
        assert request.headers["cookie"] == "_yapi_token=token-abc; _yapi_uid=11"

    @pytest.mark.asyncio
    async def test_domain_error_raises_extraction_error(self, yapi_session, fetcher, fake_yapi):
        await yapi_session.ensure_session()
        fake_yapi.interface_responses.append({"errcode": 490, "errmsg": "不存在的", "data": None})

        with pytest.raises(ExtractionError) as exc_info:
            await fetcher.fetch_interface("1")

        assert not isinstance(exc_info.value, SessionExpiredError)
        assert "不存在的" in str(exc_info.value)
        # Other domain errors leave the session alone
        assert yapi_session.is_valid

    @pytest.mark.asyncio
    async def test_session_expiry_invalidates_session(self, yapi_session, fetcher, fake_yapi):
        await yapi_session.ensure_session()
        fake_yapi.interface_responses.append(
            {"errcode": 40011, "errmsg": "请登录...", "data": {"unexpected": True}}
        )

        with pytest.raises(SessionExpiredError) as exc_info:
            await fetcher.fetch_interface("9769")

        assert isinstance(exc_info.value, ExtractionError)
        assert not yapi_session.is_valid

    @pytest.mark.asyncio
    async def test_fetcher_does_not_log_in_by_itself(self, fetcher, fake_yapi):
        fake_yapi.interface_responses.append({"errcode": 40011, "errmsg": "请登录...", "data": None})

        with pytest.raises(SessionExpiredError):
            await fetcher.fetch_interface("9769")

        assert fake_yapi.login_count == 0
        assert len(fake_yapi.requests_to(INTERFACE_PATH)) == 1

    @pytest.mark.asyncio
    async def test_incomplete_data_is_extraction_error(self, yapi_session, fetcher, fake_yapi):
        await yapi_session.ensure_session()
        fake_yapi.interface_responses.append({"errcode": 0, "errmsg": "", "data": {"title": "x"}})

        with pytest.raises(ExtractionError) as exc_info:
            await fetcher.fetch_interface("9769")

        assert exc_info.value.code == "INVALID_INTERFACE_DATA"
