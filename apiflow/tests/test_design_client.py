"""Tests for the HTTP design gateway against a mocked transport."""

import json

import httpx
import pytest
from pydantic import ValidationError

from apiflow.gateway import DesignGatewayError
from apiflow.sdk.design_client import HttpDesignGateway


RECORD = {
    "id": "3f0c7a52-5d0e-4a43-9d5b-0a3c8b1f2e11",
    "name": "Flow A",
    "design_data": {"nodes": [], "edges": [], "viewport": {"x": 0, "y": 0, "zoom": 1}},
    "created_at": "2026-01-05T10:00:00.000000+00:00",
    "updated_at": "2026-01-05T10:00:00.000000+00:00",
}


def _gateway(handler) -> HttpDesignGateway:
    return HttpDesignGateway("http://designs.test/", transport=httpx.MockTransport(handler))


class TestRequests:
    @pytest.mark.asyncio
    async def test_create_posts_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=RECORD)

        record = await _gateway(handler).create_design("Flow A", RECORD["design_data"])
        assert seen == {
            "method": "POST",
            "path": "/api/designs",
            "body": {"name": "Flow A", "design_data": RECORD["design_data"]},
        }
        assert record.id == RECORD["id"]

    @pytest.mark.asyncio
    async def test_update_sends_only_given_fields(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={**RECORD, "name": "Renamed"})

        record = await _gateway(handler).update_design(RECORD["id"], name="Renamed")
        assert seen == {"method": "PATCH", "body": {"name": "Renamed"}}
        assert record.name == "Renamed"

    @pytest.mark.asyncio
    async def test_empty_name_never_sent(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("request should not be sent")

        with pytest.raises(ValidationError):
            await _gateway(handler).create_design("", {})

    @pytest.mark.asyncio
    async def test_list_parses_records(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[RECORD, {**RECORD, "name": "Flow B"}])

        designs = await _gateway(handler).list_designs()
        assert [d.name for d in designs] == ["Flow A", "Flow B"]


class TestNotFound:
    @pytest.mark.asyncio
    async def test_get_404_is_none(self):
        gateway = _gateway(lambda request: httpx.Response(404, json={"detail": "nope"}))
        assert await gateway.get_design(RECORD["id"]) is None

    @pytest.mark.asyncio
    async def test_update_404_is_none(self):
        gateway = _gateway(lambda request: httpx.Response(404, json={"detail": "nope"}))
        assert await gateway.update_design(RECORD["id"], name="x") is None

    @pytest.mark.asyncio
    async def test_delete_reports_success_flag(self):
        gateway = _gateway(lambda request: httpx.Response(200, json={"success": False}))
        result = await gateway.delete_design(RECORD["id"])
        assert result.success is False


class TestFailures:
    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DesignGatewayError, match="Failed to connect"):
            await _gateway(handler).list_designs()

    @pytest.mark.asyncio
    async def test_server_error(self):
        gateway = _gateway(lambda request: httpx.Response(500, json={"detail": "boom"}))
        with pytest.raises(DesignGatewayError, match="500"):
            await gateway.get_design(RECORD["id"])

    @pytest.mark.asyncio
    async def test_unreadable_record(self):
        gateway = _gateway(lambda request: httpx.Response(200, json={"id": 1}))
        with pytest.raises(DesignGatewayError, match="Unreadable"):
            await gateway.get_design(RECORD["id"])
