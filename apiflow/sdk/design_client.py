"""HTTP client for the design server.

Implements the ``DesignGateway`` protocol on top of the server's
``/api/designs`` routes:

    gateway = HttpDesignGateway("http://localhost:8000")
    record = await gateway.create_design("Flow A", serialize_graph(nodes, edges))
"""

from __future__ import annotations

import os
from typing import Any

import httpx
from pydantic import ValidationError

from apiflow.gateway import DesignGatewayError
from apiflow.models.design import DeleteResult, DesignCreate, DesignRecord, DesignUpdate

DEFAULT_SERVER_URL = os.getenv("APIFLOW_SERVER_URL", "http://localhost:8000")


class HttpDesignGateway:
    """Talks to the design server over HTTP.

    A 404 from the server becomes ``None``; connection problems, other
    error statuses and unreadable responses raise ``DesignGatewayError``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Base URL of the design server
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport, e.g. ``httpx.ASGITransport``
                to call an in-process app
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        json: dict | None = None,
    ) -> httpx.Response | None:
        """Send a request; returns None on 404."""
        try:
            async with self._client() as client:
                response = await client.request(method, f"/api{path}", json=json)
        except httpx.RequestError as e:
            raise DesignGatewayError(
                f"Failed to connect to server at {self.base_url}: {e}"
            ) from e

        if response.status_code == 404:
            return None
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DesignGatewayError(
                f"{method} {path} failed with status {response.status_code}: {response.text}"
            ) from e
        return response

    @staticmethod
    def _parse_record(response: httpx.Response) -> DesignRecord:
        try:
            return DesignRecord.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise DesignGatewayError(f"Unreadable design record: {e}") from e

    async def list_designs(self) -> list[DesignRecord]:
        response = await self._request("GET", "/designs")
        if response is None:
            raise DesignGatewayError("Design listing endpoint not found")
        try:
            return [DesignRecord.model_validate(item) for item in response.json()]
        except (ValueError, ValidationError) as e:
            raise DesignGatewayError(f"Unreadable design list: {e}") from e

    async def create_design(self, name: str, design_data: dict[str, Any]) -> DesignRecord:
        # validate locally so a bad request is never sent
        request = DesignCreate(name=name, design_data=design_data)
        response = await self._request("POST", "/designs", json=request.model_dump())
        if response is None:
            raise DesignGatewayError("Design creation endpoint not found")
        return self._parse_record(response)

    async def get_design(self, design_id: str) -> DesignRecord | None:
        response = await self._request("GET", f"/designs/{design_id}")
        if response is None:
            return None
        return self._parse_record(response)

    async def update_design(
        self,
        design_id: str,
        name: str | None = None,
        design_data: dict[str, Any] | None = None,
    ) -> DesignRecord | None:
        request = DesignUpdate(name=name, design_data=design_data)
        response = await self._request(
            "PATCH",
            f"/designs/{design_id}",
            json=request.model_dump(exclude_none=True),
        )
        if response is None:
            return None
        return self._parse_record(response)

    async def delete_design(self, design_id: str) -> DeleteResult:
        response = await self._request("DELETE", f"/designs/{design_id}")
        if response is None:
            return DeleteResult(success=False)
        try:
            return DeleteResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise DesignGatewayError(f"Unreadable delete result: {e}") from e

    def __repr__(self) -> str:
        return f"HttpDesignGateway(base_url={self.base_url!r})"
