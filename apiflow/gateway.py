"""Persistence gateway contract and an in-memory implementation.

The editor only talks to storage through ``DesignGateway``. A missing
design is an ordinary result (``None`` or ``DeleteResult(success=False)``);
only transport or storage trouble raises, as ``DesignGatewayError``.
"""

from __future__ import annotations

from typing import Any, Protocol

from apiflow.models.design import DeleteResult, DesignCreate, DesignRecord, DesignUpdate
from apiflow.utils.identifiers import generate_design_id, next_timestamp, utc_now


class DesignGatewayError(Exception):
    """Raised when the design store cannot be reached or fails."""
    pass


class DesignGateway(Protocol):
    """Protocol for create/read/list/update/delete over named designs."""

    async def list_designs(self) -> list[DesignRecord]:
        """All designs, newest ``created_at`` first."""
        ...

    async def create_design(self, name: str, design_data: dict[str, Any]) -> DesignRecord:
        ...

    async def get_design(self, design_id: str) -> DesignRecord | None:
        ...

    async def update_design(
        self,
        design_id: str,
        name: str | None = None,
        design_data: dict[str, Any] | None = None,
    ) -> DesignRecord | None:
        ...

    async def delete_design(self, design_id: str) -> DeleteResult:
        ...


class InMemoryDesignGateway:
    """keeps designs in a dict; useful offline and in tests."""

    def __init__(self) -> None:
        self.records: dict[str, DesignRecord] = {}

    async def list_designs(self) -> list[DesignRecord]:
        # ties on created_at go to the later insert
        records = list(reversed(self.records.values()))
        records.sort(key=lambda r: r.created_at, reverse=True)
        return [r.model_copy(deep=True) for r in records]

    async def create_design(self, name: str, design_data: dict[str, Any]) -> DesignRecord:
        request = DesignCreate(name=name, design_data=design_data)
        now = utc_now()
        record = DesignRecord(
            id=generate_design_id(),
            name=request.name,
            design_data=request.design_data,
            created_at=now,
            updated_at=now,
        )
        self.records[record.id] = record
        return record.model_copy(deep=True)

    async def get_design(self, design_id: str) -> DesignRecord | None:
        record = self.records.get(design_id)
        return record.model_copy(deep=True) if record else None

    async def update_design(
        self,
        design_id: str,
        name: str | None = None,
        design_data: dict[str, Any] | None = None,
    ) -> DesignRecord | None:
        record = self.records.get(design_id)
        if record is None:
            return None
        request = DesignUpdate(name=name, design_data=design_data)

        # update fields that were provided
        update_data = request.model_dump(exclude_none=True)
        update_data["updated_at"] = next_timestamp(record.updated_at)
        record = record.model_copy(update=update_data, deep=True)
        self.records[design_id] = record
        return record.model_copy(deep=True)

    async def delete_design(self, design_id: str) -> DeleteResult:
        return DeleteResult(success=self.records.pop(design_id, None) is not None)
