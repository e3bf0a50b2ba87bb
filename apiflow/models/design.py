"""Data models for edges, graphs and persisted designs.

A design record holds the graph as an opaque ``design_data`` blob; the
storage layer never looks inside it. Decoding that blob back into a graph
lives in ``apiflow.serialization``.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from apiflow.models.node import Node


def edge_id(source: str, target: str) -> str:
    """Edge ids are derived from their endpoints, one edge per ordered pair."""
    return f"{source}-{target}"


class Edge(BaseModel):
    """a directed connection between two nodes."""

    id: str
    source: str
    target: str

    @classmethod
    def between(cls, source: str, target: str) -> "Edge":
        return cls(id=edge_id(source, target), source=source, target=target)


class Viewport(BaseModel):
    """camera state; always written as the default."""

    x: float = 0
    y: float = 0
    zoom: float = 1


class DesignData(BaseModel):
    """the full graph as stored inside a design record."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    viewport: Viewport = Field(default_factory=Viewport)


class DesignRecord(BaseModel):
    """A named design as returned by the persistence gateway."""

    id: str
    name: str
    design_data: dict[str, Any]
    created_at: datetime
    updated_at: datetime


class DesignCreate(BaseModel):
    """Request body for creating a design."""

    name: str = Field(min_length=1)
    design_data: dict[str, Any]


class DesignUpdate(BaseModel):
    """Request body for updating a design. Omitted fields are left alone."""

    name: str | None = Field(default=None, min_length=1)
    design_data: dict[str, Any] | None = None


class DeleteResult(BaseModel):
    success: bool
