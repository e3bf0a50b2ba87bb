"""Core data models for the API flow designer."""

from apiflow.models.design import (
    DeleteResult,
    DesignCreate,
    DesignData,
    DesignRecord,
    DesignUpdate,
    Edge,
    Viewport,
    edge_id,
)
from apiflow.models.node import (
    PALETTE,
    DatabaseQueryData,
    DatabaseQueryNode,
    HttpMethod,
    HttpRequestData,
    HttpRequestNode,
    Node,
    NodeKind,
    PaletteEntry,
    Position,
    QueryType,
    ResponseData,
    ResponseNode,
    StartData,
    StartNode,
    build_node,
    merge_node_data,
)

__all__ = [
    # Nodes
    "Node",
    "NodeKind",
    "Position",
    "StartNode",
    "StartData",
    "HttpRequestNode",
    "HttpRequestData",
    "HttpMethod",
    "DatabaseQueryNode",
    "DatabaseQueryData",
    "QueryType",
    "ResponseNode",
    "ResponseData",
    "build_node",
    "merge_node_data",
    # Palette
    "PALETTE",
    "PaletteEntry",
    # Graph and design records
    "Edge",
    "edge_id",
    "Viewport",
    "DesignData",
    "DesignRecord",
    "DesignCreate",
    "DesignUpdate",
    "DeleteResult",
]
