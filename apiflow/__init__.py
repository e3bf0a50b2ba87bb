"""API Flow Designer - graph editing core for composing API call flows."""

from apiflow.editor import CanvasController, GraphStore, HandleSide, layout_edges
from apiflow.gateway import DesignGateway, DesignGatewayError, InMemoryDesignGateway
from apiflow.models import (
    PALETTE,
    DesignData,
    DesignRecord,
    Edge,
    Node,
    NodeKind,
    Position,
)
from apiflow.sdk.design_client import HttpDesignGateway
from apiflow.serialization import deserialize_graph, serialize_graph
from apiflow.session import EditorSession, Outcome

__all__ = [
    # Models
    "Node",
    "NodeKind",
    "Position",
    "Edge",
    "DesignData",
    "DesignRecord",
    "PALETTE",
    # Editing
    "GraphStore",
    "CanvasController",
    "HandleSide",
    "layout_edges",
    # Serialization
    "serialize_graph",
    "deserialize_graph",
    # Persistence
    "DesignGateway",
    "DesignGatewayError",
    "InMemoryDesignGateway",
    "HttpDesignGateway",
    # High-level APIs
    "EditorSession",
    "Outcome",
]
