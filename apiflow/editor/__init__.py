"""Graph editing: the store, pointer gestures and edge geometry."""

from apiflow.editor.geometry import (
    NODE_HALF_HEIGHT,
    NODE_WIDTH,
    EdgeGeometry,
    edge_geometry,
    layout_edges,
)
from apiflow.editor.graph_store import GraphStore
from apiflow.editor.interaction import (
    CanvasController,
    HandleSide,
    InteractionState,
    has_handle,
)

__all__ = [
    "GraphStore",
    "CanvasController",
    "HandleSide",
    "InteractionState",
    "has_handle",
    "EdgeGeometry",
    "edge_geometry",
    "layout_edges",
    "NODE_WIDTH",
    "NODE_HALF_HEIGHT",
]
