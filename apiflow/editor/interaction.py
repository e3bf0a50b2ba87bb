"""Pointer gestures on the canvas, translated into graph store calls.

Two independent state machines live here:

- dragging: press on a node starts a drag, pointer moves reposition the
  node, release anywhere ends it.
- connecting: a click on a handle either starts a connection or, when one
  is already pending, completes it.

None of this state is ever saved with a design.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from apiflow.editor.graph_store import GraphStore
from apiflow.models.node import Node, NodeKind, Position

logger = logging.getLogger(__name__)


class HandleSide(str, Enum):
    """Which side of a node a connection handle sits on."""

    left = "left"  # target handle
    right = "right"  # source handle


def has_handle(node: Node, side: HandleSide) -> bool:
    """Response nodes have no right handle, start nodes no left handle."""
    if side == HandleSide.right:
        return node.type != NodeKind.response
    return node.type != NodeKind.start


@dataclass
class InteractionState:
    """Transient gesture state, scoped to one canvas."""

    dragged_node_id: str | None = None
    drag_offset: Position | None = None
    connecting_from_id: str | None = None


class CanvasController:
    """Turns press/move/release/click events into graph store mutations.

    Usage:
        controller = CanvasController(store)
        controller.press_node(node.id, Position(x=130, y=140))
        controller.move_pointer(Position(x=200, y=220))
        controller.release_pointer()
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store
        self.state = InteractionState()

    @property
    def is_dragging(self) -> bool:
        return self.state.dragged_node_id is not None

    @property
    def is_connecting(self) -> bool:
        return self.state.connecting_from_id is not None

    # --- dragging ---

    def press_node(self, node_id: str, pointer: Position) -> None:
        """Start dragging ``node_id`` and select it."""
        node = self.store.get_node(node_id)
        if node is None:
            return
        self.state.dragged_node_id = node_id
        self.state.drag_offset = Position(
            x=pointer.x - node.position.x,
            y=pointer.y - node.position.y,
        )
        self.store.select_node(node)

    def move_pointer(self, pointer: Position) -> None:
        if not self.is_dragging:
            return
        offset = self.state.drag_offset
        self.store.move_node(
            self.state.dragged_node_id,
            Position(x=pointer.x - offset.x, y=pointer.y - offset.y),
        )

    def release_pointer(self) -> None:
        self.state.dragged_node_id = None
        self.state.drag_offset = None

    def click_background(self) -> None:
        """A click on empty canvas clears the selection."""
        if self.is_dragging:
            return
        self.store.select_node(None)

    # --- connecting ---

    def click_handle(self, node_id: str, side: HandleSide) -> None:
        """Start a connection from ``node_id`` or finish the pending one.

        Finishing on the node the connection started from drops it without
        adding an edge.
        """
        node = self.store.get_node(node_id)
        if node is None or not has_handle(node, side):
            return

        source_id = self.state.connecting_from_id
        if source_id is None:
            self.state.connecting_from_id = node_id
            return

        if source_id != node_id:
            self.store.connect(source_id, node_id)
        else:
            logger.debug("dropped self connection on %s", node_id)
        self.state.connecting_from_id = None

    def cancel_connection(self) -> None:
        self.state.connecting_from_id = None

    def click_edge_marker(self, edge_id: str) -> None:
        """The midpoint marker of an edge removes that edge."""
        self.store.disconnect(edge_id)
