"""In-memory graph that the canvas edits.

The store owns the node and edge lists and the current selection. Every
operation is a synchronous state transition; nodes are replaced rather than
mutated so a snapshot handed out earlier (for example the selected node)
never changes underneath its holder.
"""

import logging
import random
from typing import Iterable

from apiflow.models.design import Edge, edge_id as make_edge_id
from apiflow.models.node import (
    PALETTE,
    HttpRequestData,
    Node,
    NodeKind,
    Position,
    build_node,
    merge_node_data,
)
from apiflow.utils.identifiers import generate_node_id

logger = logging.getLogger(__name__)

# new nodes land somewhere inside this box
SPAWN_ORIGIN = Position(x=100, y=100)
SPAWN_WIDTH = 400
SPAWN_HEIGHT = 300


class GraphStore:
    """Authoritative node/edge state plus the selected node."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._selected: Node | None = None
        self._rng = rng or random.Random()

    # --- read access ---

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def selected_node(self) -> Node | None:
        return self._selected

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def get_node(self, node_id: str) -> Node | None:
        for node in self._nodes:
            if node.id == node_id:
                return node
        return None

    def get_edge(self, edge_id: str) -> Edge | None:
        for edge in self._edges:
            if edge.id == edge_id:
                return edge
        return None

    def _index_of(self, node_id: str) -> int | None:
        for index, node in enumerate(self._nodes):
            if node.id == node_id:
                return index
        return None

    def _replace(self, index: int, node: Node) -> None:
        self._nodes[index] = node
        if self._selected is not None and self._selected.id == node.id:
            self._selected = node

    # --- mutations ---

    def add_node(self, kind: NodeKind | str, label: str | None = None) -> Node:
        """Append a node of ``kind`` with default data at a random spot.

        The label defaults to the palette label for the kind.
        """
        kind = NodeKind(kind)
        if label is None:
            label = PALETTE[kind].label

        existing = {node.id for node in self._nodes}
        node_id = generate_node_id(kind.value)
        while node_id in existing:
            node_id = generate_node_id(kind.value)

        position = Position(
            x=self._rng.random() * SPAWN_WIDTH + SPAWN_ORIGIN.x,
            y=self._rng.random() * SPAWN_HEIGHT + SPAWN_ORIGIN.y,
        )
        node = build_node(kind, node_id, label, position)
        self._nodes.append(node)
        logger.debug("added node %s", node_id)
        return node

    def update_node_data(self, node_id: str, partial: dict) -> None:
        """Merge ``partial`` into the node's data; fields not mentioned stay."""
        index = self._index_of(node_id)
        if index is None:
            return
        node = self._nodes[index]
        data = merge_node_data(node.data, partial)
        self._replace(index, node.model_copy(update={"data": data}))

    def _headers_of(self, node_id: str) -> dict[str, str] | None:
        node = self.get_node(node_id)
        if node is None or not isinstance(node.data, HttpRequestData):
            return None
        return dict(node.data.headers)

    def set_header(self, node_id: str, key: str, value: str) -> None:
        """Add or overwrite one header on an HTTP request node.

        Ignored when the key or the value is empty.
        """
        if not key or not value:
            return
        headers = self._headers_of(node_id)
        if headers is None:
            return
        headers[key] = value
        self.update_node_data(node_id, {"headers": headers})

    def remove_header(self, node_id: str, key: str) -> None:
        headers = self._headers_of(node_id)
        if headers is None or key not in headers:
            return
        del headers[key]
        self.update_node_data(node_id, {"headers": headers})

    def move_node(self, node_id: str, position: Position) -> None:
        """Move a node, clamping both coordinates to be non-negative."""
        index = self._index_of(node_id)
        if index is None:
            return
        clamped = Position(x=max(0.0, position.x), y=max(0.0, position.y))
        node = self._nodes[index]
        self._replace(index, node.model_copy(update={"position": clamped}))

    def connect(self, source_id: str, target_id: str) -> Edge | None:
        """Add an edge from source to target.

        Self loops and duplicates are ignored and return None.
        """
        if source_id == target_id:
            return None
        if self.get_edge(make_edge_id(source_id, target_id)) is not None:
            return None
        edge = Edge.between(source_id, target_id)
        self._edges.append(edge)
        logger.debug("connected %s", edge.id)
        return edge

    def disconnect(self, edge_id: str) -> None:
        self._edges = [edge for edge in self._edges if edge.id != edge_id]

    def remove_node(self, node_id: str) -> None:
        """Remove a node together with every edge that touches it."""
        index = self._index_of(node_id)
        if index is None:
            return
        del self._nodes[index]
        self._edges = [
            edge
            for edge in self._edges
            if edge.source != node_id and edge.target != node_id
        ]
        if self._selected is not None and self._selected.id == node_id:
            self._selected = None

    def select_node(self, node: Node | None) -> None:
        self._selected = node

    def reset(self) -> None:
        """Clear nodes, edges and selection."""
        self._nodes = []
        self._edges = []
        self._selected = None

    def load(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        """Replace the whole graph, e.g. with a freshly loaded design."""
        self._nodes = list(nodes)
        self._edges = list(edges)
        self._selected = None

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self._nodes)}, edges={len(self._edges)})"
