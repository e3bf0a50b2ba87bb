"""Where edges are drawn on the canvas.

An edge runs from the source node's right-center to the target node's
left-center, with a clickable marker at the midpoint that removes it.
"""

from typing import Iterable

from pydantic import BaseModel

from apiflow.models.design import Edge
from apiflow.models.node import Node, Position

# approximate rendered node size
NODE_WIDTH = 120
NODE_HALF_HEIGHT = 25


class EdgeGeometry(BaseModel):
    """screen-space line for one edge."""

    edge_id: str
    start: Position
    end: Position

    @property
    def midpoint(self) -> Position:
        return Position(
            x=(self.start.x + self.end.x) / 2,
            y=(self.start.y + self.end.y) / 2,
        )


def source_anchor(node: Node) -> Position:
    return Position(x=node.position.x + NODE_WIDTH, y=node.position.y + NODE_HALF_HEIGHT)


def target_anchor(node: Node) -> Position:
    return Position(x=node.position.x, y=node.position.y + NODE_HALF_HEIGHT)


def _line(edge: Edge, by_id: dict[str, Node]) -> EdgeGeometry | None:
    source = by_id.get(edge.source)
    target = by_id.get(edge.target)
    if source is None or target is None:
        return None
    return EdgeGeometry(
        edge_id=edge.id,
        start=source_anchor(source),
        end=target_anchor(target),
    )


def edge_geometry(edge: Edge, nodes: Iterable[Node]) -> EdgeGeometry | None:
    """Line for ``edge``, or None when either endpoint is missing."""
    return _line(edge, {node.id: node for node in nodes})


def layout_edges(nodes: Iterable[Node], edges: Iterable[Edge]) -> list[EdgeGeometry]:
    """Geometry for every edge that can be drawn; orphaned edges are skipped."""
    by_id = {node.id: node for node in nodes}
    lines = [_line(edge, by_id) for edge in edges]
    return [line for line in lines if line is not None]
