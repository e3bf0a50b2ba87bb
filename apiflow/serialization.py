"""Conversion between the live graph and the blob stored in a design record.

Storage treats ``design_data`` as opaque JSON, so nothing guarantees the
shape of what comes back. Decoding therefore never raises: missing or
malformed parts fall back to empty lists and the default viewport, and
individual nodes or edges that fail validation are dropped with a warning.
Edge ids are rebuilt from their endpoints, and repeated node ids, repeated
edges and self loops are dropped, so a loaded graph obeys the same rules as
one built by the store.
"""

import logging
from typing import Any, Iterable

from pydantic import ValidationError

from apiflow.models.design import DesignData, Edge, Viewport
from apiflow.models.node import Node, node_adapter

logger = logging.getLogger(__name__)


def serialize_graph(nodes: Iterable[Node], edges: Iterable[Edge]) -> dict[str, Any]:
    """Build the ``design_data`` blob for the given graph.

    The viewport is always the default; the editor does not track pan/zoom.
    """
    design = DesignData(nodes=list(nodes), edges=list(edges), viewport=Viewport())
    return design.model_dump(mode="json", by_alias=True)


def _decode_list(raw: Any, decode, what: str) -> list:
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning("ignoring %s: expected a list, got %s", what, type(raw).__name__)
        return []

    items = []
    for position, entry in enumerate(raw):
        try:
            items.append(decode(entry))
        except ValidationError as e:
            logger.warning("skipping %s[%d]: %s", what, position, e.error_count())
    return items


def _unique_nodes(nodes: list[Node]) -> list[Node]:
    seen: set[str] = set()
    kept = []
    for node in nodes:
        if node.id in seen:
            logger.warning("skipping node with duplicate id %s", node.id)
            continue
        seen.add(node.id)
        kept.append(node)
    return kept


def _canonical_edges(edges: list[Edge]) -> list[Edge]:
    """Rebuild ids from the endpoints, dropping self loops and repeats."""
    seen: set[str] = set()
    kept = []
    for edge in edges:
        if edge.source == edge.target:
            logger.warning("skipping self loop on %s", edge.source)
            continue
        edge = Edge.between(edge.source, edge.target)
        if edge.id in seen:
            logger.warning("skipping duplicate edge %s", edge.id)
            continue
        seen.add(edge.id)
        kept.append(edge)
    return kept


def deserialize_graph(blob: Any) -> DesignData:
    """Decode a stored ``design_data`` blob into a graph."""
    if not isinstance(blob, dict):
        if blob is not None:
            logger.warning("design data is not an object, loading empty graph")
        return DesignData()

    nodes = _decode_list(blob.get("nodes"), node_adapter.validate_python, "nodes")
    edges = _decode_list(blob.get("edges"), Edge.model_validate, "edges")
    return DesignData(
        nodes=_unique_nodes(nodes),
        edges=_canonical_edges(edges),
        viewport=Viewport(),
    )
