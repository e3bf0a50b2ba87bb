"""Editor session: the graph being edited plus save/load/delete flows.

The session owns a ``GraphStore``, a ``CanvasController`` over it, and the
identity of the design currently open. Persistence goes through a
``DesignGateway``. Gateway failures never escape: they are logged, kept in
``last_error`` and reported as ``Outcome.failed``, and the graph is left as
it was.
"""

from __future__ import annotations

import logging
from enum import Enum

from apiflow.editor.graph_store import GraphStore
from apiflow.editor.interaction import CanvasController
from apiflow.gateway import DesignGateway, DesignGatewayError
from apiflow.models.design import DesignRecord
from apiflow.serialization import deserialize_graph, serialize_graph

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Result of a session operation."""

    ok = "ok"
    invalid = "invalid"  # rejected before any request was sent
    not_found = "not_found"
    failed = "failed"  # transport or storage error, see last_error


class EditorSession:
    """One user's editing session against a design store.

    Usage:
        session = EditorSession(HttpDesignGateway())
        await session.refresh_designs()
        start = session.store.add_node("start")
        await session.save_design("Flow A")
    """

    def __init__(self, gateway: DesignGateway, store: GraphStore | None = None) -> None:
        self.gateway = gateway
        self.store = store or GraphStore()
        self.controller = CanvasController(self.store)

        self.designs: list[DesignRecord] = []
        self.current_design_id: str | None = None
        self.current_design_name: str = ""

        # only meant for disabling UI while a request is in flight
        self.is_loading = False
        self.last_error: DesignGatewayError | None = None

    def _fail(self, action: str, error: DesignGatewayError) -> Outcome:
        logger.error("Failed to %s: %s", action, error)
        self.last_error = error
        return Outcome.failed

    async def refresh_designs(self) -> Outcome:
        """Reload the list of saved designs."""
        try:
            self.designs = await self.gateway.list_designs()
        except DesignGatewayError as e:
            return self._fail("load designs", e)
        return Outcome.ok

    async def save_design(self, name: str) -> Outcome:
        """Save the current graph under ``name``.

        Updates the open design if there is one, otherwise creates a new
        design and makes it the open one. Surrounding whitespace is trimmed
        from the name.
        """
        name = name.strip()
        if not name:
            return Outcome.invalid

        self.is_loading = True
        try:
            design_data = serialize_graph(self.store.nodes, self.store.edges)
            if self.current_design_id:
                record = await self.gateway.update_design(
                    self.current_design_id,
                    name=name,
                    design_data=design_data,
                )
                if record is None:
                    return Outcome.not_found
            else:
                record = await self.gateway.create_design(name, design_data)
                self.current_design_id = record.id

            self.current_design_name = name
            await self.refresh_designs()
            return Outcome.ok
        except DesignGatewayError as e:
            return self._fail("save design", e)
        finally:
            self.is_loading = False

    async def load_design(self, design_id: str) -> Outcome:
        """Replace the graph with a stored design and make it the open one."""
        self.is_loading = True
        try:
            record = await self.gateway.get_design(design_id)
            if record is None:
                return Outcome.not_found

            design = deserialize_graph(record.design_data)
            self.store.load(design.nodes, design.edges)
            self.controller.release_pointer()
            self.controller.cancel_connection()
            self.current_design_id = record.id
            self.current_design_name = record.name
            return Outcome.ok
        except DesignGatewayError as e:
            return self._fail("load design", e)
        finally:
            self.is_loading = False

    async def delete_design(self, design_id: str) -> Outcome:
        """Delete a stored design; deleting the open one clears the editor."""
        self.is_loading = True
        try:
            result = await self.gateway.delete_design(design_id)
            if not result.success:
                return Outcome.not_found

            await self.refresh_designs()
            if self.current_design_id == design_id:
                self.new_design()
            return Outcome.ok
        except DesignGatewayError as e:
            return self._fail("delete design", e)
        finally:
            self.is_loading = False

    def new_design(self) -> None:
        """Start over with an empty, unsaved graph."""
        self.store.reset()
        self.controller.release_pointer()
        self.controller.cancel_connection()
        self.current_design_id = None
        self.current_design_name = ""

    def __repr__(self) -> str:
        return (
            f"EditorSession(design_id={self.current_design_id!r}, "
            f"nodes={self.store.node_count}, edges={self.store.edge_count})"
        )
