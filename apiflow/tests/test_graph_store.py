"""Tests for the graph store state transitions."""

import random

import pytest
from pydantic import ValidationError

from apiflow.editor.graph_store import GraphStore
from apiflow.models.design import Edge
from apiflow.models.node import HttpMethod, NodeKind, Position, build_node


@pytest.fixture
def store():
    return GraphStore(rng=random.Random(7))


class TestAddNode:
    def test_ids_are_pairwise_distinct(self, store):
        for _ in range(300):
            store.add_node(NodeKind.start)
        ids = [node.id for node in store.nodes]
        assert len(set(ids)) == 300

    def test_appends_in_order(self, store):
        first = store.add_node(NodeKind.start, "Start")
        second = store.add_node(NodeKind.response, "Response")
        assert [n.id for n in store.nodes] == [first.id, second.id]

    def test_label_defaults_to_palette(self, store):
        node = store.add_node("databaseQuery")
        assert node.data.label == "Database Query"

    def test_spawns_inside_default_region(self, store):
        for _ in range(50):
            node = store.add_node(NodeKind.http_request)
            assert 100 <= node.position.x < 500
            assert 100 <= node.position.y < 400

    def test_avoids_ids_already_in_graph(self, store, monkeypatch):
        loaded = build_node(NodeKind.start, "start-taken", "Start", Position(x=0, y=0))
        store.load([loaded], [])

        issued = iter(["start-taken", "start-fresh"])
        monkeypatch.setattr(
            "apiflow.editor.graph_store.generate_node_id", lambda kind: next(issued)
        )
        node = store.add_node(NodeKind.start)
        assert node.id == "start-fresh"


class TestUpdateNodeData:
    def test_partial_update_preserves_other_fields(self, store):
        node = store.add_node(NodeKind.http_request)
        store.update_node_data(node.id, {"method": "POST", "headers": {"X-Key": "1"}})
        store.update_node_data(node.id, {"url": "x"})

        data = store.get_node(node.id).data
        assert data.url == "x"
        assert data.method == HttpMethod.POST
        assert data.headers == {"X-Key": "1"}

    def test_missing_id_is_noop(self, store):
        node = store.add_node(NodeKind.start)
        store.update_node_data("nope", {"description": "x"})
        assert store.nodes == (node,)

    def test_refreshes_selected_snapshot(self, store):
        node = store.add_node(NodeKind.start)
        store.select_node(node)
        store.update_node_data(node.id, {"description": "entry point"})
        assert store.selected_node.data.description == "entry point"

    def test_leaves_other_selection_alone(self, store):
        a = store.add_node(NodeKind.start)
        b = store.add_node(NodeKind.response)
        store.select_node(a)
        store.update_node_data(b.id, {"statusCode": 404})
        assert store.selected_node == a

    def test_invalid_value_leaves_node_unchanged(self, store):
        node = store.add_node(NodeKind.response)
        with pytest.raises(ValidationError):
            store.update_node_data(node.id, {"statusCode": "lots"})
        assert store.get_node(node.id) == node


class TestHeaders:
    def test_set_header_adds_and_overwrites(self, store):
        node = store.add_node(NodeKind.http_request)
        store.set_header(node.id, "Accept", "text/plain")
        store.set_header(node.id, "Accept", "application/json")
        store.set_header(node.id, "X-Trace", "1")
        assert store.get_node(node.id).data.headers == {
            "Accept": "application/json",
            "X-Trace": "1",
        }

    def test_empty_key_or_value_ignored(self, store):
        node = store.add_node(NodeKind.http_request)
        store.set_header(node.id, "", "x")
        store.set_header(node.id, "Accept", "")
        assert store.get_node(node.id).data.headers == {}

    def test_remove_header_drops_one_key(self, store):
        node = store.add_node(NodeKind.http_request)
        store.set_header(node.id, "Accept", "application/json")
        store.set_header(node.id, "X-Trace", "1")
        store.remove_header(node.id, "Accept")
        store.remove_header(node.id, "Missing")
        assert store.get_node(node.id).data.headers == {"X-Trace": "1"}

    def test_refreshes_selected_snapshot(self, store):
        node = store.add_node(NodeKind.http_request)
        store.select_node(node)
        store.set_header(node.id, "Accept", "application/json")
        assert store.selected_node.data.headers == {"Accept": "application/json"}

    def test_other_kinds_untouched(self, store):
        node = store.add_node(NodeKind.response)
        store.set_header(node.id, "Accept", "application/json")
        store.remove_header(node.id, "Accept")
        assert store.get_node(node.id) == node


class TestMoveNode:
    def test_clamps_negative_coordinates(self, store):
        node = store.add_node(NodeKind.start)
        store.move_node(node.id, Position(x=-5, y=-5))
        assert store.get_node(node.id).position == Position(x=0, y=0)

    def test_moves_to_position(self, store):
        node = store.add_node(NodeKind.start)
        store.move_node(node.id, Position(x=250, y=-1))
        assert store.get_node(node.id).position == Position(x=250, y=0)

    def test_missing_id_is_noop(self, store):
        node = store.add_node(NodeKind.start)
        store.move_node("nope", Position(x=1, y=1))
        assert store.nodes == (node,)


class TestConnect:
    def test_duplicate_connect_leaves_one_edge(self, store):
        a = store.add_node(NodeKind.start)
        b = store.add_node(NodeKind.http_request)
        assert store.connect(a.id, b.id) is not None
        assert store.connect(a.id, b.id) is None
        assert store.edges == (Edge.between(a.id, b.id),)

    def test_self_loop_never_created(self, store):
        a = store.add_node(NodeKind.http_request)
        assert store.connect(a.id, a.id) is None
        assert store.edge_count == 0

    def test_reverse_direction_is_distinct(self, store):
        a = store.add_node(NodeKind.http_request)
        b = store.add_node(NodeKind.database_query)
        store.connect(a.id, b.id)
        store.connect(b.id, a.id)
        assert [e.id for e in store.edges] == [f"{a.id}-{b.id}", f"{b.id}-{a.id}"]

    def test_dangling_endpoints_allowed(self, store):
        edge = store.connect("ghost-1", "ghost-2")
        assert edge.id == "ghost-1-ghost-2"


class TestDisconnect:
    def test_removes_edge(self, store):
        a = store.add_node(NodeKind.start)
        b = store.add_node(NodeKind.response)
        edge = store.connect(a.id, b.id)
        store.disconnect(edge.id)
        assert store.edges == ()

    def test_unknown_edge_is_noop(self, store):
        a = store.add_node(NodeKind.start)
        b = store.add_node(NodeKind.response)
        store.connect(a.id, b.id)
        store.disconnect("not-an-edge")
        assert store.edge_count == 1


class TestRemoveNode:
    def test_removes_node_and_touching_edges(self, store):
        a = store.add_node(NodeKind.start)
        b = store.add_node(NodeKind.http_request)
        c = store.add_node(NodeKind.response)
        store.connect(a.id, b.id)
        store.connect(b.id, c.id)
        store.connect(a.id, c.id)

        store.remove_node(b.id)
        assert [n.id for n in store.nodes] == [a.id, c.id]
        assert [e.id for e in store.edges] == [f"{a.id}-{c.id}"]

    def test_clears_selection_of_removed_node(self, store):
        a = store.add_node(NodeKind.start)
        store.select_node(a)
        store.remove_node(a.id)
        assert store.selected_node is None


class TestSelectionAndReset:
    def test_select_and_clear(self, store):
        a = store.add_node(NodeKind.start)
        store.select_node(a)
        assert store.selected_node == a
        store.select_node(None)
        assert store.selected_node is None

    def test_reset_clears_everything(self, store):
        a = store.add_node(NodeKind.start)
        b = store.add_node(NodeKind.response)
        store.connect(a.id, b.id)
        store.select_node(a)

        store.reset()
        assert store.nodes == ()
        assert store.edges == ()
        assert store.selected_node is None

    def test_load_replaces_graph_and_clears_selection(self, store):
        a = store.add_node(NodeKind.start)
        store.select_node(a)
        loaded = build_node(NodeKind.response, "response-1", "Done", Position(x=1, y=2))

        store.load([loaded], [Edge.between("x", "response-1")])
        assert store.nodes == (loaded,)
        assert store.edge_count == 1
        assert store.selected_node is None
