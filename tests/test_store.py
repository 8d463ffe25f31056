import pytest

from core.drag import DragSession, DropRequest
from core.log import Log
from core.node import PLACEHOLDER_NAME
from core.status import Status
from core.store import TreeStore


@pytest.fixture
def store(forest):
    return TreeStore(forest)


@pytest.fixture
def changes(store):
    seen = []
    store.subscribe(lambda forest, outcome: seen.append((forest, outcome)))
    return seen


def names(store, node_id):
    return [c.name for c in store.find(node_id).children]


def test_default_store_uses_sample_forest():
    store = TreeStore()
    assert [n.id for n in store.nodes] == ["root-1"]
    assert store.find("node-c-2").name == "Level C"


def test_edits_replace_forest_and_notify(store, changes):
    before = store.nodes
    out = store.add_node("P", "Fresh")

    assert out.ok
    assert store.nodes is out.forest
    assert store.nodes is not before
    assert len(changes) == 1
    assert changes[0][0] is store.nodes
    assert changes[0][1] is out
    assert names(store, "P")[-1] == "Fresh"


def test_unchanged_outcome_does_not_notify(store, changes):
    store.set_expanded("P", True)
    store.move_node("B", "B")
    assert changes == []


def test_rejections_are_logged_and_leave_forest(store, changes):
    before = store.nodes
    count = Log.count()

    assert store.rename_node("A", "   ").status is Status.INVALID_INPUT
    assert store.remove_node("ghost").status is Status.NOT_FOUND
    assert store.move_node("Q", "E").status is Status.STRUCTURAL_VIOLATION

    assert store.nodes is before
    assert changes == []
    assert Log.count() == count + 3
    assert "not found" in Log.get(count + 1)[1]
    assert "[store.py]" in Log.last()


def test_success_is_logged_when_verbose(store):
    Log.set_verbosity(1)
    store.rename_node("A", "Alpha")
    assert "Rename" in Log.last()


def test_toggle_lazy_load_through_store(store):
    store.toggle_node("R")
    assert names(store, "R") == [PLACEHOLDER_NAME]
    store.toggle_node("R")
    assert store.find("R").is_expanded is False
    assert names(store, "R") == [PLACEHOLDER_NAME]


def test_unsubscribe(store, changes):
    listener = lambda forest, outcome: changes.append("second")
    store.subscribe(listener)
    store.unsubscribe(listener)
    store.expand_all()
    assert len(changes) == 1

# ---------- drag and drop ----------

def test_drag_and_drop_moves_node(store, changes):
    assert store.begin_drag("A").ok
    assert store.active_node.id == "A"

    out = store.end_drag("C")
    assert out.ok
    assert [c.id for c in store.find("P").children] == ["B", "C", "A"]
    assert store.active_node is None
    assert len(changes) == 1


def test_drop_outside_tree_is_noop(store, changes):
    store.begin_drag("A")
    before = store.nodes
    out = store.end_drag(None)
    assert out.ok
    assert store.nodes is before
    assert store.active_node is None
    assert changes == []


def test_drag_stale_source(store):
    out = store.begin_drag("ghost")
    assert out.status is Status.NOT_FOUND
    assert store.active_node is None
    assert store.end_drag("A").forest is store.nodes


def test_drop_into_own_subtree_rejected(store):
    store.begin_drag("Q")
    before = store.nodes
    out = store.end_drag("E")
    assert out.status is Status.STRUCTURAL_VIOLATION
    assert store.nodes is before


def test_removing_dragged_node_cancels_drag(store):
    store.begin_drag("E")
    store.remove_node("Q")
    assert store.active_node is None


def test_drag_session_messages(forest):
    session = DragSession()
    assert session.end("A") is None

    assert session.begin(forest, "B")
    assert session.active
    assert session.active_node.name == "B"
    assert session.end("C") == DropRequest("B", "C")
    assert not session.active

    assert not session.begin(forest, "ghost")
    assert session.active_node is None


def test_shift_drop_makes_last_child(store, changes):
    store.begin_drag("B")
    out = store.end_drag("E", into=True)
    assert out.ok
    assert [c.id for c in store.find("E").children] == ["B"]
    assert store.find("E").is_expanded
    assert [c.id for c in store.find("P").children] == ["A", "C"]
    assert len(changes) == 1


def test_shift_drop_into_loaded_parent(store):
    store.begin_drag("B")
    assert store.end_drag("D", into=True).ok
    assert [c.id for c in store.find("D").children] == ["E", "B"]
    assert store.find("D").is_expanded


def test_shift_drop_into_leaf(store):
    store.begin_drag("C")
    assert store.end_drag("B", into=True).ok
    assert names(store, "B") == ["C"]
    assert store.find("B").has_children


def test_shift_drop_into_own_subtree_rejected(store):
    store.begin_drag("Q")
    before = store.nodes
    out = store.end_drag("E", into=True)
    assert out.status is Status.STRUCTURAL_VIOLATION
    assert store.nodes is before


def test_shift_drop_on_itself_is_noop(store, changes):
    store.begin_drag("B")
    before = store.nodes
    assert store.end_drag("B", into=True).ok
    assert store.nodes is before
    assert changes == []


# ---------- add into an expanded parent ----------

def test_add_node_expanded_loads_parent_first(store):
    out = store.add_node_expanded("R", "New")
    assert out.ok
    assert names(store, "R") == [PLACEHOLDER_NAME, "New"]
    assert store.find("R").is_expanded


def test_add_node_expanded_blank_name_changes_nothing(store, changes):
    before = store.nodes
    out = store.add_node_expanded("R", "   ")
    assert out.status is Status.INVALID_INPUT
    assert store.nodes is before
    assert not store.find("R").is_expanded
    assert changes == []


def test_add_node_expanded_missing_parent(store):
    before = store.nodes
    assert store.add_node_expanded("ghost", "New").status is Status.NOT_FOUND
    assert store.nodes is before
