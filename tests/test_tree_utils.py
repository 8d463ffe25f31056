import pytest

from core.node import PLACEHOLDER_NAME, collect_ids, count_nodes
from core.status import Status
from core.tree import find_node, get_ancestors
from core.tree_utils import (
    add_child,
    collapse_all,
    expand_all,
    remove_subtree,
    rename_node,
    set_expanded,
    toggle_expand,
)


def child_ids(forest, node_id):
    return [c.id for c in find_node(forest, node_id).children or ()]

# ---------- add ----------

def test_add_child_appends_last_and_expands_parent(forest):
    out = add_child(forest, "Q", "New")

    assert out.ok
    assert out.node_id is not None
    assert child_ids(out.forest, "Q") == ["D", out.node_id]
    parent = find_node(out.forest, "Q")
    assert parent.is_expanded and parent.has_children
    new = find_node(out.forest, out.node_id)
    assert new.name == "New"
    assert new.children is None and not new.has_children
    assert get_ancestors(out.forest, out.node_id) == ["Q"]


def test_add_child_initializes_missing_children(forest):
    out = add_child(forest, "B", "Leaf child")
    node = find_node(out.forest, "B")
    assert [c.name for c in node.children] == ["Leaf child"]
    assert node.is_expanded and node.has_children


def test_add_root(forest):
    out = add_child(forest, None, "  Top  ")
    assert out.ok
    assert out.forest[-1].id == out.node_id
    assert out.forest[-1].name == "Top"
    assert out.forest[:-1] == forest


def test_add_under_missing_parent_is_not_found(forest):
    out = add_child(forest, "ghost", "X")
    assert out.status is Status.NOT_FOUND
    assert out.forest is forest


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_add_rejects_blank_names(forest, name):
    out = add_child(forest, "P", name)
    assert out.status is Status.INVALID_INPUT
    assert out.forest is forest


def test_repeated_adds_keep_ids_unique(forest):
    for i in range(20):
        forest = add_child(forest, "A" if i % 2 else None, f"n{i}").forest
    ids = collect_ids(forest)
    assert len(ids) == len(set(ids))

# ---------- remove ----------

def test_remove_subtree_drops_node_and_descendants(forest):
    out = remove_subtree(forest, "Q")
    assert out.ok
    for gone in ("Q", "D", "E"):
        assert find_node(out.forest, gone) is None
    assert count_nodes(out.forest) == count_nodes(forest) - 3
    assert [n.id for n in out.forest] == ["P", "R"]


def test_remove_keeps_sibling_order(forest):
    out = remove_subtree(forest, "B")
    assert child_ids(out.forest, "P") == ["A", "C"]


def test_remove_last_child_clears_hint(forest):
    out = remove_subtree(forest, "E")
    d = find_node(out.forest, "D")
    assert d.children == ()
    assert d.has_children is False


def test_remove_missing_is_not_found(forest):
    out = remove_subtree(forest, "ghost")
    assert out.status is Status.NOT_FOUND
    assert out.forest is forest

# ---------- rename ----------

def test_rename(forest):
    out = rename_node(forest, "E", "Echo")
    assert out.ok
    assert find_node(out.forest, "E").name == "Echo"
    assert find_node(forest, "E").name == "E"


def test_rename_is_idempotent(forest):
    once = rename_node(forest, "A", "X").forest
    twice = rename_node(once, "A", "X").forest
    assert twice == once
    assert twice is once


def test_rename_strips_name(forest):
    out = rename_node(forest, "A", "  spaced  ")
    assert find_node(out.forest, "A").name == "spaced"


@pytest.mark.parametrize("name", ["", "    "])
def test_rename_rejects_empty(forest, name):
    out = rename_node(forest, "A", name)
    assert out.status is Status.INVALID_INPUT
    assert out.forest is forest


def test_rename_missing_is_not_found(forest):
    assert rename_node(forest, "ghost", "X").status is Status.NOT_FOUND

# ---------- expand / collapse ----------

def test_toggle_lazy_loads_single_placeholder(forest):
    out = toggle_expand(forest, "R")
    r = find_node(out.forest, "R")
    assert r.is_expanded
    assert len(r.children) == 1
    placeholder = r.children[0]
    assert placeholder.name == PLACEHOLDER_NAME
    assert placeholder.children is None and not placeholder.has_children

    again = toggle_expand(out.forest, "R")
    r2 = find_node(again.forest, "R")
    assert r2.is_expanded is False
    assert r2.children is r.children


def test_reexpanding_does_not_reload(forest):
    first = toggle_expand(forest, "R").forest
    collapsed = toggle_expand(first, "R").forest
    reopened = toggle_expand(collapsed, "R").forest
    assert find_node(reopened, "R").children == find_node(first, "R").children


def test_toggle_loaded_node_only_flips_flag(forest):
    out = toggle_expand(forest, "Q")
    q = find_node(out.forest, "Q")
    assert q.is_expanded
    assert q.children is forest[1].children


def test_toggle_missing_is_not_found(forest):
    out = toggle_expand(forest, "ghost")
    assert out.status is Status.NOT_FOUND
    assert out.forest is forest


def test_set_expanded_noop_returns_same_forest(forest):
    assert set_expanded(forest, "P", True).forest is forest
    assert set_expanded(forest, "Q", False).forest is forest


def test_set_expanded_loads_placeholder(forest):
    out = set_expanded(forest, "R", True)
    assert [c.name for c in find_node(out.forest, "R").children] == [PLACEHOLDER_NAME]


def test_expand_and_collapse_all(forest):
    expanded = expand_all(forest).forest
    for node_id in ("P", "A", "Q", "D", "R"):
        assert find_node(expanded, node_id).is_expanded
    assert not find_node(expanded, "B").is_expanded

    collapsed = collapse_all(expanded).forest
    for node_id in ("P", "A", "Q", "D", "R"):
        assert not find_node(collapsed, node_id).is_expanded
    assert collapse_all(collapsed).forest is collapsed
