from core.tree import (
    find_node,
    find_path,
    get_ancestors,
    is_descendant,
    update_children,
    update_node,
)


def test_find_node_at_any_depth(forest):
    assert find_node(forest, "P").name == "P"
    assert find_node(forest, "E").name == "E"
    assert find_node(forest, "missing") is None


def test_find_path_and_ancestors(forest):
    assert [n.id for n in find_path(forest, "E")] == ["Q", "D", "E"]
    assert get_ancestors(forest, "E") == ["D", "Q"]
    assert get_ancestors(forest, "P") == []
    assert get_ancestors(forest, "missing") == []


def test_is_descendant(forest):
    assert is_descendant(forest, "Q", "E")
    assert is_descendant(forest, "P", "A2")
    assert not is_descendant(forest, "E", "Q")
    assert not is_descendant(forest, "A", "A")
    assert not is_descendant(forest, "P", "E")


def test_update_node_copies_only_the_path(forest):
    new = update_node(forest, "A1", lambda n: n.with_changes(name="changed"))

    assert find_node(new, "A1").name == "changed"
    assert find_node(forest, "A1").name == "A1"
    # Untouched subtrees are shared by reference
    assert new[1] is forest[1]
    assert new[2] is forest[2]
    assert new[0].children[1] is forest[0].children[1]
    assert new[0].children[0].children[1] is forest[0].children[0].children[1]
    # The path to the change is rebuilt
    assert new[0] is not forest[0]
    assert new[0].children[0] is not forest[0].children[0]


def test_update_node_missing_returns_none(forest):
    assert update_node(forest, "missing", lambda n: n) is None


def test_update_node_identity_when_unchanged(forest):
    assert update_node(forest, "E", lambda n: n) is forest


def test_update_children_root_and_nested(forest):
    new = update_children(forest, None, lambda roots: roots[::-1])
    assert [n.id for n in new] == ["R", "Q", "P"]

    new = update_children(forest, "R", lambda kids: kids + (forest[0].children[1],))
    assert [c.id for c in find_node(new, "R").children] == ["B"]

    assert update_children(forest, "missing", lambda kids: kids) is None
