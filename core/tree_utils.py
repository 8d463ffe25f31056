from __future__ import annotations

from typing import Optional

from core.node import Forest, TreeNode, PLACEHOLDER_NAME, make_node
from core.status import Outcome, Status
from core.tree import find_node, update_node

__all__ = [
    "clean_name",
    "add_child",
    "remove_subtree",
    "rename_node",
    "toggle_expand",
    "set_expanded",
    "expand_all",
    "collapse_all",
]

def clean_name(name: Optional[str]) -> str:
    """Strip user input; None counts as empty."""
    return (name or "").strip()

def _not_found(forest: Forest, node_id: Optional[str], what: str = "Node") -> Outcome:
    return Outcome(forest, Status.NOT_FOUND, node_id, f"{what} {node_id} not found")

def _load_placeholder(node: TreeNode) -> TreeNode:
    """Stand-in for a child fetch: give an unloaded parent one synthesized child."""
    if node.children is None and node.has_children:
        return node.with_changes(children=(make_node(PLACEHOLDER_NAME),))
    return node

# ---------- Create / Delete / Rename ----------

def add_child(forest: Forest, parent_id: Optional[str], name: str) -> Outcome:
    """
    Append a new leaf named `name` under parent_id, or to the root list when
    parent_id is None. The parent is expanded so the new child is visible.
    """
    name = clean_name(name)
    if not name:
        return Outcome(forest, Status.INVALID_INPUT, parent_id, "Node name cannot be empty")

    child = make_node(name)
    if parent_id is None:
        return Outcome(forest + (child,), Status.OK, child.id, f"Added '{name}'")

    def _append(parent: TreeNode) -> TreeNode:
        return parent.with_changes(
            children=(parent.children or ()) + (child,),
            has_children=True,
            is_expanded=True,
        )

    new_forest = update_node(forest, parent_id, _append)
    if new_forest is None:
        return _not_found(forest, parent_id, "Parent")
    return Outcome(new_forest, Status.OK, child.id, f"Added '{name}'")

def _without(nodes, node_id: str):
    """Return (new_nodes, found). Unchanged branches are returned as-is."""
    for i, node in enumerate(nodes):
        if node.id == node_id:
            return nodes[:i] + nodes[i + 1:], True

    for i, node in enumerate(nodes):
        if not node.children:
            continue
        sub, found = _without(node.children, node_id)
        if found:
            changes = {"children": sub}
            if not sub:
                changes["has_children"] = False
            return nodes[:i] + (node.with_changes(**changes),) + nodes[i + 1:], True

    return nodes, False

def remove_subtree(forest: Forest, node_id: str) -> Outcome:
    """Excise node_id and everything below it from whichever list holds it."""
    new_forest, found = _without(forest, node_id)
    if not found:
        return _not_found(forest, node_id)
    return Outcome(new_forest, Status.OK, node_id, "Deleted node")

def rename_node(forest: Forest, node_id: str, new_name: str) -> Outcome:
    """Set the node's name. Empty (after stripping) names are rejected."""
    new_name = clean_name(new_name)
    if not new_name:
        return Outcome(forest, Status.INVALID_INPUT, node_id, "Node name cannot be empty")

    def _rename(node: TreeNode) -> TreeNode:
        if node.name == new_name:
            return node
        return node.with_changes(name=new_name)

    new_forest = update_node(forest, node_id, _rename)
    if new_forest is None:
        return _not_found(forest, node_id)
    return Outcome(new_forest, Status.OK, node_id, f"Renamed to '{new_name}'")

# ---------- Collapse / Expand ----------

def toggle_expand(forest: Forest, node_id: str) -> Outcome:
    """
    Flip is_expanded. Expanding an unloaded node that advertises children
    first populates a single placeholder child.
    """
    def _toggle(node: TreeNode) -> TreeNode:
        if node.is_expanded:
            return node.with_changes(is_expanded=False)
        return _load_placeholder(node).with_changes(is_expanded=True)

    new_forest = update_node(forest, node_id, _toggle)
    if new_forest is None:
        return _not_found(forest, node_id)

    node = find_node(new_forest, node_id)
    state = "Expanded" if node.is_expanded else "Collapsed"
    return Outcome(new_forest, Status.OK, node_id, f"{state} '{node.name}'")

def set_expanded(forest: Forest, node_id: str, expanded: bool) -> Outcome:
    """Expand or collapse explicitly. Returns the same forest when nothing changes."""
    def _set(node: TreeNode) -> TreeNode:
        if node.is_expanded == bool(expanded):
            return node
        if expanded:
            node = _load_placeholder(node)
        return node.with_changes(is_expanded=bool(expanded))

    new_forest = update_node(forest, node_id, _set)
    if new_forest is None:
        return _not_found(forest, node_id)
    return Outcome(new_forest, Status.OK, node_id)

def _set_all(nodes, expanded: bool):
    changed = False
    out = []
    for node in nodes:
        new_node = node
        if new_node.shows_caret and new_node.is_expanded != expanded:
            if expanded:
                new_node = _load_placeholder(new_node)
            new_node = new_node.with_changes(is_expanded=expanded)
        if new_node.children:
            sub = _set_all(new_node.children, expanded)
            if sub is not new_node.children:
                new_node = new_node.with_changes(children=sub)
        changed = changed or new_node is not node
        out.append(new_node)
    return tuple(out) if changed else nodes

def expand_all(forest: Forest) -> Outcome:
    """Expand every node that has (or advertises) children, one level of loading deep."""
    return Outcome(_set_all(forest, True), Status.OK, None, "Expanded all")

def collapse_all(forest: Forest) -> Outcome:
    return Outcome(_set_all(forest, False), Status.OK, None, "Collapsed all")
