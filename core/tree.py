from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from core.node import Forest, TreeNode

__all__ = [
    "find_node",
    "find_path",
    "get_ancestors",
    "is_descendant",
    "update_node",
    "update_children",
]

NodeUpdater = Callable[[TreeNode], TreeNode]
ListUpdater = Callable[[Tuple[TreeNode, ...]], Tuple[TreeNode, ...]]

# ---------- lookup ----------

def find_node(forest: Forest, node_id: str) -> Optional[TreeNode]:
    """Depth-first pre-order search by id. Returns None if the id is absent."""
    for node in forest:
        if node.id == node_id:
            return node
        if node.children:
            found = find_node(node.children, node_id)
            if found is not None:
                return found
    return None

def find_path(forest: Forest, node_id: str) -> Optional[List[TreeNode]]:
    """Return [root, ..., parent, node] for node_id, or None if not found."""
    for node in forest:
        if node.id == node_id:
            return [node]
        if node.children:
            sub = find_path(node.children, node_id)
            if sub is not None:
                return [node] + sub
    return None

def get_ancestors(forest: Forest, node_id: str) -> List[str]:
    """Ancestor ids of node_id, nearest first. Empty for roots and unknown ids."""
    path = find_path(forest, node_id)
    if not path:
        return []
    return [n.id for n in reversed(path[:-1])]

def is_descendant(forest: Forest, ancestor_id: str, node_id: str) -> bool:
    """True if node_id lies strictly inside the subtree rooted at ancestor_id."""
    ancestor = find_node(forest, ancestor_id)
    if ancestor is None or not ancestor.children:
        return False
    return find_node(ancestor.children, node_id) is not None

# ---------- path-copying updates ----------

def _update_in(nodes: Tuple[TreeNode, ...], node_id: str,
               updater: NodeUpdater) -> Optional[Tuple[TreeNode, ...]]:
    for i, node in enumerate(nodes):
        if node.id == node_id:
            new_node = updater(node)
            if new_node is node:
                return nodes
            return nodes[:i] + (new_node,) + nodes[i + 1:]

        if node.children:
            sub = _update_in(node.children, node_id, updater)
            if sub is None:
                continue
            if sub is node.children:
                return nodes
            return nodes[:i] + (node.with_changes(children=sub),) + nodes[i + 1:]

    return None

def update_node(forest: Forest, node_id: str, updater: NodeUpdater) -> Optional[Forest]:
    """
    Replace the node with the given id by updater(node).

    Only the nodes on the path from the root to the target are rebuilt; all
    other subtrees are shared with the input. Returns the input forest itself
    if updater returns the node unchanged, and None if node_id is absent.
    """
    return _update_in(forest, node_id, updater)

def update_children(forest: Forest, parent_id: Optional[str],
                    updater: ListUpdater) -> Optional[Forest]:
    """
    Replace a sibling list. parent_id None addresses the root list; otherwise
    the parent's children (treated as () when not loaded). Returns None if the
    parent is absent.
    """
    if parent_id is None:
        return updater(forest)

    def _apply(parent: TreeNode) -> TreeNode:
        old = parent.children or ()
        new = updater(old)
        if new is old and parent.children is not None:
            return parent
        return parent.with_changes(children=new)

    return update_node(forest, parent_id, _apply)
