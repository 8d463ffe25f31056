# core/resolver.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from core.node import Forest, TreeNode
from core.status import Outcome, Status
from core.tree import find_node, is_descendant, update_children, update_node

__all__ = ["Location", "locate", "move", "move_to_parent"]


@dataclass(slots=True, frozen=True)
class Location:
    """
    Where a node sits in the forest.

    • parent_id – id of the owning node, None for the root list
    • index     – position within the containing list
    • siblings  – the containing list itself
    """
    parent_id: Optional[str]
    index: int
    siblings: Tuple[TreeNode, ...]


def locate(forest: Forest, node_id: str, parent_id: Optional[str] = None) -> Optional[Location]:
    """Depth-first search for the sibling list holding node_id."""
    for i, node in enumerate(forest):
        if node.id == node_id:
            return Location(parent_id, i, forest)

    for node in forest:
        if node.children:
            found = locate(node.children, node_id, node.id)
            if found is not None:
                return found

    return None


def _reorder(siblings: Tuple[TreeNode, ...], src: int, dst: int) -> Tuple[TreeNode, ...]:
    # The moved node ends up at the index the target held before the move
    items = list(siblings)
    moved = items.pop(src)
    items.insert(dst, moved)
    return tuple(items)


def _detach(forest: Forest, loc: Location) -> Forest:
    """Remove the node at loc from its list, clearing has_children on an emptied parent."""
    remaining = loc.siblings[:loc.index] + loc.siblings[loc.index + 1:]
    if loc.parent_id is None:
        return remaining

    def _drop(parent: TreeNode) -> TreeNode:
        if remaining:
            return parent.with_changes(children=remaining)
        return parent.with_changes(children=remaining, has_children=False)

    return update_node(forest, loc.parent_id, _drop)


def move(forest: Forest, source_id: str, target_id: str) -> Outcome:
    """
    Move source_id to the position currently held by target_id.

    Within one list this is an array move: [A, B, C] with A dropped on C gives
    [B, C, A], and C dropped on A gives [C, A, B]. Across lists the source is
    inserted into the target's list just before the target, which reparents it.
    Dropping a node into its own subtree is rejected.
    """
    if source_id == target_id:
        return Outcome(forest, Status.OK, source_id, "Dropped on itself")

    # Both lookups run against the same snapshot
    src = locate(forest, source_id)
    dst = locate(forest, target_id)
    if src is None:
        return Outcome(forest, Status.NOT_FOUND, source_id, f"Node {source_id} not found")
    if dst is None:
        return Outcome(forest, Status.NOT_FOUND, target_id, f"Drop target {target_id} not found")

    if src.parent_id == dst.parent_id:
        new_forest = update_children(
            forest, src.parent_id, lambda siblings: _reorder(siblings, src.index, dst.index)
        )
        return Outcome(new_forest, Status.OK, source_id, "Reordered node")

    if is_descendant(forest, source_id, target_id):
        return Outcome(forest, Status.STRUCTURAL_VIOLATION, source_id,
                       "Cannot move a node into its own subtree")

    moved = src.siblings[src.index]
    new_forest = _detach(forest, src)
    # The target list is not inside the moved subtree, so dst.index is still valid
    new_forest = update_children(
        new_forest, dst.parent_id,
        lambda siblings: siblings[:dst.index] + (moved,) + siblings[dst.index:],
    )
    return Outcome(new_forest, Status.OK, source_id, "Moved node")


def move_to_parent(forest: Forest, source_id: str, parent_id: Optional[str],
                   index: Optional[int] = None) -> Outcome:
    """
    Drop source_id directly into parent_id's children (the root list when
    parent_id is None), at index or at the end. index counts positions in the
    list after the source has been taken out of it. The new parent is expanded.
    """
    src = locate(forest, source_id)
    if src is None:
        return Outcome(forest, Status.NOT_FOUND, source_id, f"Node {source_id} not found")

    if parent_id is not None:
        if parent_id == source_id or is_descendant(forest, source_id, parent_id):
            return Outcome(forest, Status.STRUCTURAL_VIOLATION, source_id,
                           "Cannot move a node into its own subtree")
        if find_node(forest, parent_id) is None:
            return Outcome(forest, Status.NOT_FOUND, parent_id, f"Parent {parent_id} not found")

    moved = src.siblings[src.index]
    new_forest = _detach(forest, src)

    def _insert(siblings: Tuple[TreeNode, ...]) -> Tuple[TreeNode, ...]:
        pos = len(siblings) if index is None else max(0, min(index, len(siblings)))
        return siblings[:pos] + (moved,) + siblings[pos:]

    new_forest = update_children(new_forest, parent_id, _insert)
    if parent_id is not None:
        new_forest = update_node(
            new_forest, parent_id,
            lambda p: p.with_changes(has_children=True, is_expanded=True),
        )
    return Outcome(new_forest, Status.OK, source_id, "Moved node")
