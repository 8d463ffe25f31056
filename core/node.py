# core/node.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

__all__ = [
    "TreeNode",
    "Forest",
    "PLACEHOLDER_NAME",
    "DEFAULT_NODE_NAME",
    "new_id",
    "make_node",
    "node_from_dict",
    "node_to_dict",
    "forest_from_dicts",
    "forest_to_dicts",
    "iter_nodes",
    "count_nodes",
    "collect_ids",
    "sample_forest",
]

PLACEHOLDER_NAME = "Loaded Node"
DEFAULT_NODE_NAME = "New Node"


@dataclass(slots=True, frozen=True)
class TreeNode:
    """
    One node of the forest. Nodes are immutable values; every edit builds a
    new node for the changed entry and each of its ancestors.

    • children is None  – not loaded yet, or a leaf
    • children == ()    – loaded, but empty
    """
    id: str
    name: str
    children: Optional[Tuple["TreeNode", ...]] = None
    has_children: bool = False
    is_expanded: bool = False

    def with_changes(self, **changes) -> "TreeNode":
        return replace(self, **changes)

    @property
    def child_count(self) -> int:
        return len(self.children) if self.children else 0

    @property
    def shows_caret(self) -> bool:
        """Whether the UI should offer an expand/collapse control."""
        return bool(self.children) or self.has_children


Forest = Tuple[TreeNode, ...]


def new_id() -> str:
    return uuid.uuid4().hex[:12]


def make_node(name: str) -> TreeNode:
    """Mint a fresh leaf node."""
    return TreeNode(id=new_id(), name=name, children=None, has_children=False)

# ---------- dict conversion ----------

def node_from_dict(data: Dict[str, Any]) -> TreeNode:
    if not isinstance(data, dict):
        raise ValueError(f"Tree node must be a dict, got {type(data).__name__}")
    node_id = data.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise ValueError(f"Tree node is missing a string id: {data!r}")

    raw_children = data.get("children")
    children = None
    if raw_children is not None:
        if not isinstance(raw_children, (list, tuple)):
            raise ValueError(f"children of {node_id} must be a list")
        children = tuple(node_from_dict(c) for c in raw_children)

    return TreeNode(
        id=node_id,
        name=str(data.get("name", "")),
        children=children,
        has_children=bool(data.get("hasChildren", data.get("has_children", False))),
        is_expanded=bool(data.get("isExpanded", data.get("is_expanded", False))),
    )


def node_to_dict(node: TreeNode) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "id": node.id,
        "name": node.name,
        "hasChildren": node.has_children,
        "isExpanded": node.is_expanded,
    }
    if node.children is not None:
        out["children"] = [node_to_dict(c) for c in node.children]
    return out


def forest_from_dicts(items: Iterable[Dict[str, Any]]) -> Forest:
    """Build a forest from literal data. Raises ValueError on duplicate ids."""
    forest = tuple(node_from_dict(item) for item in items)
    seen: Set[str] = set()
    for node in iter_nodes(forest):
        if node.id in seen:
            raise ValueError(f"Duplicate node id in forest: {node.id}")
        seen.add(node.id)
    return forest


def forest_to_dicts(forest: Forest) -> List[Dict[str, Any]]:
    return [node_to_dict(n) for n in forest]

# ---------- traversal ----------

def iter_nodes(forest: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Depth-first pre-order walk over every node."""
    for node in forest:
        yield node
        if node.children:
            yield from iter_nodes(node.children)


def count_nodes(forest: Iterable[TreeNode]) -> int:
    return sum(1 for _ in iter_nodes(forest))


def collect_ids(forest: Iterable[TreeNode]) -> List[str]:
    return [n.id for n in iter_nodes(forest)]

# ---------- seed data ----------

def sample_forest() -> Forest:
    return forest_from_dicts([
        {
            "id": "root-1",
            "name": "Level A",
            "isExpanded": True,
            "hasChildren": True,
            "children": [
                {
                    "id": "node-b-1",
                    "name": "Level B",
                    "isExpanded": True,
                    "hasChildren": True,
                    "children": [
                        {"id": "node-c-1", "name": "Level C", "hasChildren": False},
                        {"id": "node-c-2", "name": "Level C", "hasChildren": False},
                    ],
                },
                {"id": "node-b-2", "name": "Level B", "hasChildren": False},
            ],
        },
    ])
