'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List, Optional, Sequence

from core.node import Forest, TreeNode
from ui.types import Row

def _gather(nodes: Sequence[TreeNode], level: int, parent_id: Optional[str], out: List[Row]) -> None:
    """Append rows for nodes and, for expanded ones, their children."""
    for node in nodes:
        out.append(Row(
            entry_id=node.id,
            level=level,
            name=node.name,
            caret=node.shows_caret,
            expanded=node.is_expanded,
            parent_id=parent_id,
        ))
        # Skip children if this node is collapsed
        if node.is_expanded and node.children:
            _gather(node.children, level + 1, node.id, out)

def flatten_forest(forest: Forest) -> List[Row]:
    """Flatten the forest into the linear list of rows the view draws."""
    rows: List[Row] = []
    _gather(forest, 0, None, rows)
    return rows

def row_index(rows: Sequence[Row], entry_id: str) -> int:
    """Index of the row for entry_id, or -1 if it is not visible."""
    return next((i for i, row in enumerate(rows) if row.entry_id == entry_id), -1)

def sibling_id(rows: Sequence[Row], entry_id: str, step: int) -> Optional[str]:
    """
    Id of the visible sibling `step` places away from entry_id (-1 = previous,
    +1 = next), or None at either end of the sibling list.
    """
    idx = row_index(rows, entry_id)
    if idx < 0:
        return None
    parent_id = rows[idx].parent_id
    siblings = [r.entry_id for r in rows if r.parent_id == parent_id]
    pos = siblings.index(entry_id) + step
    if 0 <= pos < len(siblings):
        return siblings[pos]
    return None

def level_char(level: int) -> str:
    """Badge letter for a tree depth: A for roots, B below them, wrapping after Z."""
    return chr(ord("A") + level % 26)
