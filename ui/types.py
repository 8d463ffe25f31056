# ui/types.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, frozen=True)
class Row:
    """
    A single flattened, visible row of the tree view.

    • entry_id  – id of the node this row represents
    • level     – tree-indent level (root = 0)
    • name      – label to draw
    • caret     – whether an expand/collapse control is shown
    • expanded  – whether the node's children follow this row
    • parent_id – owning node, None for roots
    """
    entry_id: str
    level: int
    name: str
    caret: bool = False
    expanded: bool = False
    parent_id: Optional[str] = None
