from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.node import Forest, TreeNode
from core.tree import find_node

__all__ = ["DropRequest", "DragSession"]


@dataclass(slots=True, frozen=True)
class DropRequest:
    source_id: str
    target_id: str


class DragSession:
    """
    Tracks the node being dragged between drag-start and drag-end.

    The captured node is only used for display (the drag ghost label); the
    structural edit is decided on drop from the ids alone.
    """

    def __init__(self):
        self.active_id: Optional[str] = None
        self.active_node: Optional[TreeNode] = None

    @property
    def active(self) -> bool:
        return self.active_id is not None

    def begin(self, forest: Forest, source_id: str) -> bool:
        """Start dragging source_id. Returns False if the node is not in the forest."""
        node = find_node(forest, source_id)
        if node is None:
            self.cancel()
            return False
        self.active_id = source_id
        self.active_node = node
        return True

    def end(self, target_id: Optional[str]) -> Optional[DropRequest]:
        """Finish the drag. None when nothing was dragged or the drop missed every node."""
        source_id = self.active_id
        self.cancel()
        if source_id is None or target_id is None:
            return None
        return DropRequest(source_id, target_id)

    def cancel(self):
        self.active_id = None
        self.active_node = None
