# core/store.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Callable, List, Optional

from core.log import Log
from core.node import Forest, TreeNode, sample_forest
from core.status import Outcome, Status
from core.drag import DragSession
from core.tree import find_node, get_ancestors
from core import tree_utils
from core import resolver

__all__ = ["TreeStore"]

Listener = Callable[[Forest, Outcome], None]

class TreeStore:
    """
    Owner of the current forest for one editor session.

    Every edit goes through here: the pure operation computes the next forest,
    the store adopts it, logs the outcome and tells listeners (the view) to
    re-render. Rejected edits leave the forest untouched and are reported.
    """

    def __init__(self, forest: Optional[Forest] = None):
        self._forest: Forest = sample_forest() if forest is None else tuple(forest)
        self._listeners: List[Listener] = []
        self.drag = DragSession()

    @property
    def nodes(self) -> Forest:
        return self._forest

    @property
    def active_node(self) -> Optional[TreeNode]:
        """Node currently being dragged, for the drag ghost."""
        return self.drag.active_node

    # ------------------------------------------------------------------ #
    # Listeners
    # ------------------------------------------------------------------ #

    def subscribe(self, listener: Listener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _commit(self, action: str, outcome: Outcome) -> Outcome:
        """Adopt the outcome's forest, report failures, notify on change."""
        if not outcome.ok:
            # NOT_FOUND means the UI acted on a stale id, so always report it
            Log.debug(f"{action} rejected ({outcome.status.value}): {outcome.message}", 0)
            return outcome

        previous = self._forest
        self._forest = outcome.forest
        if outcome.changed_from(previous):
            Log.debug(f"{action}: {outcome.message or 'ok'} [{outcome.node_id}]", 1)
            for listener in list(self._listeners):
                listener(self._forest, outcome)
        else:
            Log.debug(f"{action}: no change [{outcome.node_id}]", 2)
        return outcome

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def find(self, node_id: str) -> Optional[TreeNode]:
        return find_node(self._forest, node_id)

    def ancestors(self, node_id: str) -> List[str]:
        return get_ancestors(self._forest, node_id)

    # ------------------------------------------------------------------ #
    # Edits
    # ------------------------------------------------------------------ #

    def add_node(self, parent_id: Optional[str], name: str) -> Outcome:
        return self._commit("Add", tree_utils.add_child(self._forest, parent_id, name))

    def add_node_expanded(self, parent_id: str, name: str) -> Outcome:
        """
        Expand parent_id first (lazily loading it), then append the new child,
        so the child lands after any placeholder the expansion synthesized.
        """
        if not tree_utils.clean_name(name):
            return self.add_node(parent_id, name)
        opened = self.set_expanded(parent_id, True)
        if not opened.ok:
            return opened
        return self.add_node(parent_id, name)

    def remove_node(self, node_id: str) -> Outcome:
        if self.drag.active_id is not None and (
            self.drag.active_id == node_id or node_id in self.ancestors(self.drag.active_id)
        ):
            self.drag.cancel()
        return self._commit("Remove", tree_utils.remove_subtree(self._forest, node_id))

    def rename_node(self, node_id: str, new_name: str) -> Outcome:
        return self._commit("Rename", tree_utils.rename_node(self._forest, node_id, new_name))

    def toggle_node(self, node_id: str) -> Outcome:
        return self._commit("Toggle", tree_utils.toggle_expand(self._forest, node_id))

    def set_expanded(self, node_id: str, expanded: bool) -> Outcome:
        return self._commit("Expand" if expanded else "Collapse",
                            tree_utils.set_expanded(self._forest, node_id, expanded))

    def expand_all(self) -> Outcome:
        return self._commit("Expand all", tree_utils.expand_all(self._forest))

    def collapse_all(self) -> Outcome:
        return self._commit("Collapse all", tree_utils.collapse_all(self._forest))

    def move_node(self, source_id: str, target_id: str) -> Outcome:
        return self._commit("Move", resolver.move(self._forest, source_id, target_id))

    def move_to_parent(self, source_id: str, parent_id: Optional[str],
                       index: Optional[int] = None) -> Outcome:
        return self._commit("Move", resolver.move_to_parent(self._forest, source_id, parent_id, index))

    # ------------------------------------------------------------------ #
    # Drag and drop
    # ------------------------------------------------------------------ #

    def begin_drag(self, source_id: str) -> Outcome:
        if not self.drag.begin(self._forest, source_id):
            return self._commit(
                "Drag",
                Outcome(self._forest, Status.NOT_FOUND, source_id, f"Node {source_id} not found"),
            )
        Log.debug(f"Drag start [{source_id}]", 2)
        return Outcome(self._forest, Status.OK, source_id)

    def end_drag(self, target_id: Optional[str], into: bool = False) -> Outcome:
        """
        Drop the dragged node on target_id; None (dropped outside the tree) does
        nothing. With into=True the node becomes target_id's last child instead
        of taking target_id's place.
        """
        source_id = self.drag.active_id
        request = self.drag.end(target_id)
        if request is None:
            Log.debug(f"Drag ended without a drop target [{source_id}]", 2)
            return Outcome(self._forest, Status.OK, source_id)
        if into and request.source_id != request.target_id:
            return self.move_to_parent(request.source_id, request.target_id)
        return self.move_node(request.source_id, request.target_id)
