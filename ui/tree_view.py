# ui/tree_view.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Dict, List, Optional

import wx

from core.log import Log
from ui.constants import DEFAULT_BG_COLOR, LEVEL_COLORS
from ui.drag_drop import TreeDragHandler
from ui.model import flatten_forest, level_char, sibling_id
from ui.types import Row

__all__ = ["TreeView"]

class TreeView(wx.TreeCtrl):
    """
    Renders the store's current forest and forwards user gestures to it.

    The control never edits its own items: every change goes through the
    store, and the store's change notification triggers a full rebuild from
    the new snapshot. Rebuilds are deferred with wx.CallAfter so they never
    run inside the wx event that caused them.
    """

    STYLE = (wx.TR_DEFAULT_STYLE | wx.TR_HIDE_ROOT | wx.TR_HAS_BUTTONS |
             wx.TR_LINES_AT_ROOT | wx.TR_EDIT_LABELS | wx.TR_SINGLE)

    def __init__(self, parent, store):
        super().__init__(parent, style=self.STYLE)
        self.store = store
        self._rows: List[Row] = []
        self._items: Dict[str, wx.TreeItemId] = {}
        self._row_by_id: Dict[str, Row] = {}
        self._rebuilding = False
        self._rebuild_pending = False
        self._pending_select: Optional[str] = None

        self.SetBackgroundColour(DEFAULT_BG_COLOR)
        self.drag = TreeDragHandler(self, store)

        self.Bind(wx.EVT_TREE_ITEM_EXPANDING, self._on_expanding)
        self.Bind(wx.EVT_TREE_ITEM_COLLAPSING, self._on_collapsing)
        self.Bind(wx.EVT_TREE_BEGIN_LABEL_EDIT, self._on_begin_label_edit)
        self.Bind(wx.EVT_TREE_END_LABEL_EDIT, self._on_end_label_edit)
        self.Bind(wx.EVT_TREE_KEY_DOWN, self._on_key_down)
        self.Bind(wx.EVT_TREE_ITEM_GETTOOLTIP, self._on_get_tooltip)

        store.subscribe(self._on_store_changed)
        self.rebuild()

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def _on_store_changed(self, forest, outcome):
        if outcome.node_id and self.store.find(outcome.node_id) is not None:
            self._pending_select = outcome.node_id
        if not self._rebuild_pending:
            self._rebuild_pending = True
            wx.CallAfter(self.rebuild)

    def rebuild(self):
        """Recreate all items from the store's current forest."""
        self._rebuild_pending = False
        keep = self._pending_select or self.selected_id()
        self._pending_select = None

        self._rebuilding = True
        self.Freeze()
        try:
            self.DeleteAllItems()
            self._items = {}
            root = self.AddRoot("")
            self._rows = flatten_forest(self.store.nodes)
            self._row_by_id = {row.entry_id: row for row in self._rows}

            for row in self._rows:
                parent = root if row.parent_id is None else self._items[row.parent_id]
                item = self.AppendItem(parent, row.name, data=row.entry_id)
                # Collapsed parents have no child items yet; still show the button
                self.SetItemHasChildren(item, row.caret)
                self._items[row.entry_id] = item
                self.restore_item_style(row.entry_id)

            for row in self._rows:
                if row.expanded and row.caret:
                    self.Expand(self._items[row.entry_id])
        finally:
            self.Thaw()
            self._rebuilding = False

        if keep is not None:
            self.select_id(keep)
        Log.debug(f"Rebuilt tree view with {len(self._rows)} visible rows.", 3)

    # ------------------------------------------------------------------ #
    # Selection
    # ------------------------------------------------------------------ #

    def selected_id(self) -> Optional[str]:
        item = self.GetSelection()
        if not item.IsOk() or item == self.GetRootItem():
            return None
        return self.GetItemData(item)

    def select_id(self, entry_id: str) -> bool:
        if self._rebuild_pending:
            self._pending_select = entry_id
            return True
        item = self._items.get(entry_id)
        if item is None:
            return False
        self.SelectItem(item)
        self.EnsureVisible(item)
        return True

    def row_for(self, entry_id: str) -> Optional[Row]:
        return self._row_by_id.get(entry_id)

    def item_for(self, entry_id: str) -> Optional[wx.TreeItemId]:
        return self._items.get(entry_id)

    def restore_item_style(self, entry_id: str):
        """Reset an item to its depth colour on the default background."""
        item = self._items.get(entry_id)
        row = self.row_for(entry_id)
        if item is None or row is None:
            return
        self.SetItemTextColour(item, LEVEL_COLORS[min(row.level, len(LEVEL_COLORS) - 1)])
        self.SetItemBackgroundColour(item, DEFAULT_BG_COLOR)

    def set_status(self, text: str):
        frame = self.GetTopLevelParent()
        if hasattr(frame, 'SetStatusText'):
            frame.SetStatusText(text)

    # ------------------------------------------------------------------ #
    # Gestures
    # ------------------------------------------------------------------ #

    def _item_entry_id(self, evt) -> Optional[str]:
        item = evt.GetItem()
        if not item.IsOk() or item == self.GetRootItem():
            return None
        return self.GetItemData(item)

    def _on_expanding(self, evt):
        if self._rebuilding:
            return
        entry_id = self._item_entry_id(evt)
        node = self.store.find(entry_id) if entry_id else None
        if node is None or node.is_expanded:
            return
        # Let the store expand (and lazily load); the rebuild shows the result
        evt.Veto()
        wx.CallAfter(self._toggle, entry_id)

    def _on_collapsing(self, evt):
        if self._rebuilding:
            return
        entry_id = self._item_entry_id(evt)
        node = self.store.find(entry_id) if entry_id else None
        if node is None or not node.is_expanded:
            return
        evt.Veto()
        wx.CallAfter(self._toggle, entry_id)

    def _toggle(self, entry_id: str):
        outcome = self.store.toggle_node(entry_id)
        self.set_status(outcome.message)

    def _on_get_tooltip(self, evt):
        entry_id = self._item_entry_id(evt)
        row = self.row_for(entry_id) if entry_id else None
        if row is not None:
            evt.SetToolTip(f"Level {level_char(row.level)}")

    def _on_begin_label_edit(self, evt):
        if self._item_entry_id(evt) is None:
            evt.Veto()

    def _on_end_label_edit(self, evt):
        if evt.IsEditCancelled():
            return
        entry_id = self._item_entry_id(evt)
        if entry_id is None:
            return
        outcome = self.store.rename_node(entry_id, evt.GetLabel())
        # The label always comes from the store: the rebuild shows an accepted
        # name, and a rejected one reverts to the stored name
        evt.Veto()
        self.set_status(outcome.message)

    def _on_key_down(self, evt):
        code = evt.GetKeyCode()
        key_event = evt.GetKeyEvent()
        entry_id = self.selected_id()

        if code == wx.WXK_F2 and entry_id is not None:
            self.EditLabel(self._items[entry_id])
            return
        if code in (wx.WXK_DELETE, wx.WXK_NUMPAD_DELETE) and entry_id is not None:
            frame = self.GetTopLevelParent()
            if hasattr(frame, 'on_action_delete'):
                frame.on_action_delete()
                return
        if key_event.AltDown() and code in (wx.WXK_UP, wx.WXK_DOWN) and entry_id is not None:
            self.move_selected(-1 if code == wx.WXK_UP else 1)
            return
        if key_event.AltDown() and code == wx.WXK_RIGHT and entry_id is not None:
            self.indent_selected()
            return
        evt.Skip()

    def move_selected(self, step: int) -> bool:
        """Keyboard drag: swap the selected node with its previous/next sibling."""
        entry_id = self.selected_id()
        if entry_id is None:
            return False
        target_id = sibling_id(self._rows, entry_id, step)
        if target_id is None:
            self.set_status("Already at the edge of its list.")
            return False
        outcome = self.store.move_node(entry_id, target_id)
        self.set_status(outcome.message)
        return outcome.ok

    def indent_selected(self) -> bool:
        """Make the selected node the last child of its previous sibling."""
        entry_id = self.selected_id()
        if entry_id is None:
            return False
        parent_id = sibling_id(self._rows, entry_id, -1)
        if parent_id is None:
            self.set_status("No previous sibling to move into.")
            return False
        outcome = self.store.move_to_parent(entry_id, parent_id)
        self.set_status(outcome.message)
        return outcome.ok
