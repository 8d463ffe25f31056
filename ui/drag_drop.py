import wx

from core.log import Log
from core.status import Status
from ui.constants import DROP_HILITE_COLOR, GHOST_FG_COLOR

class TreeDragHandler:
    """
    Pointer drag & drop for tree rows.
    Turns wx begin/end drag events into drag-start / drag-end calls on the
    store and gives colour, cursor and status bar feedback while a node is
    moving. A plain drop puts the node in the target's place; a drop with
    Shift held makes it the target's last child.
    """
    def __init__(self, view, store):
        self.view = view
        self.store = store
        self._hover_id = None
        view.Bind(wx.EVT_TREE_BEGIN_DRAG, self.OnBeginDrag)
        view.Bind(wx.EVT_TREE_END_DRAG, self.OnEndDrag)
        view.Bind(wx.EVT_MOTION, self.OnMotion)

    def _item_id(self, item):
        if item is None or not item.IsOk() or item == self.view.GetRootItem():
            return None
        return self.view.GetItemData(item)

    def _set_hover(self, entry_id):
        """Move the drop highlight to entry_id (None clears it)."""
        if entry_id == self._hover_id:
            return
        if self._hover_id is not None and self._hover_id != self.store.drag.active_id:
            self.view.restore_item_style(self._hover_id)
        self._hover_id = entry_id
        item = self.view.item_for(entry_id) if entry_id else None
        if item is not None and entry_id != self.store.drag.active_id:
            self.view.SetItemBackgroundColour(item, DROP_HILITE_COLOR)

    def OnBeginDrag(self, evt):
        """Capture the dragged node; wx only starts the drag if we Allow() it."""
        source_id = self._item_id(evt.GetItem())
        if source_id is None:
            return

        outcome = self.store.begin_drag(source_id)
        if not outcome.ok:
            self.view.set_status(outcome.message)
            return

        evt.Allow()
        self.view.SetCursor(wx.Cursor(wx.CURSOR_HAND))
        # Stand-in for a drag ghost: grey out the row and name it in the status bar
        self.view.SetItemTextColour(evt.GetItem(), GHOST_FG_COLOR)
        ghost = self.store.active_node
        self.view.set_status(f"Moving '{ghost.name}'... (hold Shift to drop inside)")

    def OnMotion(self, evt):
        evt.Skip()
        if not self.store.drag.active:
            return
        item, _flags = self.view.HitTest(evt.GetPosition())
        self._set_hover(self._item_id(item))

    def OnEndDrag(self, evt):
        """Resolve the drop target and commit the move."""
        self.view.SetCursor(wx.Cursor(wx.CURSOR_DEFAULT))
        self._set_hover(None)
        source_id = self.store.drag.active_id
        if source_id is not None:
            self.view.restore_item_style(source_id)
        target_id = self._item_id(evt.GetItem())

        into = wx.GetKeyState(wx.WXK_SHIFT)
        outcome = self.store.end_drag(target_id, into=into)
        if target_id is None:
            self.view.set_status("Drop cancelled.")
            return

        if outcome.status is Status.STRUCTURAL_VIOLATION:
            wx.Bell()
            self.view.set_status(f"Rejected drop: {outcome.message}")
        elif not outcome.ok:
            self.view.set_status(outcome.message)
        else:
            Log.debug(f"Dropped {source_id} {'into' if into else 'on'} {target_id}", 2)
            self.view.set_status(outcome.message)
            self.view.select_id(source_id)
