'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from typing import Optional

import wx

from core.log import Log
from core.node import DEFAULT_NODE_NAME
from core.store import TreeStore
from core.tree_utils import clean_name
from ui.constants import FRAME_SIZE, FRAME_MIN_SIZE, PADDING
from ui.decorators import requires_selection, restore_focus
from ui.statusbar import StatusBar
from ui.toolbar import Toolbar
from ui.tree_view import TreeView


class MainFrame(wx.Frame):
    """Main application frame for the Sapling tree editor."""
    def __init__(self, verbosity: int = 0, store: Optional[TreeStore] = None):
        super().__init__(None, title="Sapling - Visual Tree Editor", size=FRAME_SIZE)
        self.SetMinSize(FRAME_MIN_SIZE)
        Log.set_verbosity(verbosity)

        self.store = store or TreeStore()

        self._build_menu()
        self.SetStatusBar(StatusBar(self))
        self._build_body()
        self.SetStatusText("Ready.")
        self.Bind(wx.EVT_CLOSE, self._on_close)

    # ---------------- Construction ----------------

    def _build_menu(self):
        menubar = wx.MenuBar()

        m_file = wx.Menu()
        m_file.Append(wx.ID_EXIT, "&Quit\tCtrl+Q")
        menubar.Append(m_file, "&File")

        m_edit = wx.Menu()
        id_add_root = wx.NewIdRef()
        id_add_child = wx.NewIdRef()
        id_rename = wx.NewIdRef()
        m_edit.Append(id_add_root, "Add &Root Node\tCtrl+Shift+N")
        m_edit.Append(id_add_child, "Add &Child Node\tCtrl+N")
        m_edit.Append(id_rename, "Re&name\tF2")
        m_edit.Append(wx.ID_DELETE, "&Delete")
        menubar.Append(m_edit, "&Edit")

        m_view = wx.Menu()
        id_expand = wx.NewIdRef()
        id_collapse = wx.NewIdRef()
        m_view.Append(id_expand, "&Expand All")
        m_view.Append(id_collapse, "&Collapse All")
        menubar.Append(m_view, "&View")

        m_help = wx.Menu()
        m_help.Append(wx.ID_ABOUT, "&About")
        menubar.Append(m_help, "&Help")

        self.SetMenuBar(menubar)

        self.Bind(wx.EVT_MENU, lambda e: self.Close(), id=wx.ID_EXIT)
        self.Bind(wx.EVT_MENU, self.on_action_add_root, id=id_add_root)
        self.Bind(wx.EVT_MENU, self.on_action_add_child, id=id_add_child)
        self.Bind(wx.EVT_MENU, self.on_action_rename, id=id_rename)
        self.Bind(wx.EVT_MENU, self.on_action_delete, id=wx.ID_DELETE)
        self.Bind(wx.EVT_MENU, self.on_action_expand_all, id=id_expand)
        self.Bind(wx.EVT_MENU, self.on_action_collapse_all, id=id_collapse)
        self.Bind(wx.EVT_MENU, self.on_action_about, id=wx.ID_ABOUT)

    def _build_body(self):
        panel = wx.Panel(self)
        self.tree = TreeView(panel, self.store)
        self.toolbar = Toolbar(panel, self)

        sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(self.toolbar, 0, wx.EXPAND)
        sizer.Add(self.tree, 1, wx.EXPAND | wx.ALL, PADDING)
        panel.SetSizer(sizer)
        self.tree.SetFocus()

    def _on_close(self, evt):
        self.store.unsubscribe(self.tree._on_store_changed)
        Log.debug("Main frame closing.", 1)
        evt.Skip()

    # ---------------- Helpers ----------------

    def _ask_name(self, title: str, default: str = DEFAULT_NODE_NAME) -> Optional[str]:
        """Prompt for a node name. None when cancelled or left blank."""
        with wx.TextEntryDialog(self, "Node name:", title, value=default) as dlg:
            if dlg.ShowModal() != wx.ID_OK:
                return None
            name = clean_name(dlg.GetValue())
        if not name:
            self.SetStatusText("Node name cannot be empty.")
            return None
        return name

    def _report(self, outcome):
        self.SetStatusText(outcome.message or outcome.status.value)
        if outcome.ok and outcome.node_id:
            self.tree.select_id(outcome.node_id)

    # ---------------- Actions ----------------

    @restore_focus
    def on_action_add_root(self, evt=None):
        name = self._ask_name("Add Root Node")
        if name is not None:
            self._report(self.store.add_node(None, name))

    @restore_focus
    @requires_selection
    def on_action_add_child(self, evt=None):
        parent_id = self.tree.selected_id()
        name = self._ask_name("Add Child Node")
        if name is not None:
            self._report(self.store.add_node_expanded(parent_id, name))

    @requires_selection
    def on_action_rename(self, evt=None):
        self.tree.EditLabel(self.tree.GetSelection())

    @restore_focus
    @requires_selection
    def on_action_delete(self, evt=None):
        entry_id = self.tree.selected_id()
        node = self.store.find(entry_id)
        if node is not None and node.child_count:
            answer = wx.MessageBox(
                f"Delete '{node.name}' and its {node.child_count} child node(s)?",
                "Delete Node",
                wx.YES_NO | wx.ICON_QUESTION,
                self,
            )
            if answer != wx.YES:
                return
        self._report(self.store.remove_node(entry_id))

    @restore_focus
    @requires_selection
    def on_action_move_up(self, evt=None):
        self.tree.move_selected(-1)

    @restore_focus
    @requires_selection
    def on_action_move_down(self, evt=None):
        self.tree.move_selected(1)

    @restore_focus
    @requires_selection
    def on_action_indent(self, evt=None):
        self.tree.indent_selected()

    @restore_focus
    def on_action_expand_all(self, evt=None):
        self._report(self.store.expand_all())

    @restore_focus
    def on_action_collapse_all(self, evt=None):
        self._report(self.store.collapse_all())

    def on_action_about(self, evt=None):
        wx.MessageBox(
            "Sapling\n\nA visual tree editor: drag nodes to reorder or reparent them,\n"
            "F2 to rename, Alt+Up/Down to move within a list,\n"
            "Alt+Right or a Shift-drop to move a node inside another.",
            "About Sapling",
            wx.OK | wx.ICON_INFORMATION,
            self,
        )
