from __future__ import annotations

import wx

from ui.constants import DEFAULT_BG_COLOR, TOOLBAR_MIN_H

class Toolbar(wx.Panel):
    """
    Data-driven toolbar with buttons defined in a simple list.
    Uses on_action_* methods on the main frame for event handling.
    """

    def __init__(self, parent: wx.Window, main_frame: wx.Frame):
        super().__init__(parent, style=wx.BORDER_NONE)
        self.main_frame = main_frame

        self._setup_painting()
        self._create_controls()
        self._setup_layout()

        self.SetMinSize((-1, TOOLBAR_MIN_H))

    def _setup_painting(self):
        """Configure custom painting for gradient background"""
        self.SetDoubleBuffered(True)
        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.Bind(wx.EVT_ERASE_BACKGROUND, lambda e: None)
        self.Bind(wx.EVT_PAINT, self._on_paint)

    def _create_controls(self):
        """Create all toolbar buttons from the tools list"""

        # (tooltip, art id, method name), or None for a separator
        self.tools = [
            ("Add Root Node", wx.ART_NEW_DIR, "on_action_add_root"),
            ("Add Child Node", wx.ART_NEW, "on_action_add_child"),
            ("Rename", wx.ART_EDIT, "on_action_rename"),
            ("Delete", wx.ART_DELETE, "on_action_delete"),
            None,
            ("Move Up", wx.ART_GO_UP, "on_action_move_up"),
            ("Move Down", wx.ART_GO_DOWN, "on_action_move_down"),
            ("Move Into Previous Sibling", wx.ART_GO_FORWARD, "on_action_indent"),
            None,
            ("Expand All", wx.ART_PLUS, "on_action_expand_all"),
            ("Collapse All", wx.ART_MINUS, "on_action_collapse_all"),
        ]

        self.buttons = []
        self.controls = []
        for item in self.tools:
            if item is None:
                ctrl = wx.StaticLine(self, style=wx.LI_VERTICAL)
            else:
                ctrl = self._create_button(*item)
                self.buttons.append(ctrl)
            self.controls.append(ctrl)

    def _create_button(self, tooltip: str, art_id: str, method_name: str) -> wx.BitmapButton:
        """Create a standard toolbar button"""
        bmp = wx.ArtProvider.GetBitmap(art_id, wx.ART_TOOLBAR, (16, 16))
        btn = wx.BitmapButton(self, bitmap=bmp, style=wx.BU_EXACTFIT | wx.NO_BORDER)
        btn.SetToolTip(wx.ToolTip(tooltip))
        btn.SetCanFocus(False)  # Keep focus on the tree

        handler = getattr(self.main_frame, method_name)
        btn.Bind(wx.EVT_BUTTON, handler)
        return btn

    def _setup_layout(self):
        sizer = wx.BoxSizer(wx.HORIZONTAL)
        sizer.AddSpacer(4)
        for ctrl in self.controls:
            if isinstance(ctrl, wx.StaticLine):
                sizer.Add(ctrl, 0, wx.EXPAND | wx.LEFT | wx.RIGHT, 6)
            else:
                sizer.Add(ctrl, 0, wx.ALIGN_CENTER_VERTICAL | wx.ALL, 2)
        self.SetSizer(sizer)

    def _on_paint(self, evt):
        dc = wx.AutoBufferedPaintDC(self)
        rect = self.GetClientRect()
        dc.GradientFillLinear(rect, wx.Colour(255, 255, 255), DEFAULT_BG_COLOR, wx.SOUTH)
