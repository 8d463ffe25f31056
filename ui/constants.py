'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

# Shared UI constants
FRAME_SIZE = (640, 720)
FRAME_MIN_SIZE = (420, 360)
PADDING = 8
TOOLBAR_MIN_H = 32
DEFAULT_BG_COLOR = wx.Colour(240, 242, 245)
DROP_HILITE_COLOR = wx.Colour(210, 225, 250)
GHOST_FG_COLOR = wx.Colour(160, 160, 160)
# Label colour by depth: level A, level B, level C and deeper
LEVEL_COLORS = (
    wx.Colour(30, 60, 140),
    wx.Colour(30, 110, 60),
    wx.Colour(120, 70, 20),
)
