################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the main window's status bar and its session log popup.
'''
################################################################################################

import wx

from core.log import Log

################################################################################################
class LogList(wx.VListBox):
    """Virtual list drawing one log entry per item: index, timestamp, text."""
    DATE_W     = 20
    INDEX_W    = 6

    def __init__(self, parent, log, size):
        self.log = log
        super().__init__(parent, style=wx.LB_EXTENDED | wx.SIMPLE_BORDER, size=size)
        self.font = wx.Font(wx.FontInfo(9).Family(wx.FONTFAMILY_TELETYPE))
        dc = wx.MemoryDC()
        dc.SetFont(self.font)
        self.char_w, self.char_h = dc.GetTextExtent("X")
        self.SetBackgroundColour((0, 0, 0))
        self.SetItemCount(self.log.count())
        self.ScrollToRow(max(0, self.log.count() - 1))
        self.Bind(wx.EVT_LEFT_DCLICK, self._on_item_dclick)

    def OnMeasureItem(self, index):
        text = self.log.get(index)[1]
        return max(1, text.count("\n") + 1) * self.char_h

    def OnDrawItem(self, dc, rect, index):
        timestamp, text = self.log.get(index)
        dc.SetFont(self.font)
        dc.SetTextForeground((255, 255, 0))
        dc.DrawText("%d" % index, rect.x, rect.y)
        dc.SetTextForeground((255, 0, 255))
        dc.DrawText(timestamp, rect.x + self.INDEX_W * self.char_w, rect.y)
        dc.SetTextForeground((128, 192, 128))
        dc.DrawText(text, rect.x + (self.INDEX_W + self.DATE_W) * self.char_w, rect.y)
        # Update to catch new log entries.
        self.SetItemCount(self.log.count())

    def OnDrawBackground(self, dc, rect, index):
        brush = wx.Brush((64, 0, 64)) if self.IsSelected(index) else wx.Brush((0, 0, 0))
        dc.SetBrush(brush)
        dc.SetPen(wx.Pen((0, 0, 100)))
        dc.DrawRectangle(rect)
        # Update to catch new log entries.
        self.SetItemCount(self.log.count())

    def _on_item_dclick(self, event):
        """Copy the double-clicked entry's text to the clipboard."""
        index = self.VirtualHitTest(event.GetPosition().y)
        if index == wx.NOT_FOUND or index >= self.log.count():
            return
        text = self.log.get(index)[1]
        if text and wx.TheClipboard.Open():
            wx.TheClipboard.SetData(wx.TextDataObject(text))
            wx.TheClipboard.Close()

################################################################################################
class StatusBarPopup(wx.PopupTransientWindow):
    WIN_HEIGHT = 300

    def __init__(self, parent, log):
        super().__init__(parent, wx.SIMPLE_BORDER)
        self.log_list = LogList(self, log, (parent.Size[0], self.WIN_HEIGHT))
        box_main = wx.BoxSizer(wx.VERTICAL)
        box_main.Add(self.log_list, 1, wx.EXPAND)
        self.SetSizerAndFit(box_main)

    def OnDismiss(self):
        self.Parent.popup = None

################################################################################################
class StatusBar(wx.StatusBar):
    def __init__(self, parent):
        super().__init__(parent)
        self.popup = None
        self.Bind(wx.EVT_RIGHT_DOWN, self.OnRightDown)
        Log.add("Create StatusBar")

    def OnRightDown(self, event):
        """Context menu with log options."""
        menu = wx.Menu()
        item_show = menu.Append(wx.ID_ANY, "Show Log")
        menu.AppendSeparator()
        item_save = menu.Append(wx.ID_SAVE, "Save Log to File...")
        item_copy = menu.Append(wx.ID_COPY, "Copy Log to Clipboard")
        menu.AppendSeparator()
        item_clear = menu.Append(wx.ID_CLEAR, "Clear Log")

        self.Bind(wx.EVT_MENU, self.OnShowLog, item_show)
        self.Bind(wx.EVT_MENU, self.OnSaveLogToFile, item_save)
        self.Bind(wx.EVT_MENU, self.OnCopyLogToClipboard, item_copy)
        self.Bind(wx.EVT_MENU, self.OnClearLog, item_clear)

        self.PopupMenu(menu)
        menu.Destroy()

    def OnShowLog(self, event=None):
        if self.popup is not None:
            self.popup.Dismiss()
        self.popup = StatusBarPopup(self, Log)
        pos = self.ClientToScreen((0, 0))
        self.popup.Position((pos[0], pos[1] - StatusBarPopup.WIN_HEIGHT), (0, 0))
        self.popup.Popup()

    def OnSaveLogToFile(self, event=None):
        with wx.FileDialog(
            self,
            "Save Log to file",
            wildcard="Text files (*.txt)|*.txt|Log files (*.log)|*.log|All files (*.*)|*.*",
            style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT
        ) as dlg:
            if dlg.ShowModal() == wx.ID_CANCEL:
                return
            path = dlg.GetPath()

        if Log.write_to_file(path):
            self.SetStatusText(f"Log saved to: {path}")
        else:
            self.SetStatusText(Log.last())

    def OnCopyLogToClipboard(self, event=None):
        lines = Log.format_lines()
        if not wx.TheClipboard.Open():
            self.SetStatusText("Error: Could not access clipboard")
            return
        wx.TheClipboard.SetData(wx.TextDataObject("\n".join(lines)))
        wx.TheClipboard.Close()
        self.SetStatusText(f"Copied {len(lines)} log entries to clipboard")

    def OnClearLog(self, event=None):
        result = wx.MessageBox(
            "Are you sure you want to clear the entire log?",
            "Clear Log",
            wx.YES_NO | wx.ICON_QUESTION
        )
        if result == wx.YES:
            Log.clear()
            self.SetStatusText("Log cleared")

################################################################################################
