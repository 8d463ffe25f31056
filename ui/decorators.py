'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from functools import wraps

def requires_selection(method):
    """Decorator to skip an action (with a status hint) when no node is selected."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        if self.tree.selected_id() is None:
            self.SetStatusText("Select a node first.")
            return
        return method(self, *args, **kwargs)
    return wrapper

def restore_focus(method):
    """Decorator to hand keyboard focus back to the tree after a toolbar/menu action."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        finally:
            self.tree.SetFocus()
    return wrapper
