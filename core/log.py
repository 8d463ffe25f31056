################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the session log shown by the status bar.

'''

################################################################################################

import inspect
from datetime import datetime
from typing import List, Optional, Tuple

################################################################################################

TIME_FMT = "%m/%d/%Y %H:%M:%S"

class LogManager():
    """
    Process-wide, in-memory list of (timestamp, text) entries.

    All instances share one backing list so the status bar popup and the tree
    store see the same session log. The list is capped at MAX_ENTRIES; the
    oldest entries are dropped first.
    """
    MAX_ENTRIES = 5000
    __log: Optional[List[Tuple[str, str]]] = None

    def __init__(self, verbosity: int = 0):
        if LogManager.__log is None:
            LogManager.__log = [(self._now(), "Begin Sapling Log")]
        self.verbosity = verbosity

    @staticmethod
    def _now() -> str:
        return datetime.now().strftime(TIME_FMT)

    def add(self, text: str):
        LogManager.__log.append((self._now(), text))
        overflow = len(LogManager.__log) - self.MAX_ENTRIES
        if overflow > 0:
            del LogManager.__log[:overflow]

    def debug(self, text: str, level: int = 0):
        if self.verbosity < level:
            return
        # Tag with the caller's file name, not the full path
        stack = inspect.stack()
        if len(stack) > 1:
            filename = stack[1].filename.replace("\\", "/").split('/')[-1]
        else:
            filename = "unknown"
        self.add(f"[{filename}] {text}")

    def get(self, index: int = None):
        if index is not None:
            return LogManager.__log[index]
        return LogManager.__log.copy()

    def last(self) -> str:
        """Text of the newest entry."""
        return LogManager.__log[-1][1]

    def count(self):
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Drop all entries, leaving a single marker entry."""
        LogManager.__log.clear()
        LogManager.__log.append((self._now(), "Log cleared"))

    def format_lines(self) -> List[str]:
        return [f"[{timestamp}] {message}" for timestamp, message in LogManager.__log]

    def write_to_file(self, filepath: str) -> bool:
        """Write all entries to a text file. Returns False (and logs why) on failure."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for line in self.format_lines():
                    f.write(line + "\n")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")
            return False
        self.add(f"Log written to file: {filepath}")
        return True

################################################################################################

Log = LogManager()

################################################################################################
