# core/status.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from core.node import TreeNode

__all__ = ["Status", "Outcome"]


class Status(Enum):
    OK = "ok"
    NOT_FOUND = "not found"
    INVALID_INPUT = "invalid input"
    STRUCTURAL_VIOLATION = "structural violation"


@dataclass(slots=True, frozen=True)
class Outcome:
    """
    Result of one tree operation.

    • forest   – the forest after the operation (the input forest when rejected)
    • status   – what happened
    • node_id  – node the operation created or acted on, if any
    • message  – short human readable description for the status bar / log
    """
    forest: Tuple["TreeNode", ...]
    status: Status = Status.OK
    node_id: Optional[str] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    def changed_from(self, forest: Tuple["TreeNode", ...]) -> bool:
        """True when this outcome's forest is a different value than `forest`."""
        return self.forest is not forest
