from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Sequence
import logging

import config
from model import Shape

logger = logging.getLogger(__name__)

Entry = List[Dict]


def _freeze(shapes: Sequence[Shape]) -> Entry:
    return [shape.to_dict() for shape in shapes]


def _thaw(entry: Entry) -> List[Shape]:
    return [Shape.from_dict(item) for item in entry]


class HistoryStack:
    """Undo/redo log of shape-sequence snapshots.

    Entries are attribute-wise copies, so later edits to live shapes never
    reach into history. Both stacks are bounded; the oldest entries fall off.
    """

    def __init__(self, limit: int = config.HISTORY_LIMIT) -> None:
        self.limit = max(1, int(limit))
        self.undo_stack: Deque[Entry] = deque(maxlen=self.limit)
        self.redo_stack: Deque[Entry] = deque(maxlen=self.limit)

    def push(self, shapes: Sequence[Shape]) -> None:
        """Description: Push a copy onto the undo stack
        Inputs: shapes: Sequence[Shape]
        """
        self.undo_stack.append(_freeze(shapes))

    def pop(self) -> Optional[List[Shape]]:
        """Description: Pop the newest undo entry
        Inputs: None
        """
        if not self.undo_stack:
            return None
        return _thaw(self.undo_stack.pop())

    def peek(self) -> Optional[List[Shape]]:
        if not self.undo_stack:
            return None
        return _thaw(self.undo_stack[-1])

    def snapshot(self, shapes: Sequence[Shape]) -> None:
        """Description: Record the state before a mutation; invalidates redo
        Inputs: shapes: Sequence[Shape]
        """
        self.push(shapes)
        self.redo_stack.clear()

    def undo(self, current: Sequence[Shape]) -> Optional[List[Shape]]:
        """Description: Step back one entry
        Inputs: current: Sequence[Shape]
        Returns: the restored shapes, or None when nothing to undo
        """
        previous = self.pop()
        if previous is None:
            logger.debug("Undo requested with empty history")
            return None
        self.redo_stack.append(_freeze(current))
        return previous

    def redo(self, current: Sequence[Shape]) -> Optional[List[Shape]]:
        """Description: Step forward one entry
        Inputs: current: Sequence[Shape]
        Returns: the restored shapes, or None when nothing to redo
        """
        if not self.redo_stack:
            logger.debug("Redo requested with empty redo log")
            return None
        following = _thaw(self.redo_stack.pop())
        self.push(current)
        return following

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    def can_undo(self) -> bool:
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self.redo_stack) > 0

    def stats(self) -> Dict:
        """Description: Stack sizes for the status bar
        Inputs: None
        """
        return {
            "undo_count": len(self.undo_stack),
            "redo_count": len(self.redo_stack),
            "limit": self.limit,
            "undo_full": len(self.undo_stack) >= self.limit,
        }
