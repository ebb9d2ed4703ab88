"""
Configuration History

Linear undo/redo over TemplateConfig snapshots. Recording a new snapshot while
the cursor is behind the end discards the redo branch.
"""

from typing import List, Optional, Tuple

from resumeforge.contexts.customization.config import TemplateConfig
from resumeforge.contexts.customization.exceptions import EmptyHistoryError


class ConfigHistory:
    """
    Ordered snapshot sequence with a cursor marking the active snapshot.

    The cursor is a valid index into the sequence at all times after the first
    reset(). Before that the history is empty and the cursor is -1.
    """

    def __init__(self, initial: Optional[TemplateConfig] = None):
        self._snapshots: List[TemplateConfig] = []
        self._cursor = -1
        if initial is not None:
            self.reset(initial)

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> Tuple[TemplateConfig, ...]:
        return tuple(self._snapshots)

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def reset(self, initial: TemplateConfig) -> None:
        """Replace the whole history with a single snapshot."""
        self._snapshots = [initial]
        self._cursor = 0

    def record(self, snapshot: TemplateConfig) -> None:
        """
        Append a snapshot after the cursor and move the cursor onto it.

        Snapshots after the cursor (the redo branch) are discarded first.
        """
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(snapshot)
        self._cursor = len(self._snapshots) - 1

    def current(self) -> TemplateConfig:
        """
        Get the snapshot at the cursor.

        Raises:
            EmptyHistoryError: If nothing has been loaded yet
        """
        if self._cursor < 0:
            raise EmptyHistoryError("History is empty; call reset() first")
        return self._snapshots[self._cursor]

    def undo(self) -> Optional[TemplateConfig]:
        """Step back one snapshot if possible and return the snapshot at the cursor."""
        if self._cursor < 0:
            return None
        if self.can_undo:
            self._cursor -= 1
        return self._snapshots[self._cursor]

    def redo(self) -> Optional[TemplateConfig]:
        """Step forward one snapshot if possible and return the snapshot at the cursor."""
        if self._cursor < 0:
            return None
        if self.can_redo:
            self._cursor += 1
        return self._snapshots[self._cursor]
