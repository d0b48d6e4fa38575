"""Undo/redo log of reversible mutations."""

from typing import Dict, List, Optional

from ..config.logging import LoggerMixin
from ..models.actions import Action, SetAction
from ..models.entry import Entry


def _revert(action: Action, data: Dict[str, Entry]) -> None:
    """Put ``data[action.key]`` back the way it was before ``action``."""
    if isinstance(action, SetAction) and action.prior is None:
        data.pop(action.key, None)
    else:
        data[action.key] = action.prior


def _replay(action: Action, data: Dict[str, Entry]) -> None:
    """Apply ``action`` to ``data`` again."""
    if isinstance(action, SetAction):
        data[action.key] = action.new
    else:
        data.pop(action.key, None)


class ActionLog(LoggerMixin):
    """Two stacks of actions; each action lives on exactly one of them.

    Recording a new action discards the redo stack, since the undone
    "future" no longer follows from the current state.
    """

    def __init__(self) -> None:
        self._undo: List[Action] = []
        self._redo: List[Action] = []

    def record(self, action: Action) -> None:
        self._undo.append(action)
        if self._redo:
            self.logger.debug("Redo history discarded", dropped=len(self._redo))
            self._redo.clear()

    def undo(self, data: Dict[str, Entry]) -> Optional[Action]:
        """Revert the most recent action against ``data``.

        Returns the action that was reverted, or ``None`` when there is
        nothing to undo.
        """
        if not self._undo:
            return None
        action = self._undo.pop()
        _revert(action, data)
        self._redo.append(action)
        return action

    def redo(self, data: Dict[str, Entry]) -> Optional[Action]:
        """Re-apply the most recently undone action against ``data``."""
        if not self._redo:
            return None
        action = self._redo.pop()
        _replay(action, data)
        self._undo.append(action)
        return action

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)
