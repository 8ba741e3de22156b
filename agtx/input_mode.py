"""Input modes of the terminal interface."""

from __future__ import annotations

import enum


class InputMode(enum.Enum):
    """What the keyboard is currently driving."""

    NORMAL = "normal"
    """Navigating the board."""
    INPUT_TITLE = "input_title"
    """Entering a task title."""
    SELECT_PLUGIN = "select_plugin"
    """Choosing the workflow plugin for a task."""
    INPUT_DESCRIPTION = "input_description"
    """Entering a task description or prompt."""

    @classmethod
    def default(cls) -> "InputMode":
        """The mode the interface starts in."""
        return cls.NORMAL