"""State and view computations for the popup that mirrors a tmux window."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Union

MAX_TRAILING_EMPTY_LINES = 3
"""Maximum number of trailing empty lines kept after content."""

Line = Union[str, Sequence[Any]]
"""A line is a string or a sequence of spans (strings or objects with ``content``)."""


@dataclass
class ShellPopup:
    """Popup showing a detached tmux window."""

    task_title: str
    window_name: str
    scroll_offset: int = 0
    """Negative values scroll up into history."""
    cached_content: bytes = b""
    """Pane content, refreshed periodically rather than every frame."""
    last_pane_size: Optional[tuple[int, int]] = None
    """Last known pane dimensions, for resize detection."""

    def scroll_up(self, lines: int) -> None:
        """Scroll up into history."""
        self.scroll_offset -= lines

    def scroll_down(self, lines: int) -> None:
        """Scroll down toward the current content."""
        self.scroll_offset = min(self.scroll_offset + lines, 0)

    def scroll_to_bottom(self) -> None:
        """Jump to the current content."""
        self.scroll_offset = 0

    def is_at_bottom(self) -> bool:
        """Whether the view shows the current content."""
        return self.scroll_offset >= 0


@dataclass
class ShellPopupColors:
    """Colours used to draw the popup."""

    border: str = "green"
    header_fg: str = "black"
    header_bg: str = "cyan"
    footer_fg: str = "black"
    footer_bg: str = "gray"


def _span_text(span: Any) -> str:
    return span if isinstance(span, str) else str(getattr(span, "content", span))


def _has_content(line: Line) -> bool:
    if isinstance(line, str):
        return bool(line.strip())
    spans = list(line)
    return bool(spans) and any(_span_text(span).strip() for span in spans)


def compute_visible_lines(
    styled_lines: Sequence[Line], visible_height: int, scroll_offset: int
) -> tuple[list[Line], int, int]:
    """Return ``(visible_lines, start_line, total_lines)`` for the given scroll state.

    At the bottom every line is kept so the prompt position shows; when
    scrolled up, trailing blank lines are dropped.
    """
    lines = list(styled_lines)
    total_input = len(lines)

    if scroll_offset >= 0:
        effective = total_input
    else:
        last = next(
            (i for i in reversed(range(total_input)) if _has_content(lines[i])),
            None,
        )
        effective = last + 1 if last is not None else total_input

    total_lines = max(effective, 1)
    start_line = max(total_lines - visible_height, 0)
    if scroll_offset < 0:
        start_line = max(start_line - (-scroll_offset), 0)

    visible = lines[:effective][start_line:start_line + visible_height]
    return visible, start_line, total_lines


def build_footer_text(scroll_offset: int, start_line: int) -> str:
    """Footer with key hints and the scroll position."""
    if scroll_offset < 0:
        return (
            " [Ctrl+j/k] scroll [Ctrl+d/u] page [Ctrl+g] bottom [Ctrl+q] close"
            f" | Line {start_line + 1} "
        )
    return " [Ctrl+j/k] scroll [Ctrl+d/u] page [Ctrl+q] close | At bottom "


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def trim_trailing_empty_lines(lines: Sequence[str]) -> int:
    """Number of lines to keep: content plus a few trailing blank lines."""
    if not lines:
        return 0
    last = next((i for i in reversed(range(len(lines))) if lines[i].strip()), None)
    if last is None:
        return min(MAX_TRAILING_EMPTY_LINES, len(lines))
    return min(last + 1 + MAX_TRAILING_EMPTY_LINES, len(lines))


def trim_content_to_cursor(content: bytes, cursor_info: Optional[tuple[int, int]]) -> bytes:
    """Drop unused pane space below the cursor and excess trailing blank lines.

    ``cursor_info`` is ``(cursor_y, pane_height)`` as reported by tmux. The cut
    at the cursor happens only when everything below it is blank.
    """
    lines = _split_lines(content.decode("utf-8", errors="replace"))
    total = len(lines)
    if total == 0:
        return content

    end = total
    if cursor_info is not None:
        cursor_y, pane_height = cursor_info
        if pane_height > 0:
            visible_start = max(total - pane_height, 0)
            trim_at = min(visible_start + cursor_y + 1, total)
            if not any(line.strip() for line in lines[trim_at:]):
                end = trim_at

    keep = trim_trailing_empty_lines(lines[:end])
    return "\n".join(lines[:keep]).encode("utf-8")