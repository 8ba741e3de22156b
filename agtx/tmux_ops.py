"""Window-level tmux operations behind an interface that tests can replace."""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agtx.tmux import AGENT_SERVER, TmuxError


class TmuxOperations(ABC):
    """Operations on windows and sessions of the agent tmux server."""

    @abstractmethod
    def create_window(self, session: str, window_name: str, working_dir: str, command: Optional[str]) -> None:
        """Create a detached window, optionally running ``command``."""

    @abstractmethod
    def kill_window(self, target: str) -> None:
        """Kill a window."""

    @abstractmethod
    def window_exists(self, target: str) -> bool:
        """Whether the window exists."""

    @abstractmethod
    def send_keys(self, target: str, keys: str) -> None:
        """Send keys followed by Enter."""

    @abstractmethod
    def send_keys_literal(self, target: str, keys: str) -> None:
        """Send keys without pressing Enter."""

    @abstractmethod
    def capture_pane(self, target: str) -> str:
        """Capture the visible pane text."""

    @abstractmethod
    def capture_pane_with_history(self, target: str, history_lines: int) -> bytes:
        """Capture pane content with history and escape sequences."""

    @abstractmethod
    def get_cursor_info(self, target: str) -> Optional[tuple[int, int]]:
        """Return ``(cursor_y, pane_height)`` or None."""

    @abstractmethod
    def resize_window(self, target: str, width: int, height: int) -> None:
        """Resize a window."""

    @abstractmethod
    def pane_current_command(self, target: str) -> Optional[str]:
        """The command currently running in the pane, if known."""

    @abstractmethod
    def has_session(self, session: str) -> bool:
        """Whether the session exists."""

    @abstractmethod
    def create_session(self, session: str, working_dir: str) -> None:
        """Create a detached session."""


def _run(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(["tmux", "-L", AGENT_SERVER, *args], capture_output=True, check=False)
    except OSError as exc:
        raise TmuxError(str(exc)) from exc


def _decode(data: Optional[bytes]) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _parse_unsigned(text: str) -> Optional[int]:
    body = text[1:] if text.startswith("+") else text
    if body and body.isascii() and body.isdigit():
        return int(body)
    return None


class RealTmuxOps(TmuxOperations):
    """Implementation that runs the ``tmux`` binary."""

    def create_window(self, session: str, window_name: str, working_dir: str, command: Optional[str]) -> None:
        args = ["new-window", "-d", "-t", session, "-n", window_name, "-c", working_dir]
        if command is not None:
            args += ["sh", "-c", f"{command}; exec $SHELL"]
        if _run(args).returncode != 0:
            raise TmuxError("Failed to create tmux window")

    def kill_window(self, target: str) -> None:
        _run(["kill-window", "-t", target])

    def window_exists(self, target: str) -> bool:
        return _run(["list-windows", "-t", target]).returncode == 0

    def send_keys(self, target: str, keys: str) -> None:
        _run(["send-keys", "-t", target, keys])
        _run(["send-keys", "-t", target, "Enter"])

    def send_keys_literal(self, target: str, keys: str) -> None:
        _run(["send-keys", "-t", target, keys])

    def capture_pane(self, target: str) -> str:
        return _decode(_run(["capture-pane", "-t", target, "-p"]).stdout)

    def capture_pane_with_history(self, target: str, history_lines: int) -> bytes:
        try:
            result = _run(["capture-pane", "-t", target, "-p", "-e", "-J", "-S", f"-{history_lines}"])
        except TmuxError:
            return b""
        return result.stdout or b""

    def get_cursor_info(self, target: str) -> Optional[tuple[int, int]]:
        try:
            result = _run(["display", "-p", "-t", target, "#{cursor_y} #{pane_height}"])
        except TmuxError:
            return None
        if result.returncode != 0:
            return None
        parts = _decode(result.stdout).split()
        if len(parts) != 2:
            return None
        cursor_y, pane_height = (_parse_unsigned(p) for p in parts)
        if cursor_y is None or pane_height is None:
            return None
        return cursor_y, pane_height

    def resize_window(self, target: str, width: int, height: int) -> None:
        _run(["resize-window", "-t", target, "-x", str(width), "-y", str(height)])

    def pane_current_command(self, target: str) -> Optional[str]:
        try:
            result = _run(["display", "-p", "-t", target, "#{pane_current_command}"])
        except TmuxError:
            return None
        if result.returncode != 0:
            return None
        command = _decode(result.stdout).strip()
        return command or None

    def has_session(self, session: str) -> bool:
        try:
            return _run(["has-session", "-t", session]).returncode == 0
        except TmuxError:
            return False

    def create_session(self, session: str, working_dir: str) -> None:
        _run(["new-session", "-d", "-s", session, "-c", working_dir])