"""Helpers for driving agent sessions on a dedicated tmux server."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

AGENT_SERVER = "agtx"
"""Name of the tmux server (``tmux -L``) that hosts agent sessions."""

_UNSIGNED = re.compile(r"\+?[0-9]+")


class TmuxError(RuntimeError):
    """Raised when a tmux command cannot be run or reports failure."""


@dataclass
class SessionInfo:
    """A session listed by the agent tmux server."""

    name: str
    last_activity: int = 0
    created: int = 0

    def task_id(self) -> Optional[str]:
        """Task id from a name of the form ``task-{id}--{project}--{slug}``."""
        if not self.name.startswith("task-"):
            return None
        return self.name[len("task-"):].split("--")[0]

    def project_name(self) -> Optional[str]:
        """Project name: the second ``--``-separated part of the name."""
        parts = self.name.split("--")
        return parts[1] if len(parts) > 1 else None


def _run(args: Sequence[str], context: str, capture: bool = True) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            ["tmux", "-L", AGENT_SERVER, *args],
            capture_output=capture,
            check=False,
        )
    except OSError as exc:
        raise TmuxError(f"{context}: {exc}") from exc


def _decode(data: Optional[bytes]) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _parse_unsigned(text: str) -> int:
    return int(text) if _UNSIGNED.fullmatch(text) else 0


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_shell_command(agent_command: str, args: Sequence[str]) -> str:
    """Join a command and its arguments, single-quoting every argument for ``sh``."""
    quoted = ("'" + arg.replace("'", "'\"'\"'") + "'" for arg in args)
    return " ".join([agent_command, *quoted])


def spawn_session(session_name: str, working_dir: str, agent_command: str, args: Sequence[str]) -> None:
    """Start a detached session running the agent command in ``working_dir``."""
    shell_command = build_shell_command(agent_command, args)
    result = _run(
        [
            "new-session", "-d",
            "-s", session_name,
            "-c", working_dir,
            "sh", "-c", shell_command,
        ],
        "Failed to spawn tmux session",
    )
    if result.returncode != 0:
        raise TmuxError(f"tmux new-session failed: {_decode(result.stderr)}")


def parse_session_list(text: str) -> list[SessionInfo]:
    """Parse ``name<TAB>activity<TAB>created`` lines; malformed lines are skipped."""
    sessions = []
    for line in _lines(text):
        parts = line.split("\t")
        if len(parts) < 3:
            continue
        sessions.append(
            SessionInfo(
                name=parts[0],
                last_activity=_parse_unsigned(parts[1]),
                created=_parse_unsigned(parts[2]),
            )
        )
    return sessions


def list_sessions() -> list[SessionInfo]:
    """All sessions on the agent server; empty if the server is not running."""
    result = _run(
        [
            "list-sessions",
            "-F",
            "#{session_name}\t#{session_activity}\t#{session_created}",
        ],
        "Failed to list tmux sessions",
    )
    if result.returncode != 0:
        return []
    return parse_session_list(_decode(result.stdout))


def session_exists(session_name: str) -> bool:
    """Whether the named session exists."""
    result = _run(["has-session", "-t", session_name], "Failed to check tmux session")
    return result.returncode == 0


def capture_pane(session_name: str, lines: int) -> str:
    """Capture the pane text, starting ``lines`` lines back in history."""
    result = _run(
        ["capture-pane", "-t", session_name, "-p", "-S", str(-lines)],
        "Failed to capture tmux pane",
    )
    return _decode(result.stdout)


def send_keys(session_name: str, keys: str) -> None:
    """Type ``keys`` into the session followed by Enter."""
    _run(["send-keys", "-t", session_name, keys, "Enter"], "Failed to send keys to tmux session")


def attach_session(session_name: str) -> None:
    """Attach the terminal to the session; blocks until detach or exit."""
    _run(["attach", "-t", session_name], "Failed to attach to tmux session", capture=False)


def kill_session(session_name: str) -> None:
    """Kill the named session."""
    _run(["kill-session", "-t", session_name], "Failed to kill tmux session")