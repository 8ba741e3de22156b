import subprocess
from unittest.mock import patch

import pytest

from agtx.tmux import AGENT_SERVER, TmuxError
from agtx.tmux_ops import RealTmuxOps, TmuxOperations


def _done(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def ops():
    return RealTmuxOps()


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        TmuxOperations()


def test_create_window_wraps_command(ops):
    with patch("subprocess.run", return_value=_done()) as run:
        result = ops.create_window("proj", "task-1", "/wt", "claude")
    assert result is None
    argv = run.call_args.args[0]
    assert argv[:3] == ["tmux", "-L", AGENT_SERVER]
    assert argv[3:11] == ["new-window", "-d", "-t", "proj", "-n", "task-1", "-c", "/wt"]
    assert argv[11:] == ["sh", "-c", "claude; exec $SHELL"]


def test_create_window_without_command(ops):
    with patch("subprocess.run", return_value=_done()) as run:
        result = ops.create_window("proj", "w", "/wt", None)
    assert result is None
    assert "sh" not in run.call_args.args[0]


def test_create_window_failure_raises(ops):
    with patch("subprocess.run", return_value=_done(1)):
        with pytest.raises(TmuxError, match="Failed to create tmux window"):
            ops.create_window("proj", "w", "/wt", None)


def test_kill_window_missing_binary_raises(ops):
    with patch("subprocess.run", side_effect=FileNotFoundError("tmux")):
        with pytest.raises(TmuxError):
            ops.kill_window("proj:w")


def test_window_exists(ops):
    with patch("subprocess.run", return_value=_done(0)):
        assert ops.window_exists("proj:w") is True
    with patch("subprocess.run", return_value=_done(1)):
        assert ops.window_exists("proj:w") is False


def test_send_keys_sends_text_then_enter(ops):
    with patch("subprocess.run", return_value=_done()) as run:
        result = ops.send_keys("proj:w", "/exit")
    assert result is None
    calls = [c.args[0][3:] for c in run.call_args_list]
    assert calls == [["send-keys", "-t", "proj:w", "/exit"], ["send-keys", "-t", "proj:w", "Enter"]]


def test_send_keys_literal_single_call(ops):
    with patch("subprocess.run", return_value=_done()) as run:
        result = ops.send_keys_literal("proj:w", "C-c")
    assert result is None
    assert run.call_count == 1
    assert run.call_args.args[0][3:] == ["send-keys", "-t", "proj:w", "C-c"]


def test_capture_pane_decodes(ops):
    with patch("subprocess.run", return_value=_done(stdout=b"Ready for input >")):
        assert ops.capture_pane("proj:w") == "Ready for input >"


def test_capture_pane_with_history(ops):
    with patch("subprocess.run", return_value=_done(stdout=b"Line 1\nLine 2\n")) as run:
        data = ops.capture_pane_with_history("test-window", 500)
    assert data == b"Line 1\nLine 2\n"
    argv = run.call_args.args[0]
    assert "-e" in argv and "-J" in argv
    assert argv[argv.index("-S") + 1] == "-500"


def test_capture_pane_with_history_error_is_empty(ops):
    with patch("subprocess.run", side_effect=FileNotFoundError("tmux")):
        assert ops.capture_pane_with_history("w", 500) == b""


def test_get_cursor_info_parses(ops):
    with patch("subprocess.run", return_value=_done(stdout=b"5 24\n")):
        assert ops.get_cursor_info("w") == (5, 24)


@pytest.mark.parametrize("out,code", [(b"5\n", 0), (b"a b\n", 0), (b"1 2 3\n", 0), (b"5 24\n", 1), (b"-1 24", 0)])
def test_get_cursor_info_invalid(ops, out, code):
    with patch("subprocess.run", return_value=_done(code, stdout=out)):
        assert ops.get_cursor_info("w") is None


def test_resize_window_args(ops):
    with patch("subprocess.run", return_value=_done()) as run:
        result = ops.resize_window("w", 120, 40)
    assert result is None
    assert run.call_args.args[0][3:] == ["resize-window", "-t", "w", "-x", "120", "-y", "40"]


def test_pane_current_command(ops):
    with patch("subprocess.run", return_value=_done(stdout=b"bash\n")):
        assert ops.pane_current_command("sess:win") == "bash"
    with patch("subprocess.run", return_value=_done(stdout=b"  \n")):
        assert ops.pane_current_command("sess:win") is None
    with patch("subprocess.run", return_value=_done(1, stdout=b"bash\n")):
        assert ops.pane_current_command("sess:win") is None


def test_has_session(ops):
    with patch("subprocess.run", return_value=_done(0)):
        assert ops.has_session("my-project") is True
    with patch("subprocess.run", side_effect=FileNotFoundError("tmux")):
        assert ops.has_session("my-project") is False


def test_create_session_args(ops):
    with patch("subprocess.run", return_value=_done()) as run:
        result = ops.create_session("my-project", "/home/user/project")
    assert result is None
    assert run.call_args.args[0][3:] == [
        "new-session", "-d", "-s", "my-project", "-c", "/home/user/project",
    ]