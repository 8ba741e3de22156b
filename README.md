# agtx

Building blocks for a terminal kanban board that drives coding agents running
in tmux. The package has no third-party dependencies.

All tmux commands go to a dedicated tmux server named `agtx` (`tmux -L agtx`,
the `AGENT_SERVER` constant in `agtx.tmux`). This keeps agent sessions apart
from your own tmux sessions.

## Installation

```
pip install .
```

To install and run the tests:

```
pip install ".[test]"
pytest
```

The session and window functions run the `tmux` binary, so `tmux` must be on
your `PATH`.

## Modules

### `agtx.tmux`

Functions that manage whole sessions on the agent server:

- `spawn_session(session_name, working_dir, agent_command, args)` starts a
  detached session. The session runs the command through `sh -c` in
  `working_dir`. It raises `TmuxError` if tmux reports failure, and the error
  message includes tmux's stderr.
- `list_sessions()` returns a list of `SessionInfo`. The list is empty when the
  server is not running.
- `session_exists(session_name)` returns a bool.
- `capture_pane(session_name, lines)` returns the pane text, starting `lines`
  lines back in history.
- `send_keys(session_name, keys)` types the keys and then presses Enter.
- `attach_session(session_name)` attaches your terminal to the session. It
  blocks until you detach or the session ends.
- `kill_session(session_name)` kills the session.
- `build_shell_command(agent_command, args)` joins the command and its
  arguments. It wraps each argument in single quotes and escapes any embedded
  single quotes.
- `parse_session_list(text)` reads lines of the form
  `name<TAB>activity<TAB>created`. Lines with fewer than three fields are
  skipped. A numeric field that does not parse becomes `0`.
- `SessionInfo` has the fields `name`, `last_activity` and `created`. Its
  `task_id()` and `project_name()` methods read the parts of a name of the form
  `task-{id}--{project}--{slug}`, and return `None` when the part is missing.

All of these functions raise `TmuxError` when the `tmux` program cannot be
started.

```python
from agtx.tmux import spawn_session, list_sessions

spawn_session("task-42--web--fix-login", "/path/to/repo", "claude", ["fix the login bug"])
for info in list_sessions():
    print(info.name, info.task_id(), info.project_name())
```

### `agtx.tmux_ops`

`TmuxOperations` is an abstract interface for window-level control. In tests,
code that accepts a `TmuxOperations` can be given a fake. `RealTmuxOps`
implements the interface by running tmux. It provides:

- `create_window(session, window_name, working_dir, command)`. When `command`
  is given, the window runs `command; exec $SHELL`, so you get a shell after
  the command exits. It raises `TmuxError` if tmux fails.
- `kill_window`, `window_exists`, `resize_window(target, width, height)`.
- `send_keys` sends the keys and then Enter. `send_keys_literal` sends the keys
  without Enter.
- `capture_pane(target)` returns the visible text.
  `capture_pane_with_history(target, history_lines)` returns raw bytes that
  keep escape sequences and joined wrapped lines. It returns empty bytes if
  tmux cannot be run.
- `get_cursor_info(target)` returns `(cursor_y, pane_height)`, or `None`.
- `pane_current_command(target)` returns, for example, `"bash"` or `"claude"`.
  It returns `None` when the command is unknown.
- `has_session(session)` returns a bool. It returns `False` if tmux cannot be
  run.
- `create_session(session, working_dir)`.

### `agtx.board`

`BoardState(columns, tasks=None)` holds the tasks and the selected column and
row. `columns` is the ordered sequence of statuses shown as columns. A task is
any object whose `status` attribute matches one of those statuses. It provides:

- `tasks_in_column(column)`. This returns an empty list for an unknown column.
- `selected_task()`. This returns `None` when nothing is under the selection.
- `move_left()`, `move_right()`, `move_up()` and `move_down()`. All moves stay
  within the board. Changing column clamps the row to the tasks in the new
  column.

### `agtx.input_mode`

`InputMode` lists the editor states: `NORMAL`, `INPUT_TITLE`, `SELECT_PLUGIN`
and `INPUT_DESCRIPTION`. `InputMode.default()` returns `NORMAL`.

### `agtx.shell_popup`

`ShellPopup(task_title, window_name)` tracks the scroll position of a popup
that shows an agent's window. A negative `scroll_offset` means the view is
scrolled up into history. It provides `scroll_up(lines)`, `scroll_down(lines)`
(which never goes past the bottom), `scroll_to_bottom()` and `is_at_bottom()`.
It also has the fields `cached_content` and `last_pane_size`.

The helpers work on plain data, so any renderer can use them:

- `compute_visible_lines(styled_lines, visible_height, scroll_offset)` returns
  `(visible_lines, start_line, total_lines)`. A line is either a string or a
  sequence of spans, where each span is a string or an object with a `content`
  attribute. When the view is scrolled up, trailing blank lines are dropped.
- `build_footer_text(scroll_offset, start_line)` returns the key-hint status
  line.
- `trim_content_to_cursor(content, cursor_info)` cuts captured bytes at the
  cursor, but only when everything below the cursor is blank. It then applies
  `trim_trailing_empty_lines`.
- `trim_trailing_empty_lines(lines)` returns how many lines to keep: the
  content plus up to `MAX_TRAILING_EMPTY_LINES` (3) blank lines.
- `ShellPopupColors` holds colour names for the border, the header and the
  footer.

## What this package does not do

There is no interactive board screen, no drawing code, and no command to start
the package. There is also no storage for tasks or projects, and no git or
pull-request handling. The package gives you the state, text computations and
tmux control that such an application would be built on.