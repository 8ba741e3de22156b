"""Kanban board selection state, shell popup helpers and tmux control for coding agents."""

__version__ = "0.1.0"
__all__ = ["board", "input_mode", "shell_popup", "tmux", "tmux_ops"]