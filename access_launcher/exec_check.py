from __future__ import annotations

import os

from gi.repository import GLib

_SHELL_CHARS = ('"', "'", "\\")


def exec_command(exec_line: str):
    """Return the program an Exec line would run, or None if it can't be told."""
    exec_line = exec_line.strip()
    if not exec_line:
        return None
    if not any(ch in exec_line for ch in _SHELL_CHARS):
        return exec_line.split()[0]
    try:
        _ok, argv = GLib.shell_parse_argv(exec_line)
    except GLib.Error:
        return None
    return argv[0] if argv else None


def exec_looks_valid(exec_line: str) -> bool:
    """Cheap check that an Exec line points at something runnable.

    Absolute commands must exist on disk. Bare names are resolved through
    PATH at launch time and are accepted as-is, as is anything the shell
    tokenizer rejects.
    """
    if not exec_line or not exec_line.strip():
        return False
    command = exec_command(exec_line)
    if command is None:
        return True
    if command.startswith("/"):
        return os.path.exists(command)
    return True
