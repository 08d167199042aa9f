"""Copying process identifiers to the system clipboard."""

from __future__ import annotations

import shutil
import subprocess

from portsage.process import ProcessInfo
from portsage.tui.state import ClipboardMessage

COPIED_MESSAGE = "✔ Copied PID to clipboard"

_CLIPBOARD_COMMANDS = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def _write_clipboard(text: str) -> bool:
    for program, *args in _CLIPBOARD_COMMANDS:
        path = shutil.which(program)
        if path is None:
            continue
        try:
            result = subprocess.run(
                [path, *args],
                input=text.encode(),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
                timeout=2,
            )
        except (OSError, subprocess.SubprocessError):
            continue
        if result.returncode == 0:
            return True
    return False


def copy_pid_to_clipboard(proc: ProcessInfo, message: ClipboardMessage) -> bool:
    """Put the PID of ``proc`` on the clipboard and report success in ``message``.

    Returns whether the copy succeeded; on failure ``message`` is left alone.
    """
    if not _write_clipboard(str(proc.pid)):
        return False
    message.set(COPIED_MESSAGE)
    return True