"""Live filtering of the process list in the terminal interface."""

from __future__ import annotations

from collections.abc import Iterable

from portsage.process import ProcessInfo


def apply_filter(processes: Iterable[ProcessInfo], keyword: str) -> list[ProcessInfo]:
    """Keep processes whose PID, name or any command argument contains ``keyword``.

    Name and argument matches ignore case.
    """
    needle = keyword.lower()
    return [
        proc
        for proc in processes
        if needle in str(proc.pid)
        or needle in proc.name.lower()
        or any(needle in arg.lower() for arg in proc.cmd)
    ]