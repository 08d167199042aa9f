"""Keyword filtering of process lists."""

from __future__ import annotations

from collections.abc import Iterable

from portsage.process import ProcessInfo


def filter_processes_by_name(
    processes: Iterable[ProcessInfo], keyword: str
) -> list[ProcessInfo]:
    """Keep processes whose name or any command argument contains ``keyword``.

    The match ignores case.
    """
    needle = keyword.lower()
    return [
        proc
        for proc in processes
        if needle in proc.name.lower() or any(needle in arg.lower() for arg in proc.cmd)
    ]