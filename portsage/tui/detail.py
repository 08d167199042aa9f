"""Text describing a single process in detail."""

from __future__ import annotations

from portsage.process import ProcessInfo


def detail_lines(proc: ProcessInfo, include_ports: bool = False) -> list[str]:
    """Return the detail view of ``proc`` as one line per field."""
    parent = "N/A" if proc.parent_pid is None else str(proc.parent_pid)
    lines = [
        f"PID: {proc.pid}",
        f"Name: {proc.name}",
        f"Status: {proc.status}",
        f"CPU Usage: {proc.cpu_usage:.2f}%",
        f"Memory: {proc.memory} KB",
        f"Virtual Memory: {proc.virtual_memory} KB",
        f"Parent PID: {parent}",
        f"Start Time: {proc.start_time}",
        f"Exe: {proc.exe}",
        f"CWD: {proc.cwd}",
    ]
    if include_ports:
        lines.append("Ports: " + ", ".join(str(port) for port in proc.ports))
    lines.append("Cmd: " + " ".join(proc.cmd))
    return lines


def detail_text(proc: ProcessInfo, include_ports: bool = False) -> str:
    """Return the detail view of ``proc`` as a single block of text."""
    return "\n".join(detail_lines(proc, include_ports))