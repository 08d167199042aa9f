"""Snapshot of running processes together with the ports they listen on."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

import psutil

from portsage.port import get_port_pid_map

_ATTRS = [
    "pid",
    "name",
    "cmdline",
    "exe",
    "status",
    "cpu_percent",
    "memory_info",
    "ppid",
    "create_time",
    "cwd",
]

_STATUS_NAMES = {
    psutil.STATUS_RUNNING: "Run",
    psutil.STATUS_SLEEPING: "Sleep",
    psutil.STATUS_DISK_SLEEP: "UninterruptibleDiskSleep",
    psutil.STATUS_STOPPED: "Stop",
    psutil.STATUS_TRACING_STOP: "Tracing",
    psutil.STATUS_ZOMBIE: "Zombie",
    psutil.STATUS_DEAD: "Dead",
    psutil.STATUS_WAKING: "Waking",
    psutil.STATUS_IDLE: "Idle",
    psutil.STATUS_LOCKED: "LockBlocked",
    psutil.STATUS_WAITING: "Waiting",
    psutil.STATUS_PARKED: "Parked",
}


@dataclass
class ProcessInfo:
    """Everything known about one process."""

    pid: int
    name: str
    cmd: list[str]
    exe: str
    status: str
    cpu_usage: float
    memory: int
    virtual_memory: int
    parent_pid: int | None
    start_time: int
    cwd: str
    ports: list[int] = field(default_factory=list)


@dataclass
class DisplayProcessInfo:
    """The columns shown for a process in the table output."""

    pid: int
    name: str
    ports: str
    command: str

    @classmethod
    def from_process(cls, proc: ProcessInfo) -> DisplayProcessInfo:
        return cls(
            pid=proc.pid,
            name=proc.name,
            ports=", ".join(str(port) for port in proc.ports),
            command=" ".join(proc.cmd),
        )


def _status_name(status: str | None) -> str:
    if not status:
        return "Unknown"
    return _STATUS_NAMES.get(status, status.replace("-", " ").title().replace(" ", ""))


def _build_info(info: dict, ports: list[int]) -> ProcessInfo:
    memory_info = info.get("memory_info")
    ppid = info.get("ppid")
    create_time = info.get("create_time")
    return ProcessInfo(
        pid=info["pid"],
        name=info.get("name") or "",
        cmd=list(info.get("cmdline") or []),
        exe=info.get("exe") or "",
        status=_status_name(info.get("status")),
        cpu_usage=float(info.get("cpu_percent") or 0.0),
        memory=memory_info.rss if memory_info else 0,
        virtual_memory=memory_info.vms if memory_info else 0,
        parent_pid=ppid if ppid else None,
        start_time=int(create_time) if create_time else 0,
        cwd=info.get("cwd") or "",
        ports=ports,
    )


def get_all_processes() -> list[ProcessInfo]:
    """Return every running process, those with the most ports first."""
    ports_by_pid: dict[int, list[int]] = defaultdict(list)
    for port, pid in get_port_pid_map().items():
        ports_by_pid[pid].append(port)

    processes = [
        _build_info(proc.info, sorted(ports_by_pid.get(proc.info["pid"], [])))
        for proc in psutil.process_iter(attrs=_ATTRS, ad_value=None)
    ]
    processes.sort(key=lambda p: len(p.ports), reverse=True)
    return processes