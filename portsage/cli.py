"""Command line entry point: an interactive view or a one-shot table."""

from __future__ import annotations

import argparse
import curses
import os
import signal
from collections.abc import Sequence
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version

from tabulate import tabulate

from portsage.filter import filter_processes_by_name
from portsage.port import get_port_pid_map
from portsage.process import DisplayProcessInfo, ProcessInfo, get_all_processes
from portsage.tui.clipboard import copy_pid_to_clipboard
from portsage.tui.filter import apply_filter
from portsage.tui.state import ClipboardMessage, Mode
from portsage.tui.view import draw_view

DESCRIPTION = "A TUI tool to monitor processes and their listening ports"
TABLE_HEADERS = ("pid", "name", "ports", "command")

_PAGE_ROWS = 20
_POLL_MILLISECONDS = 100
_ESCAPE = "\x1b"
_TAB = "\t"
_ENTER_KEYS = {"\n", "\r", curses.KEY_ENTER}
_BACKSPACE_KEYS = {"\x7f", "\b", curses.KEY_BACKSPACE}
_DOWN_KEYS = {"j", curses.KEY_DOWN}
_UP_KEYS = {"k", curses.KEY_UP}
_QUIT_KEYS = {"q"}
_FILTER_KEYS = {"/"}
_DETAIL_KEYS = {_TAB}
_KILL_KEYS = {"x"}


def _program_version() -> str:
    try:
        return version("portsage")
    except PackageNotFoundError:
        return "0.1.0"


def _bounded_int(limit: int):
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
        if not 0 <= value <= limit:
            raise argparse.ArgumentTypeError(f"{text} is not in 0..={limit}")
        return value

    return convert


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``portsage`` command."""
    parser = argparse.ArgumentParser(prog="portsage", description=DESCRIPTION)
    parser.add_argument("-f", "--filter", default=None, help="keep processes matching a keyword")
    parser.add_argument(
        "-p", "--port", type=_bounded_int(0xFFFF), default=None,
        help="keep only the process listening on this port",
    )
    parser.add_argument("--json", action="store_true", help="request JSON output")
    parser.add_argument(
        "--kill", type=_bounded_int(0xFFFFFFFF), default=None, help="PID of a process to kill"
    )
    parser.add_argument("--cli", action="store_true", help="print a table instead of the TUI")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_program_version()}")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments (without the program name)."""
    return build_parser().parse_args(argv)


def render_table(processes: Sequence[ProcessInfo]) -> str:
    """Render processes as a table with rounded borders."""
    rows = []
    for proc in processes:
        shown = DisplayProcessInfo.from_process(proc)
        rows.append([str(shown.pid), shown.name, shown.ports, shown.command])
    return tabulate(
        rows,
        headers=TABLE_HEADERS,
        tablefmt="rounded_outline",
        disable_numparse=True,
        stralign="left",
    )


@dataclass
class _Tui:
    """Key handling for the interactive view."""

    processes: list[ProcessInfo]
    filtered: list[ProcessInfo] = field(default_factory=list)
    selected_index: int = 0
    offset: int = 0
    mode: Mode = Mode.NORMAL
    filter_input: str = ""
    message: ClipboardMessage = field(default_factory=ClipboardMessage)

    def __post_init__(self) -> None:
        self.filtered = list(self.processes)

    def _selected(self) -> ProcessInfo | None:
        if 0 <= self.selected_index < len(self.filtered):
            return self.filtered[self.selected_index]
        return None

    def _refilter(self) -> None:
        self.filtered = apply_filter(self.processes, self.filter_input)

    def handle(self, key) -> bool:
        """Process one key press; return False when the interface should close."""
        if self.mode is Mode.NORMAL:
            return self._handle_normal(key)
        if self.mode is Mode.FILTER_INPUT:
            self._handle_filter(key)
        elif self.mode is Mode.DETAIL:
            if key in (_ESCAPE, "q", _TAB):
                self.mode = Mode.NORMAL
        elif self.mode is Mode.CONFIRM_KILL:
            if key == "y":
                self._kill_selected()
                self._refilter()
            self.mode = Mode.NORMAL
        return True

    def _handle_normal(self, key) -> bool:
        if key in _QUIT_KEYS:
            return False
        if key in _DOWN_KEYS:
            if self.selected_index + 1 < len(self.filtered):
                self.selected_index += 1
                if self.selected_index >= self.offset + _PAGE_ROWS:
                    self.offset += 1
        elif key in _UP_KEYS:
            if self.selected_index > 0:
                self.selected_index -= 1
                if self.selected_index < self.offset:
                    self.offset = max(self.offset - 1, 0)
        elif key in _FILTER_KEYS:
            self.mode = Mode.FILTER_INPUT
            self.filter_input = ""
        elif key in _DETAIL_KEYS:
            self.mode = Mode.DETAIL
        elif key in _ENTER_KEYS:
            proc = self._selected()
            if proc is not None:
                copy_pid_to_clipboard(proc, self.message)
        elif key in _KILL_KEYS:
            self.mode = Mode.CONFIRM_KILL
        return True

    def _handle_filter(self, key) -> None:
        if key == _ESCAPE or key in _ENTER_KEYS:
            self.mode = Mode.NORMAL
            return
        if key in _BACKSPACE_KEYS:
            self.filter_input = self.filter_input[:-1]
        elif isinstance(key, str) and key.isprintable():
            self.filter_input += key
        else:
            return
        self._refilter()
        self.selected_index = 0
        self.offset = 0

    def _kill_selected(self) -> None:
        proc = self._selected()
        if proc is None:
            return
        kill_signal = getattr(signal, "SIGKILL", signal.SIGTERM)
        try:
            os.kill(proc.pid, kill_signal)
        except OSError:
            self.message.set(f"✖ Failed to kill process {proc.pid}")
        else:
            self.message.set(f"✔ Killed process {proc.pid}")


def _tui_loop(screen, processes: list[ProcessInfo]) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)
    screen.timeout(_POLL_MILLISECONDS)
    tui = _Tui(processes)
    while True:
        draw_view(
            screen,
            tui.filtered,
            tui.selected_index,
            tui.offset,
            tui.filter_input,
            tui.mode,
            tui.message,
        )
        try:
            key = screen.get_wch()
        except curses.error:
            continue
        if not tui.handle(key):
            break


def _run_tui(processes: list[ProcessInfo]) -> None:
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(_tui_loop, processes)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``portsage`` command."""
    args = parse_args(argv)
    processes = get_all_processes()

    if not args.cli:
        _run_tui(processes)
        return 0

    filtered = list(processes)
    if args.filter is not None:
        filtered = filter_processes_by_name(filtered, args.filter)

    if args.port is not None:
        pid = get_port_pid_map().get(args.port)
        filtered = [] if pid is None else [proc for proc in filtered if proc.pid == pid]

    print(render_table(filtered))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())