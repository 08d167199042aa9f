"""Drawing of the process table, header, status line and pop-ups."""

from __future__ import annotations

import curses
import functools
from collections.abc import Sequence

from portsage.process import ProcessInfo
from portsage.tui.detail import detail_lines
from portsage.tui.state import ClipboardMessage, Mode

HELP_TEXT = "PortSage - TUI (↑/↓/j/k: move, enter: copy pid, tab: detail, q: quit)"
KILL_PROMPT = "Kill this process? (y/n)"

_HEADER_HEIGHT = 3
_MESSAGE_HEIGHT = 3
_DETAIL_HEIGHT = 13
_DETAIL_MAX_WIDTH = 100
_CONFIRM_WIDTH = 40
_CONFIRM_HEIGHT = 5

_TABLE_HEADINGS = ("PID", "Name", "Ports", "Command")
# (offset inside the table, width or None for the remaining space)
_TABLE_COLUMNS = ((0, 8), (10, 20), (32, 10), (44, None))

_COLORS = {
    "cyan": curses.COLOR_CYAN,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "red": curses.COLOR_RED,
    "white": curses.COLOR_WHITE,
}


@functools.cache
def _palette() -> dict[str, int]:
    if not curses.has_colors():
        return {}
    curses.start_color()
    background = curses.COLOR_BLACK
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        pass
    palette = {}
    for number, (name, foreground) in enumerate(_COLORS.items(), start=1):
        curses.init_pair(number, foreground, background)
        palette[name] = curses.color_pair(number)
    return palette


def _color(name: str) -> int:
    try:
        return _palette().get(name, curses.A_NORMAL)
    except curses.error:
        return curses.A_NORMAL


def header_text(mode: Mode, filter_input: str) -> str:
    """Return the line shown at the top of the screen."""
    if mode is Mode.FILTER_INPUT:
        return f"Filter: {filter_input}"
    return HELP_TEXT


def table_rows(
    processes: Sequence[ProcessInfo], selected_index: int, offset: int, height: int
) -> list[tuple[tuple[str, str, str, str], bool]]:
    """Return the visible table rows as (cells, selected) for an area ``height`` tall."""
    visible = processes[offset : offset + max(height - 2, 0)]
    return [
        (
            (
                str(proc.pid),
                proc.name,
                ", ".join(str(port) for port in proc.ports),
                " ".join(proc.cmd),
            ),
            index == selected_index,
        )
        for index, proc in enumerate(visible, start=offset)
    ]


def centered_box(
    screen_width: int, screen_height: int, width: int, height: int
) -> tuple[int, int, int, int]:
    """Return (x, y, width, height) of a box centred on the screen."""
    x = max(screen_width - width, 0) // 2
    y = max(screen_height - height, 0) // 2
    return x, y, width, height


def _put(screen, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    rows, cols = screen.getmaxyx()
    if not text or y < 0 or y >= rows or x < 0 or x >= cols:
        return
    try:
        screen.addstr(y, x, text[: cols - x], attr)
    except curses.error:
        # Writing into the bottom-right cell moves the cursor off screen.
        pass


def _box(screen, top: int, left: int, height: int, width: int, title: str, attr: int) -> None:
    if height < 2 or width < 2:
        return
    horizontal = "─" * (width - 2)
    _put(screen, top, left, "┌" + horizontal + "┐", attr)
    for y in range(top + 1, top + height - 1):
        _put(screen, y, left, "│", attr)
        _put(screen, y, left + width - 1, "│", attr)
    _put(screen, top + height - 1, left, "└" + horizontal + "┘", attr)
    if title:
        _put(screen, top, left + 1, title[: width - 2], attr)


def _fill(screen, top: int, left: int, height: int, width: int) -> None:
    for y in range(top, top + height):
        _put(screen, y, left, " " * width)


def _put_cells(screen, y: int, left: int, inner_width: int, cells, styles, base: int) -> None:
    for cell, style, (column, width) in zip(cells, styles, _TABLE_COLUMNS):
        if column >= inner_width:
            break
        span = inner_width - column if width is None else min(width, inner_width - column)
        _put(screen, y, left + column, cell[:span], style | base)


def _draw_header(screen, width: int, text: str) -> None:
    attr = _color("cyan")
    _put(screen, 0, 0, text, attr)
    _put(screen, _HEADER_HEIGHT - 1, 0, "─" * width, attr)


def _draw_table(
    screen,
    top: int,
    height: int,
    width: int,
    processes: Sequence[ProcessInfo],
    selected_index: int,
    offset: int,
) -> None:
    if height < 2 or width < 2:
        return
    _box(screen, top, 0, height, width, "", curses.A_NORMAL)
    inner_width = width - 2
    bottom = top + height - 1
    if top + 1 < bottom:
        yellow = _color("yellow")
        _put_cells(screen, top + 1, 1, inner_width, _TABLE_HEADINGS, (yellow,) * 4, 0)
    styles = (_color("green"), curses.A_BOLD, _color("yellow"), _color("blue"))
    rows = table_rows(processes, selected_index, offset, height)
    for y, (cells, selected) in enumerate(rows, start=top + 2):
        if y >= bottom:
            break
        base = curses.A_REVERSE if selected else curses.A_NORMAL
        if selected:
            _put(screen, y, 1, " " * inner_width, base)
        _put_cells(screen, y, 1, inner_width, cells, styles, base)


def _draw_message(screen, top: int, width: int, message: ClipboardMessage) -> None:
    text = message.visible_text()
    if text is None:
        return
    attr = _color("green")
    _put(screen, top, 0, "─" * width, attr)
    _put(screen, top + 1, 0, text, attr)


def _draw_popup(screen, box, title: str, lines: Sequence[str], border: int, text: int) -> None:
    x, y, width, height = box
    if width < 2 or height < 2:
        return
    _fill(screen, y, x, height, width)
    _box(screen, y, x, height, width, title, border)
    for row, line in enumerate(lines[: height - 2], start=y + 1):
        _put(screen, row, x + 1, line[: width - 2], text)


def draw_view(
    screen,
    processes: Sequence[ProcessInfo],
    selected_index: int,
    offset: int,
    filter_input: str,
    mode: Mode,
    clipboard_message: ClipboardMessage,
) -> None:
    """Draw the whole interface onto a curses window."""
    height, width = screen.getmaxyx()
    screen.erase()

    table_height = max(height - _HEADER_HEIGHT - _MESSAGE_HEIGHT, 0)
    _draw_header(screen, width, header_text(mode, filter_input))
    _draw_table(screen, _HEADER_HEIGHT, table_height, width, processes, selected_index, offset)
    _draw_message(screen, _HEADER_HEIGHT + table_height, width, clipboard_message)

    if mode is Mode.DETAIL and 0 <= selected_index < len(processes):
        detail_width = min(max(width - 10, 0), _DETAIL_MAX_WIDTH)
        _draw_popup(
            screen,
            centered_box(width, height, detail_width, _DETAIL_HEIGHT),
            "Process Detail",
            detail_lines(processes[selected_index], include_ports=True),
            _color("yellow"),
            _color("white"),
        )
    if mode is Mode.CONFIRM_KILL:
        _draw_popup(
            screen,
            centered_box(width, height, _CONFIRM_WIDTH, _CONFIRM_HEIGHT),
            "Confirm Kill",
            [KILL_PROMPT],
            _color("red"),
            _color("white"),
        )

    screen.refresh()