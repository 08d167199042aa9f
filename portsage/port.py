"""Discovery of listening TCP ports and the processes that own them."""

from __future__ import annotations

import subprocess

_LSOF_COMMAND = ("lsof", "-iTCP", "-sTCP:LISTEN", "-nP")
_NAME_COLUMN = 8
_MIN_COLUMNS = 9


def _parse_unsigned(text: str, limit: int) -> int | None:
    """Parse a plain unsigned decimal number no greater than ``limit``."""
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= limit else None


def parse_lsof_output(output: str) -> dict[int, int]:
    """Build a mapping of port to PID from the text printed by ``lsof``.

    The first line is treated as the header and skipped.  Lines with fewer
    than nine columns are ignored, and a PID that cannot be read becomes 0.
    """
    port_map: dict[int, int] = {}
    for line in output.splitlines()[1:]:
        columns = line.split()
        if len(columns) < _MIN_COLUMNS:
            continue
        pid = _parse_unsigned(columns[1], 0xFFFFFFFF) or 0
        port = _parse_unsigned(columns[_NAME_COLUMN].split(":")[-1], 0xFFFF)
        if port is not None:
            port_map[port] = pid
    return port_map


def get_port_pid_map() -> dict[int, int]:
    """Run ``lsof`` and return the mapping of listening port to PID."""
    try:
        result = subprocess.run(_LSOF_COMMAND, capture_output=True, check=False)
    except OSError as exc:
        raise RuntimeError("failed to execute lsof") from exc
    stdout = result.stdout.decode("utf-8", errors="replace")
    return parse_lsof_output(stdout)