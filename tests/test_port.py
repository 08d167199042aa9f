from unittest import mock

import pytest

from portsage.port import get_port_pid_map, parse_lsof_output

MOCK_OUTPUT = """
COMMAND     PID USER   FD   TYPE             DEVICE SIZE/OFF NODE NAME
uvicorn    1234 user   10u  IPv4 0x12345678      0t0  TCP *:8000 (LISTEN)
node       5678 user   20u  IPv4 0x23456789      0t0  TCP *:3000 (LISTEN)
docker-pr  9012 user   22u  IPv6 0x34567890      0t0  TCP *:5432 (LISTEN)
"""


def test_parse_lsof_output():
    port_map = parse_lsof_output(MOCK_OUTPUT)
    assert port_map.get(8000) == 1234
    assert port_map.get(3000) == 5678
    assert port_map.get(5432) == 9012
    assert port_map.get(9999) is None


def test_header_only_gives_empty_map():
    header = "COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME\n"
    assert parse_lsof_output(header) == {}


def test_short_lines_are_ignored():
    text = "HEADER\nnode 5678 user 20u IPv4 0x1 0t0 TCP\n"
    assert parse_lsof_output(text) == {}


def test_unparseable_pid_becomes_zero():
    text = "HEADER\nnode abc user 20u IPv4 0x1 0t0 TCP 127.0.0.1:4000 (LISTEN)\n"
    assert parse_lsof_output(text) == {4000: 0}


def test_ipv6_address_takes_last_segment():
    text = "HEADER\nsrv 42 user 3u IPv6 0x1 0t0 TCP [::1]:6379 (LISTEN)\n"
    assert parse_lsof_output(text) == {6379: 42}


def test_port_out_of_range_is_ignored():
    text = "HEADER\nsrv 42 user 3u IPv4 0x1 0t0 TCP *:70000 (LISTEN)\n"
    assert parse_lsof_output(text) == {}


def test_later_line_overwrites_same_port():
    text = (
        "HEADER\n"
        "a 10 user 3u IPv4 0x1 0t0 TCP *:8080 (LISTEN)\n"
        "b 20 user 3u IPv6 0x1 0t0 TCP *:8080 (LISTEN)\n"
    )
    assert parse_lsof_output(text) == {8080: 20}


def test_get_port_pid_map_uses_lsof_output():
    completed = mock.Mock(stdout=MOCK_OUTPUT.encode(), returncode=0)
    with mock.patch("portsage.port.subprocess.run", return_value=completed) as run:
        port_map = get_port_pid_map()
    assert port_map == {8000: 1234, 3000: 5678, 5432: 9012}
    assert run.call_args.args[0] == ("lsof", "-iTCP", "-sTCP:LISTEN", "-nP")


def test_get_port_pid_map_raises_when_lsof_missing():
    with mock.patch("portsage.port.subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(RuntimeError, match="failed to execute lsof"):
            get_port_pid_map()