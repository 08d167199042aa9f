import os
from unittest import mock

from portsage.process import DisplayProcessInfo, ProcessInfo, get_all_processes


def _mock_process(pid, name, cmd, ports=None):
    return ProcessInfo(
        pid=pid,
        name=name,
        cmd=list(cmd),
        exe="/usr/bin/dummy",
        status="Running",
        cpu_usage=1.0,
        memory=2048,
        virtual_memory=4096,
        parent_pid=1,
        start_time=0,
        cwd="/home/dummy",
        ports=list(ports or []),
    )


def _patched_lsof(output):
    completed = mock.Mock(stdout=output.encode(), returncode=0)
    return mock.patch("portsage.port.subprocess.run", return_value=completed)


def _lsof_for(pid, ports):
    lines = ["COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME"]
    lines += [
        f"python {pid} user 3u IPv4 0x1 0t0 TCP *:{port} (LISTEN)" for port in ports
    ]
    return "\n".join(lines) + "\n"


def test_process_list_is_not_empty():
    with _patched_lsof(""):
        processes = get_all_processes()
    assert len(processes) > 0


def test_current_process_is_listed():
    with _patched_lsof(""):
        processes = get_all_processes()
    assert os.getpid() in {p.pid for p in processes}


def test_current_process_fields_are_valid():
    with _patched_lsof(""):
        processes = get_all_processes()
    me = next(p for p in processes if p.pid == os.getpid())
    assert me.pid > 0
    assert me.name != ""
    assert me.memory > 0 or me.virtual_memory > 0
    assert me.parent_pid == os.getppid()


def test_ports_are_attached_and_sorted_first():
    pid = os.getpid()
    with _patched_lsof(_lsof_for(pid, [9100, 9050])):
        processes = get_all_processes()
    assert processes[0].pid == pid
    assert processes[0].ports == [9050, 9100]
    assert all(p.ports == [] for p in processes[1:])


def test_processes_sorted_by_port_count_descending():
    with _patched_lsof(_lsof_for(os.getpid(), [9200])):
        processes = get_all_processes()
    counts = [len(p.ports) for p in processes]
    assert counts == sorted(counts, reverse=True)


def test_filter_sample():
    proc = _mock_process(1001, "dummy-process", ["dummy", "--test"])
    display = DisplayProcessInfo.from_process(proc)
    assert "dummy" in display.name


def test_display_from_process_joins_fields():
    proc = _mock_process(42, "node", ["node", "index.js"], ports=[3000, 3001])
    display = DisplayProcessInfo.from_process(proc)
    assert display == DisplayProcessInfo(
        pid=42, name="node", ports="3000, 3001", command="node index.js"
    )


def test_display_without_ports_or_command():
    proc = _mock_process(7, "idle", [])
    display = DisplayProcessInfo.from_process(proc)
    assert display.ports == ""
    assert display.command == ""