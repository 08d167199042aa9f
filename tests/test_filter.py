import pytest

from portsage.filter import filter_processes_by_name
from portsage.process import ProcessInfo


def _mock_process(pid, name, cmd):
    return ProcessInfo(
        pid=pid,
        name=name,
        cmd=list(cmd),
        exe="/usr/bin/dummy",
        status="Running",
        cpu_usage=0.0,
        memory=1024,
        virtual_memory=2048,
        parent_pid=1,
        start_time=0,
        cwd="/tmp",
    )


@pytest.fixture
def processes():
    return [
        _mock_process(1, "uvicorn", ["uvicorn", "main:app"]),
        _mock_process(2, "node", ["node", "index.js"]),
        _mock_process(3, "python3", ["python3", "server.py"]),
    ]


def test_filter_by_name(processes):
    filtered = filter_processes_by_name(processes, "uvicorn")
    assert [p.pid for p in filtered] == [1]

    filtered2 = filter_processes_by_name(processes, "python")
    assert [p.pid for p in filtered2] == [3]

    filtered3 = filter_processes_by_name(processes, "notfound")
    assert filtered3 == []


def test_filter_matches_command_arguments(processes):
    filtered = filter_processes_by_name(processes, "index.js")
    assert [p.pid for p in filtered] == [2]


def test_filter_ignores_case(processes):
    filtered = filter_processes_by_name(processes, "NODE")
    assert [p.pid for p in filtered] == [2]


def test_empty_keyword_keeps_everything_in_order(processes):
    filtered = filter_processes_by_name(processes, "")
    assert [p.pid for p in filtered] == [1, 2, 3]


def test_filter_does_not_match_pid(processes):
    assert filter_processes_by_name(processes, "3") == [processes[2]]
    assert filter_processes_by_name(processes, "1") == []