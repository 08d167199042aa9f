# portsage

Find out which processes are running on your machine and which TCP ports
they are listening on, either in an interactive terminal view or as a
plain table.

Listening ports are read from `lsof -iTCP -sTCP:LISTEN -nP`, so `lsof`
has to be installed and on your `PATH`. Processes with the most listening
ports are listed first.

## Installation

```
pip install .
```

## Interactive view

Run the command with no options:

```
portsage
```

Keys:

| Key            | Action                                        |
|----------------|-----------------------------------------------|
| `↑` / `k`      | move up                                       |
| `↓` / `j`      | move down                                     |
| `/`            | type a filter (PID, name or command line)     |
| `Enter`        | copy the selected PID to the clipboard        |
| `Tab`          | show details of the selected process          |
| `x`            | kill the selected process (asks `y`/`n`)      |
| `q`            | quit                                          |

In filter mode, `Esc` or `Enter` goes back to the list and `Backspace`
removes the last character. In the detail view, `Esc`, `q` or `Tab`
closes it. Status messages, such as the result of a copy or a kill, stay
at the bottom of the screen for two seconds.

## Table output

Pass `--cli` to print a table and exit:

```
portsage --cli
```

Narrow the list down by name or command line (case-insensitive):

```
portsage --cli --filter uvicorn
```

Show only the process listening on a given port:

```
portsage --cli --port 8080
```

Both options can be combined. If no process listens on the port, the
table is empty.

## Using it from Python

```python
from portsage.process import get_all_processes
from portsage.filter import filter_processes_by_name
from portsage.port import parse_lsof_output, get_port_pid_map

processes = get_all_processes()
for proc in filter_processes_by_name(processes, "python"):
    print(proc.pid, proc.name, proc.ports)

print(get_port_pid_map())  # {port: pid, ...}
```

`parse_lsof_output` turns the text printed by `lsof` into a dictionary
mapping each port to the PID that listens on it.

## Running the tests

```
pip install ".[test]"
pytest
```