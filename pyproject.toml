[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portsage"
version = "0.1.0"
description = "A terminal tool to monitor processes and their listening ports"
requires-python = ">=3.10"
keywords = ["tui", "process", "port", "monitor", "lsof"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
    "tabulate",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
portsage = "portsage.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["portsage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
