"""Monitor processes and the TCP ports they listen on."""

__version__ = "0.1.0"