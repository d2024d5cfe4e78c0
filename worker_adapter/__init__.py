"""Execute envelope protocol between an API gateway and language workers."""

__version__ = "0.1.0"
