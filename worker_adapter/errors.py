"""Error taxonomy shared by the worker adapter components."""

from __future__ import annotations

from typing import Optional


class WorkerAdapterError(Exception):
    """Base error for worker adapter operations."""


class ConfigurationError(WorkerAdapterError):
    """Raised when a required configuration value is missing or has the wrong kind."""


class ConnectionNotFoundError(ConfigurationError):
    """Raised when the connector cannot resolve a connection reference."""


class WorkerConnectionError(WorkerAdapterError, ConnectionError):
    """Raised when the RPC transport to a worker fails."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CodeCacheError(WorkerAdapterError, RuntimeError):
    """Raised when the local code cache is misconfigured or an artifact is unusable."""


__all__ = [
    "WorkerAdapterError",
    "ConfigurationError",
    "ConnectionNotFoundError",
    "WorkerConnectionError",
    "CodeCacheError",
]
