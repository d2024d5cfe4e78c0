"""Contract of the RPC peer that runs action code."""

from __future__ import annotations

from abc import ABC, abstractmethod

from worker_adapter.models import About, Execute, Result, Update


class WorkerClient(ABC):
    """Blocking client for one worker endpoint.

    Every method raises ``WorkerConnectionError`` when the transport fails.
    Implementations apply their own timeout and never retry.
    """

    @abstractmethod
    def execute(self, action: str, execute: Execute) -> Result:
        """Run the action on the worker and wait for its result."""

    @abstractmethod
    def put(self, action: str, update: Update) -> None:
        """Upsert the source code of an action."""

    @abstractmethod
    def delete(self, action: str) -> None:
        """Remove an action; removing an unknown action is not an error."""

    @abstractmethod
    def get(self) -> About:
        """Return worker metadata used for health checks."""
