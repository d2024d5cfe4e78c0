"""Connection driver producing clients for remote workers."""

from __future__ import annotations

from typing import Any, Mapping

from worker_adapter.client import HttpWorkerClient
from worker_adapter.engine.form import FormBuilder, InputElement
from worker_adapter.errors import ConfigurationError
from worker_adapter.health import HealthProbe


class WorkerConnection:
    """Driver for the connection kind that points at a worker endpoint."""

    CLASS_NAME = "worker_adapter.connections.worker.WorkerConnection"

    def __init__(self, *, timeout_seconds: float = 30, probe: HealthProbe | None = None) -> None:
        self._timeout_seconds = timeout_seconds
        self._probe = probe or HealthProbe()

    def get_name(self) -> str:
        return "Worker"

    def get_connection(self, config: Mapping[str, Any]) -> HttpWorkerClient:
        url = config.get("url")
        if not url:
            raise ConfigurationError("Worker connection requires a url")
        return HttpWorkerClient(base_url=str(url), timeout_seconds=self._timeout_seconds)

    def configure(self, builder: FormBuilder) -> FormBuilder:
        return builder.add(
            InputElement("url", "URL", "url", "The URL of the worker, i.e. http://localhost:9090")
        )

    def ping(self, connection: Any) -> bool:
        return self._probe.ping(connection)
