"""Action that executes its code on a remote worker."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from worker_adapter.client import WorkerClient
from worker_adapter.engine.connector import Connector
from worker_adapter.engine.context import ExecutionContext
from worker_adapter.engine.form import ConnectionElement, FormBuilder, TextAreaElement
from worker_adapter.engine.request import Request
from worker_adapter.engine.response import HttpResponse
from worker_adapter.errors import ConfigurationError
from worker_adapter.execution import EnvelopeBuilder, ResponseMerger
from worker_adapter.health import HealthProbe
from worker_adapter.lifecycle import LifecycleForwarder

from .variants import WorkerVariant

LOGGER = logging.getLogger(__name__)


class WorkerAction:
    """Sends each request to the configured worker and merges its result."""

    def __init__(
        self,
        variant: WorkerVariant,
        *,
        connector: Connector,
        envelope_builder: EnvelopeBuilder,
        merger: ResponseMerger,
        lifecycle: LifecycleForwarder,
        probe: HealthProbe,
    ) -> None:
        self._variant = variant
        self._connector = connector
        self._envelope_builder = envelope_builder
        self._merger = merger
        self._lifecycle = lifecycle
        self._probe = probe

    @property
    def variant(self) -> WorkerVariant:
        return self._variant

    def get_name(self) -> str:
        return self._variant.name

    def handle(self, request: Request, configuration: Mapping[str, Any], context: ExecutionContext) -> HttpResponse:
        client = self._connector.get_connection(configuration.get("worker"))
        if not isinstance(client, WorkerClient):
            raise ConfigurationError("Provided an invalid worker connection")

        action = context.action_name if context is not None else None
        execute = self._envelope_builder.build(request, context)
        LOGGER.debug("Executing action %s on %s worker", action, self._variant.language)
        result = client.execute(action or "", execute)
        return self._merger.merge(result)

    def configure(self, builder: FormBuilder) -> FormBuilder:
        builder.add(ConnectionElement("worker", "Worker", "The worker connection"))
        builder.add(TextAreaElement("code", "Code", self._variant.language, ""))
        return builder

    def on_create(self, name: str, config: Mapping[str, Any]) -> None:
        self._lifecycle.on_create(name, config)

    def on_update(self, name: str, config: Mapping[str, Any]) -> None:
        self._lifecycle.on_update(name, config)

    def on_delete(self, name: str, config: Mapping[str, Any]) -> None:
        self._lifecycle.on_delete(name, config)

    def ping(self, connection: Any) -> bool:
        return self._probe.ping(connection)
