"""Action that runs cached Python code inside the gateway process."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from worker_adapter.engine.connector import Connector
from worker_adapter.engine.context import ExecutionContext
from worker_adapter.engine.dispatcher import EventDispatcherLike
from worker_adapter.engine.form import FormBuilder, TextAreaElement
from worker_adapter.engine.request import Request
from worker_adapter.engine.response import HttpResponse, ResponseBuilder
from worker_adapter.errors import CodeCacheError
from worker_adapter.execution import EnvelopeBuilder
from worker_adapter.lifecycle import LifecycleForwarder, LocalCodeCache

from .variants import WorkerVariant

LOGGER = logging.getLogger(__name__)


class LocalWorkerAction:
    """Executes the module-level ``handle`` callable of the cached action file.

    The callable receives the same capabilities a remote worker reaches through
    the envelope: ``handle(request, context, connector, response, dispatcher, logger)``.
    """

    def __init__(
        self,
        variant: WorkerVariant,
        *,
        cache: LocalCodeCache,
        connector: Connector,
        envelope_builder: EnvelopeBuilder,
        response_builder: ResponseBuilder,
        dispatcher: EventDispatcherLike,
        logger: logging.Logger,
        lifecycle: LifecycleForwarder,
    ) -> None:
        self._variant = variant
        self._cache = cache
        self._connector = connector
        self._envelope_builder = envelope_builder
        self._response_builder = response_builder
        self._dispatcher = dispatcher
        self._logger = logger
        self._lifecycle = lifecycle

    @property
    def variant(self) -> WorkerVariant:
        return self._variant

    def get_name(self) -> str:
        return self._variant.name

    def handle(self, request: Request, configuration: Mapping[str, Any], context: ExecutionContext) -> HttpResponse:
        action = context.action_name if context is not None else None
        if not action:
            raise CodeCacheError("No action name available")

        path = self._cache.resolve_for_execution(action, configuration)
        handler = self._cache.load_handler(path)
        execute = self._envelope_builder.build(request, context)

        LOGGER.debug("Executing local action %s from %s", action, path)
        result = handler(
            execute.request,
            execute.context,
            self._connector,
            self._response_builder,
            self._dispatcher,
            self._logger,
        )
        if isinstance(result, HttpResponse):
            return result
        return self._response_builder.build(200, {}, result)

    def configure(self, builder: FormBuilder) -> FormBuilder:
        return builder.add(TextAreaElement("code", "Code", self._variant.language, "The Python code of this action"))

    def on_create(self, name: str, config: Mapping[str, Any]) -> None:
        self._lifecycle.on_create(name, config)

    def on_update(self, name: str, config: Mapping[str, Any]) -> None:
        self._lifecycle.on_update(name, config)

    def on_delete(self, name: str, config: Mapping[str, Any]) -> None:
        self._lifecycle.on_delete(name, config)
