"""Capabilities an action can offer to the gateway."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from worker_adapter.engine.context import ExecutionContext
from worker_adapter.engine.form import FormBuilder
from worker_adapter.engine.request import Request
from worker_adapter.engine.response import HttpResponse


@runtime_checkable
class Executable(Protocol):
    def handle(self, request: Request, configuration: Mapping[str, Any], context: ExecutionContext) -> HttpResponse: ...


@runtime_checkable
class Configurable(Protocol):
    def configure(self, builder: FormBuilder) -> FormBuilder: ...


@runtime_checkable
class CodeLifecycleAware(Protocol):
    def on_create(self, name: str, config: Mapping[str, Any]) -> None: ...

    def on_update(self, name: str, config: Mapping[str, Any]) -> None: ...

    def on_delete(self, name: str, config: Mapping[str, Any]) -> None: ...


@runtime_checkable
class Pingable(Protocol):
    def ping(self, connection: Any) -> bool: ...
