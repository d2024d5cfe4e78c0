"""Build the execute envelope sent to workers."""

from __future__ import annotations

import logging
from typing import Optional

from worker_adapter.connections.snapshot import ConnectionSnapshot
from worker_adapter.engine.context import App, ExecutionContext, User
from worker_adapter.engine.request import HttpRequestContext, Request, RequestContext
from worker_adapter.errors import ConfigurationError
from worker_adapter.models import (
    Execute,
    ExecuteContext,
    ExecuteContextApp,
    ExecuteContextUser,
    ExecuteRequest,
    ExecuteRequestContext,
)

LOGGER = logging.getLogger(__name__)


class EnvelopeBuilder:
    """Turns a gateway request and its execution context into an ``Execute`` envelope.

    Arguments and payload are forwarded verbatim; validating them is the
    worker's job. Connections are read from the snapshot on every call.
    """

    def __init__(self, snapshot: ConnectionSnapshot) -> None:
        self._snapshot = snapshot

    def build(self, request: Optional[Request], context: Optional[ExecutionContext]) -> Execute:
        if request is None:
            raise ConfigurationError("No request available to build the execute envelope")
        if context is None:
            raise ConfigurationError("No execution context available to build the execute envelope")

        execute = Execute(
            connections=self._snapshot.snapshot(),
            request=self.build_request(request),
            context=self.build_context(context),
        )
        LOGGER.debug(
            "Built execute envelope action=%s connections=%d",
            execute.context.action,
            len(execute.connections),
        )
        return execute

    def build_request(self, request: Request) -> ExecuteRequest:
        return ExecuteRequest(
            arguments=dict(request.arguments or {}),
            payload=request.payload,
            context=self._build_request_context(request.context),
        )

    def build_context(self, context: ExecutionContext) -> ExecuteContext:
        return ExecuteContext(
            operation_id=context.operation_id,
            base_url=context.base_url or "",
            tenant_id=context.tenant_id,
            action=context.action_name or "",
            app=self._build_app(context.app),
            user=self._build_user(context.user),
        )

    @staticmethod
    def _build_request_context(request_context: Optional[RequestContext]) -> ExecuteRequestContext:
        if request_context is None:
            request_context = RequestContext()
        if not isinstance(request_context, HttpRequestContext):
            return ExecuteRequestContext(type=request_context.type)
        return ExecuteRequestContext(
            type=request_context.type,
            uri_fragments={key: str(value) for key, value in request_context.uri_fragments.items()},
            method=request_context.method,
            path=request_context.path,
            query_parameters={key: str(value) for key, value in request_context.query_parameters.items()},
            headers=request_context.header_lines(),
        )

    @staticmethod
    def _build_app(app: Optional[App]) -> ExecuteContextApp:
        app = app or App()
        return ExecuteContextApp(anonymous=app.anonymous, id=app.id, name=app.name)

    @staticmethod
    def _build_user(user: Optional[User]) -> ExecuteContextUser:
        user = user or User()
        return ExecuteContextUser(
            anonymous=user.anonymous,
            id=user.id,
            plan_id=user.plan_id,
            name=user.name,
            email=user.email,
            points=user.points,
        )
