"""FastAPI surface routing HTTP requests to worker actions."""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

import yaml
from fastapi import FastAPI, Request as HttpRequest, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from worker_adapter.bootstrap import ServiceContainer
from worker_adapter.config import AdapterSettings
from worker_adapter.engine import (
    Action,
    ExecutionContext,
    HttpRequestContext,
    HttpResponse,
    Parameters,
    Request,
)
from worker_adapter.errors import ConnectionNotFoundError

from .errors import error_payload, register_error_handlers

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionRoute:
    path: str
    action: str
    variant: str
    configuration: Mapping[str, Any] = field(default_factory=dict)
    methods: tuple[str, ...] = ("GET",)
    operation_id: Optional[str] = None


def load_routes(path: Path) -> List[ActionRoute]:
    """Read route definitions from a YAML file with a top-level ``routes`` list."""

    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict) or not isinstance(raw.get("routes", []), list):
        raise ValueError(f"Route file {path} must contain a 'routes' list")
    routes: List[ActionRoute] = []
    for entry in raw.get("routes", []):
        routes.append(
            ActionRoute(
                path=entry["path"],
                action=entry["action"],
                variant=entry["variant"],
                configuration=dict(entry.get("configuration") or {}),
                methods=tuple(method.upper() for method in entry.get("methods", ["GET"])),
                operation_id=entry.get("operationId"),
            )
        )
    return routes


async def to_gateway_request(request: HttpRequest) -> Request:
    headers: Dict[str, List[str]] = {}
    for raw_name, raw_value in request.headers.raw:
        headers.setdefault(raw_name.decode("latin-1"), []).append(raw_value.decode("latin-1"))
    path_params = {key: str(value) for key, value in request.path_params.items()}
    query: Dict[str, str] = {}
    for name, value in request.query_params.multi_items():
        query[name] = f"{query[name]}, {value}" if name in query else value
    context = HttpRequestContext(
        method=request.method,
        path=request.url.path,
        uri_fragments=path_params,
        query_parameters=query,
        headers=headers,
    )
    return Request(
        arguments={**query, **path_params},
        payload=_decode_payload(await request.body(), request.headers.get("content-type")),
        context=context,
    )


def _decode_payload(body: bytes, content_type: Optional[str]) -> Any:
    if not body:
        return None
    text = body.decode("utf-8", errors="replace")
    if content_type and "json" in content_type.lower():
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            LOGGER.debug("Request body is not valid JSON; forwarding as text")
    return text


def build_execution_context(request: HttpRequest, route: ActionRoute, settings: AdapterSettings) -> ExecutionContext:
    return ExecutionContext(
        base_url=settings.base_url or str(request.base_url).rstrip("/"),
        operation_id=route.operation_id,
        tenant_id=settings.tenant_id,
        action=Action(name=route.action),
    )


def to_http_response(response: HttpResponse) -> Response:
    body = response.body
    if body is None:
        result: Response = Response(status_code=response.status_code)
    elif isinstance(body, (bytes, str)):
        result = Response(content=body, status_code=response.status_code)
    else:
        result = JSONResponse(content=body, status_code=response.status_code)
    for name, values in response.headers.items():
        if not values:
            continue
        result.headers[name] = values[0]
        for value in values[1:]:
            result.headers.append(name, value)
    return result


def _make_endpoint(container: ServiceContainer, route: ActionRoute):
    action = container.action(route.variant)
    parameters = Parameters(dict(route.configuration))

    async def endpoint(request: HttpRequest) -> Response:
        gateway_request = await to_gateway_request(request)
        context = build_execution_context(request, route, container.settings)
        response = await run_in_threadpool(action.handle, gateway_request, parameters, context)
        return to_http_response(response)

    return endpoint


def sync_code(container: ServiceContainer, routes: Iterable[ActionRoute]) -> None:
    """Push the configured code of every route to its code store."""

    for route in routes:
        if not route.configuration.get("code"):
            continue
        action = container.action(route.variant)
        try:
            action.on_update(route.action, Parameters(dict(route.configuration)))
        except Exception:  # noqa: BLE001
            LOGGER.exception("Code sync failed action=%s variant=%s", route.action, route.variant)


def create_app(
    container: ServiceContainer,
    routes: Iterable[ActionRoute] = (),
    *,
    sync_on_startup: bool = False,
) -> FastAPI:
    routes = list(routes)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if sync_on_startup:
            await run_in_threadpool(sync_code, container, routes)
        yield

    app = FastAPI(title="Worker Gateway", lifespan=lifespan)
    register_error_handlers(app)

    @app.get("/_health/{connection}")
    async def connection_health(connection: str) -> JSONResponse:
        try:
            resolved = await run_in_threadpool(container.connector.get_connection, connection)
        except ConnectionNotFoundError as exc:
            return JSONResponse(status_code=404, content=error_payload(str(exc), status_code=404))
        healthy = await run_in_threadpool(container.probe.ping, resolved)
        return JSONResponse(content={"connection": connection, "healthy": healthy})

    for route in routes:
        app.add_api_route(
            route.path,
            _make_endpoint(container, route),
            methods=list(route.methods),
            name=route.operation_id or route.action,
        )
        LOGGER.debug("Mounted action %s (%s) at %s", route.action, route.variant, route.path)

    return app
