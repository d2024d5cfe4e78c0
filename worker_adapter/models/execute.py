# coding: utf-8

"""
    Worker Protocol (v1): execute envelope
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from .base import WireModel


class ExecuteConnection(WireModel):
    """
    Connection handed to the worker so it can open its own client.
    """  # noqa: E501

    type: StrictStr = Field(description="Class identifier of the connection driver.")
    config: StrictStr = Field(description="Base64 encoded JSON connection config.")
    __properties: ClassVar[list[str]] = ["type", "config"]


class ExecuteRequestContext(WireModel):
    """
    Origin of the request; HTTP fields are only present for HTTP requests.
    """  # noqa: E501

    type: StrictStr = Field(description="Kind of request context.")
    uri_fragments: Optional[Dict[str, StrictStr]] = Field(default=None, alias="uriFragments")
    method: Optional[StrictStr] = None
    path: Optional[StrictStr] = None
    query_parameters: Optional[Dict[str, StrictStr]] = Field(default=None, alias="queryParameters")
    headers: Optional[Dict[str, StrictStr]] = None
    __properties: ClassVar[list[str]] = ["type", "uriFragments", "method", "path", "queryParameters", "headers"]


class ExecuteRequest(WireModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)
    payload: Optional[Any] = None
    context: ExecuteRequestContext
    __properties: ClassVar[list[str]] = ["arguments", "payload", "context"]


class ExecuteContextApp(WireModel):
    anonymous: StrictBool = True
    id: StrictInt = 0
    name: StrictStr = ""
    __properties: ClassVar[list[str]] = ["anonymous", "id", "name"]


class ExecuteContextUser(WireModel):
    anonymous: StrictBool = True
    id: StrictInt = 0
    plan_id: StrictInt = Field(default=0, alias="planId")
    name: StrictStr = ""
    email: Optional[StrictStr] = None
    points: StrictInt = 0
    __properties: ClassVar[list[str]] = ["anonymous", "id", "planId", "name", "email", "points"]


class ExecuteContext(WireModel):
    """
    Identity and routing information of the current execution.
    """  # noqa: E501

    operation_id: Optional[StrictStr] = Field(default=None, alias="operationId")
    base_url: StrictStr = Field(alias="baseUrl")
    tenant_id: Optional[StrictStr] = Field(default=None, alias="tenantId")
    action: Optional[StrictStr] = None
    app: ExecuteContextApp
    user: ExecuteContextUser
    __properties: ClassVar[list[str]] = ["operationId", "baseUrl", "tenantId", "action", "app", "user"]


class Execute(WireModel):
    """
    Envelope sent to a worker for a single action execution.
    """  # noqa: E501

    connections: Dict[str, ExecuteConnection] = Field(default_factory=dict)
    request: ExecuteRequest
    context: ExecuteContext
    __properties: ClassVar[list[str]] = ["connections", "request", "context"]
