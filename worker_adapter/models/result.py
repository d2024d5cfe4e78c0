# coding: utf-8

"""
    Worker Protocol (v1): execute result
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import Field, StrictStr, field_validator

from .base import WireModel


class ResultEvent(WireModel):
    event_name: Optional[StrictStr] = Field(default=None, alias="eventName")
    data: Optional[Any] = None
    __properties: ClassVar[list[str]] = ["eventName", "data"]


class ResultLog(WireModel):
    level: Optional[StrictStr] = None
    message: Optional[StrictStr] = None
    __properties: ClassVar[list[str]] = ["level", "message"]


class ResultHttp(WireModel):
    """
    HTTP response produced by the worker.
    """  # noqa: E501

    status_code: Optional[int] = Field(default=None, alias="statusCode")
    headers: Optional[Dict[str, List[str]]] = None
    body: Optional[Any] = None
    __properties: ClassVar[list[str]] = ["statusCode", "headers", "body"]

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_header_values(cls, value: Optional[Dict[str, Union[str, List[str]]]]):
        if not isinstance(value, dict):
            return value
        return {name: [item] if isinstance(item, str) else item for name, item in value.items()}


class Result(WireModel):
    """
    Everything a worker returns for one execution.
    """  # noqa: E501

    events: Optional[List[ResultEvent]] = None
    logs: Optional[List[ResultLog]] = None
    response: Optional[ResultHttp] = None
    __properties: ClassVar[list[str]] = ["events", "logs", "response"]
