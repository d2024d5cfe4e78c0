# coding: utf-8

"""
    Worker Protocol (v1): worker introspection
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field, StrictBool, StrictStr

from .base import WireModel


class About(WireModel):
    api_version: Optional[StrictStr] = Field(default=None, alias="apiVersion")
    language: Optional[StrictStr] = None
    __properties: ClassVar[list[str]] = ["apiVersion", "language"]


class Message(WireModel):
    """
    Acknowledgement returned for code updates and deletes.
    """  # noqa: E501

    success: Optional[StrictBool] = None
    message: Optional[StrictStr] = None
    __properties: ClassVar[list[str]] = ["success", "message"]
