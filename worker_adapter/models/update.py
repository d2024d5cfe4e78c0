# coding: utf-8

"""
    Worker Protocol (v1): code update
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import StrictStr

from .base import WireModel


class Update(WireModel):
    """
    Full source code of one action.
    """  # noqa: E501

    code: StrictStr
    __properties: ClassVar[list[str]] = ["code"]
