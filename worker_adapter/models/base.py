# coding: utf-8

"""
    Worker Protocol (v1): shared serialization behaviour
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel
from typing_extensions import Self


class WireModel(BaseModel):
    """Base for protocol models; camelCase on the wire, snake_case in Python."""

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, json_str: str) -> Self:
        return cls.model_validate_json(json_str)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        if obj is None:
            return None
        return cls.model_validate(obj)
