"""Configuration form schema declared by actions and connections."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ConnectionElement:
    name: str
    title: str
    help: Optional[str] = None
    element: str = "connection"


@dataclass(frozen=True)
class TextAreaElement:
    name: str
    title: str
    mode: str
    help: Optional[str] = None
    element: str = "textarea"


@dataclass(frozen=True)
class InputElement:
    name: str
    title: str
    type: str = "text"
    help: Optional[str] = None
    element: str = "input"


FormElement = ConnectionElement | TextAreaElement | InputElement


class FormBuilder:
    def __init__(self) -> None:
        self._elements: List[FormElement] = []

    def add(self, element: FormElement) -> "FormBuilder":
        self._elements.append(element)
        return self

    @property
    def elements(self) -> List[FormElement]:
        return list(self._elements)

    def names(self) -> List[str]:
        return [element.name for element in self._elements]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "element": [
                {key: value for key, value in asdict(element).items() if value is not None}
                for element in self._elements
            ]
        }
