"""HTTP-shaped action results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

HeaderValues = Union[str, Sequence[str]]


@dataclass
class HttpResponse:
    status_code: int = 200
    headers: Dict[str, List[str]] = field(default_factory=dict)
    body: Any = None


class ResponseBuilder:
    """Factory for action responses; normalises header values to lists."""

    def build(
        self,
        status_code: int,
        headers: Optional[Mapping[str, HeaderValues]] = None,
        body: Any = None,
    ) -> HttpResponse:
        normalised: Dict[str, List[str]] = {}
        for name, value in (headers or {}).items():
            normalised[name] = [value] if isinstance(value, str) else list(value)
        return HttpResponse(status_code=status_code, headers=normalised, body=body)
