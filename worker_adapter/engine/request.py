"""Request objects handed to actions by the gateway."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RequestContext:
    """Origin of a request which carries no transport specific data."""

    @property
    def type(self) -> str:
        return type(self).__name__


@dataclass
class HttpRequestContext(RequestContext):
    method: str = "GET"
    path: str = "/"
    uri_fragments: Dict[str, str] = field(default_factory=dict)
    query_parameters: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, List[str]] = field(default_factory=dict)

    def header_lines(self) -> Dict[str, str]:
        return {key: ", ".join(values) for key, values in self.headers.items()}


@dataclass
class RpcRequestContext(RequestContext):
    method: Optional[str] = None


@dataclass
class CliRequestContext(RequestContext):
    command: Optional[str] = None


@dataclass
class Request:
    arguments: Dict[str, Any] = field(default_factory=dict)
    payload: Any = None
    context: RequestContext = field(default_factory=RequestContext)

    def get(self, name: str, default: Any = None) -> Any:
        return self.arguments.get(name, default)
