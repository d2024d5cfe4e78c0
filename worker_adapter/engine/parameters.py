"""Read-only action configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional


class Parameters(Mapping):
    """Immutable view on the configuration an action was saved with."""

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Parameters({self._values!r})"
