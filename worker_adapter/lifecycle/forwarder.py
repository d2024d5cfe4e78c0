"""Forward action lifecycle transitions to the code store."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from worker_adapter.errors import ConfigurationError

from .store import CodeStore

LOGGER = logging.getLogger(__name__)


class LifecycleForwarder:
    def __init__(self, store: CodeStore) -> None:
        self._store = store

    @property
    def store(self) -> CodeStore:
        return self._store

    def on_create(self, name: str, config: Mapping[str, Any]) -> None:
        self._store.write(name, self._require_code(config), config)

    def on_update(self, name: str, config: Mapping[str, Any]) -> None:
        self._store.write(name, self._require_code(config), config)

    def on_delete(self, name: str, config: Mapping[str, Any]) -> None:
        self._store.remove(name, config)

    @staticmethod
    def _require_code(config: Mapping[str, Any]) -> str:
        code = config.get("code")
        if not code:
            raise ConfigurationError("No code provided")
        if not isinstance(code, str):
            raise ConfigurationError("Code must be provided as text")
        return code
