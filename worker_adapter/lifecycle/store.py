"""Destinations for action source code."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from worker_adapter.client import WorkerClient
from worker_adapter.engine.connector import Connector
from worker_adapter.errors import ConfigurationError, WorkerConnectionError
from worker_adapter.models import Update

from .local_cache import LocalCodeCache

LOGGER = logging.getLogger(__name__)


class CodeStore(ABC):
    @abstractmethod
    def write(self, name: str, code: str, config: Mapping[str, Any]) -> None:
        """Store the code of an action, replacing any previous version."""

    @abstractmethod
    def remove(self, name: str, config: Mapping[str, Any]) -> None:
        """Drop the code of an action; unknown actions are ignored."""


class RemoteCodeStore(CodeStore):
    """Pushes code to the worker referenced by the ``worker`` config field.

    A reference that does not resolve to a worker client turns every call
    into a no-op so actions can be authored against other connections.
    """

    def __init__(self, connector: Connector) -> None:
        self._connector = connector

    def write(self, name: str, code: str, config: Mapping[str, Any]) -> None:
        client = self._resolve_client(config)
        if client is None:
            return
        client.put(name, Update(code=code))
        LOGGER.info("Uploaded code of action %s to worker", name)

    def remove(self, name: str, config: Mapping[str, Any]) -> None:
        client = self._resolve_client(config)
        if client is None:
            return
        client.delete(name)
        LOGGER.info("Deleted action %s from worker", name)

    def _resolve_client(self, config: Mapping[str, Any]) -> Optional[WorkerClient]:
        reference = config.get("worker")
        try:
            connection = self._connector.get_connection(reference)
        except (ConfigurationError, WorkerConnectionError) as exc:
            LOGGER.debug("Skipping code sync, worker %r not resolvable: %s", reference, exc)
            return None
        if not isinstance(connection, WorkerClient):
            LOGGER.debug("Skipping code sync, connection %r is not a worker", reference)
            return None
        return connection


class LocalFileCodeStore(CodeStore):
    def __init__(self, cache: LocalCodeCache) -> None:
        self._cache = cache

    @property
    def cache(self) -> LocalCodeCache:
        return self._cache

    def write(self, name: str, code: str, config: Mapping[str, Any]) -> None:
        self._cache.write(name, code)

    def remove(self, name: str, config: Mapping[str, Any]) -> None:
        self._cache.remove(name)
