"""Resolve connection references to live connection objects."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Protocol

from worker_adapter.connections.repository import ConnectionRepository
from worker_adapter.errors import ConfigurationError, ConnectionNotFoundError

LOGGER = logging.getLogger(__name__)


class ConnectionDriver(Protocol):
    def get_connection(self, config: Mapping[str, Any]) -> Any: ...


class Connector:
    """Instantiates connections through the driver registered for their class."""

    def __init__(
        self,
        repository: ConnectionRepository,
        drivers: Optional[Mapping[str, ConnectionDriver]] = None,
    ) -> None:
        self._repository = repository
        self._drivers: Dict[str, ConnectionDriver] = dict(drivers or {})

    def register_driver(self, class_name: str, driver: ConnectionDriver) -> None:
        self._drivers[class_name] = driver

    def get_connection(self, name_or_id: str | int | None) -> Any:
        if name_or_id is None or name_or_id == "":
            raise ConnectionNotFoundError("No connection provided")
        record = self._repository.find(name_or_id)
        if record is None or not record.is_active:
            raise ConnectionNotFoundError(f"Could not find connection {name_or_id}")
        driver = self._drivers.get(record.class_name)
        if driver is None:
            raise ConfigurationError(f"No driver registered for connection class {record.class_name}")
        LOGGER.debug("Opening connection %s via %s", record.name, record.class_name)
        return driver.get_connection(record.config)
