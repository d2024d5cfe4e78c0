"""Liveness probe for worker connections."""

from __future__ import annotations

import logging
from typing import Any

from worker_adapter.client import WorkerClient

LOGGER = logging.getLogger(__name__)


class HealthProbe:
    """Reports whether a connection is a worker that answers with an API version."""

    def ping(self, connection: Any) -> bool:
        if not isinstance(connection, WorkerClient):
            return False
        try:
            about = connection.get()
        except Exception as exc:  # noqa: BLE001
            LOGGER.info("Worker ping failed: %s", exc)
            return False
        if about is None or not about.api_version:
            LOGGER.info("Worker responded without an API version")
            return False
        return True
