"""Serialize the active outbound connections into the execute envelope."""

from __future__ import annotations

import base64
import json
import logging
from typing import Dict

from pydantic import ValidationError

from worker_adapter.models import ExecuteConnection

from .repository import ConnectionRecord, ConnectionRepository, ConnectionStatus

LOGGER = logging.getLogger(__name__)


def encode_config(config: Dict) -> str:
    """Encode a connection config as base64 of its JSON form."""

    raw = json.dumps(config, separators=(",", ":"), allow_nan=False)
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_config(encoded: str) -> Dict:
    return json.loads(base64.b64decode(encoded).decode("utf-8"))


class ConnectionSnapshot:
    """Reads active connections fresh on every call; nothing is cached."""

    def __init__(self, repository: ConnectionRepository) -> None:
        self._repository = repository

    def snapshot(self) -> Dict[str, ExecuteConnection]:
        connections: Dict[str, ExecuteConnection] = {}
        for record in self._repository.get_all(status=ConnectionStatus.ACTIVE):
            if not record.is_active:
                continue
            connection = self._serialize(record)
            if connection is not None:
                connections[record.name] = connection
        return connections

    @staticmethod
    def _serialize(record: ConnectionRecord) -> ExecuteConnection | None:
        try:
            return ExecuteConnection(type=record.class_name, config=encode_config(record.config))
        except (TypeError, ValueError, ValidationError) as exc:
            LOGGER.warning("Skipping connection %s: cannot be serialized (%s)", record.name, exc)
            return None
