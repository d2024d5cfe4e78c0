"""Storage of outbound connection configuration."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .db import ConnectionRow

LOGGER = logging.getLogger(__name__)


class ConnectionStatus(IntEnum):
    DELETED = 0
    ACTIVE = 1


@dataclass
class ConnectionRecord:
    name: str
    class_name: str
    config: Dict[str, Any] = field(default_factory=dict)
    status: ConnectionStatus = ConnectionStatus.ACTIVE
    id: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.status == ConnectionStatus.ACTIVE


class ConnectionRepository(ABC):
    """Read access to stored connections."""

    @abstractmethod
    def get_all(self, status: Optional[ConnectionStatus] = None) -> List[ConnectionRecord]:
        """Return connections in storage order, optionally filtered by status."""

    @abstractmethod
    def find(self, name_or_id: str | int) -> Optional[ConnectionRecord]:
        """Look up a connection by name or numeric id."""


class InMemoryConnectionRepository(ConnectionRepository):
    def __init__(self, records: Iterable[ConnectionRecord] = ()) -> None:
        self._records: List[ConnectionRecord] = []
        for record in records:
            self.add(record)

    def add(self, record: ConnectionRecord) -> ConnectionRecord:
        if record.id is None:
            record.id = len(self._records) + 1
        self._records.append(record)
        return record

    def set_status(self, name: str, status: ConnectionStatus) -> None:
        record = self.find(name)
        if record is None:
            raise KeyError(f"Connection not found: {name}")
        record.status = status

    def get_all(self, status: Optional[ConnectionStatus] = None) -> List[ConnectionRecord]:
        return [record for record in self._records if status is None or record.status == status]

    def find(self, name_or_id: str | int) -> Optional[ConnectionRecord]:
        for record in self._records:
            if record.name == name_or_id or (record.id is not None and str(record.id) == str(name_or_id)):
                return record
        return None


def _record_from_row(row: ConnectionRow) -> ConnectionRecord:
    config: Dict[str, Any] = {}
    if row.config:
        try:
            config = json.loads(row.config)
        except json.JSONDecodeError:
            LOGGER.warning("Connection %s has an invalid stored config; using empty config", row.name)
    return ConnectionRecord(
        id=row.id,
        name=row.name,
        class_name=row.class_name,
        config=config,
        status=ConnectionStatus(row.status),
    )


class SqlConnectionRepository(ConnectionRepository):
    """Connections stored in a relational table via SQLAlchemy."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def get_all(self, status: Optional[ConnectionStatus] = None) -> List[ConnectionRecord]:
        stmt = select(ConnectionRow).order_by(ConnectionRow.id)
        if status is not None:
            stmt = stmt.where(ConnectionRow.status == int(status))
        with self._session_factory() as session:
            rows = session.execute(stmt).scalars().all()
            return [_record_from_row(row) for row in rows]

    def find(self, name_or_id: str | int) -> Optional[ConnectionRecord]:
        with self._session_factory() as session:
            row = self._load(session, name_or_id)
            return _record_from_row(row) if row else None

    def add(self, record: ConnectionRecord) -> ConnectionRecord:
        with self._session_factory() as session:
            row = ConnectionRow(
                name=record.name,
                class_name=record.class_name,
                config=json.dumps(record.config),
                status=int(record.status),
            )
            session.add(row)
            session.commit()
            record.id = row.id
        return record

    def set_status(self, name: str, status: ConnectionStatus) -> None:
        with self._session_factory() as session:
            row = self._load(session, name)
            if row is None:
                raise KeyError(f"Connection not found: {name}")
            row.status = int(status)
            session.commit()

    @staticmethod
    def _load(session: Session, name_or_id: str | int) -> Optional[ConnectionRow]:
        if isinstance(name_or_id, int) or str(name_or_id).isdigit():
            row = session.get(ConnectionRow, int(name_or_id))
            if row is not None:
                return row
        stmt = select(ConnectionRow).where(ConnectionRow.name == str(name_or_id))
        return session.execute(stmt).scalar_one_or_none()
