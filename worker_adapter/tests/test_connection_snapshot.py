import base64
import json

from worker_adapter.connections import (
    ConnectionRecord,
    ConnectionSnapshot,
    ConnectionStatus,
    InMemoryConnectionRepository,
)


def test_snapshot_contains_only_active_connections(repository):
    snapshot = ConnectionSnapshot(repository).snapshot()

    assert set(snapshot) == {"db", "cache", "worker"}
    assert "legacy" not in snapshot


def test_config_is_base64_json():
    repository = InMemoryConnectionRepository(
        [ConnectionRecord(name="db", class_name="SqlConnection", config={"host": "db", "port": 5432})]
    )

    snapshot = ConnectionSnapshot(repository).snapshot()

    decoded = json.loads(base64.b64decode(snapshot["db"].config))
    assert decoded == {"host": "db", "port": 5432}


def test_unencodable_config_is_skipped():
    repository = InMemoryConnectionRepository(
        [
            ConnectionRecord(name="broken", class_name="SqlConnection", config={"handle": object()}),
            ConnectionRecord(name="nan", class_name="SqlConnection", config={"ratio": float("nan")}),
            ConnectionRecord(name="ok", class_name="RedisConnection", config={}),
        ]
    )

    snapshot = ConnectionSnapshot(repository).snapshot()

    assert list(snapshot) == ["ok"]


def test_empty_repository_yields_empty_snapshot():
    assert ConnectionSnapshot(InMemoryConnectionRepository()).snapshot() == {}


def test_snapshot_ignores_inactive_records_returned_by_repository():
    class LeakyRepository(InMemoryConnectionRepository):
        def get_all(self, status=None):
            return list(self._records)

    repository = LeakyRepository(
        [
            ConnectionRecord(name="on", class_name="SqlConnection"),
            ConnectionRecord(name="off", class_name="SqlConnection", status=ConnectionStatus.DELETED),
        ]
    )

    assert list(ConnectionSnapshot(repository).snapshot()) == ["on"]


def test_record_with_invalid_class_name_is_skipped():
    repository = InMemoryConnectionRepository(
        [
            ConnectionRecord(name="odd", class_name=None, config={}),
            ConnectionRecord(name="ok", class_name="SqlConnection", config={}),
        ]
    )

    assert list(ConnectionSnapshot(repository).snapshot()) == ["ok"]
