from worker_adapter.connections import (
    ConnectionRecord,
    ConnectionSnapshot,
    ConnectionStatus,
    SqlConnectionRepository,
    decode_config,
)
from worker_adapter.connections.db import create_session_factory


def _repository() -> SqlConnectionRepository:
    repository = SqlConnectionRepository(create_session_factory("sqlite:///:memory:"))
    repository.add(ConnectionRecord(name="db", class_name="SqlConnection", config={"dsn": "sqlite://"}))
    repository.add(ConnectionRecord(name="cache", class_name="RedisConnection", config={"host": "redis"}))
    repository.add(
        ConnectionRecord(
            name="old",
            class_name="SqlConnection",
            config={},
            status=ConnectionStatus.DELETED,
        )
    )
    return repository


def test_get_all_filters_by_status():
    repository = _repository()

    assert [r.name for r in repository.get_all()] == ["db", "cache", "old"]
    assert [r.name for r in repository.get_all(status=ConnectionStatus.ACTIVE)] == ["db", "cache"]


def test_find_by_name_and_id():
    repository = _repository()

    by_name = repository.find("cache")
    assert by_name is not None
    assert by_name.config == {"host": "redis"}
    assert repository.find(by_name.id).name == "cache"
    assert repository.find(str(by_name.id)).name == "cache"
    assert repository.find("missing") is None


def test_snapshot_over_sql_repository():
    repository = _repository()
    repository.set_status("cache", ConnectionStatus.DELETED)

    snapshot = ConnectionSnapshot(repository).snapshot()

    assert list(snapshot) == ["db"]
    assert decode_config(snapshot["db"].config) == {"dsn": "sqlite://"}
