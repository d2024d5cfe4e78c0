import pytest

from worker_adapter.engine import Parameters
from worker_adapter.errors import ConfigurationError, WorkerConnectionError


def _config(**values) -> Parameters:
    return Parameters({"worker": "worker", **values})


def test_create_and_update_push_code(container, worker_client):
    action = container.action("Worker-Python")

    action.on_create("items.get", _config(code="def handle(): pass"))
    action.on_update("items.get", _config(code="def handle(): return 1"))

    assert worker_client.calls == [
        ("put", "items.get", "def handle(): pass"),
        ("put", "items.get", "def handle(): return 1"),
    ]
    assert worker_client.code == {"items.get": "def handle(): return 1"}


def test_delete_removes_code(container, worker_client):
    action = container.action("Worker-Javascript")
    action.on_create("items.get", _config(code="module.exports = () => {}"))

    action.on_delete("items.get", _config())

    assert worker_client.code == {}
    assert worker_client.calls[-1] == ("delete", "items.get")


def test_delete_then_create_equals_single_create(container, worker_client):
    action = container.action("Worker-PHP")
    action.on_create("items.get", _config(code="<?php return 1;"))
    expected = dict(worker_client.code)

    action.on_delete("items.get", _config())
    action.on_create("items.get", _config(code="<?php return 1;"))

    assert worker_client.code == expected


@pytest.mark.parametrize("config", [{"worker": "worker"}, {"worker": "worker", "code": ""}])
def test_missing_code_fails(container, worker_client, config):
    action = container.action("Worker-Java")

    with pytest.raises(ConfigurationError, match="No code provided"):
        action.on_create("items.get", Parameters(config))
    with pytest.raises(ConfigurationError):
        action.on_update("items.get", Parameters(config))
    assert worker_client.calls == []


def test_non_worker_connection_is_a_silent_noop(container, worker_client):
    action = container.action("Worker-Python")
    config = Parameters({"worker": "db", "code": "def handle(): pass"})

    action.on_create("items.get", config)
    action.on_update("items.get", config)
    action.on_delete("items.get", config)

    assert worker_client.calls == []


def test_unresolvable_connection_is_a_silent_noop(container, worker_client):
    action = container.action("Worker-Python")

    action.on_create("items.get", Parameters({"worker": "missing", "code": "x = 1"}))
    action.on_delete("items.get", Parameters({"worker": "legacy"}))
    action.on_delete("items.get", Parameters({}))

    assert worker_client.calls == []


def test_transport_failure_on_worker_propagates(container, worker_client):
    worker_client.error = WorkerConnectionError("connection refused")
    action = container.action("Worker-Python")

    with pytest.raises(WorkerConnectionError):
        action.on_create("items.get", _config(code="x = 1"))
