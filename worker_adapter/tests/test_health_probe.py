from worker_adapter.errors import WorkerConnectionError
from worker_adapter.health import HealthProbe
from worker_adapter.models import About


def test_ping_with_api_version(worker_client):
    assert HealthProbe().ping(worker_client) is True


def test_ping_rejects_non_worker_connections():
    probe = HealthProbe()

    assert probe.ping(object()) is False
    assert probe.ping(None) is False
    assert probe.ping("http://worker") is False


def test_ping_without_api_version(worker_client):
    probe = HealthProbe()

    worker_client.about = About(api_version=None, language="php")
    assert probe.ping(worker_client) is False

    worker_client.about = About(api_version="")
    assert probe.ping(worker_client) is False


def test_ping_never_raises(worker_client):
    probe = HealthProbe()

    worker_client.error = WorkerConnectionError("timed out")
    assert probe.ping(worker_client) is False

    worker_client.error = ValueError("garbage")
    assert probe.ping(worker_client) is False


def test_action_ping_delegates_to_probe(container, worker_client):
    assert container.action("Worker-Python").ping(worker_client) is True
    assert container.action("Worker-Java").ping(object()) is False
