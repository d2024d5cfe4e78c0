import logging
from typing import Any, List, Optional, Tuple

import pytest

from worker_adapter.bootstrap import ServiceContainer
from worker_adapter.client import WorkerClient
from worker_adapter.config import AdapterSettings
from worker_adapter.connections import ConnectionRecord, ConnectionStatus, InMemoryConnectionRepository
from worker_adapter.models import About, Execute, Result, Update

FAKE_WORKER_CLASS = "tests.FakeWorker"


class FakeWorkerClient(WorkerClient):
    def __init__(
        self,
        result: Optional[Result] = None,
        about: Optional[About] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.result = result or Result()
        self.about = about if about is not None else About(api_version="1.0.0", language="python")
        self.error = error
        self.calls: List[Tuple[Any, ...]] = []
        self.code: dict[str, str] = {}

    def execute(self, action: str, execute: Execute) -> Result:
        self.calls.append(("execute", action, execute))
        if self.error:
            raise self.error
        return self.result

    def put(self, action: str, update: Update) -> None:
        self.calls.append(("put", action, update.code))
        if self.error:
            raise self.error
        self.code[action] = update.code

    def delete(self, action: str) -> None:
        self.calls.append(("delete", action))
        if self.error:
            raise self.error
        self.code.pop(action, None)

    def get(self) -> About:
        if self.error:
            raise self.error
        return self.about


class StaticDriver:
    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def get_connection(self, config):
        return self.connection


class RecordingDispatcher:
    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def dispatch(self, event_name: str, payload: Any) -> None:
        self.events.append((event_name, payload))


@pytest.fixture
def worker_client() -> FakeWorkerClient:
    return FakeWorkerClient()


@pytest.fixture
def repository() -> InMemoryConnectionRepository:
    return InMemoryConnectionRepository(
        [
            ConnectionRecord(name="db", class_name="SqlConnection", config={"dsn": "sqlite://"}),
            ConnectionRecord(name="cache", class_name="RedisConnection", config={"host": "localhost"}),
            ConnectionRecord(name="worker", class_name=FAKE_WORKER_CLASS, config={"url": "http://worker"}),
            ConnectionRecord(
                name="legacy",
                class_name="SqlConnection",
                config={"dsn": "mysql://"},
                status=ConnectionStatus.DELETED,
            ),
        ]
    )


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def settings(tmp_path) -> AdapterSettings:
    return AdapterSettings(
        cache_dir=tmp_path / "cache",
        database_url="sqlite:///:memory:",
        tenant_id="tenant-1",
    )


@pytest.fixture
def container(settings, repository, dispatcher, worker_client) -> ServiceContainer:
    container = ServiceContainer.create(
        settings,
        repository,
        dispatcher=dispatcher,
        logger=logging.getLogger("worker_adapter.tests.worker"),
    )
    container.connector.register_driver(FAKE_WORKER_CLASS, StaticDriver(worker_client))
    container.connector.register_driver("SqlConnection", StaticDriver(object()))
    return container
