"""Service wiring for the worker actions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from worker_adapter.actions import VARIANTS, LocalWorkerAction, WorkerAction, WorkerVariant
from worker_adapter.config import AdapterSettings, get_settings
from worker_adapter.connections import ConnectionRepository, ConnectionSnapshot, SqlConnectionRepository
from worker_adapter.connections.db import create_session_factory
from worker_adapter.connections.worker import WorkerConnection
from worker_adapter.engine import Connector, EventDispatcher, ResponseBuilder
from worker_adapter.engine.dispatcher import EventDispatcherLike
from worker_adapter.execution import EnvelopeBuilder, ResponseMerger
from worker_adapter.health import HealthProbe
from worker_adapter.lifecycle import LifecycleForwarder, LocalCodeCache, LocalFileCodeStore, RemoteCodeStore

LOGGER = logging.getLogger(__name__)

WORKER_LOGGER_NAME = "worker_adapter.worker"

WorkerActionLike = WorkerAction | LocalWorkerAction


@dataclass
class ServiceContainer:
    settings: AdapterSettings
    repository: ConnectionRepository
    connector: Connector
    snapshot: ConnectionSnapshot
    envelope_builder: EnvelopeBuilder
    response_builder: ResponseBuilder
    dispatcher: EventDispatcherLike
    logger: logging.Logger
    cache: LocalCodeCache
    probe: HealthProbe
    actions: Dict[str, WorkerActionLike] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        settings: AdapterSettings,
        repository: ConnectionRepository,
        *,
        dispatcher: Optional[EventDispatcherLike] = None,
        logger: Optional[logging.Logger] = None,
    ) -> ServiceContainer:
        """Wire every collaborator explicitly and register one action per variant."""

        probe = HealthProbe()
        connector = Connector(repository)
        connector.register_driver(
            WorkerConnection.CLASS_NAME,
            WorkerConnection(timeout_seconds=settings.worker_timeout_seconds, probe=probe),
        )
        snapshot = ConnectionSnapshot(repository)
        container = cls(
            settings=settings,
            repository=repository,
            connector=connector,
            snapshot=snapshot,
            envelope_builder=EnvelopeBuilder(snapshot),
            response_builder=ResponseBuilder(),
            dispatcher=dispatcher or EventDispatcher(),
            logger=logger or logging.getLogger(WORKER_LOGGER_NAME),
            cache=LocalCodeCache(settings.cache_dir),
            probe=probe,
        )
        for variant in VARIANTS.values():
            container.actions[variant.name] = container.build_action(variant)
        LOGGER.debug("Registered worker actions: %s", ", ".join(container.actions))
        return container

    @classmethod
    def from_settings(cls, settings: Optional[AdapterSettings] = None) -> ServiceContainer:
        settings = settings or get_settings()
        repository = SqlConnectionRepository(create_session_factory(settings.database_url))
        return cls.create(settings, repository)

    def build_action(self, variant: WorkerVariant) -> WorkerActionLike:
        if variant.is_local:
            return LocalWorkerAction(
                variant,
                cache=self.cache,
                connector=self.connector,
                envelope_builder=self.envelope_builder,
                response_builder=self.response_builder,
                dispatcher=self.dispatcher,
                logger=self.logger,
                lifecycle=LifecycleForwarder(LocalFileCodeStore(self.cache)),
            )
        return WorkerAction(
            variant,
            connector=self.connector,
            envelope_builder=self.envelope_builder,
            merger=ResponseMerger(self.dispatcher, self.logger, self.response_builder),
            lifecycle=LifecycleForwarder(RemoteCodeStore(self.connector)),
            probe=self.probe,
        )

    def action(self, name: str) -> WorkerActionLike:
        try:
            return self.actions[name]
        except KeyError as exc:
            raise KeyError(f"Unknown worker action: {name}") from exc
