"""Fold a worker result back into the gateway's event bus, logger and response."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from worker_adapter.engine.dispatcher import EventDispatcherLike
from worker_adapter.engine.response import HttpResponse, ResponseBuilder
from worker_adapter.models import Result, ResultEvent, ResultLog

LOGGER = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = 200

# PSR-3 level names used by the worker runtimes
LOG_LEVELS: Dict[str, int] = {
    "emergency": logging.CRITICAL,
    "alert": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "notice": logging.INFO,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def resolve_log_level(level: str) -> int:
    resolved = LOG_LEVELS.get(level.strip().lower())
    if resolved is None:
        LOGGER.debug("Unknown worker log level %r; using INFO", level)
        return logging.INFO
    return resolved


class ResponseMerger:
    """Applies the side effects of a worker result, then builds the response.

    Events are dispatched first, then log lines are emitted, and only then is
    the response constructed. Entries missing either field are dropped.
    """

    def __init__(
        self,
        dispatcher: EventDispatcherLike,
        logger: logging.Logger,
        response_builder: ResponseBuilder,
    ) -> None:
        self._dispatcher = dispatcher
        self._logger = logger
        self._response_builder = response_builder

    def merge(self, result: Result) -> HttpResponse:
        self.dispatch_events(result.events)
        self.emit_logs(result.logs)
        return self.build_response(result)

    def dispatch_events(self, events: Optional[List[ResultEvent]]) -> int:
        dispatched = 0
        for event in events or ():
            if event.event_name is None or event.data is None:
                continue
            self._dispatcher.dispatch(event.event_name, event.data)
            dispatched += 1
        return dispatched

    def emit_logs(self, logs: Optional[List[ResultLog]]) -> int:
        emitted = 0
        for entry in logs or ():
            if entry.level is None or entry.message is None:
                continue
            self._logger.log(resolve_log_level(entry.level), entry.message)
            emitted += 1
        return emitted

    def build_response(self, result: Result) -> HttpResponse:
        http = result.response
        if http is None:
            return self._response_builder.build(DEFAULT_STATUS_CODE, {}, None)
        status_code = http.status_code if http.status_code is not None else DEFAULT_STATUS_CODE
        headers = http.headers if http.headers is not None else {}
        return self._response_builder.build(status_code, headers, http.body)
