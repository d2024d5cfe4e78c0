import logging

from worker_adapter.engine import ResponseBuilder
from worker_adapter.execution import ResponseMerger, resolve_log_level
from worker_adapter.models import Result


def _merger(dispatcher, logger_name="worker_adapter.tests.merger") -> ResponseMerger:
    return ResponseMerger(dispatcher, logging.getLogger(logger_name), ResponseBuilder())


def test_result_without_response_block_defaults(dispatcher):
    response = _merger(dispatcher).merge(Result())

    assert response.status_code == 200
    assert response.headers == {}
    assert response.body is None
    assert dispatcher.events == []


def test_worker_scenario_404_with_event(dispatcher):
    result = Result.from_dict(
        {
            "events": [{"eventName": "item.viewed", "data": {"id": 5}}],
            "logs": [],
            "response": {"statusCode": 404, "headers": {}, "body": None},
        }
    )

    response = _merger(dispatcher).merge(result)

    assert dispatcher.events == [("item.viewed", {"id": 5})]
    assert response.status_code == 404
    assert response.headers == {}
    assert response.body is None


def test_incomplete_events_are_dropped_and_order_kept(dispatcher):
    result = Result.from_dict(
        {
            "events": [
                {"eventName": "first", "data": 1},
                {"eventName": None, "data": {"x": 1}},
                {"eventName": "no-data"},
                {"eventName": "second", "data": [2]},
            ]
        }
    )

    _merger(dispatcher).merge(result)

    assert dispatcher.events == [("first", 1), ("second", [2])]


def test_logs_are_emitted_in_order(dispatcher, caplog):
    result = Result.from_dict(
        {
            "logs": [
                {"level": "info", "message": "started"},
                {"level": None, "message": "dropped"},
                {"level": "error", "message": None},
                {"level": "ERROR", "message": "failed"},
                {"level": "notice", "message": "noticed"},
            ]
        }
    )

    with caplog.at_level(logging.DEBUG, logger="worker_adapter.tests.merger"):
        _merger(dispatcher).merge(result)

    records = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "worker_adapter.tests.merger"]
    assert records == [
        (logging.INFO, "started"),
        (logging.ERROR, "failed"),
        (logging.INFO, "noticed"),
    ]


def test_events_are_dispatched_before_logs(caplog):
    order = []

    class OrderedDispatcher:
        def dispatch(self, event_name, payload):
            order.append(("event", event_name))

    class OrderedHandler(logging.Handler):
        def emit(self, record):
            order.append(("log", record.getMessage()))

    logger = logging.getLogger("worker_adapter.tests.ordering")
    handler = OrderedHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        result = Result.from_dict(
            {
                "logs": [{"level": "info", "message": "log-1"}],
                "events": [{"eventName": "evt-1", "data": {}}],
            }
        )
        ResponseMerger(OrderedDispatcher(), logger, ResponseBuilder()).merge(result)
    finally:
        logger.removeHandler(handler)

    assert order == [("event", "evt-1"), ("log", "log-1")]


def test_present_response_fields_are_used_as_is(dispatcher):
    result = Result.from_dict(
        {"response": {"statusCode": 201, "headers": {"X-Id": ["1", "2"], "Location": "/items/1"}, "body": ""}}
    )

    response = _merger(dispatcher).merge(result)

    assert response.status_code == 201
    assert response.headers == {"X-Id": ["1", "2"], "Location": ["/items/1"]}
    assert response.body == ""


def test_response_block_without_status_defaults_to_200(dispatcher):
    response = _merger(dispatcher).merge(Result.from_dict({"response": {"body": {"ok": True}}}))

    assert response.status_code == 200
    assert response.headers == {}
    assert response.body == {"ok": True}


def test_resolve_log_level():
    assert resolve_log_level("emergency") == logging.CRITICAL
    assert resolve_log_level("Warning") == logging.WARNING
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("verbose") == logging.INFO
