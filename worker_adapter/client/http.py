"""HTTP implementation of the worker client."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote, urljoin

import requests
from pydantic import ValidationError
from requests import Response

from worker_adapter.errors import WorkerConnectionError
from worker_adapter.models import About, Execute, Message, Result, Update

from .base import WorkerClient

LOGGER = logging.getLogger(__name__)


class HttpWorkerClient(WorkerClient):
    def __init__(self, *, base_url: str, timeout_seconds: float = 30) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    @property
    def base_url(self) -> str:
        return self._base_url

    def execute(self, action: str, execute: Execute) -> Result:
        payload = self._request_json("POST", self._action_path(action), json_body=execute.to_dict())
        try:
            return Result.from_dict(payload)
        except ValidationError as exc:
            raise WorkerConnectionError("Worker returned an invalid result.") from exc

    def put(self, action: str, update: Update) -> None:
        payload = self._request_json("PUT", self._action_path(action), json_body=update.to_dict())
        self._log_message("put", action, payload)

    def delete(self, action: str) -> None:
        try:
            payload = self._request_json("DELETE", self._action_path(action))
        except WorkerConnectionError as exc:
            if exc.status_code == 404:
                LOGGER.debug("Worker %s has no action %s; nothing to delete", self._base_url, action)
                return
            raise
        self._log_message("delete", action, payload)

    def get(self) -> About:
        payload = self._request_json("GET", "/")
        try:
            return About.from_dict(payload)
        except ValidationError as exc:
            raise WorkerConnectionError("Worker returned an invalid about document.") from exc

    @staticmethod
    def _action_path(action: str) -> str:
        return "/" + quote(action, safe="")

    def _log_message(self, operation: str, action: str, payload: dict[str, Any]) -> None:
        try:
            message = Message.from_dict(payload)
        except ValidationError as exc:
            raise WorkerConnectionError("Worker returned an invalid message.") from exc
        if message.success is False:
            LOGGER.warning(
                "Worker %s rejected %s of action %s: %s",
                self._base_url,
                operation,
                action,
                message.message,
            )

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        response = self._request(method, path, json_body=json_body)
        if not response.content:
            return {}
        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError) as exc:
            raise WorkerConnectionError("Worker returned invalid JSON.") from exc
        if not isinstance(payload, dict):
            raise WorkerConnectionError("Worker returned an unexpected payload.")
        return payload

    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
    ) -> Response:
        url = urljoin(f"{self._base_url}/", path.lstrip("/"))
        LOGGER.debug("Worker request %s %s", method, url)
        try:
            response = requests.request(
                method,
                url,
                headers={"Accept": "application/json"},
                json=json_body,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise WorkerConnectionError(str(exc)) from exc
        if response.status_code >= 400:
            raise WorkerConnectionError(
                f"Worker request failed with status {response.status_code}.",
                status_code=response.status_code,
            )
        return response
