"""Filesystem cache holding the code of locally executed actions."""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from worker_adapter.errors import CodeCacheError

LOGGER = logging.getLogger(__name__)

HANDLER_ATTRIBUTE = "handle"


def action_digest(name: str) -> str:
    """Short, stable identifier for an action name."""

    return hashlib.md5(name.encode("utf-8")).hexdigest()[:8]


class LocalCodeCache:
    """One file per action under ``base_path``, named by a hash of the action name."""

    def __init__(self, base_path: Optional[Path | str], *, prefix: str = "python_local_", suffix: str = ".py") -> None:
        self._base_path = Path(base_path) if base_path else None
        self._prefix = prefix
        self._suffix = suffix

    def path_for(self, name: str) -> Path:
        if self._base_path is None:
            raise CodeCacheError("No base path provided")
        return self._base_path / f"{self._prefix}{action_digest(name)}{self._suffix}"

    def write(self, name: str, code: str) -> Path:
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        # readers racing a write see either the old or the new file, never a partial one
        fd, tmp_name = tempfile.mkstemp(prefix=path.stem, suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(code)
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Cached code of action %s at %s", name, path)
        return path

    def remove(self, name: str) -> None:
        path = self.path_for(name)
        if path.is_file():
            path.unlink(missing_ok=True)
            LOGGER.debug("Removed cached code of action %s", name)

    def resolve_for_execution(self, name: str, config: Mapping[str, Any]) -> Path:
        """Return the cached file, re-creating it from ``config`` if it has gone missing.

        The cache directory is not guaranteed to survive a redeploy, so a
        missing file is regenerated from the stored configuration.
        """

        path = self.path_for(name)
        if path.is_file():
            return path
        code = config.get("code") if config is not None else None
        if not code:
            raise CodeCacheError(f"No code available for action {name}")
        LOGGER.info("Cache file for action %s missing; regenerating", name)
        return self.write(name, code)

    def load_handler(self, path: Path) -> Callable[..., Any]:
        module_name = f"worker_adapter_local_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise CodeCacheError(f"Cannot load cached action {path}")
        module = importlib.util.module_from_spec(spec)
        # no bytecode cache: rewrites within the same second must be picked up
        previous = sys.dont_write_bytecode
        sys.dont_write_bytecode = True
        try:
            spec.loader.exec_module(module)
        except FileNotFoundError as exc:
            raise CodeCacheError(f"Cached action {path} disappeared before loading") from exc
        finally:
            sys.dont_write_bytecode = previous
        handler = getattr(module, HANDLER_ATTRIBUTE, None)
        if not callable(handler):
            raise CodeCacheError("Provided action does not return a callable")
        return handler
