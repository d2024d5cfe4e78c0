"""Catalogue of supported worker languages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

Storage = Literal["remote", "local"]


@dataclass(frozen=True)
class WorkerVariant:
    name: str
    language: str
    storage: Storage = "remote"

    @property
    def is_local(self) -> bool:
        return self.storage == "local"


WORKER_JAVA = WorkerVariant(name="Worker-Java", language="java")
WORKER_JAVASCRIPT = WorkerVariant(name="Worker-Javascript", language="javascript")
WORKER_PHP = WorkerVariant(name="Worker-PHP", language="php")
WORKER_PYTHON = WorkerVariant(name="Worker-Python", language="python")
WORKER_PYTHON_LOCAL = WorkerVariant(name="Worker-Python-Local", language="python", storage="local")

VARIANTS: Dict[str, WorkerVariant] = {
    variant.name: variant
    for variant in (WORKER_JAVA, WORKER_JAVASCRIPT, WORKER_PHP, WORKER_PYTHON, WORKER_PYTHON_LOCAL)
}


def get_variant(name: str) -> WorkerVariant:
    try:
        return VARIANTS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown worker variant: {name} (available: {', '.join(VARIANTS)})") from exc
