from .forwarder import LifecycleForwarder
from .local_cache import LocalCodeCache, action_digest
from .store import CodeStore, LocalFileCodeStore, RemoteCodeStore

__all__ = [
    "LifecycleForwarder",
    "LocalCodeCache",
    "action_digest",
    "CodeStore",
    "LocalFileCodeStore",
    "RemoteCodeStore",
]
