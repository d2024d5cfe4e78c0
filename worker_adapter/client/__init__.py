from .base import WorkerClient
from .http import HttpWorkerClient

__all__ = ["WorkerClient", "HttpWorkerClient"]
