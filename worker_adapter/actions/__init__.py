from .capabilities import CodeLifecycleAware, Configurable, Executable, Pingable
from .local import LocalWorkerAction
from .variants import VARIANTS, WorkerVariant, get_variant
from .worker import WorkerAction

__all__ = [
    "CodeLifecycleAware",
    "Configurable",
    "Executable",
    "Pingable",
    "LocalWorkerAction",
    "VARIANTS",
    "WorkerVariant",
    "get_variant",
    "WorkerAction",
]
