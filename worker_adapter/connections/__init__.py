from .repository import (
    ConnectionRecord,
    ConnectionRepository,
    ConnectionStatus,
    InMemoryConnectionRepository,
    SqlConnectionRepository,
)
from .snapshot import ConnectionSnapshot, decode_config, encode_config

__all__ = [
    "ConnectionRecord",
    "ConnectionRepository",
    "ConnectionStatus",
    "InMemoryConnectionRepository",
    "SqlConnectionRepository",
    "ConnectionSnapshot",
    "decode_config",
    "encode_config",
]
