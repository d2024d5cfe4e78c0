from .about import About, Message
from .execute import (
    Execute,
    ExecuteConnection,
    ExecuteContext,
    ExecuteContextApp,
    ExecuteContextUser,
    ExecuteRequest,
    ExecuteRequestContext,
)
from .result import Result, ResultEvent, ResultHttp, ResultLog
from .update import Update

__all__ = [
    "About",
    "Message",
    "Execute",
    "ExecuteConnection",
    "ExecuteContext",
    "ExecuteContextApp",
    "ExecuteContextUser",
    "ExecuteRequest",
    "ExecuteRequestContext",
    "Result",
    "ResultEvent",
    "ResultHttp",
    "ResultLog",
    "Update",
]
