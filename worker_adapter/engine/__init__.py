from .connector import Connector
from .context import Action, App, ExecutionContext, User
from .dispatcher import EventDispatcher
from .form import ConnectionElement, FormBuilder, InputElement, TextAreaElement
from .parameters import Parameters
from .request import CliRequestContext, HttpRequestContext, Request, RequestContext, RpcRequestContext
from .response import HttpResponse, ResponseBuilder

__all__ = [
    "Connector",
    "Action",
    "App",
    "ExecutionContext",
    "User",
    "EventDispatcher",
    "ConnectionElement",
    "FormBuilder",
    "InputElement",
    "TextAreaElement",
    "Parameters",
    "CliRequestContext",
    "HttpRequestContext",
    "Request",
    "RequestContext",
    "RpcRequestContext",
    "HttpResponse",
    "ResponseBuilder",
]
