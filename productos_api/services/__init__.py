from .dispatcher import Dispatcher, build_dispatcher
from .exceptions import (
    DispatcherError,
    HandlerAlreadyRegisteredError,
    HandlerNotRegisteredError,
)
from .messages import CreateProductoCommand, GetProductoByIdQuery

__all__ = [
    "Dispatcher",
    "build_dispatcher",
    "DispatcherError",
    "HandlerAlreadyRegisteredError",
    "HandlerNotRegisteredError",
    "CreateProductoCommand",
    "GetProductoByIdQuery",
]
