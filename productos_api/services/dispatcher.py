from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any, Callable, Dict, Optional

from starlette.concurrency import run_in_threadpool

from .exceptions import (
    DispatcherError,
    HandlerAlreadyRegisteredError,
    HandlerNotRegisteredError,
)

logger = logging.getLogger("productos_api.services.dispatcher")

Handler = Callable[[Any], Any]


class Dispatcher:
    """
    Registro de handlers de comandos y consultas.

    Cada tipo de mensaje tiene exactamente un handler. El handler puede ser
    una corrutina o una función normal; las funciones normales se ejecutan en
    el threadpool para no bloquear el event loop.
    """

    def __init__(self) -> None:
        self._handlers: Dict[type, Handler] = {}

    def __len__(self) -> int:
        return len(self._handlers)

    def register(self, message_type: type, handler: Handler) -> None:
        if message_type in self._handlers:
            raise HandlerAlreadyRegisteredError(message_type)
        self._handlers[message_type] = handler
        logger.debug(
            "handler registered | message=%s | handler=%s",
            message_type.__name__,
            getattr(handler, "__qualname__", repr(handler)),
        )

    def handler(self, message_type: type) -> Callable[[Handler], Handler]:
        def decorator(func: Handler) -> Handler:
            self.register(message_type, func)
            return func

        return decorator

    def is_registered(self, message_type: type) -> bool:
        return message_type in self._handlers

    async def send(self, message: Any) -> Any:
        message_type = type(message)
        handler = self._handlers.get(message_type)
        if handler is None:
            raise HandlerNotRegisteredError(message_type)

        logger.debug("dispatch | message=%s", message_type.__name__)
        if inspect.iscoroutinefunction(handler):
            return await handler(message)

        result = await run_in_threadpool(handler, message)
        # callables que devuelven awaitables (p.ej. functools.partial de una corrutina)
        if inspect.isawaitable(result):
            result = await result
        return result


def build_dispatcher(handlers_module: Optional[str] = None) -> Dispatcher:
    """
    Crea el despachador y carga los handlers desde `handlers_module`.

    El módulo debe exponer `register_handlers(dispatcher)`.
    """
    dispatcher = Dispatcher()
    if not handlers_module:
        logger.warning("dispatcher without handlers | handlers_module not configured")
        return dispatcher

    module = importlib.import_module(handlers_module)
    register_handlers = getattr(module, "register_handlers", None)
    if not callable(register_handlers):
        raise DispatcherError(
            f"El módulo {handlers_module} no define register_handlers(dispatcher)"
        )

    register_handlers(dispatcher)
    logger.info(
        "dispatcher handlers loaded | module=%s | count=%s",
        handlers_module,
        len(dispatcher),
    )
    return dispatcher
