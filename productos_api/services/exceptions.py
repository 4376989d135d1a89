class DispatcherError(Exception):
    """Error base del despachador de comandos y consultas."""


class HandlerNotRegisteredError(DispatcherError):
    def __init__(self, message_type: type) -> None:
        self.message_type = message_type
        super().__init__(f"No hay handler registrado para {message_type.__name__}")


class HandlerAlreadyRegisteredError(DispatcherError):
    def __init__(self, message_type: type) -> None:
        self.message_type = message_type
        super().__init__(f"Ya existe un handler para {message_type.__name__}")
