"""Dispatcher errors."""


class HandlerNotRegisteredError(LookupError):
    """No handler is registered for a command or query type.

    This is a wiring mistake, not a runtime condition: every command and
    query must appear in the CQRS registry.
    """

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type
