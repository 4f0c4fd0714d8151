"""Error types raised by the resource services.

Route handlers and the service layer raise these; the exception handlers
registered in ``clinic_api.main`` turn them into response envelopes.
Anything that is not a ``ServiceError`` is treated as an internal fault.
"""


class ServiceError(Exception):
    status_code = 500
    default_message = "Something went wrong!"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Client sent an incomplete or unreadable payload."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(ServiceError):
    """The addressed record does not exist in the store."""

    status_code = 404
    default_message = "Resource not found"


class RouteNotFoundError(ServiceError):
    status_code = 404
    default_message = "Route not found"
