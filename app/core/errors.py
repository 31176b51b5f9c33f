"""Application error taxonomy.

Services raise these; the handlers registered in ``app.main`` render every one
of them as ``{"message": ...}`` with the matching HTTP status.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class AuthenticationFailed(AppError):
    status_code = 401
    default_message = "Authentication required"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    status_code = 409
    default_message = "Already exists"


class CapacityExceeded(AppError):
    status_code = 400
    default_message = "Not enough seats available"
