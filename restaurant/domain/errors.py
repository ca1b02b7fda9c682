# restaurant/domain/errors.py
"""
Bledy domenowe rzucane przez serwisy.
Kazda klasa niesie swoj status HTTP, handler w restaurant/api/errors.py
zamienia je na odpowiedz {"message": ...}.
"""


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ServiceError, ValueError):
    status_code = 400
    default_message = "Invalid input."


class InvalidCredentials(ServiceError):
    status_code = 401
    default_message = "Invalid Credentials"


class NotAuthenticated(ServiceError):
    status_code = 401
    default_message = "Not authenticated"


class AccessDenied(ServiceError, PermissionError):
    status_code = 403
    default_message = "Admin access required"


class NotFound(ServiceError, LookupError):
    status_code = 404
    default_message = "Not Found"


class DuplicateEmail(ServiceError):
    status_code = 409
    default_message = "Email already exists"


class StoreUnavailable(ServiceError):
    status_code = 503
    default_message = "Database connection unavailable. Please try again later."
