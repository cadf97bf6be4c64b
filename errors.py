from typing import Optional


class TodoError(Exception):
    """Base class for failures that map to an HTTP status and a {message} body"""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TodoError):
    status_code = 400
    default_message = "Invalid request"


class DuplicateIdentity(TodoError):
    status_code = 400
    default_message = "Email or Username already exists"


class Unauthorized(TodoError):
    status_code = 401
    default_message = "Unauthorized"


class InvalidCredentials(TodoError):
    status_code = 401
    default_message = "Invalid credentials"


class NotFound(TodoError):
    status_code = 404
    default_message = "Not found"


class UserNotFound(NotFound):
    default_message = "User not found"


class TaskNotFound(NotFound):
    default_message = "Task not found"


class StoreError(TodoError):
    status_code = 500
    default_message = "Database error"


class SessionDestroyError(StoreError):
    default_message = "Logout Failed"
