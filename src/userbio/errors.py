"""Error taxonomy for user operations.

Each error carries the HTTP status it translates to. Anything that is not a
``UserServiceError`` is treated as an internal failure by the API layer.
"""


class UserServiceError(Exception):
    """Base class for expected failures of a user operation."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientError(UserServiceError):
    """The request was understood but rejected (400)."""

    status_code = 400


class DuplicateEmailError(ClientError):
    def __init__(self, message: str = "User with this email already exists") -> None:
        super().__init__(message)


class InvalidEmailError(ClientError):
    pass


class NotFoundError(UserServiceError):
    """No record matched the request (404)."""

    status_code = 404


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "User Not Found") -> None:
        super().__init__(message)
