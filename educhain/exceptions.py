"""
Domain exceptions.

Every exception carries a client-safe message and the HTTP status it maps to.
Missing rows surface as 400, matching the rest of the write endpoints.
"""


class EduChainError(Exception):
    """Base class for errors that are safe to report to the client."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(EduChainError):
    """A referenced row does not exist."""

    status_code = 400


class InvalidRequestError(EduChainError):
    """The request is well-formed but cannot be processed."""

    status_code = 400
