"""
Service errors for Pomotimer

Every error a service raises on purpose derives from PomotimerError and carries
the HTTP status the API layer should answer with.
"""


class PomotimerError(Exception):
    """Baseclass for all pomotimer errors"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AlreadyExistsError(PomotimerError):
    """Resource is already present (taken email, duplicate settings row)"""

    status_code = 400


class NotFoundError(PomotimerError):
    """Requested user or settings record does not exist"""

    status_code = 404


class UnauthorizedError(PomotimerError):
    """Credentials or token could not be verified"""

    status_code = 401
