"""
Error taxonomy shared by the directory, the ledger and the session issuer.

Every error carries the HTTP status the routing layer should answer with, so
handlers never need to know which operation raised it.
"""


class MessagelyError(Exception):
    """Base exception for messagely operations"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConflictError(MessagelyError):
    """Raised when a uniqueness constraint rejects a new record"""
    status_code = 409


class NotFoundError(MessagelyError):
    """Raised when an operation references a user or message that does not exist"""
    status_code = 404


class AuthenticationError(MessagelyError):
    """Raised when credentials do not verify"""
    status_code = 401


class AuthorizationError(MessagelyError):
    """Raised when an authenticated user acts on someone else's resources"""
    status_code = 403


class InvalidPasswordError(MessagelyError):
    """Raised when a password cannot be hashed, e.g. longer than bcrypt accepts"""
    status_code = 422
