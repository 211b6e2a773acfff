"""Application errors. Each carries the HTTP status and error code it is surfaced with."""


class CyberGuardError(Exception):
    """Base class for errors shown to the client as a 4xx response."""

    status_code = 400
    code = "BadRequest"
    default_message = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidEmail(CyberGuardError):
    code = "InvalidEmail"
    default_message = "Please provide a valid email address"


class InvalidName(CyberGuardError):
    code = "InvalidName"
    default_message = "Name is required"


class DuplicateEmail(CyberGuardError):
    code = "DuplicateEmail"
    default_message = "User already exists"


class WeakPassword(CyberGuardError):
    code = "WeakPassword"
    default_message = "Password must be at least 8 characters long"


class InvalidCredentials(CyberGuardError):
    # Same message for unknown email and wrong password
    code = "InvalidCredentials"
    default_message = "Invalid credentials"


class RateLimited(CyberGuardError):
    status_code = 429
    code = "RateLimited"
    default_message = "Too many login attempts, please try again later"


class Unauthenticated(CyberGuardError):
    status_code = 401
    code = "Unauthenticated"
    default_message = "Authentication required"


class InvalidOrExpiredToken(CyberGuardError):
    status_code = 403
    code = "InvalidOrExpiredToken"
    default_message = "Invalid or expired token"


class InvalidToken(InvalidOrExpiredToken):
    """Signature mismatch or malformed token."""


class ExpiredToken(InvalidOrExpiredToken):
    """Token is past its expiry."""


class NotFound(CyberGuardError):
    status_code = 404
    code = "NotFound"
    default_message = "User not found"
