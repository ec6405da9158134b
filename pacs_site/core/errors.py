"""Domain errors raised by services and mapped to HTTP responses in main.py."""


class SiteError(Exception):
    """Base class for site errors; message is safe to show to visitors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(SiteError):
    """A required form field is missing or malformed. Rendered as 400."""


class AuthError(SiteError):
    """Authentication or authorization failure."""


class InvalidCredentials(AuthError):
    """Unknown username or wrong password. Shown inline on the login form."""


class NotAuthenticated(AuthError):
    """No valid admin session. Rendered as a redirect to /login."""


class PersistenceError(SiteError):
    """A query or insert failed. Rendered as 500; detail is logged, not shown."""


class BootstrapError(SiteError):
    """Startup seeding failed. Logged; the server keeps serving."""
