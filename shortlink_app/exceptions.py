"""
Error taxonomy for the short link service.

None of these are fatal to the process. Routes translate them into
HTTP responses; the registry raises them and never retries on the
caller's behalf (except for generated-code collisions, which stay internal).
"""


class ShortLinkError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:short_link_error'


class InvalidTargetError(ShortLinkError, ValueError):
    """Raised when a destination URL has no scheme or no host."""

    error_code = 'link:invalid_target'


class InvalidExpirationError(ShortLinkError, ValueError):
    """Raised when an expiration duration is malformed or not positive."""

    error_code = 'link:invalid_expiration'


class NameConflictError(ShortLinkError):
    """Raised when a requested custom name is already taken."""

    error_code = 'link:name_conflict'

    def __init__(self, name: str, reason: str = "already in use"):
        self.name = name
        super().__init__(f"Custom name '{name}' is {reason}")


class LinkNotFoundError(ShortLinkError, LookupError):
    """Raised when a short code is unknown or its link has expired."""

    error_code = 'link:not_found'

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(f"Short link '{short_code}' not found or expired")


class KeyspaceExhaustedError(ShortLinkError):
    """Raised when no free short code could be generated within the retry budget."""

    error_code = 'link:keyspace_exhausted'
