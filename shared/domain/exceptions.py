"""
Domain Error Kinds

Every error raised by the catalog core derives from ``DomainError`` so call
sites can recover from any of them without catching unrelated exceptions.

- ValidationError: malformed or contradictory input, blocks confirmation
- NotFoundError: requested item id has no matching record
- TransientFetchError: the backing store could not be reached
- StaleResponseError: a fetch was superseded by a newer request
"""


class DomainError(Exception):
    """Base class for recoverable domain errors."""


class ValidationError(DomainError, ValueError):
    """Raised when input is malformed or contradicts itself."""


class NotFoundError(DomainError, LookupError):
    """Raised when a referenced record does not exist."""

    def __init__(self, resource: str, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} not found")


class TransientFetchError(DomainError):
    """Raised when the store failed; retry policy belongs to the caller."""


class StaleResponseError(DomainError):
    """Raised when a response arrives after a newer request for the same key."""

    def __init__(self, key, token: int):
        self.key = key
        self.token = token
        super().__init__(f"Response {token} for {key!r} was superseded")
