"""Exception types for kvcontacts.

Every error raised by the library derives from :class:`KvContactsError`
so callers can catch the whole family at once.  Errors that describe bad
caller input also subclass :class:`ValueError`.

Fetch failures are modelled by :class:`FetchError`.  Only the not-found
case (HTTP 404) is ever recovered by the library; every other fetch
failure reaches the caller unchanged.
"""
from __future__ import annotations

from http import HTTPStatus


class KvContactsError(Exception):
    """Base class for all kvcontacts errors."""


class InvalidIdentifierError(KvContactsError, ValueError):
    """Raised when a resource identifier string cannot be parsed."""

    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid resource identifier {identifier!r}: {reason}")


class AmbiguousReferenceError(KvContactsError, ValueError):
    """Raised in strict mode when more than one vault reference form is given."""

    def __init__(self, supplied: tuple[str, ...]) -> None:
        self.supplied = supplied
        super().__init__(
            f"Ambiguous vault reference: {', '.join(supplied)} were all supplied. "
            "Pass exactly one of vault name, input object or resource id."
        )


class MissingReferenceError(KvContactsError, ValueError):
    """Raised when no vault reference form is given at all."""

    def __init__(self) -> None:
        super().__init__(
            "No vault reference supplied. "
            "Pass one of vault name, input object or resource id."
        )


class FetchError(KvContactsError):
    """A failure reported by a contact fetcher.

    Parameters
    ----------
    message:
        Human-readable description of the failure.
    status_code:
        HTTP status returned by the remote service, or ``None`` when the
        failure happened before a response was received.
    vault_name:
        The vault the request was made for, if known.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        vault_name: str | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.vault_name = vault_name
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        """Return True if the remote resource does not exist."""
        return self.status_code == HTTPStatus.NOT_FOUND

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"status_code={self.status_code!r}, vault_name={self.vault_name!r})"
        )


class NotFoundError(FetchError):
    """The vault or its contacts sub-resource does not exist."""

    def __init__(self, vault_name: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Certificate contacts for vault {vault_name!r} not found",
            status_code=int(HTTPStatus.NOT_FOUND),
            vault_name=vault_name,
        )


class SnapshotError(KvContactsError, ValueError):
    """Raised when a contacts snapshot document is malformed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid contacts snapshot {source}: {reason}")
