"""Contact data types.

``RawContact`` and ``RawContacts`` mirror what the remote service
returns.  ``CertificateContact`` is the normalized public record; it
always carries the name of the vault the contact belongs to.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Accepted spellings of the email field on mapping-shaped raw contacts.
EMAIL_KEYS = ("email_address", "emailAddress", "email")


@dataclass(frozen=True, slots=True)
class RawContact:
    """A single contact as returned by the remote service."""

    email_address: str
    name: str | None = None
    phone: str | None = None


@dataclass(frozen=True, slots=True)
class RawContacts:
    """The contacts sub-resource of a vault.

    ``contact_list`` is ``None`` when the sub-resource exists but the
    service reported no list at all.
    """

    contact_list: tuple[Any, ...] | None = field(default=None)

    @classmethod
    def coerce(cls, value: Any) -> "RawContacts | None":
        """Wrap a plain sequence of raw contacts; ``None`` and ``RawContacts`` pass through."""
        if value is None or isinstance(value, RawContacts):
            return value
        return cls(contact_list=tuple(value))


@dataclass(frozen=True, slots=True)
class CertificateContact:
    """A normalized certificate contact.

    Parameters
    ----------
    vault_name:
        Name of the vault the contact is registered on.
    email:
        Notification email address.
    name:
        Optional display name.
    phone:
        Optional phone number.
    """

    vault_name: str
    email: str
    name: str | None = None
    phone: str | None = None

    @classmethod
    def from_raw(cls, raw: Any, vault_name: str) -> "CertificateContact":
        """Normalize a raw contact for *vault_name*.

        *raw* may be a ``RawContact``, any object exposing
        ``email_address`` / ``name`` / ``phone`` attributes, or a mapping
        using ``email_address``, ``emailAddress`` or ``email`` for the
        address.

        Raises
        ------
        TypeError
            If *raw* carries no email address.
        """
        if isinstance(raw, Mapping):
            email = next((raw[k] for k in EMAIL_KEYS if raw.get(k) is not None), None)
            name = raw.get("name")
            phone = raw.get("phone")
        else:
            email = getattr(raw, "email_address", None)
            name = getattr(raw, "name", None)
            phone = getattr(raw, "phone", None)

        if email is None:
            raise TypeError(f"Contact {raw!r} has no email address")
        return cls(vault_name=vault_name, email=str(email), name=name, phone=phone)
