"""kvcontacts: read the certificate contacts of a key vault.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import kvcontacts
    from kvcontacts.contacts import InMemoryContactFetcher
    from kvcontacts.reference import VaultName, VaultResourceId

    fetcher = InMemoryContactFetcher({"prod-kv": [{"email": "ops@example.com"}]})

    # Resolve a reference to the canonical vault name
    name = kvcontacts.resolve(VaultResourceId(
        "/subscriptions/0000/resourceGroups/rg/providers/Microsoft.KeyVault/vaults/prod-kv"
    ))

    # Fetch and normalize the contacts
    contacts = kvcontacts.fetch_contacts(name, fetcher)

    # Or both steps at once
    contacts = kvcontacts.get_certificate_contacts(VaultName("prod-kv"), fetcher)

    kvcontacts.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from kvcontacts.contacts.fetcher import ContactFetcher
    from kvcontacts.contacts.models import CertificateContact
    from kvcontacts.reference import VaultReference


def resolve(ref: "VaultReference") -> str:
    """Resolve a vault reference to its canonical vault name.

    Parameters
    ----------
    ref:
        A ``VaultName``, ``VaultObject`` or ``VaultResourceId``.

    Returns
    -------
    str
        The vault name.

    Raises
    ------
    kvcontacts.errors.InvalidIdentifierError
        If a resource id cannot be parsed.
    """
    from kvcontacts.resolver import resolve as _resolve

    return _resolve(ref)


def fetch_contacts(name: str, client: "ContactFetcher") -> list["CertificateContact"]:
    """Fetch and normalize the certificate contacts of a named vault.

    Parameters
    ----------
    name:
        Canonical vault name.
    client:
        The contact fetcher to call once.

    Returns
    -------
    list[CertificateContact]
        Normalized contacts; empty when the vault has none or is not found.
    """
    from kvcontacts.contacts.service import fetch_contacts as _fetch

    return _fetch(name, client)


def get_certificate_contacts(
    ref: "VaultReference", client: "ContactFetcher"
) -> list["CertificateContact"]:
    """Resolve *ref* and fetch its normalized certificate contacts.

    Parameters
    ----------
    ref:
        The vault reference.
    client:
        The contact fetcher to call once.

    Returns
    -------
    list[CertificateContact]
        Normalized contacts in service order.
    """
    from kvcontacts.contacts.service import get_certificate_contacts as _get

    return _get(ref, client)


__all__ = [
    "__version__",
    "resolve",
    "fetch_contacts",
    "get_certificate_contacts",
]
