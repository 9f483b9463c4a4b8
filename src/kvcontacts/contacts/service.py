"""Fetch a vault's certificate contacts and normalize them.

Only a not-found reply is recovered here: it becomes an empty result.
Every other failure raised by the fetcher propagates unchanged.
"""
from __future__ import annotations

import logging

from kvcontacts.contacts.fetcher import ContactFetcher
from kvcontacts.contacts.models import CertificateContact, RawContacts
from kvcontacts.errors import FetchError
from kvcontacts.reference import VaultReference
from kvcontacts.resolver import resolve

logger = logging.getLogger(__name__)


def fetch_contacts(name: str, client: ContactFetcher) -> list[CertificateContact]:
    """Fetch and normalize the certificate contacts of vault *name*.

    Parameters
    ----------
    name:
        Canonical vault name.
    client:
        The fetcher to call.  It is called exactly once.

    Returns
    -------
    list[CertificateContact]
        Contacts in the order the service returned them.  Empty when the
        vault or its contacts do not exist, or the service sent no list.

    Raises
    ------
    FetchError
        Any fetch failure other than not-found.
    """
    contacts: RawContacts | None
    try:
        contacts = RawContacts.coerce(client.get_certificate_contacts(name))
    except FetchError as exc:
        if not exc.is_not_found:
            raise
        logger.debug("No certificate contacts found for vault %r", name)
        contacts = None

    if contacts is None or contacts.contact_list is None:
        return []

    return [CertificateContact.from_raw(item, name) for item in contacts.contact_list]


def get_certificate_contacts(
    ref: VaultReference, client: ContactFetcher
) -> list[CertificateContact]:
    """Resolve *ref* and return the vault's normalized certificate contacts.

    Raises
    ------
    InvalidIdentifierError
        If *ref* holds a malformed resource id.  *client* is not called.
    FetchError
        Any fetch failure other than not-found.
    """
    name = resolve(ref)
    return fetch_contacts(name, client)
