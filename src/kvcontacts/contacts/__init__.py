"""Certificate contacts: models, fetchers, service and serializer."""
from __future__ import annotations

from kvcontacts.contacts.fetcher import (
    ContactFetcher,
    InMemoryContactFetcher,
    SnapshotContactFetcher,
)
from kvcontacts.contacts.models import CertificateContact, RawContact, RawContacts
from kvcontacts.contacts.serializer import ContactSerializer
from kvcontacts.contacts.service import fetch_contacts, get_certificate_contacts

__all__ = [
    "CertificateContact",
    "ContactFetcher",
    "ContactSerializer",
    "InMemoryContactFetcher",
    "RawContact",
    "RawContacts",
    "SnapshotContactFetcher",
    "fetch_contacts",
    "get_certificate_contacts",
]
