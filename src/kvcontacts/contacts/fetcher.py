"""Contact fetchers.

Defines the ``ContactFetcher`` protocol the library calls to reach the
remote service, plus two in-process implementations:

- ``InMemoryContactFetcher``: deterministic stub backed by a dict; used
  in tests and examples, never touches the network.
- ``SnapshotContactFetcher``: serves contacts from a YAML or JSON
  snapshot document, as used by the command-line front end.

Usage
-----
::

    from kvcontacts.contacts.fetcher import InMemoryContactFetcher

    fetcher = InMemoryContactFetcher({"prod-kv": [{"email": "ops@example.com"}]})
    fetcher.get_certificate_contacts("prod-kv")
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml

from kvcontacts.contacts.models import EMAIL_KEYS, RawContacts
from kvcontacts.errors import FetchError, NotFoundError, SnapshotError

logger = logging.getLogger(__name__)


@runtime_checkable
class ContactFetcher(Protocol):
    """Protocol for back-ends that fetch a vault's certificate contacts.

    Implementations perform exactly one request per call and report
    failures as :class:`~kvcontacts.errors.FetchError`.  A missing vault
    or contacts sub-resource must be reported with status 404 so that
    callers can tell it apart from other failures.
    """

    def get_certificate_contacts(self, vault_name: str) -> RawContacts | None:
        """Return the contacts sub-resource of *vault_name*.

        Returns
        -------
        RawContacts | None
            The contacts (a plain sequence is also accepted),
            or ``None`` if the service returned no body.

        Raises
        ------
        FetchError
            On any failure; ``status_code == 404`` when not found.
        """
        ...  # pragma: no cover


class InMemoryContactFetcher:
    """Dict-backed fetcher for tests and examples.

    Parameters
    ----------
    vaults:
        Maps vault name to its contacts: a ``RawContacts``, a plain
        sequence of raw contacts, or ``None``.  Vaults missing from the
        mapping raise :class:`NotFoundError`.
    failures:
        Maps vault name to an exception raised instead of returning data.
    """

    def __init__(
        self,
        vaults: Mapping[str, Any] | None = None,
        failures: Mapping[str, BaseException] | None = None,
    ) -> None:
        self._vaults = {name: RawContacts.coerce(v) for name, v in (vaults or {}).items()}
        self._failures = dict(failures or {})
        self.calls: list[str] = []

    def get_certificate_contacts(self, vault_name: str) -> RawContacts | None:
        self.calls.append(vault_name)
        if vault_name in self._failures:
            raise self._failures[vault_name]
        if vault_name not in self._vaults:
            raise NotFoundError(vault_name)
        return self._vaults[vault_name]

    @property
    def call_count(self) -> int:
        """Number of fetches performed so far."""
        return len(self.calls)


class SnapshotContactFetcher(InMemoryContactFetcher):
    """Fetcher that serves contacts from a snapshot document.

    The document is a mapping with a single ``vaults`` key::

        vaults:
          prod-kv:
            - email_address: ops@example.com
              name: Ops
          empty-kv: []
          no-list-kv: null
          locked-kv:
            status: 403
            message: Forbidden

    A vault whose value is a mapping with a ``status`` key simulates a
    failed request with that HTTP status.
    Every listed contact must be a mapping carrying an email address.
    """

    def __init__(self, document: Any, source: str = "<snapshot>") -> None:
        if not isinstance(document, Mapping) or not isinstance(document.get("vaults"), Mapping):
            raise SnapshotError(source, "expected a mapping with a 'vaults' mapping")

        vaults: dict[str, Any] = {}
        failures: dict[str, BaseException] = {}
        for name, entry in document["vaults"].items():
            name = str(name)
            if isinstance(entry, Mapping):
                if "status" not in entry:
                    raise SnapshotError(source, f"vault {name!r}: mapping entries need a 'status'")
                try:
                    status = int(entry["status"])
                except (TypeError, ValueError):
                    raise SnapshotError(source, f"vault {name!r}: status must be an integer") from None
                failures[name] = FetchError(
                    str(entry.get("message", f"Request failed with status {status}")),
                    status_code=status,
                    vault_name=name,
                )
            elif entry is None:
                vaults[name] = None
            elif isinstance(entry, list):
                for position, contact in enumerate(entry, start=1):
                    if not isinstance(contact, Mapping) or all(
                        contact.get(k) is None for k in EMAIL_KEYS
                    ):
                        raise SnapshotError(
                            source, f"vault {name!r}: contact {position} has no email address"
                        )
                vaults[name] = entry
            else:
                raise SnapshotError(source, f"vault {name!r}: expected a list, null or mapping")

        super().__init__(vaults, failures)
        self.source = source
        logger.debug("Loaded snapshot %s with %d vault(s)", source, len(vaults) + len(failures))

    @classmethod
    def from_file(cls, path: str | Path) -> "SnapshotContactFetcher":
        """Load a YAML or JSON snapshot from *path*.

        Raises
        ------
        SnapshotError
            If the file is not valid YAML or has the wrong shape.
        OSError
            If the file cannot be read.
        """
        text = Path(path).read_text(encoding="utf-8")
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SnapshotError(str(path), f"not valid YAML or JSON ({exc})") from exc
        return cls(document, source=str(path))
