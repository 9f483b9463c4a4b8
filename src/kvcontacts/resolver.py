"""Resolve a ``VaultReference`` to the canonical vault name."""
from __future__ import annotations

import logging

from kvcontacts.reference import VaultName, VaultObject, VaultReference, VaultResourceId
from kvcontacts.resource_id import ResourceIdentifier

logger = logging.getLogger(__name__)


def resolve(ref: VaultReference) -> str:
    """Return the vault name identified by *ref*.

    Raises
    ------
    InvalidIdentifierError
        If *ref* is a ``VaultResourceId`` whose string cannot be parsed.
    TypeError
        If *ref* is not one of the ``VaultReference`` variants.
    """
    if isinstance(ref, VaultObject):
        name = ref.vault_name
    elif isinstance(ref, VaultResourceId):
        name = ResourceIdentifier.parse(ref.resource_id).resource_name
    elif isinstance(ref, VaultName):
        name = ref.name
    else:
        raise TypeError(f"Unsupported vault reference: {ref!r}")

    logger.debug("Resolved %r to vault name %r", ref, name)
    return name
