"""Vault reference types.

A vault can be identified in three mutually exclusive ways, each
modelled as its own frozen dataclass.  The ``VaultReference`` union
covers all of them; :func:`kvcontacts.resolver.resolve` dispatches on
the concrete type.

Front ends that receive the three forms as separate optional parameters
should build the union with :func:`reference_from_parameters`, which
applies the precedence rule ``input object > resource id > vault name``.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from kvcontacts.errors import AmbiguousReferenceError, MissingReferenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VaultName:
    """A bare vault name."""

    name: str


@dataclass(frozen=True, slots=True)
class VaultObject:
    """An already-resolved vault, e.g. the output of a previous lookup.

    Only ``vault_name`` takes part in resolution and it is used as-is:
    it is not re-validated, so an empty name reaches the fetcher
    unchanged. The remaining fields are carried for display.
    """

    vault_name: str
    resource_group_name: str | None = None
    location: str | None = None
    resource_id: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "VaultObject":
        """Build a ``VaultObject`` from a dict as loaded from JSON or YAML.

        Accepts both ``snake_case`` and ``PascalCase`` keys.

        Raises
        ------
        KeyError
            If the mapping carries no vault name.
        """
        name = data.get("vault_name", data.get("VaultName"))
        if name is None:
            raise KeyError("vault_name")
        return cls(
            vault_name=str(name),
            resource_group_name=data.get("resource_group_name", data.get("ResourceGroupName")),
            location=data.get("location", data.get("Location")),
            resource_id=data.get("resource_id", data.get("ResourceId")),
        )


@dataclass(frozen=True, slots=True)
class VaultResourceId:
    """A full resource identifier string from which the vault name is parsed."""

    resource_id: str


VaultReference = Union[VaultName, VaultObject, VaultResourceId]


def reference_from_parameters(
    vault_name: str | None = None,
    input_object: VaultObject | None = None,
    resource_id: str | None = None,
    strict: bool = False,
) -> VaultReference:
    """Build a ``VaultReference`` from three optional front-end parameters.

    Parameters
    ----------
    vault_name:
        Bare vault name.
    input_object:
        A resolved vault object.
    resource_id:
        A resource identifier string.  An empty string counts as absent.
    strict:
        When ``True``, supplying more than one form raises instead of
        applying the precedence rule.

    Returns
    -------
    VaultReference
        ``VaultObject`` if given, else ``VaultResourceId`` if given, else
        ``VaultName``.

    Raises
    ------
    AmbiguousReferenceError
        In strict mode, when more than one form is supplied.
    MissingReferenceError
        When no form is supplied.
    """
    supplied = tuple(
        label
        for label, present in (
            ("input_object", input_object is not None),
            ("resource_id", bool(resource_id)),
            ("vault_name", bool(vault_name)),
        )
        if present
    )
    if not supplied:
        raise MissingReferenceError()
    if len(supplied) > 1:
        if strict:
            raise AmbiguousReferenceError(supplied)
        logger.debug("Several vault references supplied %r; using %r", supplied, supplied[0])

    if input_object is not None:
        return input_object
    if resource_id:
        return VaultResourceId(resource_id)
    assert vault_name
    return VaultName(vault_name)
