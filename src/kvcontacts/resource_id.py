"""Parser for Azure Resource Manager resource identifiers.

A resource identifier has the shape::

    /subscriptions/{subscription}/resourceGroups/{group}
        /providers/{namespace}/{type}/{name}[/{child-type}/{child-name}...]

Only the final ``type/name`` pair names the resource itself; any pairs
before it name its parent resources.

Usage
-----
::

    from kvcontacts.resource_id import ResourceIdentifier

    rid = ResourceIdentifier.parse(
        "/subscriptions/0000/resourceGroups/rg/providers/Microsoft.KeyVault/vaults/prod-kv"
    )
    assert rid.resource_name == "prod-kv"
    assert rid.resource_type == "Microsoft.KeyVault/vaults"
"""
from __future__ import annotations

from dataclasses import dataclass

from kvcontacts.errors import InvalidIdentifierError

_MIN_SEGMENTS = 8

# Fixed keys at even positions 0, 2 and 4.
_FIXED_KEYS: tuple[tuple[int, str], ...] = (
    (0, "subscriptions"),
    (2, "resourcegroups"),
    (4, "providers"),
)


@dataclass(frozen=True, slots=True)
class ResourceIdentifier:
    """Structured form of a resource identifier string.

    Parameters
    ----------
    subscription:
        Subscription id segment.
    resource_group_name:
        Resource group segment.
    provider_namespace:
        Resource provider, e.g. ``"Microsoft.KeyVault"``.
    resource_type:
        Full type including the namespace and any parent types, e.g.
        ``"Microsoft.KeyVault/vaults"``.
    resource_name:
        Name of the resource itself (the last segment).
    parent_resource:
        ``type/name`` pairs of the enclosing resources joined by ``/``,
        or ``None`` for a top-level resource.
    """

    subscription: str
    resource_group_name: str
    provider_namespace: str
    resource_type: str
    resource_name: str
    parent_resource: str | None = None

    @classmethod
    def parse(cls, text: str) -> "ResourceIdentifier":
        """Parse *text* into a ``ResourceIdentifier``.

        Raises
        ------
        InvalidIdentifierError
            If *text* does not have the resource identifier shape.
        """
        if not text or not text.strip():
            raise InvalidIdentifierError(text, "identifier is empty")

        segments = [s for s in text.strip().split("/") if s]
        if len(segments) < _MIN_SEGMENTS:
            raise InvalidIdentifierError(
                text,
                f"expected at least {_MIN_SEGMENTS} path segments, found {len(segments)}",
            )
        if len(segments) % 2:
            raise InvalidIdentifierError(
                text, "resource types and names must come in pairs"
            )
        for index, key in _FIXED_KEYS:
            if segments[index].lower() != key:
                raise InvalidIdentifierError(
                    text,
                    f"expected {key!r} at segment {index + 1}, found {segments[index]!r}",
                )

        namespace = segments[5]
        pairs = [(segments[i], segments[i + 1]) for i in range(6, len(segments), 2)]
        parents = pairs[:-1]

        return cls(
            subscription=segments[1],
            resource_group_name=segments[3],
            provider_namespace=namespace,
            resource_type="/".join([namespace, *(t for t, _ in pairs)]),
            resource_name=pairs[-1][1],
            parent_resource="/".join(f"{t}/{n}" for t, n in parents) or None,
        )

    def __str__(self) -> str:
        parent = f"/{self.parent_resource}" if self.parent_resource else ""
        leaf_type = self.resource_type.rsplit("/", 1)[-1]
        return (
            f"/subscriptions/{self.subscription}"
            f"/resourceGroups/{self.resource_group_name}"
            f"/providers/{self.provider_namespace}"
            f"{parent}/{leaf_type}/{self.resource_name}"
        )
