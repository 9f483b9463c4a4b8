"""Serialization of normalized contacts to dicts, JSON and YAML.

Usage
-----
::

    from kvcontacts.contacts.serializer import ContactSerializer

    serializer = ContactSerializer()
    json_text = serializer.to_json(contacts)
"""
from __future__ import annotations

import json
from collections.abc import Sequence

import yaml

from kvcontacts.contacts.models import CertificateContact


class ContactSerializer:
    """Converts ``CertificateContact`` lists to plain data.

    Fields whose value is ``None`` are omitted from the output.
    """

    def contact_to_dict(self, contact: CertificateContact) -> dict[str, str]:
        """Serialize one contact to a dict without its ``None`` fields."""
        data = {
            "vault_name": contact.vault_name,
            "email": contact.email,
            "name": contact.name,
            "phone": contact.phone,
        }
        return {k: v for k, v in data.items() if v is not None}

    def to_dict(self, contacts: Sequence[CertificateContact]) -> list[dict[str, str]]:
        """Serialize contacts to a list of JSON-compatible dicts."""
        return [self.contact_to_dict(c) for c in contacts]

    def to_json(self, contacts: Sequence[CertificateContact], indent: int = 2) -> str:
        """Serialize contacts to a JSON string."""
        return json.dumps(self.to_dict(contacts), indent=indent, ensure_ascii=False)

    def to_yaml(self, contacts: Sequence[CertificateContact]) -> str:
        """Serialize contacts to a YAML string."""
        return yaml.dump(
            self.to_dict(contacts),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
