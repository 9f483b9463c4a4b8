#!/usr/bin/env python3
"""Example: Quickstart for kvcontacts

Resolve a vault from each of the three reference forms and fetch its
certificate contacts from an in-memory fetcher.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install kvcontacts
"""
from __future__ import annotations

import kvcontacts
from kvcontacts.contacts import ContactSerializer, InMemoryContactFetcher
from kvcontacts.errors import FetchError, InvalidIdentifierError
from kvcontacts.reference import VaultName, VaultObject, VaultResourceId

RESOURCE_ID = (
    "/subscriptions/00000000-0000-0000-0000-000000000000"
    "/resourceGroups/rg-prod/providers/Microsoft.KeyVault/vaults/prod-kv"
)


def main() -> None:
    print(f"kvcontacts version: {kvcontacts.__version__}")

    fetcher = InMemoryContactFetcher(
        {"prod-kv": [{"email": "ops@example.com", "name": "Ops"}, {"email": "sec@example.com"}]},
        failures={"locked-kv": FetchError("Forbidden", status_code=403)},
    )

    # Step 1: Every reference form resolves to the same vault
    for ref in (VaultName("prod-kv"), VaultObject(vault_name="prod-kv"), VaultResourceId(RESOURCE_ID)):
        print(f"{type(ref).__name__:16} -> {kvcontacts.resolve(ref)}")

    # Step 2: Fetch and normalize
    contacts = kvcontacts.get_certificate_contacts(VaultResourceId(RESOURCE_ID), fetcher)
    print(ContactSerializer().to_json(contacts))

    # Step 3: A vault that does not exist is simply empty
    print(f"missing-kv: {kvcontacts.fetch_contacts('missing-kv', fetcher)}")

    # Step 4: Other failures surface
    for ref in (VaultResourceId("not-a-valid-id"), VaultName("locked-kv")):
        try:
            kvcontacts.get_certificate_contacts(ref, fetcher)
        except (InvalidIdentifierError, FetchError) as exc:
            print(f"{type(exc).__name__}: {exc}")


if __name__ == "__main__":
    main()
