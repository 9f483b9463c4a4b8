"""Test that the quickstart API works for kvcontacts."""
from __future__ import annotations


def test_quickstart_import(package_name: str) -> None:
    import importlib

    module = importlib.import_module(package_name)
    assert callable(module.resolve)
    assert callable(module.fetch_contacts)
    assert callable(module.get_certificate_contacts)


def test_quickstart_version(expected_version: str) -> None:
    import kvcontacts

    assert kvcontacts.__version__ == expected_version


def test_quickstart_resolve_and_fetch() -> None:
    import kvcontacts
    from kvcontacts.contacts import InMemoryContactFetcher
    from kvcontacts.reference import VaultName

    fetcher = InMemoryContactFetcher({"prod-kv": [{"email": "ops@example.com"}]})
    contacts = kvcontacts.get_certificate_contacts(VaultName("prod-kv"), fetcher)
    assert [c.email for c in contacts] == ["ops@example.com"]


def test_quickstart_contacts_exports() -> None:
    from kvcontacts import contacts

    for name in contacts.__all__:
        assert hasattr(contacts, name)
