"""Unit tests for kvcontacts.contacts.models and kvcontacts.errors."""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from kvcontacts.contacts.models import CertificateContact, RawContact
from kvcontacts.errors import (
    AmbiguousReferenceError,
    FetchError,
    KvContactsError,
    MissingReferenceError,
    NotFoundError,
)


class TestCertificateContactFromRaw:
    def test_from_raw_contact(self) -> None:
        contact = CertificateContact.from_raw(
            RawContact("a@x.com", name="Alice", phone="555"), "kv"
        )
        assert contact == CertificateContact("kv", "a@x.com", name="Alice", phone="555")

    def test_from_duck_typed_object(self) -> None:
        raw = SimpleNamespace(email_address="a@x.com", name=None, phone=None)
        assert CertificateContact.from_raw(raw, "kv") == CertificateContact("kv", "a@x.com")

    @pytest.mark.parametrize("key", ["email_address", "emailAddress", "email"])
    def test_from_mapping_email_keys(self, key: str) -> None:
        assert CertificateContact.from_raw({key: "a@x.com"}, "kv").email == "a@x.com"

    def test_mapping_optional_fields(self) -> None:
        contact = CertificateContact.from_raw(
            {"email": "a@x.com", "name": "Alice", "phone": "555"}, "kv"
        )
        assert (contact.name, contact.phone) == ("Alice", "555")

    def test_vault_name_threaded_through(self) -> None:
        assert CertificateContact.from_raw({"email": "a@x.com"}, "vault9").vault_name == "vault9"

    def test_missing_email_raises(self) -> None:
        with pytest.raises(TypeError):
            CertificateContact.from_raw({"name": "Alice"}, "kv")

    def test_contact_is_frozen(self) -> None:
        contact = CertificateContact("kv", "a@x.com")
        with pytest.raises(AttributeError):
            contact.email = "b@x.com"  # type: ignore[misc]


class TestErrors:
    def test_all_errors_share_base(self) -> None:
        for error in (
            FetchError("x"),
            NotFoundError("kv"),
            AmbiguousReferenceError(("a", "b")),
            MissingReferenceError(),
        ):
            assert isinstance(error, KvContactsError)

    def test_not_found_error_status(self) -> None:
        error = NotFoundError("kv")
        assert error.status_code == 404
        assert error.is_not_found
        assert "kv" in str(error)

    def test_fetch_error_not_found_only_for_404(self) -> None:
        assert not FetchError("x", status_code=500).is_not_found
        assert not FetchError("x").is_not_found
        assert FetchError("x", status_code=404).is_not_found

    def test_fetch_error_repr(self) -> None:
        assert "status_code=403" in repr(FetchError("denied", status_code=403))

    def test_ambiguous_message_lists_forms(self) -> None:
        assert "resource_id, vault_name" in str(AmbiguousReferenceError(("resource_id", "vault_name")))
