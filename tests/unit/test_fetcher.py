"""Unit tests for kvcontacts.contacts.fetcher."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from kvcontacts.contacts.fetcher import (
    ContactFetcher,
    InMemoryContactFetcher,
    SnapshotContactFetcher,
)
from kvcontacts.contacts.models import RawContact, RawContacts
from kvcontacts.errors import FetchError, NotFoundError, SnapshotError


class TestContactFetcherProtocol:
    def test_in_memory_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryContactFetcher(), ContactFetcher)

    def test_snapshot_satisfies_protocol(self) -> None:
        assert isinstance(SnapshotContactFetcher({"vaults": {}}), ContactFetcher)

    def test_plain_object_does_not(self) -> None:
        assert not isinstance(object(), ContactFetcher)


class TestInMemoryContactFetcher:
    def test_list_wrapped_in_raw_contacts(self) -> None:
        fetcher = InMemoryContactFetcher({"kv": [RawContact("a@x.com")]})
        assert fetcher.get_certificate_contacts("kv") == RawContacts((RawContact("a@x.com"),))

    def test_raw_contacts_returned_as_is(self) -> None:
        contacts = RawContacts(contact_list=None)
        fetcher = InMemoryContactFetcher({"kv": contacts})
        assert fetcher.get_certificate_contacts("kv") is contacts

    def test_none_returned_as_none(self) -> None:
        assert InMemoryContactFetcher({"kv": None}).get_certificate_contacts("kv") is None

    def test_unknown_vault_raises_not_found(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            InMemoryContactFetcher().get_certificate_contacts("missing")
        assert exc_info.value.is_not_found
        assert exc_info.value.vault_name == "missing"

    def test_failure_raised(self) -> None:
        error = FetchError("denied", status_code=403)
        fetcher = InMemoryContactFetcher({"kv": []}, failures={"kv": error})
        with pytest.raises(FetchError) as exc_info:
            fetcher.get_certificate_contacts("kv")
        assert exc_info.value is error

    def test_records_calls(self) -> None:
        fetcher = InMemoryContactFetcher({"a": [], "b": []})
        fetcher.get_certificate_contacts("a")
        fetcher.get_certificate_contacts("b")
        fetcher.get_certificate_contacts("a")
        assert fetcher.calls == ["a", "b", "a"]
        assert fetcher.call_count == 3


class TestSnapshotContactFetcher:
    def test_from_yaml_file(self, snapshot_file: Path) -> None:
        fetcher = SnapshotContactFetcher.from_file(snapshot_file)
        contacts = fetcher.get_certificate_contacts("vault2")
        assert contacts is not None
        assert [c["email_address"] for c in contacts.contact_list] == ["a@x.com", "b@x.com"]
        assert fetcher.source == str(snapshot_file)

    def test_from_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "contacts.json"
        path.write_text(json.dumps({"vaults": {"kv": [{"email": "a@x.com"}]}}), encoding="utf-8")
        contacts = SnapshotContactFetcher.from_file(path).get_certificate_contacts("kv")
        assert contacts == RawContacts(({"email": "a@x.com"},))

    def test_null_vault_returns_none(self, snapshot_file: Path) -> None:
        fetcher = SnapshotContactFetcher.from_file(snapshot_file)
        assert fetcher.get_certificate_contacts("no-list-kv") is None

    def test_status_entry_raises_fetch_error(self, snapshot_file: Path) -> None:
        fetcher = SnapshotContactFetcher.from_file(snapshot_file)
        with pytest.raises(FetchError) as exc_info:
            fetcher.get_certificate_contacts("locked-kv")
        assert exc_info.value.status_code == 403
        assert str(exc_info.value) == "Caller is not authorized"

    def test_status_404_entry_is_not_found(self) -> None:
        fetcher = SnapshotContactFetcher({"vaults": {"kv": {"status": 404}}})
        with pytest.raises(FetchError) as exc_info:
            fetcher.get_certificate_contacts("kv")
        assert exc_info.value.is_not_found

    def test_missing_vault_raises_not_found(self, snapshot_file: Path) -> None:
        with pytest.raises(NotFoundError):
            SnapshotContactFetcher.from_file(snapshot_file).get_certificate_contacts("nope")

    @pytest.mark.parametrize(
        "document",
        [
            None,
            [],
            {"vault": {}},
            {"vaults": []},
            {"vaults": {"kv": "a@x.com"}},
            {"vaults": {"kv": {"message": "no status"}}},
            {"vaults": {"kv": {"status": "forbidden"}}},
            {"vaults": {"kv": {"status": None}}},
            {"vaults": {"kv": [{"name": "Ops"}]}},
            {"vaults": {"kv": [{"email": None}]}},
            {"vaults": {"kv": ["a@x.com"]}},
        ],
    )
    def test_bad_shape_raises(self, document: object) -> None:
        with pytest.raises(SnapshotError):
            SnapshotContactFetcher(document)

    def test_bad_status_message_names_vault(self) -> None:
        with pytest.raises(SnapshotError, match="status must be an integer"):
            SnapshotContactFetcher({"vaults": {"kv": {"status": "forbidden"}}})

    def test_contact_without_email_message(self) -> None:
        with pytest.raises(SnapshotError, match="contact 2 has no email address"):
            SnapshotContactFetcher({"vaults": {"kv": [{"email": "a@x.com"}, {"name": "Ops"}]}})

    def test_mixed_email_keys_accepted(self) -> None:
        fetcher = SnapshotContactFetcher(
            {"vaults": {"kv": [{"email": "a@x.com"}, {"emailAddress": "b@x.com"}]}}
        )
        assert fetcher.get_certificate_contacts("kv") is not None

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("vaults: [unclosed", encoding="utf-8")
        with pytest.raises(SnapshotError):
            SnapshotContactFetcher.from_file(path)

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            SnapshotContactFetcher.from_file(tmp_path / "missing.yaml")
