"""Shared test fixtures for kvcontacts.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest

VAULT2_RESOURCE_ID = (
    "/subscriptions/00000000-0000-0000-0000-000000000000"
    "/resourceGroups/rg-prod/providers/Microsoft.KeyVault/vaults/vault2"
)

SNAPSHOT_YAML = """\
vaults:
  vault2:
    - email_address: a@x.com
      name: Alice
    - email_address: b@x.com
      phone: "555-0100"
  empty-kv: []
  no-list-kv: null
  locked-kv:
    status: 403
    message: Caller is not authorized
"""


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "kvcontacts"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def vault2_resource_id() -> str:
    return VAULT2_RESOURCE_ID


@pytest.fixture()
def snapshot_file(tmp_path: Path) -> Path:
    """Write a contacts snapshot covering the common cases."""
    path = tmp_path / "contacts.yaml"
    path.write_text(SNAPSHOT_YAML, encoding="utf-8")
    return path
