"""CLI entry point for kvcontacts.

Invoked as::

    kvcontacts [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m kvcontacts.cli.main

Commands
--------
get         Show the certificate contacts of a vault
parse-id    Show the components of a resource identifier
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from kvcontacts.contacts.fetcher import SnapshotContactFetcher
    from kvcontacts.contacts.models import CertificateContact
    from kvcontacts.reference import VaultObject

console = Console()
err_console = Console(stderr=True)


def _load_fetcher_or_exit(path: str) -> "SnapshotContactFetcher":
    """Load a contacts snapshot, exiting on error."""
    from kvcontacts.contacts.fetcher import SnapshotContactFetcher
    from kvcontacts.errors import SnapshotError

    try:
        return SnapshotContactFetcher.from_file(path)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {escape(str(exc))}")
        sys.exit(1)
    except SnapshotError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)


def _load_input_object_or_exit(path: str) -> "VaultObject":
    """Read a vault object from a YAML or JSON file, exiting on error."""
    from kvcontacts.reference import VaultObject

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {escape(str(exc))}")
        sys.exit(1)
    except yaml.YAMLError as exc:
        err_console.print(f"[red]Error:[/red] {path} is not valid YAML or JSON: {escape(str(exc))}")
        sys.exit(1)

    if not isinstance(data, dict):
        err_console.print(f"[red]Error:[/red] {path} must contain a vault object mapping")
        sys.exit(1)
    try:
        return VaultObject.from_mapping(data)
    except KeyError:
        err_console.print(f"[red]Error:[/red] {path} has no vault_name")
        sys.exit(1)


def _contacts_table(vault_name: str, contacts: list["CertificateContact"]) -> Table:
    table = Table(title=f"Certificate contacts: {vault_name}", show_lines=False)
    table.add_column("Email", style="bold")
    table.add_column("Name")
    table.add_column("Phone")
    table.add_column("Vault", style="dim")
    for contact in contacts:
        table.add_row(contact.email, contact.name or "", contact.phone or "", contact.vault_name)
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="kvcontacts")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Read the certificate contacts of a key vault."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from kvcontacts import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]kvcontacts[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# get command
# ---------------------------------------------------------------------------


@cli.command(name="get")
@click.option("--vault-name", "-n", default=None, help="Vault name")
@click.option("--resource-id", default=None, help="Full resource id of the vault")
@click.option(
    "--input-object",
    type=click.Path(exists=False),
    default=None,
    help="YAML or JSON file holding a vault object",
)
@click.option(
    "--contacts-file",
    envvar="KVCONTACTS_CONTACTS_FILE",
    type=click.Path(exists=False),
    required=True,
    help="Contacts snapshot to read from (env: KVCONTACTS_CONTACTS_FILE)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Reject more than one of --vault-name, --resource-id, --input-object",
)
def get_command(
    vault_name: str | None,
    resource_id: str | None,
    input_object: str | None,
    contacts_file: str,
    output_format: str,
    strict: bool,
) -> None:
    """Show the certificate contacts of a vault.

    Identify the vault with one of --vault-name, --resource-id or
    --input-object. When several are given, --input-object wins over
    --resource-id, which wins over --vault-name.

    Examples:

    \b
        kvcontacts get -n prod-kv --contacts-file contacts.yaml
        kvcontacts get --resource-id /subscriptions/.../vaults/prod-kv --format json
    """
    from kvcontacts.contacts import ContactSerializer, fetch_contacts
    from kvcontacts.errors import FetchError, KvContactsError
    from kvcontacts.reference import reference_from_parameters
    from kvcontacts.resolver import resolve

    vault_object = _load_input_object_or_exit(input_object) if input_object else None

    try:
        ref = reference_from_parameters(
            vault_name=vault_name,
            input_object=vault_object,
            resource_id=resource_id,
            strict=strict,
        )
        name = resolve(ref)
    except KvContactsError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    fetcher = _load_fetcher_or_exit(contacts_file)
    try:
        contacts = fetch_contacts(name, fetcher)
    except FetchError as exc:
        status = f" (HTTP {exc.status_code})" if exc.status_code is not None else ""
        err_console.print(f"[red]Request failed[/red]{status}: {escape(str(exc))}")
        sys.exit(1)

    serializer = ContactSerializer()
    if output_format == "json":
        click.echo(serializer.to_json(contacts))
    elif output_format == "yaml":
        click.echo(serializer.to_yaml(contacts), nl=False)
    elif not contacts:
        console.print(f"[yellow]No certificate contacts[/yellow] for vault {escape(name)}")
    else:
        console.print(_contacts_table(name, contacts))


# ---------------------------------------------------------------------------
# parse-id command
# ---------------------------------------------------------------------------


@cli.command(name="parse-id")
@click.argument("resource_id")
def parse_id_command(resource_id: str) -> None:
    """Show the components of a resource identifier.

    RESOURCE_ID is the full identifier, starting with /subscriptions/.
    """
    from kvcontacts.errors import InvalidIdentifierError
    from kvcontacts.resource_id import ResourceIdentifier

    try:
        rid = ResourceIdentifier.parse(resource_id)
    except InvalidIdentifierError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Subscription[/bold]", rid.subscription)
    table.add_row("[bold]Resource group[/bold]", rid.resource_group_name)
    table.add_row("[bold]Provider[/bold]", rid.provider_namespace)
    table.add_row("[bold]Resource type[/bold]", rid.resource_type)
    table.add_row("[bold]Parent[/bold]", rid.parent_resource or "-")
    table.add_row("[bold]Name[/bold]", rid.resource_name)
    console.print(table)


if __name__ == "__main__":
    cli()
