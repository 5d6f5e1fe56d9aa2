import click
from rich.console import Console
from rich.table import Table

from aioniban.errors import AionIbanError
from aioniban.iban import (
    Iban,
    address_to_iban,
    bban_to_iban,
    create_indirect,
    iban_to_address,
)
from aioniban.lib.hashing import get_available_hashes


@click.command("to-iban")
@click.argument("address")
def to_iban(address):
    """Converts an Aion address into a direct IBAN."""
    try:
        click.echo(address_to_iban(address))
    except AionIbanError as e:
        raise click.ClickException(str(e))


@click.command("to-address")
@click.argument("iban")
@click.option(
    "--strict",
    is_flag=True,
    help="Fail instead of printing nothing for non-direct IBANs.",
)
@click.option(
    "--hash",
    "hash_name",
    type=click.Choice(get_available_hashes()),
    envvar="AIONIBAN_HASH",
    default=None,
    help="Hash used for the checksum casing of the address.",
)
def to_address(iban, strict, hash_name):
    """Converts a direct IBAN into a checksum address."""
    try:
        address = iban_to_address(iban, strict=strict, hash_name=hash_name)
    except AionIbanError as e:
        raise click.ClickException(str(e))

    if address is None:
        click.echo(f"IBAN is not direct ({len(iban)} characters): {iban}", err=True)
        return

    click.echo(address)


@click.command("from-bban")
@click.argument("bban")
def from_bban(bban):
    """Builds an IBAN from a BBAN by adding the check digits."""
    if not (bban.isascii() and bban.isalnum()):
        raise click.ClickException(f"BBAN must be alphanumeric: {bban}")
    click.echo(bban_to_iban(bban.upper()))


@click.command("indirect")
@click.option("--institution", required=True, help="Four character institution code.")
@click.option("--identifier", required=True, help="Nine character client identifier.")
def indirect(institution, identifier):
    """Builds an indirect IBAN from an institution and client identifier."""
    try:
        click.echo(create_indirect(institution.upper(), identifier.upper()))
    except AionIbanError as e:
        raise click.ClickException(str(e))


@click.command("inspect")
@click.argument("iban")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
def inspect_iban(iban, as_json):
    """Shows every property derived from an IBAN."""
    try:
        details = Iban(iban).details()
    except AionIbanError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(details.model_dump_json(indent=2))
        return

    table = Table(title=f"IBAN {details.iban}")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Well formed", "yes" if details.well_formed else "no")
    table.add_row("Valid checksum", "yes" if details.valid_checksum else "no")
    table.add_row("Check digits", details.check_digits)
    table.add_row("Direct", "yes" if details.direct else "no")
    table.add_row("Indirect", "yes" if details.indirect else "no")
    if details.address:
        table.add_row("Address", details.address)
    if details.indirect:
        table.add_row("Institution", details.institution)
        table.add_row("Client", details.client)

    Console().print(table)
