import click
import sys

from aioniban.checksum import check_address_checksum, to_checksum_address
from aioniban.errors import AionIbanError
from aioniban.iban import address_to_iban
from aioniban.lib.formats import random_direct_address
from aioniban.lib.hashing import get_available_hashes

hash_option = click.option(
    "--hash",
    "hash_name",
    type=click.Choice(get_available_hashes()),
    envvar="AIONIBAN_HASH",
    default=None,
    help="Hash used to derive the checksum casing.",
)


@click.command("checksum")
@click.argument("address")
@hash_option
def checksum(address, hash_name):
    """Prints the checksum form of an address."""
    try:
        click.echo(to_checksum_address(address, hash_name))
    except AionIbanError as e:
        raise click.ClickException(str(e))


@click.command("verify")
@click.argument("address")
@hash_option
def verify(address, hash_name):
    """Checks the letter casing of a checksum address."""
    if check_address_checksum(address, hash_name):
        click.echo("✓ Checksum is valid")
        return

    click.echo("✗ Checksum is invalid", err=True)
    sys.exit(1)


@click.command("random")
@hash_option
def random_command(hash_name):
    """Generates a random checksum address and its direct IBAN."""
    address = to_checksum_address(random_direct_address(), hash_name)
    click.echo(address)
    click.echo(address_to_iban(address))
