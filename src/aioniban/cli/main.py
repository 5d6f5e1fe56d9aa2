import click

# Import individual commands from modules
from aioniban.cli.iban import to_iban, to_address, from_bban, indirect, inspect_iban
from aioniban.cli.address import checksum, verify, random_command


@click.group()
def cli():
    """Converts Aion addresses to and from XE IBANs."""
    pass


# Add IBAN commands
cli.add_command(to_iban)
cli.add_command(to_address)
cli.add_command(from_bban)
cli.add_command(indirect)
cli.add_command(inspect_iban)

# Add address commands
cli.add_command(checksum)
cli.add_command(verify)
cli.add_command(random_command)


if __name__ == "__main__":
    cli()
