import click

from cli.contract_session import handle_contract_errors
from minting.service.identifier_codec import IdentifierCodec


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-e", "--edition", required=True, type=int, help="Edition (print run) number.")
@click.option("-i", "--item", required=True, type=int, help="Copy number within the edition, 0 <= item < 1000000.")
@handle_contract_errors
def encode_token_id(edition, item):
    """Prints the token id of one copy of an edition."""
    click.echo(IdentifierCodec.encode(edition, item))


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-t", "--token-id", required=True, type=int, help="Token id to split into edition and item.")
@handle_contract_errors
def decode_token_id(token_id):
    """Prints the edition and item carried by a token id."""
    edition, item = IdentifierCodec.decode(token_id)
    click.echo(f"edition={edition} item={item}")
