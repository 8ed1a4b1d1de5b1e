import click

from cli.admin import balance_of, set_base_uri, set_token_uri, transfer_ownership
from cli.init_contract import init_contract
from cli.mint import mint, mint_batch
from cli.token_id import decode_token_id, encode_token_id
from cli.token_uri import fetch_token_uri, token_uri


@click.group()
@click.version_option(version="1.0.0")
@click.pass_context
def cli(ctx):
    pass


# Token id codec
cli.add_command(encode_token_id, "encode_token_id")
cli.add_command(decode_token_id, "decode_token_id")

# Local contract
cli.add_command(init_contract, "init_contract")
cli.add_command(mint, "mint")
cli.add_command(mint_batch, "mint_batch")
cli.add_command(token_uri, "token_uri")
cli.add_command(balance_of, "balance_of")

# Administration
cli.add_command(set_token_uri, "set_token_uri")
cli.add_command(set_base_uri, "set_base_uri")
cli.add_command(transfer_ownership, "transfer_ownership")

# Deployed contract
cli.add_command(fetch_token_uri, "fetch_token_uri")
