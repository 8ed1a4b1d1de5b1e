import asyncio

import click

from cli.contract_session import handle_contract_errors, open_contract
from config.settings import settings
from minting.service.identifier_codec import IdentifierCodec
from onchain.book_edition_reader import BookEditionContractReader


def _resolve_token_id(token_id, edition, item):
    if token_id is not None:
        return token_id
    if edition is None or item is None:
        raise click.UsageError("Provide either --token-id or both --edition and --item")
    return IdentifierCodec.encode(edition, item)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-f", "--state-file", default=settings.contract.state_file, show_default=True, type=str, help="Path of the contract state file.")
@click.option("-t", "--token-id", default=None, type=int, help="Token id to resolve.")
@click.option("-e", "--edition", default=None, type=int, help="Edition, used with --item instead of --token-id.")
@click.option("-i", "--item", default=None, type=int, help="Item, used with --edition instead of --token-id.")
@handle_contract_errors
def token_uri(state_file, token_id, edition, item):
    """Prints the metadata URI of a token of the local contract."""
    token_id = _resolve_token_id(token_id, edition, item)
    with open_contract(state_file, persist=False) as session:
        click.echo(session.contract.resolve(token_id))


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-p", "--provider-uri", default=settings.ethereum.provider_uri, show_default=True, type=str, help="The URI of the web3 provider e.g. https://mainnet.infura.io.")
@click.option("-c", "--contract-address", default=settings.ethereum.contract_address, type=str, help="Address of the deployed book edition contract.")
@click.option("-t", "--token-id", default=None, type=int, help="Token id to resolve.")
@click.option("-e", "--edition", default=None, type=int, help="Edition, used with --item instead of --token-id.")
@click.option("-i", "--item", default=None, type=int, help="Item, used with --edition instead of --token-id.")
@handle_contract_errors
def fetch_token_uri(provider_uri, contract_address, token_id, edition, item):
    """Reads the metadata URI of a token from a deployed contract."""
    if not contract_address:
        raise click.UsageError("A contract address is required (--contract-address or BOOK_EDITION_CONTRACT_ADDRESS)")

    token_id = _resolve_token_id(token_id, edition, item)
    reader = BookEditionContractReader.from_provider_uri(
        provider_uri, contract_address, timeout=settings.ethereum.rpc_timeout
    )
    uri = asyncio.run(reader.uri(token_id))
    if uri is None:
        raise click.ClickException(f"Contract {contract_address} returned no URI for token {token_id}")
    click.echo(uri)
