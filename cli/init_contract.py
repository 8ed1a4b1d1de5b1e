import click

from config.settings import settings
from minting.collaborators.authorization import OwnableAuthorizer
from minting.collaborators.ledger import InMemoryMultiTokenLedger
from minting.service.book_edition_contract import BookEditionContract
from storage.contract_state_store import ContractState, JsonContractStateStore
from storage.uri_store import InMemoryUriStore
from utils.logger_utils import get_logger

logger = get_logger("Init Contract")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-f", "--state-file", default=settings.contract.state_file, show_default=True, type=str, help="Path of the contract state file to create.")
@click.option("--owner", default=settings.contract.owner_address, type=str, help="Administrator address of the new contract.")
@click.option("--default-prefix", default=settings.contract.default_uri_prefix, show_default=True, type=str, help="Default token URI prefix.")
@click.option("--name", default=settings.contract.collection_name, show_default=True, type=str, help="Collection name.")
@click.option("--symbol", default=settings.contract.collection_symbol, show_default=True, type=str, help="Collection symbol.")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing state file.")
def init_contract(state_file, owner, default_prefix, name, symbol, force):
    """Deploys a fresh local book edition contract into a state file."""
    if not owner:
        raise click.UsageError("An owner address is required (--owner or CONTRACT_OWNER)")

    store = JsonContractStateStore(state_file)
    if store.exists() and not force:
        raise click.ClickException(f"State file {state_file} already exists, use --force to overwrite it")

    try:
        authorizer = OwnableAuthorizer(owner)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--owner")

    uri_store = InMemoryUriStore(default_prefix)
    # The owner deploys its own contract
    BookEditionContract(
        sender=owner,
        authorizer=authorizer,
        ledger=InMemoryMultiTokenLedger(),
        uri_store=uri_store,
        name=name,
        symbol=symbol,
    )

    store.save(
        ContractState(
            default_prefix=uri_store.get_default_prefix(),
            owner=authorizer.current_administrator(),
            name=name,
            symbol=symbol,
        )
    )
    logger.info(f"Initialized contract state at {state_file}")
    click.echo(f"Contract '{name}' ({symbol}) owned by {authorizer.current_administrator()} written to {state_file}")
