import contextlib
import functools
from dataclasses import dataclass
from typing import Generator, Optional

import click

from exporters.item_exporter_creator import create_item_exporters
from minting.collaborators.authorization import OwnableAuthorizer
from minting.collaborators.ledger import InMemoryMultiTokenLedger
from minting.exceptions import BookEditionError
from minting.service.book_edition_contract import BookEditionContract
from storage.contract_state_store import ContractState, JsonContractStateStore
from storage.uri_store import InMemoryUriStore
from utils.logger_utils import get_logger

logger = get_logger("Contract Session")


@dataclass
class ContractSession:
    contract: BookEditionContract
    authorizer: OwnableAuthorizer
    ledger: InMemoryMultiTokenLedger
    uri_store: InMemoryUriStore

    def to_state(self) -> ContractState:
        return ContractState(
            default_prefix=self.uri_store.get_default_prefix(),
            owner=self.authorizer.current_administrator(),
            name=self.contract.name,
            symbol=self.contract.symbol,
            overrides={str(token_id): uri for token_id, uri in self.uri_store.overrides().items()},
            ledger=self.ledger.to_dict(),
        )


@contextlib.contextmanager
def open_contract(state_file: str, output: Optional[str] = None, persist: bool = True) -> Generator[ContractSession, None, None]:
    """
    Loads the contract persisted in `state_file` and saves it back when the block succeeds.
    A failing block leaves the state file untouched.
    """
    store = JsonContractStateStore(state_file)
    if not store.exists():
        raise click.ClickException(f"Contract state file {state_file} not found, run init_contract first")

    state = store.load()
    authorizer = OwnableAuthorizer(state.owner)
    ledger = InMemoryMultiTokenLedger.from_dict(state.ledger)
    uri_store = InMemoryUriStore(state.default_prefix, state.override_table())

    item_exporter = create_item_exporters(output) if persist else None
    contract = BookEditionContract.attach(
        authorizer=authorizer,
        ledger=ledger,
        uri_store=uri_store,
        item_exporter=item_exporter,
        name=state.name,
        symbol=state.symbol,
    )

    if item_exporter is not None:
        item_exporter.open()
    try:
        session = ContractSession(contract=contract, authorizer=authorizer, ledger=ledger, uri_store=uri_store)
        yield session
        if persist:
            store.save(session.to_state())
            logger.debug(f"Contract state persisted to {state_file}")
    finally:
        if item_exporter is not None:
            item_exporter.close()


def handle_contract_errors(func):
    """Reports contract failures as click errors (exit code 1) instead of tracebacks."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BookEditionError as e:
            raise click.ClickException(f"{type(e).__name__}: {e}")

    return wrapper
