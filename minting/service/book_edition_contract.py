import threading
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from constants.contract_interface_id import SUPPORTED_INTERFACE_IDS
from minting.collaborators.authorization import AuthorizationCollaborator
from minting.collaborators.ledger import LedgerCollaborator
from minting.exceptions import BookEditionError, LedgerRejectedError, UnauthorizedError
from minting.models.events import BatchIssuedEvent, IssuedEvent, OverrideSetEvent
from minting.service.identifier_codec import IdentifierCodec
from minting.service.metadata_resolver import MetadataResolver
from storage.uri_store import InMemoryUriStore, UriStore
from utils.formatter_utils import to_normalized_address
from utils.logger_utils import get_logger
from utils.validation_utils import validate_equal_length

logger = get_logger("Book Edition Contract")


class BookEditionContract(object):
    """
    Multi-token collection where every token id is one physical copy of a book edition.

    Administrative operations (minting, URI overrides, prefix changes) are
    checked against the authorization collaborator and executed under a
    single lock. A mint either commits completely or leaves no trace: the
    URI writes are undone when the ledger refuses the credit, and events are
    only exported once the credit went through. Exporter failures are logged
    and never undo a committed operation.
    """

    def __init__(
        self,
        sender: str,
        authorizer: AuthorizationCollaborator,
        ledger: LedgerCollaborator,
        default_prefix: Optional[str] = None,
        uri_store: Optional[UriStore] = None,
        item_exporter=None,
        name: str = "",
        symbol: str = "",
    ):
        if default_prefix is None and uri_store is None:
            raise ValueError("Either default_prefix or uri_store must be provided")

        if not authorizer.is_authorized(sender):
            logger.warning(f"Rejected deployment by {sender}")
            raise UnauthorizedError(sender)

        if uri_store is None:
            uri_store = InMemoryUriStore(default_prefix)
        elif default_prefix is not None:
            uri_store.set_default_prefix(default_prefix)

        self._setup(authorizer, ledger, uri_store, item_exporter, name, symbol)
        logger.info(f"Deployed by {sender} with default URI prefix '{uri_store.get_default_prefix()}'")

    @classmethod
    def attach(
        cls,
        authorizer: AuthorizationCollaborator,
        ledger: LedgerCollaborator,
        uri_store: UriStore,
        item_exporter=None,
        name: str = "",
        symbol: str = "",
    ) -> "BookEditionContract":
        """Rebinds an already deployed contract to its persisted state, no deployment check involved."""
        contract = cls.__new__(cls)
        contract._setup(authorizer, ledger, uri_store, item_exporter, name, symbol)
        return contract

    def _setup(self, authorizer, ledger, uri_store, item_exporter, name, symbol) -> None:
        self._authorizer = authorizer
        self._ledger = ledger
        self._resolver = MetadataResolver(uri_store)
        self._item_exporter = item_exporter
        self._lock = threading.RLock()
        self.name = name
        self.symbol = symbol

    # ---------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------

    @staticmethod
    def encode(edition: int, item: int) -> int:
        return IdentifierCodec.encode(edition, item)

    @staticmethod
    def decode(token_id: int) -> Tuple[int, int]:
        return IdentifierCodec.decode(token_id)

    def resolve(self, token_id: int) -> str:
        return self._resolver.resolve(token_id)

    def resolve_by_parts(self, edition: int, item: int) -> str:
        return self._resolver.resolve_by_parts(edition, item)

    def current_default_prefix(self) -> str:
        return self._resolver.current_default_prefix()

    def owner(self) -> Optional[str]:
        return self._authorizer.current_administrator()

    def balance_of(self, account: str, token_id: int) -> int:
        return self._ledger.balance_of(account, token_id)

    @staticmethod
    def supports_interface(interface_id: str) -> bool:
        return interface_id.lower() in SUPPORTED_INTERFACE_IDS

    # ---------------------------------------------------------------------
    # Administrative operations
    # ---------------------------------------------------------------------

    def set_default_prefix(self, sender: str, prefix: str) -> None:
        with self._lock:
            self._require_administrator(sender)
            self._resolver.replace_default_prefix(prefix)

    def set_override(self, sender: str, token_id: int, uri: str) -> None:
        with self._lock:
            self._require_administrator(sender)
            self._validate_token_id(token_id)
            self._resolver.write_overrides({token_id: uri})
            self._export([OverrideSetEvent(token_id=token_id, uri=uri)])
            logger.info(f"Token URI of {token_id} set to '{uri}'")

    def set_override_by_parts(self, sender: str, edition: int, item: int, uri: str) -> None:
        with self._lock:
            self._require_administrator(sender)
            token_id = IdentifierCodec.encode(edition, item)
            self.set_override(sender, token_id, uri)

    def issue(self, sender: str, recipient: str, edition: int, item: int) -> int:
        with self._lock:
            self._require_administrator(sender)
            recipient = to_normalized_address(recipient)

            token_id = IdentifierCodec.encode(edition, item)
            uri = self._resolver.default_uri(token_id)
            events = [
                OverrideSetEvent(token_id=token_id, uri=uri),
                IssuedEvent(recipient=recipient, edition=edition, item=item),
            ]

            self._write_and_credit(
                {token_id: uri}, lambda: self._ledger.credit(recipient, token_id, 1, operator=sender)
            )
            self._export(events)

            logger.info(f"Issued edition {edition} item {item} (token {token_id}) to {recipient}")
            return token_id

    def issue_batch(self, sender: str, recipient: str, editions: Sequence[int], items: Sequence[int]) -> List[int]:
        with self._lock:
            self._require_administrator(sender)
            validate_equal_length(editions, items)
            recipient = to_normalized_address(recipient)

            token_ids: List[int] = []
            staged_uris: Dict[int, str] = {}
            override_events: List[OverrideSetEvent] = []
            for edition, item in zip(editions, items):
                token_id = IdentifierCodec.encode(edition, item)
                uri = self._resolver.default_uri(token_id)
                token_ids.append(token_id)
                staged_uris[token_id] = uri
                override_events.append(OverrideSetEvent(token_id=token_id, uri=uri))

            self._write_and_credit(
                staged_uris,
                lambda: self._ledger.credit_batch(recipient, token_ids, [1] * len(token_ids), operator=sender),
            )
            self._export(
                override_events + [BatchIssuedEvent(recipient=recipient, editions=list(editions), items=list(items))]
            )

            logger.info(f"Issued {len(token_ids)} book tokens to {recipient}: {token_ids}")
            return token_ids

    # ---------------------------------------------------------------------
    # Internals
    # ---------------------------------------------------------------------

    def _require_administrator(self, sender: str) -> None:
        if not self._authorizer.is_authorized(sender):
            logger.warning(f"Rejected administrative call from {sender}")
            raise UnauthorizedError(sender)

    @staticmethod
    def _validate_token_id(token_id: int) -> None:
        # decode rejects anything outside uint256
        IdentifierCodec.decode(token_id)

    def _write_and_credit(self, uris: Dict[int, str], credit_call: Callable[[], None]) -> None:
        """
        Writes the mint URIs, then credits the ledger. Receiver hooks run
        during the credit and already resolve the new URIs; a failed credit
        puts the previous entries back.
        """
        previous = self._resolver.write_overrides(uris)
        try:
            credit_call()
        except LedgerRejectedError as e:
            logger.warning(f"Ledger rejected credit: {e}")
            self._resolver.restore_overrides(previous)
            raise
        except BookEditionError:
            self._resolver.restore_overrides(previous)
            raise
        except Exception as e:
            logger.warning(f"Ledger failed to credit: {e}")
            self._resolver.restore_overrides(previous)
            raise LedgerRejectedError(str(e)) from e

    def _export(self, events: List[BaseModel]) -> None:
        # Events are fire-and-forget, the operation is already committed
        if self._item_exporter is None:
            return
        try:
            self._item_exporter.export_items(events)
        except Exception:
            logger.error(f"Failed to export {len(events)} events", exc_info=True)
