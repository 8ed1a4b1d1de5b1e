from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from constants.contract_interface_id import ERC1155_BATCH_RECEIVED, ERC1155_RECEIVED
from constants.token_id import ZERO_ADDRESS
from minting.exceptions import LedgerRejectedError, LengthMismatchError
from utils.formatter_utils import to_decimal_string, to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("Multi Token Ledger")


class TokenReceiver(ABC):
    """
    A recipient contract that must acknowledge incoming tokens.
    Returning anything but the ERC-1155 magic value refuses the tokens.
    """

    @abstractmethod
    def on_erc1155_received(self, operator: str, from_address: str, token_id: int, value: int) -> str:
        ...

    @abstractmethod
    def on_erc1155_batch_received(
        self, operator: str, from_address: str, token_ids: List[int], values: List[int]
    ) -> str:
        ...


class LedgerCollaborator(ABC):
    """
    Balance, ownership and transfer tracking for multi-token ids.
    The book edition contract only ever credits, one unit per id.
    """

    @abstractmethod
    def credit(self, recipient: str, token_id: int, amount: int = 1, operator: Optional[str] = None) -> None:
        ...

    @abstractmethod
    def credit_batch(
        self, recipient: str, token_ids: Sequence[int], amounts: Sequence[int], operator: Optional[str] = None
    ) -> None:
        ...

    @abstractmethod
    def balance_of(self, account: str, token_id: int) -> int:
        ...

    @abstractmethod
    def balance_of_batch(self, accounts: Sequence[str], token_ids: Sequence[int]) -> List[int]:
        ...

    @abstractmethod
    def set_approval_for_all(self, owner: str, operator: str, approved: bool) -> None:
        ...

    @abstractmethod
    def is_approved_for_all(self, owner: str, operator: str) -> bool:
        ...

    @abstractmethod
    def safe_transfer_from(self, sender: str, from_address: str, to_address: str, token_id: int, amount: int) -> None:
        ...

    @abstractmethod
    def safe_batch_transfer_from(
        self,
        sender: str,
        from_address: str,
        to_address: str,
        token_ids: Sequence[int],
        amounts: Sequence[int],
    ) -> None:
        ...


class InMemoryMultiTokenLedger(LedgerCollaborator):
    """
    Process-local ERC-1155 ledger.

    Every mutation is all-or-nothing: balances are moved first, then the
    recipient hook (if one is registered) is asked to accept, and a refusal
    (or a hook that raises) restores the previous balances before
    LedgerRejectedError is raised.
    """

    def __init__(self):
        # token_id -> account -> amount
        self._balances: Dict[int, Dict[str, int]] = {}
        # owner -> operators
        self._operator_approvals: Dict[str, Set[str]] = {}
        self._receivers: Dict[str, TokenReceiver] = {}

    def register_receiver(self, address: str, receiver: TokenReceiver) -> None:
        self._receivers[to_normalized_address(address)] = receiver

    def credit(self, recipient: str, token_id: int, amount: int = 1, operator: Optional[str] = None) -> None:
        self.credit_batch(recipient, [token_id], [amount], operator=operator, single=True)

    def credit_batch(
        self,
        recipient: str,
        token_ids: Sequence[int],
        amounts: Sequence[int],
        operator: Optional[str] = None,
        single: bool = False,
    ) -> None:
        self._move(
            operator=operator or ZERO_ADDRESS,
            from_address=ZERO_ADDRESS,
            to_address=recipient,
            token_ids=list(token_ids),
            amounts=list(amounts),
            single=single,
        )

    def balance_of(self, account: str, token_id: int) -> int:
        return self._balances.get(token_id, {}).get(to_normalized_address(account), 0)

    def balance_of_batch(self, accounts: Sequence[str], token_ids: Sequence[int]) -> List[int]:
        if len(accounts) != len(token_ids):
            raise LengthMismatchError(
                f"accounts and ids must have the same length, got {len(accounts)} and {len(token_ids)}"
            )
        return [self.balance_of(account, token_id) for account, token_id in zip(accounts, token_ids)]

    def set_approval_for_all(self, owner: str, operator: str, approved: bool) -> None:
        owner = to_normalized_address(owner)
        operator = to_normalized_address(operator)
        if owner == operator:
            raise LedgerRejectedError(f"{owner} cannot set approval status for itself")

        operators = self._operator_approvals.setdefault(owner, set())
        if approved:
            operators.add(operator)
        else:
            operators.discard(operator)

    def is_approved_for_all(self, owner: str, operator: str) -> bool:
        return to_normalized_address(operator) in self._operator_approvals.get(to_normalized_address(owner), set())

    def safe_transfer_from(self, sender: str, from_address: str, to_address: str, token_id: int, amount: int) -> None:
        self._require_owner_or_approved(sender, from_address)
        self._move(sender, from_address, to_address, [token_id], [amount], single=True)

    def safe_batch_transfer_from(
        self,
        sender: str,
        from_address: str,
        to_address: str,
        token_ids: Sequence[int],
        amounts: Sequence[int],
    ) -> None:
        self._require_owner_or_approved(sender, from_address)
        self._move(sender, from_address, to_address, list(token_ids), list(amounts), single=False)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON friendly snapshot. Token ids become decimal strings."""
        return {
            "balances": {
                to_decimal_string(token_id): {account: amount for account, amount in holders.items() if amount}
                for token_id, holders in self._balances.items()
                if any(holders.values())
            },
            "operator_approvals": {
                owner: sorted(operators) for owner, operators in self._operator_approvals.items() if operators
            },
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "InMemoryMultiTokenLedger":
        ledger = cls()
        if not data:
            return ledger
        for token_id, holders in data.get("balances", {}).items():
            ledger._balances[int(token_id)] = {account: int(amount) for account, amount in holders.items()}
        for owner, operators in data.get("operator_approvals", {}).items():
            ledger._operator_approvals[owner] = set(operators)
        return ledger

    def _require_owner_or_approved(self, sender: str, from_address: str) -> None:
        if to_normalized_address(sender) == to_normalized_address(from_address):
            return
        if not self.is_approved_for_all(from_address, sender):
            raise LedgerRejectedError(f"{sender} is neither the owner of {from_address} tokens nor approved")

    def _move(
        self,
        operator: str,
        from_address: str,
        to_address: str,
        token_ids: List[int],
        amounts: List[int],
        single: bool,
    ) -> None:
        if len(token_ids) != len(amounts):
            raise LengthMismatchError(f"ids and amounts must have the same length, got {len(token_ids)} and {len(amounts)}")

        operator = to_normalized_address(operator)
        from_address = to_normalized_address(from_address)
        to_address = to_normalized_address(to_address)
        if not to_address or to_address == ZERO_ADDRESS:
            raise LedgerRejectedError("Cannot transfer to the zero address")

        snapshot: Dict[Tuple[int, str], int] = {}
        try:
            for token_id, amount in zip(token_ids, amounts):
                if amount < 0:
                    raise LedgerRejectedError(f"Amount must not be negative, got {amount}")
                holders = self._balances.setdefault(token_id, {})
                for account in (from_address, to_address):
                    snapshot.setdefault((token_id, account), holders.get(account, 0))

                if from_address != ZERO_ADDRESS:
                    from_balance = holders.get(from_address, 0)
                    if from_balance < amount:
                        raise LedgerRejectedError(
                            f"Insufficient balance for token {token_id}: {from_address} holds {from_balance}, needs {amount}"
                        )
                    holders[from_address] = from_balance - amount
                holders[to_address] = holders.get(to_address, 0) + amount

            self._check_acceptance(operator, from_address, to_address, token_ids, amounts, single)
        except Exception:
            self._restore(snapshot)
            raise

        logger.debug(f"Moved ids {token_ids} x {amounts} from {from_address} to {to_address}")

    def _check_acceptance(
        self,
        operator: str,
        from_address: str,
        to_address: str,
        token_ids: List[int],
        amounts: List[int],
        single: bool,
    ) -> None:
        receiver = self._receivers.get(to_address)
        if receiver is None:
            return

        try:
            if single:
                response = receiver.on_erc1155_received(operator, from_address, token_ids[0], amounts[0])
                expected = ERC1155_RECEIVED
            else:
                response = receiver.on_erc1155_batch_received(operator, from_address, token_ids, amounts)
                expected = ERC1155_BATCH_RECEIVED
        except Exception as e:
            # a reverting hook refuses the tokens
            raise LedgerRejectedError(f"Recipient {to_address} reverted on receiving {token_ids}: {e}") from e

        if response != expected:
            raise LedgerRejectedError(f"Recipient {to_address} refused the tokens {token_ids}")

    def _restore(self, snapshot: Dict[Tuple[int, str], int]) -> None:
        for (token_id, account), amount in snapshot.items():
            holders = self._balances.setdefault(token_id, {})
            if amount:
                holders[account] = amount
            else:
                holders.pop(account, None)
        for token_id in [token_id for token_id, holders in self._balances.items() if not holders]:
            del self._balances[token_id]
