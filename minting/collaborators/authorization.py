from abc import ABC, abstractmethod
from typing import Optional

from constants.token_id import ZERO_ADDRESS
from minting.exceptions import UnauthorizedError
from utils.formatter_utils import to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("Ownable Authorizer")


class AuthorizationCollaborator(ABC):
    """Decides which caller may run administrative operations."""

    @abstractmethod
    def current_administrator(self) -> Optional[str]:
        ...

    @abstractmethod
    def is_authorized(self, caller: str) -> bool:
        ...


class OwnableAuthorizer(AuthorizationCollaborator):
    """
    Single-owner access control: only the owner is authorized.
    After ``renounce_ownership`` nobody is, permanently.
    """

    def __init__(self, owner: Optional[str]):
        if owner is None:
            # Restored from a contract whose ownership was renounced
            self._owner: Optional[str] = None
            return

        normalized_owner = to_normalized_address(owner)
        if not normalized_owner or normalized_owner == ZERO_ADDRESS:
            raise ValueError(f"Invalid owner address: {owner!r}")
        self._owner = normalized_owner

    def current_administrator(self) -> Optional[str]:
        return self._owner

    def is_authorized(self, caller: str) -> bool:
        if self._owner is None:
            return False
        return to_normalized_address(caller) == self._owner

    def transfer_ownership(self, sender: str, new_owner: str) -> None:
        self._require_owner(sender)
        normalized_owner = to_normalized_address(new_owner)
        if not normalized_owner or normalized_owner == ZERO_ADDRESS:
            raise ValueError(f"New owner must not be the zero address, got {new_owner!r}")

        logger.info(f"Ownership transferred from {self._owner} to {normalized_owner}")
        self._owner = normalized_owner

    def renounce_ownership(self, sender: str) -> None:
        self._require_owner(sender)
        logger.info(f"Ownership renounced by {self._owner}")
        self._owner = None

    def _require_owner(self, sender: str) -> None:
        if not self.is_authorized(sender):
            raise UnauthorizedError(sender)
