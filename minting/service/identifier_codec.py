from typing import Tuple

from constants.token_id import EDITION_MULTIPLIER, MAX_UINT256
from minting.exceptions import IdentifierOverflowError, OutOfRangeError
from minting.models.book_token import BookToken
from utils.validation_utils import validate_token_part


class IdentifierCodec(object):
    """
    Bijection between an (edition, item) pair and a flat ERC-1155 token id.

        token_id = edition * 1_000_000 + item,   0 <= item < 1_000_000

    Id 0 is the first copy of edition 0 and is a regular, mintable token.
    """

    @staticmethod
    def encode(edition: int, item: int) -> int:
        validate_token_part("item", item, EDITION_MULTIPLIER)
        validate_token_part("edition", edition)

        token_id = edition * EDITION_MULTIPLIER + item
        if token_id > MAX_UINT256:
            raise IdentifierOverflowError(f"Token id for edition {edition} and item {item} exceeds uint256")
        return token_id

    @staticmethod
    def decode(token_id: int) -> Tuple[int, int]:
        if not isinstance(token_id, int) or isinstance(token_id, bool) or token_id < 0 or token_id > MAX_UINT256:
            raise OutOfRangeError(f"Token id must be a uint256, got {token_id!r}")
        return divmod(token_id, EDITION_MULTIPLIER)

    @staticmethod
    def to_book_token(token_id: int) -> BookToken:
        edition, item = IdentifierCodec.decode(token_id)
        return BookToken(edition=edition, item=item)
