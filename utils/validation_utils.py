from typing import Sequence

from minting.exceptions import LengthMismatchError, OutOfRangeError


def validate_token_part(name: str, value: int, upper_bound_excl: int | None = None) -> None:
    """
    Validate one part (edition or item) of a book token.

    Args:
        name: Name of the part, used in the error message.
        value: The value to validate, must be >= 0.
        upper_bound_excl: Optional exclusive upper bound.

    Raises:
        OutOfRangeError: If the value is negative or not below the upper bound.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise OutOfRangeError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise OutOfRangeError(f"{name} must be greater than or equal to 0, got {value}")

    if upper_bound_excl is not None and value >= upper_bound_excl:
        raise OutOfRangeError(f"{name} must be less than {upper_bound_excl}, got {value}")


def validate_equal_length(editions: Sequence[int], items: Sequence[int]) -> None:
    """
    Validate that a batch carries one item per edition.

    Raises:
        LengthMismatchError: If the sequences differ in length.
    """
    if len(editions) != len(items):
        raise LengthMismatchError(
            f"editions and items must have the same length, got {len(editions)} editions and {len(items)} items"
        )
