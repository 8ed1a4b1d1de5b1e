class BookEditionError(Exception):
    """Base class for every failure raised by the book edition contract."""


class OutOfRangeError(BookEditionError, ValueError):
    """An edition or item lies outside the encodable range."""


class IdentifierOverflowError(BookEditionError, ValueError):
    """The encoded token id does not fit into uint256."""


class LengthMismatchError(BookEditionError, ValueError):
    """Batch editions and items differ in length."""


class UnauthorizedError(BookEditionError, PermissionError):
    """The caller is not the contract administrator."""

    def __init__(self, caller):
        self.caller = caller
        super().__init__(f"Caller {caller} is not authorized to perform this operation")


class LedgerRejectedError(BookEditionError):
    """The ledger refused to credit, transfer or approve."""
