from typing import Optional

from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError

from abi.book_edition_abi import BOOK_EDITION_ABI
from minting.service.identifier_codec import IdentifierCodec
from utils.logger_utils import get_logger

logger = get_logger("Book Edition Contract Reader")

# Errors meaning "the contract does not answer this call", not "the node is broken"
IGNORED_CALL_ERRORS = (BadFunctionCallOutput, ContractLogicError, OverflowError, ValueError)


class BookEditionContractReader(object):
    """
    Read-only view of a deployed book edition contract.

    Calls the contract does not implement (or that revert) resolve to None;
    transport errors propagate.
    """

    def __init__(self, web3: AsyncWeb3, contract_address: str):
        self._web3 = web3
        self.contract_address = AsyncWeb3.to_checksum_address(contract_address)
        self._contract = self._web3.eth.contract(address=self.contract_address, abi=BOOK_EDITION_ABI)

    @classmethod
    def from_provider_uri(cls, provider_uri: str, contract_address: str, timeout: int = 60) -> "BookEditionContractReader":
        web3 = AsyncWeb3(AsyncHTTPProvider(provider_uri, request_kwargs={"timeout": timeout}))
        return cls(web3, contract_address)

    async def uri(self, token_id: int) -> Optional[str]:
        # rejects ids outside uint256
        IdentifierCodec.decode(token_id)
        return await self._call(self._contract.functions.uri(token_id))

    async def uri_by_parts(self, edition: int, item: int) -> Optional[str]:
        return await self.uri(IdentifierCodec.encode(edition, item))

    async def balance_of(self, account: str, token_id: int) -> Optional[int]:
        checksum_account = AsyncWeb3.to_checksum_address(account)
        return await self._call(self._contract.functions.balanceOf(checksum_account, token_id))

    async def owner(self) -> Optional[str]:
        return await self._call(self._contract.functions.owner())

    async def supports_interface(self, interface_id: str) -> Optional[bool]:
        return await self._call(self._contract.functions.supportsInterface(bytes.fromhex(interface_id.removeprefix("0x"))))

    async def _call(self, func):
        try:
            return await func.call()
        except IGNORED_CALL_ERRORS:
            logger.debug(
                f"Call {func.fn_name} on {self.contract_address} failed. This exception can be safely ignored.",
                exc_info=True,
            )
            return None
