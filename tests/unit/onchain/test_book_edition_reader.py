import pytest
from unittest.mock import AsyncMock, MagicMock

from web3.exceptions import ContractLogicError

from minting.exceptions import OutOfRangeError
from onchain.book_edition_reader import BookEditionContractReader

CONTRACT = "0x5555555555555555555555555555555555555555"
ALICE = "0x2222222222222222222222222222222222222222"


@pytest.fixture
def web3():
    return MagicMock()


@pytest.fixture
def contract(web3):
    return web3.eth.contract.return_value


@pytest.fixture
def reader(web3):
    return BookEditionContractReader(web3, CONTRACT)


def test_contract_is_bound_to_address(web3, reader):
    assert reader.contract_address == CONTRACT
    assert web3.eth.contract.call_args.kwargs["address"] == CONTRACT


@pytest.mark.asyncio
async def test_uri(reader, contract):
    contract.functions.uri.return_value.call = AsyncMock(return_value="https://x/1000001.json")

    assert await reader.uri(1_000_001) == "https://x/1000001.json"
    contract.functions.uri.assert_called_once_with(1_000_001)


@pytest.mark.asyncio
async def test_uri_by_parts_encodes(reader, contract):
    contract.functions.uri.return_value.call = AsyncMock(return_value="ipfs://x")

    await reader.uri_by_parts(3, 7)

    contract.functions.uri.assert_called_once_with(3_000_007)


@pytest.mark.asyncio
async def test_uri_rejects_out_of_range_id(reader, contract):
    with pytest.raises(OutOfRangeError):
        await reader.uri(2**256)

    contract.functions.uri.assert_not_called()


@pytest.mark.asyncio
async def test_reverting_call_returns_none(reader, contract):
    contract.functions.owner.return_value.call = AsyncMock(side_effect=ContractLogicError("execution reverted"))

    assert await reader.owner() is None


@pytest.mark.asyncio
async def test_balance_of(reader, contract):
    contract.functions.balanceOf.return_value.call = AsyncMock(return_value=1)

    assert await reader.balance_of(ALICE, 5) == 1
    contract.functions.balanceOf.assert_called_once_with(ALICE, 5)


@pytest.mark.asyncio
async def test_supports_interface_passes_bytes(reader, contract):
    contract.functions.supportsInterface.return_value.call = AsyncMock(return_value=True)

    assert await reader.supports_interface("0xd9b67a26") is True
    contract.functions.supportsInterface.assert_called_once_with(bytes.fromhex("d9b67a26"))
