import pytest

from constants.token_id import MAX_UINT256
from minting.exceptions import IdentifierOverflowError, OutOfRangeError
from minting.models.book_token import BookToken
from minting.service.identifier_codec import IdentifierCodec


@pytest.mark.parametrize(
    "edition, item, token_id",
    [
        (1, 1, 1_000_001),
        (100, 500, 100_000_500),
        (0, 0, 0),
        (0, 999_999, 999_999),
        (7, 0, 7_000_000),
    ],
)
def test_encode_decode_known_values(edition, item, token_id):
    assert IdentifierCodec.encode(edition, item) == token_id
    assert IdentifierCodec.decode(token_id) == (edition, item)


def test_round_trip_over_boundaries():
    for edition in (0, 1, 2, 999, 10**12):
        for item in (0, 1, 500_000, 999_998, 999_999):
            assert IdentifierCodec.decode(IdentifierCodec.encode(edition, item)) == (edition, item)


def test_item_upper_boundary():
    assert IdentifierCodec.encode(5, 999_999) == 5_999_999

    with pytest.raises(OutOfRangeError):
        IdentifierCodec.encode(5, 1_000_000)


def test_negative_parts_are_out_of_range():
    with pytest.raises(OutOfRangeError):
        IdentifierCodec.encode(-1, 0)
    with pytest.raises(OutOfRangeError):
        IdentifierCodec.encode(0, -1)


def test_out_of_range_is_a_value_error():
    with pytest.raises(ValueError):
        IdentifierCodec.encode(1, 2_000_000)


def test_encode_overflow_beyond_uint256():
    max_edition = MAX_UINT256 // 1_000_000
    assert IdentifierCodec.encode(max_edition, 0) <= MAX_UINT256

    with pytest.raises(IdentifierOverflowError):
        IdentifierCodec.encode(max_edition + 1, 0)


def test_decode_rejects_ids_outside_uint256():
    with pytest.raises(OutOfRangeError):
        IdentifierCodec.decode(-1)
    with pytest.raises(OutOfRangeError):
        IdentifierCodec.decode(MAX_UINT256 + 1)


def test_decode_max_uint256():
    edition, item = IdentifierCodec.decode(MAX_UINT256)
    assert edition * 1_000_000 + item == MAX_UINT256
    assert item < 1_000_000


def test_to_book_token():
    token = IdentifierCodec.to_book_token(100_000_500)

    assert token == BookToken(edition=100, item=500)
    assert token.token_id == 100_000_500
