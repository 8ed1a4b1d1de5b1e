import pytest

from minting.exceptions import LengthMismatchError, OutOfRangeError
from utils.formatter_utils import parse_int_list, to_decimal_string, to_normalized_address
from utils.validation_utils import validate_equal_length, validate_token_part


def test_validate_token_part():
    validate_token_part("item", 0, 10)
    validate_token_part("edition", 10**30)

    with pytest.raises(OutOfRangeError):
        validate_token_part("item", 10, 10)
    with pytest.raises(OutOfRangeError):
        validate_token_part("edition", -1)
    with pytest.raises(OutOfRangeError):
        validate_token_part("edition", True)
    with pytest.raises(OutOfRangeError):
        validate_token_part("edition", 1.5)


def test_validate_equal_length():
    validate_equal_length([1, 2], [3, 4])

    with pytest.raises(LengthMismatchError):
        validate_equal_length([1, 2], [1, 2, 3])


def test_parse_int_list():
    assert parse_int_list("1, 2,3,") == [1, 2, 3]
    assert parse_int_list("") == []
    assert parse_int_list(None) == []
    with pytest.raises(ValueError):
        parse_int_list("1,a")


def test_to_decimal_string():
    assert to_decimal_string(2**256 - 1) == str(2**256 - 1)
    assert to_decimal_string(None) is None


def test_to_normalized_address():
    assert to_normalized_address("0x52908400098527886e0f7030069857d2e4169ee7") == "0x52908400098527886E0F7030069857D2E4169EE7"
    assert to_normalized_address(None) is None
    assert to_normalized_address("Not-An-Address") == "not-an-address"
