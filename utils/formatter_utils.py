# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified by: Cuong CT, 6/12/2025
# Change Description: using eth_utils library for implement some formatter utilities

from typing import List, Optional

from eth_utils import to_checksum_address

from utils.logger_utils import get_logger

logger = get_logger("Formatter Utils")


def to_normalized_address(address: Optional[str]) -> Optional[str]:
    """
    Converts an address to its EIP-55 checksum form.
    Safe-guards against None or invalid types to maintain backward compatibility.
    """
    if address is None or not isinstance(address, str):
        return None

    try:
        return to_checksum_address(address)
    except ValueError:
        logger.debug(f"Address is not a valid hex address, falling back to lowercase: {address}")
        return address.lower()


def to_decimal_string(value: Optional[int]) -> Optional[str]:
    """
    Renders a uint256 as a plain decimal string (no sign, separators or leading zeros).
    """
    if value is None:
        return None
    return str(int(value))


def parse_int_list(value: Optional[str]) -> List[int]:
    """
    Parses a comma-separated list of integers, e.g. "1,2, 3" -> [1, 2, 3].
    Empty entries are skipped.
    """
    if not value:
        return []
    return [int(part.strip()) for part in value.split(",") if part.strip()]
