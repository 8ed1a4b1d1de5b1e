# constants/token_id.py

# token_id = edition * EDITION_MULTIPLIER + item
EDITION_MULTIPLIER = 1_000_000

# Token ids live in the uint256 range of the ERC-1155 `id` argument
MAX_UINT256 = 2**256 - 1

TOKEN_URI_SUFFIX = ".json"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
