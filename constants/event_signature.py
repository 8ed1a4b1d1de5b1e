# constants/event_signature.py

from eth_utils import keccak


def event_topic(signature: str) -> str:
    """
    Returns the log topic (keccak256 of the canonical event signature) as a 0x-prefixed hex string.
    """
    return "0x" + keccak(text=signature).hex()


# ERC-1155 URI(string value, uint256 indexed id)
# Emitted whenever the stored URI of a token id is (re)written
OVERRIDE_SET_EVENT_SIGNATURE = "URI(string,uint256)"

# BookIssued(address indexed to, uint256 edition, uint256 item)
ISSUED_EVENT_SIGNATURE = "BookIssued(address,uint256,uint256)"

# BookBatchIssued(address indexed to, uint256[] editions, uint256[] items)
BATCH_ISSUED_EVENT_SIGNATURE = "BookBatchIssued(address,uint256[],uint256[])"

OVERRIDE_SET_EVENT_TOPIC = event_topic(OVERRIDE_SET_EVENT_SIGNATURE)
ISSUED_EVENT_TOPIC = event_topic(ISSUED_EVENT_SIGNATURE)
BATCH_ISSUED_EVENT_TOPIC = event_topic(BATCH_ISSUED_EVENT_SIGNATURE)
