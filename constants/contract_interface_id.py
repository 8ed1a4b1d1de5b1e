# constants/contract_interface_id.py

# ERC-165 interface ids (XOR of the interface function selectors)
ERC165_ID = "0x01ffc9a7"
ERC1155_ID = "0xd9b67a26"
ERC1155_METADATA_URI_ID = "0x0e89341c"

SUPPORTED_INTERFACE_IDS = frozenset({ERC165_ID, ERC1155_ID, ERC1155_METADATA_URI_ID})

# Values a receiving contract must return to accept a credit
# bytes4(keccak256("onERC1155Received(address,address,uint256,uint256,bytes)"))
ERC1155_RECEIVED = "0xf23a6e61"
# bytes4(keccak256("onERC1155BatchReceived(address,address,uint256[],uint256[],bytes)"))
ERC1155_BATCH_RECEIVED = "0xbc197c81"
