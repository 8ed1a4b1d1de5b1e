from abi.erc1155_abi import ERC1155_ABI

# --- Book edition collection: ERC-1155 + Ownable + edition minting ---
BOOK_EDITION_ABI = ERC1155_ABI + [
    {
        "inputs": [],
        "name": "owner",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "edition", "type": "uint256"},
            {"name": "item", "type": "uint256"}
        ],
        "name": "getTokenId",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "pure",
        "type": "function"
    },
    {
        "inputs": [{"name": "newuri", "type": "string"}],
        "name": "setURI",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "tokenId", "type": "uint256"},
            {"name": "tokenURI", "type": "string"}
        ],
        "name": "setTokenURI",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "edition", "type": "uint256"},
            {"name": "item", "type": "uint256"}
        ],
        "name": "mint",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "editions", "type": "uint256[]"},
            {"name": "items", "type": "uint256[]"}
        ],
        "name": "mintBatch",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "to", "type": "address"},
            {"indexed": False, "name": "edition", "type": "uint256"},
            {"indexed": False, "name": "item", "type": "uint256"}
        ],
        "name": "BookIssued",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "to", "type": "address"},
            {"indexed": False, "name": "editions", "type": "uint256[]"},
            {"indexed": False, "name": "items", "type": "uint256[]"}
        ],
        "name": "BookBatchIssued",
        "type": "event"
    }
]
