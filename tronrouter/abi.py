router_abi = '''
[
    {
        "inputs": [
            {"internalType": "address", "name": "_admin", "type": "address"},
            {"internalType": "address", "name": "_smartRouter", "type": "address"},
            {"internalType": "address", "name": "_WRAPPED_TOKEN", "type": "address"},
            {"internalType": "uint16", "name": "_initialFeeRate", "type": "uint16"}
        ],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "anonymous": false,
        "inputs": [
            {"indexed": false, "internalType": "uint16", "name": "newFeeRate", "type": "uint16"}
        ],
        "name": "FeeRateUpdated",
        "type": "event"
    },
    {
        "inputs": [],
        "name": "WRAPPED_TOKEN",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "acceptAdminTransfer",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "admin",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "token", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"}
        ],
        "name": "approve",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "feeRate",
        "outputs": [{"internalType": "uint16", "name": "", "type": "uint16"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "feeCollector",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "newAdmin", "type": "address"}
        ],
        "name": "initiateAdminTransfer",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "pendingAdmin",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "smartRouter",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address[]", "name": "path", "type": "address[]"},
            {"internalType": "string[]", "name": "poolVersion", "type": "string[]"},
            {"internalType": "uint256[]", "name": "versionLen", "type": "uint256[]"},
            {"internalType": "uint24[]", "name": "fees", "type": "uint24[]"},
            {
                "components": [
                    {"internalType": "uint256", "name": "amountIn", "type": "uint256"},
                    {"internalType": "uint256", "name": "amountOutMin", "type": "uint256"},
                    {"internalType": "address", "name": "to", "type": "address"},
                    {"internalType": "uint256", "name": "deadline", "type": "uint256"}
                ],
                "internalType": "struct IRouter.SwapData",
                "name": "data",
                "type": "tuple"
            },
            {"internalType": "uint16", "name": "routerFeeRate", "type": "uint16"}
        ],
        "name": "swapExactIn",
        "outputs": [{"internalType": "uint256[]", "name": "amountsOut", "type": "uint256[]"}],
        "stateMutability": "payable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "uint16", "name": "_newFeeRate", "type": "uint16"}
        ],
        "name": "updateFeeRate",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_newFeeCollector", "type": "address"}
        ],
        "name": "updateFeeCollector",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "token", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "address", "name": "recipient", "type": "address"}
        ],
        "name": "withdrawToken",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
'''

trc20_abi = '''
[
    {
        "inputs": [
            {"internalType": "address", "name": "owner", "type": "address"},
            {"internalType": "address", "name": "spender", "type": "address"}
        ],
        "name": "allowance",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "spender", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"}
        ],
        "name": "approve",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "account", "type": "address"}
        ],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "recipient", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"}
        ],
        "name": "transfer",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
'''

smart_router_abi = '''
[
    {
        "inputs": [
            {"internalType": "address[]", "name": "path", "type": "address[]"},
            {"internalType": "string[]", "name": "poolVersion", "type": "string[]"},
            {"internalType": "uint256[]", "name": "versionLen", "type": "uint256[]"},
            {"internalType": "uint24[]", "name": "fees", "type": "uint24[]"},
            {
                "components": [
                    {"internalType": "uint256", "name": "amountIn", "type": "uint256"},
                    {"internalType": "uint256", "name": "amountOutMin", "type": "uint256"},
                    {"internalType": "address", "name": "to", "type": "address"},
                    {"internalType": "uint256", "name": "deadline", "type": "uint256"}
                ],
                "internalType": "struct SwapData",
                "name": "data",
                "type": "tuple"
            }
        ],
        "name": "swapExactInput",
        "outputs": [{"internalType": "uint256[]", "name": "amountsOut", "type": "uint256[]"}],
        "stateMutability": "payable",
        "type": "function"
    }
]
'''

swap_input_signature = 'swapExactInput(address[],string[],uint256[],uint24[],(uint256,uint256,address,uint256))'
swap_input_types = ['address[]', 'string[]', 'uint256[]', 'uint24[]', '(uint256,uint256,address,uint256)']
