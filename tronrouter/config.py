import os
from dotenv import load_dotenv

load_dotenv()

# fee rate is in basis points out of FEE_DENOMINATOR
FEE_DENOMINATOR = 10000
DEFAULT_FEE_RATE = 100
MAX_UINT256 = 2**256 - 1

ZERO_ADDRESS = 'T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb'
ZERO_ADDRESS_HEX = '410000000000000000000000000000000000000000'

WTRX = 'TNUC9Qb1rRpS5CbWLmNMxXBjyFoydXjWFR'
USDT = 'TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t'

# sun.io smart exchange router
SMART_ROUTER = 'TJ4NNy8xZEqsowCBhLvZ45LCqPdGjkET5j'
ROUTER_ADMIN = 'TZ8igyyTsRwUxMvhLBoAH8gstReJ97SsXL'
ROUTER_ADDRESS = os.getenv('ROUTER_ADDRESS', 'TGHmU2i94XE9wuZDvcFomfvXvEzi3CBq9G')

pool_versions = ['v1', 'v2', 'v2.1', 'v3', 'old3pool', 'old2pool', 'usdd202pool', 'usdc2pool']

NETWORKS = {
    'mainnet': 'https://api.trongrid.io',
    'shasta': 'https://api.shasta.trongrid.io',
    'nile': 'https://nile.trongrid.io',
    'development': 'http://127.0.0.1:9090',
}
NETWORK = os.getenv('TRON_NETWORK', 'mainnet')

api_keys = [key for key in os.getenv('TRONGRID_API_KEYS', '').split(',') if key]

# 100 TRX
FEE_LIMIT = 100_000_000
SWAP_FEE_LIMIT = 10_000_000_000
# seconds allowed for broadcast + confirmation
TX_TIMEOUT = 28
# swap deadline offset in seconds
DEADLINE_DELAY = 20 * 60

TRONSCAN_TX_INFO = 'https://apilist.tronscan.org/api/transaction-info?hash='
