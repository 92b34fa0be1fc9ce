from common import *

# WTRX -> USDT through a single v2 pool, paid in TRX.
# the sun.io smart router counts tokens per version group, path[0] included
path = [WTRX, USDT]
versions = ['v2']
version_lengths = [2]
fees = [0, 0]

if __name__ == "__main__":
    amount_in = int(float(input('input TRX amount: ')) * 10 ** 6)
    for version in versions:
        assert version in pool_versions
    print('trx balance: {}'.format(client.trx_balance(client.from_addr)))
    tx = client.swap_exact_in(path, versions, version_lengths, fees, amount_in, router_fee_rate=DEFAULT_FEE_RATE)
    print('swap txid: {}'.format(tx['id']))
    print('usdt balance: {}'.format(client.trc20_balance(USDT, client.from_addr)))
