from common import *

# direct sun.io smart router swaps, bypassing the fee router.
# the smart router counts tokens per version group, path[0] included
routes = {
    # TRX is the zero address and is paid as call value
    'trx': ([ZERO_ADDRESS, USDT], ['v1'], [2], [0, 0]),
    'wtrx': ([WTRX, USDT], ['v2'], [2], [0, 0]),
}

if __name__ == "__main__":
    route = sys.argv[1] if len(sys.argv) > 1 else 'trx'
    path, versions, version_lengths, fees = routes[route]
    amount_in = int(float(input('input {} amount: '.format(route.upper()))) * 10 ** 6)
    if route == 'wtrx':
        allowance = client.trc20_allowance(WTRX, client.from_addr, SMART_ROUTER)
        if allowance < amount_in:
            client.approve_router(WTRX, spender=SMART_ROUTER)
    tx = client.smart_router_swap(path, versions, version_lengths, fees, amount_in)
    print('swap txid: {}'.format(tx['id']))
    print('usdt balance: {}'.format(client.trc20_balance(USDT, client.from_addr)))
