from common import *

if __name__ == "__main__":
    token = sys.argv[1] if len(sys.argv) > 1 else WTRX
    tx = client.approve_router(token)
    print('approved router {} for {}: {}'.format(client.router_address, token, tx['id']))
    print('allowance: {}'.format(client.trc20_allowance(token, client.from_addr, client.router_address)))
