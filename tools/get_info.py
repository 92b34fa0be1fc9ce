from common import *

if __name__ == "__main__":
    info = client.get_info(with_fee_collector='--fee-collector' in sys.argv)
    print('router {} on {}'.format(client.router_address, client.network))
    for key, value in info.items():
        print('{:<14} {}'.format(key, value))
