import sys
import os
import json
import requests
parent_path = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
sys.path.append(parent_path)
from tronrouter.config import TRONSCAN_TX_INFO


def check_tx(txid):
    r = requests.get(TRONSCAN_TX_INFO + txid, timeout=10)
    r.raise_for_status()
    resp = json.loads(r.text)
    return resp.get('confirmed', False) and not resp.get('revert', True), resp


if __name__ == "__main__":
    for txid in sys.argv[1:]:
        ok, resp = check_tx(txid)
        print('{} {}'.format(txid, 'pass' if ok else 'FAILED: {}'.format(resp.get('contractRet'))))
