import json
import time

from func_timeout import func_set_timeout
from tronpy import Tron
from tronpy.providers import HTTPProvider

from tronrouter.abi import router_abi, smart_router_abi, trc20_abi
from tronrouter.config import *
from tronrouter.errors import InvalidParameter, TransactionFailed
from tronrouter.keystore import load_private_key
from tronrouter.logger import Logger


def timestamp():
    return int(time.time())


class RouterClient(object):
    """Reads and drives a deployed Router contract through tronpy.

    `priv_key` is only needed for transactions; when omitted it is loaded
    from the environment on first use.
    """

    def __init__(self, _log=None, network=NETWORK, router_address=ROUTER_ADDRESS, priv_key=None, client=None):
        if _log is None:
            _log = Logger(level='info')
        self.log = _log
        self.network = network
        if client is None:
            client = Tron(HTTPProvider(NETWORKS[network], api_key=api_keys or None))
        self.client = client
        self.priv_key = priv_key
        self.router_address = router_address
        self.router = self.client.get_contract(router_address)
        self.router.abi = json.loads(router_abi)
        self.tokens = {}
        self.sun_router = None

    @property
    def from_addr(self):
        return self.signer().public_key.to_base58check_address()

    def signer(self):
        if self.priv_key is None:
            self.priv_key = load_private_key()
        return self.priv_key

    def smart_router(self):
        if self.sun_router is None:
            self.sun_router = self.client.get_contract(SMART_ROUTER)
            self.sun_router.abi = json.loads(smart_router_abi)
        return self.sun_router

    def token(self, address):
        if address not in self.tokens:
            token = self.client.get_contract(address)
            token.abi = json.loads(trc20_abi)
            self.tokens[address] = token
        return self.tokens[address]

    # ---------------- reads ----------------

    def get_info(self, with_fee_collector=False):
        # deployments without a fee collector revert on feeCollector()
        info = {
            'admin': self.router.functions.admin(),
            'pending_admin': self.router.functions.pendingAdmin(),
            'smart_router': self.router.functions.smartRouter(),
            'wrapped_token': self.router.functions.WRAPPED_TOKEN(),
            'fee_rate': self.router.functions.feeRate(),
            'fee_collector': None,
        }
        if with_fee_collector:
            info['fee_collector'] = self.router.functions.feeCollector()
        return info

    def trc20_balance(self, token, owner):
        return self.token(token).functions.balanceOf(owner)

    def trc20_allowance(self, token, owner, spender):
        return self.token(token).functions.allowance(owner, spender)

    def trx_balance(self, owner):
        # tronpy reports TRX, the router works in sun
        return int(self.client.get_account_balance(owner) * 10 ** 6)

    # ---------------- transactions ----------------

    @func_set_timeout(TX_TIMEOUT)
    def _send(self, name, call, fee_limit=FEE_LIMIT):
        txn = (
            call
            .with_owner(self.from_addr)
            .fee_limit(fee_limit)
            .build()
            .sign(self.signer())
        )
        self.log.logger.info('{} txid={}'.format(name, txn.txid))
        tx = txn.broadcast().wait()
        result = tx.get('receipt', {}).get('result')
        if result != 'SUCCESS':
            self.log.logger.info('{} fail: {}'.format(name, result))
            raise TransactionFailed(tx.get('id', txn.txid), result)
        self.log.logger.info('{} txid: {} fee={}'.format(name, tx['id'], tx.get('fee', 0)))
        return tx

    def update_fee_rate(self, new_rate):
        if new_rate < 0 or new_rate > FEE_DENOMINATOR:
            raise InvalidParameter('fee rate must be within [0, {}]: {}'.format(FEE_DENOMINATOR, new_rate))
        return self._send('updateFeeRate', self.router.functions.updateFeeRate(new_rate))

    def update_fee_collector(self, new_collector):
        if new_collector == ZERO_ADDRESS:
            raise InvalidParameter('fee collector can not be the zero address')
        return self._send('updateFeeCollector', self.router.functions.updateFeeCollector(new_collector))

    def initiate_admin_transfer(self, new_admin):
        return self._send('initiateAdminTransfer', self.router.functions.initiateAdminTransfer(new_admin))

    def accept_admin_transfer(self):
        return self._send('acceptAdminTransfer', self.router.functions.acceptAdminTransfer())

    def approve(self, token, amount=MAX_UINT256):
        return self._send('approve', self.router.functions.approve(token, amount))

    def withdraw_token(self, token, amount, recipient):
        return self._send('withdrawToken', self.router.functions.withdrawToken(token, amount, recipient))

    def approve_router(self, token, amount=MAX_UINT256, spender=None):
        """User-side TRC20 approval of the router (or `spender`) for swap inputs."""
        spender = spender or self.router_address
        return self._send('approve router', self.token(token).functions.approve(spender, amount))

    def swap_exact_in(self, path, pool_versions, version_lengths, fees, amount_in, amount_out_min=0,
                      to=None, deadline=None, router_fee_rate=0, wrapped_token=WTRX):
        to = to or self.from_addr
        deadline = deadline or timestamp() + DEADLINE_DELAY
        data = (int(amount_in), int(amount_out_min), to, int(deadline))
        fn = self.router.functions.swapExactIn
        if path[0] == wrapped_token:
            fn = fn.with_transfer(int(amount_in))
        call = fn(list(path), list(pool_versions), list(version_lengths), list(fees), data, router_fee_rate)
        self.log.logger.info('swap {} {} -> {} to {}'.format(amount_in, path[0], path[-1], to))
        return self._send('swapExactIn', call, fee_limit=SWAP_FEE_LIMIT)

    def smart_router_swap(self, path, pool_versions, version_lengths, fees, amount_in, amount_out_min=0,
                          to=None, deadline=None):
        """swapExactInput straight on the sun.io smart router, no protocol fee.

        A path starting with the zero address is paid in TRX.
        """
        to = to or self.from_addr
        deadline = deadline or timestamp() + DEADLINE_DELAY
        data = (int(amount_in), int(amount_out_min), to, int(deadline))
        fn = self.smart_router().functions.swapExactInput
        if path[0] == ZERO_ADDRESS:
            fn = fn.with_transfer(int(amount_in))
        call = fn(list(path), list(pool_versions), list(version_lengths), list(fees), data)
        self.log.logger.info('sun swap {} {} -> {} to {}'.format(amount_in, path[0], path[-1], to))
        return self._send('swapExactInput', call, fee_limit=SWAP_FEE_LIMIT)
