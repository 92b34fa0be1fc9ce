import time
from contextlib import contextmanager

from tronpy import keys

from tronrouter.config import *
from tronrouter.errors import *
from tronrouter.ledger import is_int
from tronrouter.logger import Logger
from tronrouter.state import *


def compute_fee(amount_in, fee_rate):
    # floor division, must match the on-chain result exactly
    return amount_in * fee_rate // FEE_DENOMINATOR


def is_address(value):
    return isinstance(value, str) and keys.is_base58check_address(value)


class RouterCore(object):
    """In-process model of the TRON Router contract.

    Holds one RouterState and settles every token movement through a
    TokenLedger. `exchange` is the downstream smart router; its address is
    the spender that approve() grants allowances to. Every mutating
    operation takes a CallContext and either completes or leaves state,
    ledger and events exactly as they were.
    """

    def __init__(self, address, admin, exchange, wrapped_token, fee_rate, ledger, fee_collector=None, clock=None, _log=None):
        if _log is None:
            _log = Logger(level='info')
        self.log = _log
        for name, value in (('router', address), ('admin', admin), ('smart router', exchange.address), ('wrapped token', wrapped_token)):
            self._check_address(value, name)
        if fee_collector is not None:
            self._check_address(fee_collector, 'fee collector')
        self._check_fee_rate(fee_rate)
        self.address = address
        self.exchange = exchange
        self.ledger = ledger
        self.clock = clock or time.time
        self.state = RouterState(admin, exchange.address, wrapped_token, fee_rate, fee_collector)
        self.events = []
        self._locked = False
        self.log.logger.info('router {} created: admin={}, smart_router={}, fee_rate={}'.format(
            address, admin, exchange.address, fee_rate))

    # ---------------- views ----------------

    def admin(self):
        return self.state.admin

    def pending_admin(self):
        return self.state.pending_admin

    def smart_router(self):
        return self.state.smart_router

    def wrapped_token(self):
        return self.state.wrapped_token

    WRAPPED_TOKEN = wrapped_token

    def fee_rate(self):
        return self.state.fee_rate

    def fee_collector(self):
        return self.state.fee_collector

    # ---------------- guards ----------------

    def _only_admin(self, ctx):
        if ctx.caller != self.state.admin:
            return Authorization(False, '{} is not the admin'.format(ctx.caller))
        return AUTHORIZED

    def _only_pending_admin(self, ctx):
        if not self.state.transfer_pending:
            return Authorization(False, 'no admin transfer is pending')
        if ctx.caller != self.state.pending_admin:
            return Authorization(False, '{} is not the pending admin'.format(ctx.caller))
        return AUTHORIZED

    def _authorize(self, auth, operation):
        if not auth.ok:
            self.log.logger.info('{} rejected: {}'.format(operation, auth.reason))
            raise Unauthorized('{}: {}'.format(operation, auth.reason))

    @contextmanager
    def _transaction(self, operation):
        if self._locked:
            raise ReentrantCall('{} called while a swap is in progress'.format(operation))
        state_snap = self.state.snapshot()
        ledger_snap = self.ledger.snapshot()
        n_events = len(self.events)
        try:
            yield
        except Exception as e:
            self.state.restore(state_snap)
            self.ledger.restore(ledger_snap)
            del self.events[n_events:]
            self.log.logger.info('{} reverted: {}: {}'.format(operation, type(e).__name__, e))
            raise

    def _emit(self, name, **args):
        self.events.append(Event(name, args))
        self.log.logger.info('{} {}'.format(name, args))

    def _check_address(self, value, name, allow_zero=False):
        if not is_address(value):
            raise InvalidParameter('invalid {} address: {!r}'.format(name, value))
        if not allow_zero and value == ZERO_ADDRESS:
            raise InvalidParameter('{} can not be the zero address'.format(name))

    def _check_fee_rate(self, rate, name='fee rate'):
        if not is_int(rate) or rate < 0 or rate > FEE_DENOMINATOR:
            raise InvalidParameter('{} must be within [0, {}]: {!r}'.format(name, FEE_DENOMINATOR, rate))

    def _now(self, ctx):
        if ctx.timestamp is not None:
            return ctx.timestamp
        return int(self.clock())

    # ---------------- admin transfer ----------------

    def initiate_admin_transfer(self, ctx, new_admin):
        with self._transaction('initiateAdminTransfer'):
            self._authorize(self._only_admin(ctx), 'initiateAdminTransfer')
            self._check_address(new_admin, 'new admin')
            self.state.pending_admin = new_admin
            self._emit('AdminTransferInitiated', admin=self.state.admin, pendingAdmin=new_admin)

    def accept_admin_transfer(self, ctx):
        with self._transaction('acceptAdminTransfer'):
            self._authorize(self._only_pending_admin(ctx), 'acceptAdminTransfer')
            previous = self.state.admin
            self.state.admin = self.state.pending_admin
            self.state.pending_admin = ZERO_ADDRESS
            self._emit('AdminTransferred', previousAdmin=previous, newAdmin=self.state.admin)

    # ---------------- fee configuration ----------------

    def update_fee_rate(self, ctx, new_rate):
        with self._transaction('updateFeeRate'):
            self._authorize(self._only_admin(ctx), 'updateFeeRate')
            self._check_fee_rate(new_rate)
            self.state.fee_rate = new_rate
            self._emit('FeeRateUpdated', newFeeRate=new_rate)

    def update_fee_collector(self, ctx, new_collector):
        with self._transaction('updateFeeCollector'):
            self._authorize(self._only_admin(ctx), 'updateFeeCollector')
            self._check_address(new_collector, 'fee collector')
            self.state.fee_collector = new_collector
            self._emit('FeeCollectorUpdated', newFeeCollector=new_collector)

    # ---------------- treasury ----------------

    def approve(self, ctx, token, amount):
        with self._transaction('approve'):
            self._authorize(self._only_admin(ctx), 'approve')
            self._check_address(token, 'token')
            if not is_int(amount):
                raise InvalidParameter('approve amount must be an integer: {!r}'.format(amount))
            self.ledger.approve(token, self.address, self.state.smart_router, amount)
            self._emit('Approval', token=token, spender=self.state.smart_router, amount=amount)

    def withdraw_token(self, ctx, token, amount, recipient):
        with self._transaction('withdrawToken'):
            self._authorize(self._only_admin(ctx), 'withdrawToken')
            self._check_address(token, 'token')
            self._check_address(recipient, 'recipient')
            if not is_int(amount) or amount < 0:
                raise InvalidParameter('withdraw amount must be a non-negative integer: {!r}'.format(amount))
            held = self.ledger.balance_of(token, self.address)
            if amount > held:
                raise InsufficientBalance('router holds {} of {}, requested {}'.format(held, token, amount))
            self.ledger.transfer(token, self.address, recipient, amount)
            self._emit('TokenWithdrawn', token=token, amount=amount, recipient=recipient)

    # ---------------- swap ----------------

    def swap_exact_in(self, ctx, path, pool_versions, version_lengths, fees, swap_data, router_fee_rate=0):
        """Swap swap_data.amount_in of path[0] for path[-1] through the smart router.

        The protocol fee is taken from the input in path[0] and sent to the fee
        collector before the remainder is forwarded. A path starting with the
        wrapped token is paid in TRX via ctx.call_value; one ending with it is
        paid out to swap_data.to in TRX. A non-zero router_fee_rate caps the
        fee rate the caller accepts.
        """
        with self._transaction('swapExactIn'):
            request = self._swap_request(path, pool_versions, version_lengths, fees, swap_data, router_fee_rate)
            self._validate_swap(ctx, request)
            self._locked = True
            try:
                result = self._swap(ctx, request)
            finally:
                self._locked = False
        return result

    def _swap_request(self, path, pool_versions, version_lengths, fees, swap_data, router_fee_rate):
        try:
            if isinstance(swap_data, dict):
                data = SwapData(**swap_data)
            else:
                data = SwapData(*swap_data)
            return SwapRequest(list(path), list(pool_versions), list(version_lengths), list(fees), data,
                               router_fee_rate)
        except TypeError as e:
            raise InvalidParameter('malformed swap request: {}'.format(e)) from e

    def _validate_swap(self, ctx, request):
        path, data = request.path, request.data
        if len(path) < 2:
            raise InvalidParameter('path needs at least 2 tokens, got {}'.format(len(path)))
        for token in path:
            self._check_address(token, 'path token')
        if len(request.pool_versions) == 0 or len(request.pool_versions) != len(request.version_lengths):
            raise InvalidParameter('pool versions and version lengths differ: {} != {}'.format(
                len(request.pool_versions), len(request.version_lengths)))
        if any(not is_int(n) or n < 1 for n in request.version_lengths):
            raise InvalidParameter('version lengths must be positive: {}'.format(request.version_lengths))
        if sum(request.version_lengths) != len(path) - 1:
            raise InvalidParameter('version lengths cover {} hops, path has {}'.format(
                sum(request.version_lengths), len(path) - 1))
        if len(request.fees) != len(path) - 1:
            raise InvalidParameter('expected {} pool fees, got {}'.format(len(path) - 1, len(request.fees)))
        if not is_int(data.amount_in) or data.amount_in <= 0:
            raise InvalidParameter('amount in must be positive: {!r}'.format(data.amount_in))
        if not is_int(data.amount_out_min) or data.amount_out_min < 0:
            raise InvalidParameter('amount out min must be non-negative: {!r}'.format(data.amount_out_min))
        self._check_address(data.to, 'recipient')
        self._check_fee_rate(request.router_fee_rate, 'router fee rate')
        if request.router_fee_rate != 0 and self.state.fee_rate > request.router_fee_rate:
            raise InvalidParameter('fee rate {} above caller limit {}'.format(self.state.fee_rate, request.router_fee_rate))
        now = self._now(ctx)
        if data.deadline < now:
            raise Expired('deadline {} passed at {}'.format(data.deadline, now))

    def _swap(self, ctx, request):
        path, data = request.path, request.data
        wrapped = self.state.wrapped_token
        token_in, token_out = path[0], path[-1]

        if token_in == wrapped:
            if ctx.call_value != data.amount_in:
                raise InvalidParameter('call value {} does not match amount in {}'.format(ctx.call_value, data.amount_in))
            self.ledger.transfer_trx(ctx.caller, self.address, data.amount_in)
            self.ledger.deposit(self.address, data.amount_in)
        else:
            if ctx.call_value != 0:
                raise InvalidParameter('call value sent for a {} input'.format(token_in))
            self.ledger.transfer_from(token_in, self.address, ctx.caller, self.address, data.amount_in)

        fee = compute_fee(data.amount_in, self.state.fee_rate)
        if fee > 0:
            self.ledger.transfer(token_in, self.address, self.state.fee_collector, fee)
        amount_forward = data.amount_in - fee

        unwrap = token_out == wrapped
        receiver = self.address if unwrap else data.to
        balance_before = self.ledger.balance_of(token_out, receiver)
        if receiver == self.address and token_in == token_out:
            # the exchange pulls the forwarded input out of this same balance
            balance_before -= amount_forward
        try:
            amounts = self.exchange.swap_exact_input(
                self.address, path, request.pool_versions, request.version_lengths, request.fees,
                amount_forward, data.amount_out_min, receiver, data.deadline)
        except Exception as e:
            self.log.logger.error('smart router call failed: {}: {}'.format(type(e).__name__, e))
            raise ExternalCallFailed('smart router call failed: {}'.format(e)) from e
        received = self.ledger.balance_of(token_out, receiver) - balance_before
        if received < data.amount_out_min:
            raise SlippageExceeded('received {} < amount out min {}'.format(received, data.amount_out_min))

        if unwrap:
            self.ledger.withdraw(self.address, received)
            self.ledger.transfer_trx(self.address, data.to, received)

        self._emit('Swap', sender=ctx.caller, tokenIn=token_in, tokenOut=token_out, amountIn=data.amount_in,
                   fee=fee, amountOut=received, to=data.to)
        return SwapResult(list(amounts), fee, received)
