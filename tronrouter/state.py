import copy
from collections import namedtuple

from tronrouter.config import *

SwapData = namedtuple('SwapData', ['amount_in', 'amount_out_min', 'to', 'deadline'])

SwapRequest = namedtuple('SwapRequest', ['path', 'pool_versions', 'version_lengths', 'fees', 'data', 'router_fee_rate'])

SwapResult = namedtuple('SwapResult', ['amounts_out', 'fee', 'amount_received'])

# timestamp=None means "use the router clock"
CallContext = namedtuple('CallContext', ['caller', 'call_value', 'timestamp'], defaults=[0, None])

Authorization = namedtuple('Authorization', ['ok', 'reason'])

Event = namedtuple('Event', ['name', 'args'])

AUTHORIZED = Authorization(True, '')


class RouterState(object):
    def __init__(self, admin, smart_router, wrapped_token, fee_rate, fee_collector=None):
        self.admin = admin
        self.pending_admin = ZERO_ADDRESS
        self.smart_router = smart_router
        self.wrapped_token = wrapped_token
        self.fee_rate = fee_rate
        self.fee_collector = fee_collector if fee_collector is not None else admin

    @property
    def transfer_pending(self):
        return self.pending_admin != ZERO_ADDRESS

    def snapshot(self):
        return copy.copy(self)

    def restore(self, snap):
        self.__dict__.update(snap.__dict__)

    def as_dict(self):
        return {
            'admin': self.admin,
            'pending_admin': self.pending_admin,
            'smart_router': self.smart_router,
            'wrapped_token': self.wrapped_token,
            'fee_rate': self.fee_rate,
            'fee_collector': self.fee_collector,
        }
