class RouterError(Exception):
    """Base class for every failure raised by the router core."""


class Unauthorized(RouterError):
    """Caller failed an access-control check."""


class InvalidParameter(RouterError):
    """Fee rate out of range, disallowed zero address, malformed swap path."""


class Expired(RouterError):
    """Swap deadline is in the past."""


class SlippageExceeded(RouterError):
    """Received amount is below amount_out_min."""


class InsufficientBalance(RouterError):
    """Transfer or withdrawal exceeds the held balance."""


class InsufficientAllowance(RouterError):
    """transferFrom exceeds the allowance granted to the spender."""


class ExternalCallFailed(RouterError):
    """The smart router call reverted."""


class ReentrantCall(RouterError):
    """A mutating operation was entered while a swap was in flight."""


class TransactionFailed(Exception):
    """A broadcast transaction did not end with a SUCCESS receipt."""

    def __init__(self, txid, result):
        super().__init__('transaction {} failed: {}'.format(txid, result))
        self.txid = txid
        self.result = result
