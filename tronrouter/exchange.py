from tronrouter.config import *


class SmartRouter(object):
    """The downstream exchange contract as seen from the router.

    Implementations pull `amount_in` of path[0] from `sender` through the
    allowance `sender` granted to `address`, route it across the pool
    versions, and deliver path[-1] to `to`. They return the output amount of
    each version group in order; the last element is what `to` received.
    Failures are raised as ordinary exceptions; the router turns them into
    ExternalCallFailed.
    """

    def __init__(self, address):
        self.address = address

    def swap_exact_input(self, sender, path, pool_versions, version_lengths, fees, amount_in, amount_out_min, to, deadline):
        raise NotImplementedError


class MockSmartRouter(SmartRouter):
    """Fixed-rate smart router settling through a TokenLedger.

    Every version group converts at rates[version] = (numerator, denominator).
    Output tokens are paid from the router's own reserves, so tests fund it
    with ledger.mint(token, mock.address, amount) first.
    """

    def __init__(self, address, ledger, rates=None, callback=None):
        super().__init__(address)
        self.ledger = ledger
        self.rates = dict((version, (1, 1)) for version in pool_versions)
        if rates:
            self.rates.update(rates)
        # called as callback(sender) after pulling the input, before paying out
        self.callback = callback
        self.calls = []

    def swap_exact_input(self, sender, path, pool_versions, version_lengths, fees, amount_in, amount_out_min, to, deadline):
        self.calls.append((sender, list(path), amount_in, to))
        self.ledger.transfer_from(path[0], self.address, sender, self.address, amount_in)
        if self.callback is not None:
            self.callback(sender)
        amounts = []
        amount = amount_in
        for version in pool_versions:
            if version not in self.rates:
                raise ValueError('unsupported pool version: {}'.format(version))
            numerator, denominator = self.rates[version]
            amount = amount * numerator // denominator
            amounts.append(amount)
        if amount < amount_out_min:
            raise ValueError('INSUFFICIENT_OUTPUT_AMOUNT')
        self.ledger.transfer(path[-1], self.address, to, amount)
        return amounts
