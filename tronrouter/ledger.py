import copy

from tronrouter.config import *
from tronrouter.errors import InsufficientBalance, InsufficientAllowance, InvalidParameter


def is_int(value):
    # bool is an int subclass, never a valid amount
    return isinstance(value, int) and not isinstance(value, bool)


class TokenLedger(object):
    """In-memory stand-in for the host chain's balances.

    Tracks TRC20 balances and allowances per (token, owner[, spender]), native
    TRX balances in sun, and the wrapped native token, whose deposit/withdraw
    convert between the two. snapshot()/restore() give callers all-or-nothing
    execution.
    """

    def __init__(self, wrapped_token=WTRX):
        self.wrapped_token = wrapped_token
        self.balances = {}
        self.allowances = {}
        self.trx = {}

    def balance_of(self, token, owner):
        return self.balances.get((token, owner), 0)

    def allowance(self, token, owner, spender):
        return self.allowances.get((token, owner, spender), 0)

    def trx_balance(self, owner):
        return self.trx.get(owner, 0)

    def mint(self, token, owner, amount):
        self._check_amount(amount)
        self.balances[(token, owner)] = self.balance_of(token, owner) + amount

    def mint_trx(self, owner, amount):
        self._check_amount(amount)
        self.trx[owner] = self.trx_balance(owner) + amount

    def transfer(self, token, sender, to, amount):
        self._check_amount(amount)
        balance = self.balance_of(token, sender)
        if amount > balance:
            raise InsufficientBalance('{} balance of {} is {}, need {}'.format(token, sender, balance, amount))
        self.balances[(token, sender)] = balance - amount
        self.balances[(token, to)] = self.balance_of(token, to) + amount

    def approve(self, token, owner, spender, amount):
        if not is_int(amount) or amount < 0 or amount > MAX_UINT256:
            raise InvalidParameter('approve amount out of range: {}'.format(amount))
        self.allowances[(token, owner, spender)] = amount

    def transfer_from(self, token, spender, owner, to, amount):
        allowed = self.allowance(token, owner, spender)
        if amount > allowed:
            raise InsufficientAllowance('{} allowance of {} to {} is {}, need {}'.format(token, owner, spender, allowed, amount))
        self.transfer(token, owner, to, amount)
        # infinite approval is never consumed
        if allowed != MAX_UINT256:
            self.allowances[(token, owner, spender)] = allowed - amount

    def transfer_trx(self, sender, to, amount):
        self._check_amount(amount)
        balance = self.trx_balance(sender)
        if amount > balance:
            raise InsufficientBalance('TRX balance of {} is {}, need {}'.format(sender, balance, amount))
        self.trx[sender] = balance - amount
        self.trx[to] = self.trx_balance(to) + amount

    def deposit(self, owner, amount):
        """Wrap `amount` sun of owner's TRX into the wrapped token."""
        self.transfer_trx(owner, self.wrapped_token, amount)
        self.balances[(self.wrapped_token, owner)] = self.balance_of(self.wrapped_token, owner) + amount

    def withdraw(self, owner, amount):
        """Unwrap `amount` of owner's wrapped token back into TRX."""
        self._check_amount(amount)
        balance = self.balance_of(self.wrapped_token, owner)
        if amount > balance:
            raise InsufficientBalance('{} balance of {} is {}, need {}'.format(self.wrapped_token, owner, balance, amount))
        self.balances[(self.wrapped_token, owner)] = balance - amount
        self.transfer_trx(self.wrapped_token, owner, amount)

    def snapshot(self):
        return (copy.copy(self.balances), copy.copy(self.allowances), copy.copy(self.trx))

    def restore(self, snap):
        self.balances, self.allowances, self.trx = (copy.copy(part) for part in snap)

    def _check_amount(self, amount):
        if not is_int(amount) or amount < 0:
            raise InvalidParameter('amount must be a non-negative integer: {}'.format(amount))
