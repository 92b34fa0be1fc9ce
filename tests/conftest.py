import os
import sys

import pytest
from tronpy import keys

sys.path.append(os.path.abspath(os.path.dirname(os.path.dirname(__file__))))
from tronrouter.config import *
from tronrouter.exchange import MockSmartRouter
from tronrouter.ledger import TokenLedger
from tronrouter.logger import Logger
from tronrouter.router import RouterCore

NOW = 1_700_000_000


def new_address():
    return keys.PrivateKey.random().public_key.to_base58check_address()


@pytest.fixture
def accounts():
    return {
        'admin': new_address(),
        'collector': new_address(),
        'user': new_address(),
        'other': new_address(),
        'router': new_address(),
    }


@pytest.fixture
def ledger():
    return TokenLedger(WTRX)


@pytest.fixture
def exchange(ledger):
    mock = MockSmartRouter(SMART_ROUTER, ledger)
    ledger.mint(USDT, mock.address, 10 ** 12)
    # back the exchange's WTRX reserves with real TRX so unwraps settle
    ledger.mint_trx(mock.address, 10 ** 12)
    ledger.deposit(mock.address, 10 ** 12)
    return mock


@pytest.fixture
def router(accounts, ledger, exchange):
    return RouterCore(accounts['router'], accounts['admin'], exchange, WTRX, DEFAULT_FEE_RATE, ledger,
                      fee_collector=accounts['collector'], clock=lambda: NOW, _log=Logger(level='debug'))
