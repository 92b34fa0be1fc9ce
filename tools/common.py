import sys
import os
parent_path = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
sys.path.append(parent_path)
from tronrouter.config import *
from tronrouter.client import RouterClient
from tronrouter.logger import Logger

log = Logger('router_ops.log', level='info')
client = RouterClient(log)


def confirm(prompt):
    first = input(prompt)
    second = input('again: ')
    assert first == second
    return first
