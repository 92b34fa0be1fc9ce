from Crypto.Hash import keccak
from tronpy import keys
from tronpy.abi import trx_abi

from tronrouter.abi import swap_input_signature, swap_input_types
from tronrouter.state import SwapData

to_hex_address = keys.to_hex_address
to_base58_address = keys.to_base58check_address


def function_selector(signature):
    digest = keccak.new(digest_bits=256, data=signature.encode('utf-8')).hexdigest()
    return digest[:8]


def encode_swap_input(path, pool_versions, version_lengths, fees, swap_data):
    """Build the hex call data of swapExactInput, selector included."""
    data = SwapData(*swap_data)
    args = [
        list(path),
        list(pool_versions),
        [int(n) for n in version_lengths],
        [int(fee) for fee in fees],
        (int(data.amount_in), int(data.amount_out_min), data.to, int(data.deadline)),
    ]
    return function_selector(swap_input_signature) + trx_abi.encode(swap_input_types, args).hex()


def decode_swap_input(data):
    """Decode swapExactInput call data, with or without 0x and selector.

    Returns a dict with path, pool_versions, version_lengths, fees and a
    SwapData.
    """
    if data.startswith('0x'):
        data = data[2:]
    selector = function_selector(swap_input_signature)
    if data.startswith(selector) and len(data) % 64 == 8:
        data = data[8:]
    path, pool_versions, version_lengths, fees, swap = trx_abi.decode(swap_input_types, bytes.fromhex(data))
    return {
        'path': list(path),
        'pool_versions': list(pool_versions),
        'version_lengths': list(version_lengths),
        'fees': list(fees),
        'swap_data': SwapData(*swap),
    }
