import sys
import os
parent_path = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
sys.path.append(parent_path)
from tronrouter.codec import decode_swap_input

if __name__ == "__main__":
    data = sys.argv[1] if len(sys.argv) > 1 else input('call data: ')
    decoded = decode_swap_input(data.strip())
    for key, value in decoded.items():
        print('{:<16} {}'.format(key, value))
