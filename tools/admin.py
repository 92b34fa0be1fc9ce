from common import *

usage = '''usage:
  admin.py fee-rate <rate>
  admin.py fee-collector <address>
  admin.py transfer-admin <address>
  admin.py accept-admin
  admin.py approve <token> [amount]
  admin.py withdraw <token> <recipient>
'''

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(usage)
        sys.exit(1)
    cmd, args = sys.argv[1], sys.argv[2:]
    if cmd == 'fee-rate':
        client.update_fee_rate(int(args[0]))
        print('fee rate is now {}'.format(client.get_info()['fee_rate']))
    elif cmd == 'fee-collector':
        client.update_fee_collector(args[0])
    elif cmd == 'transfer-admin':
        print('pending admin will be {}'.format(args[0]))
        assert confirm('retype the new admin address: ') == args[0]
        client.initiate_admin_transfer(args[0])
    elif cmd == 'accept-admin':
        client.accept_admin_transfer()
        print('admin is now {}'.format(client.get_info()['admin']))
    elif cmd == 'approve':
        amount = int(args[1]) if len(args) > 1 else MAX_UINT256
        client.approve(args[0], amount)
    elif cmd == 'withdraw':
        token, recipient = args
        held = client.trc20_balance(token, client.router_address)
        print('router holds {} of {}, recipient {}'.format(held, token, recipient))
        amount = int(confirm('input withdraw amount: '))
        client.withdraw_token(token, amount, recipient)
    else:
        print(usage)
        sys.exit(1)
