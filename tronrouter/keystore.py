import getpass
import os
from binascii import b2a_hex, a2b_hex

from Crypto.Cipher import AES
from tronpy import keys


class PrpCrypt(object):
    """AES-CBC wrapper used to keep the operator key encrypted at rest."""

    def __init__(self, key):
        self.key = self.get16(key)
        self.mode = AES.MODE_CBC

    def get16(self, s):
        while len(s) % 16 != 0:
            s += '\0'
        return str.encode(s)

    def encrypt(self, text):
        text = text.encode('utf-8')
        cryptor = AES.new(self.key, self.mode, self.key)
        # pad with \0 up to a whole number of blocks
        length = 16
        count = len(text)
        if count % length != 0:
            text = text + ('\0' * (length - count % length)).encode('utf-8')
        self.ciphertext = cryptor.encrypt(text)
        return b2a_hex(self.ciphertext)

    def decrypt(self, text):
        cryptor = AES.new(self.key, self.mode, self.key)
        plain_text = cryptor.decrypt(a2b_hex(text))
        return bytes.decode(plain_text).rstrip('\0')


def load_private_key(prompt='password: '):
    """PRIVATE_KEY from the environment, else ENC_PRIVATE_KEY unlocked by password."""
    priv = os.getenv('PRIVATE_KEY')
    if not priv:
        enc_priv = os.getenv('ENC_PRIVATE_KEY')
        if not enc_priv:
            raise RuntimeError('set PRIVATE_KEY or ENC_PRIVATE_KEY')
        passwd = getpass.getpass(prompt)
        priv = PrpCrypt(passwd).decrypt(enc_priv)
    return keys.PrivateKey.fromhex(priv)
