"""
Account derivation and login message signing
"""

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount
from web3 import Web3

from memedeploy.constants import LOGIN_MESSAGE


def load_account(private_key: str) -> LocalAccount:
    """Derive the deployer account from a raw private key (0x prefix optional)"""
    key = private_key.strip()
    if not key.startswith('0x'):
        key = '0x' + key
    return Account.from_key(key)


def login_message(nonce: str) -> str:
    return LOGIN_MESSAGE.format(nonce=nonce)


def sign_login_message(account: LocalAccount, nonce: str) -> str:
    """Sign the login challenge as an EIP-191 personal message, 0x-prefixed hex"""
    signed = account.sign_message(encode_defunct(text=login_message(nonce)))
    return Web3.to_hex(signed.signature)
