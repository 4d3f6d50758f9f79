#!/usr/bin/env python3
"""
Four.Meme Factory Contract Interface
Sends createToken transactions and reads the new token address from receipts
"""

import logging
from typing import Optional

from eth_account.signers.local import LocalAccount
from web3 import Web3

from memedeploy.constants import FACTORY_ADDRESS
from memedeploy.errors import ChainSubmissionError

logger = logging.getLogger('meme_deployer')

GAS_ESTIMATE_BUFFER = 1.2

FACTORY_ABI = [
    {
        "inputs": [
            {"internalType": "bytes", "name": "args", "type": "bytes"},
            {"internalType": "bytes", "name": "signature", "type": "bytes"}
        ],
        "name": "createToken",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "payable",
        "type": "function"
    }
]


def _to_bytes(value) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return Web3.to_bytes(hexstr=value)


def extract_token_address(receipt, factory_address: str = FACTORY_ADDRESS) -> Optional[str]:
    """Best-effort token address from receipt logs

    Takes the first log emitted by a contract other than the factory. If every
    log comes from the factory, falls back to the first log's address.
    """
    logs = receipt.get('logs') or []
    factory = factory_address.lower()

    for log in logs:
        address = log.get('address')
        if address and address.lower() != factory:
            return address

    if logs:
        logger.warning("Could not parse token address from receipt, using first log address")
        return logs[0].get('address')

    logger.warning("Receipt has no logs, token address unknown")
    return None


class FourMemeFactoryInterface:
    """Interface for Four.Meme factory contract interactions"""

    def __init__(self, w3: Web3, account: LocalAccount,
                 factory_address: str = FACTORY_ADDRESS, gas_limit: Optional[int] = None):
        self.w3 = w3
        self.account = account
        self.factory_address = factory_address
        self.gas_limit = gas_limit
        self.factory = self.w3.eth.contract(
            address=Web3.to_checksum_address(factory_address),
            abi=FACTORY_ABI
        )

    def create_token(self, create_arg, signature) -> str:
        """Sign and broadcast createToken(args, signature); returns the tx hash"""
        sender = self.account.address
        function_call = self.factory.functions.createToken(
            _to_bytes(create_arg),
            _to_bytes(signature)
        )

        try:
            gas_limit = self.gas_limit
            if not gas_limit:
                estimated = function_call.estimate_gas({'from': sender, 'value': 0})
                gas_limit = int(estimated * GAS_ESTIMATE_BUFFER)

            nonce = self.w3.eth.get_transaction_count(sender, 'pending')
            gas_price = self.w3.eth.gas_price

            print(f"⛽ Gas: {gas_limit:,} units @ {gas_price / 1e9:.2f} gwei")
            print(f"🔢 Nonce: {nonce}")

            # No value needed, the factory no longer charges a creation fee
            tx = function_call.build_transaction({
                'from': sender,
                'value': 0,
                'gas': gas_limit,
                'gasPrice': gas_price,
                'nonce': nonce,
                'chainId': self.w3.eth.chain_id
            })

            signed_tx = self.account.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except Exception as e:
            logger.error(f"createToken submission failed: {e}")
            raise ChainSubmissionError(f"Failed to submit createToken transaction: {e}") from e

        return Web3.to_hex(tx_hash)

    def wait_for_receipt(self, tx_hash: str, timeout: int = 300):
        """Block until the transaction is mined; raises on revert or timeout"""
        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
        except Exception as e:
            logger.error(f"Waiting for {tx_hash} failed: {e}")
            raise ChainSubmissionError(f"Transaction {tx_hash} not confirmed: {e}") from e

        if receipt.get('status') == 0:
            raise ChainSubmissionError(f"Transaction {tx_hash} reverted in block {receipt.get('blockNumber')}")

        return receipt
