#!/usr/bin/env python3
"""
Four.Meme - Token Deployer
Core logic for launching a single token on Four.Meme (BSC).

Flow: login with the wallet -> upload image -> register metadata ->
call the factory with the platform-signed arguments (skipped on dry run).
Every failure is returned as DeployResult(success=False) instead of raised.
"""

import json
import logging
import os
from typing import Optional

from eth_account.signers.local import LocalAccount
from web3 import Web3

from four_meme_factory_interface import FourMemeFactoryInterface, extract_token_address
from memedeploy.constants import DRY_RUN_TX_HASH, FACTORY_ADDRESS, ZERO_ADDRESS
from memedeploy.errors import ImageNotFoundError
from memedeploy.models import DeployConfig, DeployResult, TaxConfig, TokenConfig
from memedeploy.services import (
    FourMemeAPI,
    build_metadata_payload,
    load_account,
    sign_login_message,
    validate_tax_config,
)

logger = logging.getLogger('meme_deployer')


def setup_logging(log_dir: str = 'logs') -> logging.Logger:
    """Setup logging: DEBUG to logs/deployer.log, INFO to the console"""
    os.makedirs(log_dir, exist_ok=True)

    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    file_handler = logging.FileHandler(os.path.join(log_dir, 'deployer.log'), encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    if os.getenv('DEBUG', 'false').lower() == 'true':
        console_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter('%(asctime)s | %(levelname)s | %(message)s')
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


class FourMemeDeployer:
    """Deploys one token per call to the Four.Meme factory on BSC"""

    def __init__(self, deploy_config: DeployConfig,
                 api: Optional[FourMemeAPI] = None, w3: Optional[Web3] = None):
        self.config = deploy_config
        self.api = api or FourMemeAPI(deploy_config.api_url, timeout=deploy_config.http_timeout)
        # Created on first on-chain use so dry runs never touch the RPC node
        self._w3 = w3

    @property
    def w3(self) -> Web3:
        if self._w3 is None:
            self._w3 = Web3(Web3.HTTPProvider(
                self.config.rpc_url,
                request_kwargs={'timeout': self.config.http_timeout}
            ))
        return self._w3

    def preflight(self, token_config: TokenConfig, tax_config: Optional[TaxConfig]):
        """Check everything that can fail without the network"""
        if not os.path.isfile(token_config.image_path):
            raise ImageNotFoundError(f"Image file not found at {token_config.image_path}")
        validate_tax_config(tax_config)

    def authenticate(self, account: LocalAccount) -> str:
        """Login handshake: nonce -> signed challenge -> access token"""
        print("🔄 Logging in...")
        nonce = self.api.generate_nonce(account.address)
        signature = sign_login_message(account, nonce)
        access_token = self.api.login(account.address, signature)
        print("✅ Logged in successfully")
        return access_token

    def upload_image(self, token_config: TokenConfig, access_token: str) -> str:
        print("🔄 Uploading image...")
        image_url = self.api.upload_image(token_config.image_path, access_token)
        print(f"✅ Image uploaded: {image_url}")
        return image_url

    def register_metadata(self, payload: dict, access_token: str):
        print("🔄 Submitting token metadata...")
        if self.config.dry_run:
            print("🐛 [DEBUG] Full Metadata Payload:")
            print(json.dumps(payload, indent=2))

        create_arg, signature = self.api.create_token(payload, access_token)
        print("✅ Metadata registered, received contract signature")
        return create_arg, signature

    def submit_on_chain(self, account: LocalAccount, create_arg: str, signature: str) -> DeployResult:
        """Send createToken, wait for the receipt and resolve the token address"""
        factory = FourMemeFactoryInterface(self.w3, account, gas_limit=self.config.gas_limit)

        print("🚀 Submitting transaction to BSC...")
        tx_hash = factory.create_token(create_arg, signature)
        print(f"📝 Transaction sent! Hash: {tx_hash}")
        print("⏳ Waiting for transaction confirmation...")

        receipt = factory.wait_for_receipt(tx_hash, timeout=self.config.receipt_timeout)
        print(f"✅ Transaction confirmed in block {receipt.get('blockNumber')}")

        token_address = extract_token_address(receipt, FACTORY_ADDRESS)
        print(f"🎉 Token deployed at: {token_address or 'Unknown'}")

        return DeployResult(success=True, tx_hash=tx_hash, token_address=token_address)

    async def deploy_token(self, token_config: TokenConfig,
                           tax_config: Optional[TaxConfig] = None) -> DeployResult:
        """Run the full deployment; never raises"""
        tax_config = tax_config or TaxConfig()
        try:
            self.preflight(token_config, tax_config)

            account = load_account(self.config.private_key)
            print(f"🔷 Wallet: {account.address}")
            logger.info(f"Deploying {token_config.name} ({token_config.symbol}) from {account.address}")

            access_token = self.authenticate(account)
            image_url = self.upload_image(token_config, access_token)

            if tax_config.is_taxed:
                print("⚙️  Applying tax configuration (tokenTaxInfo)...")
            payload = build_metadata_payload(token_config, image_url, account.address, tax_config)

            create_arg, signature = self.register_metadata(payload, access_token)

            if self.config.dry_run:
                print("⚠️  DRY RUN MODE ENABLED: Skipping on-chain transaction.")
                print("📝 Contract Arguments that would be sent:")
                print(f"   - createArg: {create_arg}")
                print(f"   - signature: {signature}")
                return DeployResult(success=True, tx_hash=DRY_RUN_TX_HASH, token_address=ZERO_ADDRESS)

            return self.submit_on_chain(account, create_arg, signature)

        except Exception as e:
            print(f"❌ Deployment Failed: {e}")
            logger.error(f"Deployment failed for {token_config.symbol}: {type(e).__name__}: {e}")
            return DeployResult(success=False, error=str(e))


async def deploy_token(token_config: TokenConfig, deploy_config: DeployConfig,
                       tax_config: Optional[TaxConfig] = None) -> DeployResult:
    """Deploy a token to Four.Meme with a one-off deployer"""
    deployer = FourMemeDeployer(deploy_config)
    return await deployer.deploy_token(token_config, tax_config)
