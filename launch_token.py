#!/usr/bin/env python3
"""
Launch a token on Four.Meme from the command line

Wallet and network settings come from .env (PRIVATE_KEY, RPC_URL, DRY_RUN,
BENEFICIARY_ADDRESS). Dry run stays ON unless DRY_RUN=false.

Usage:
  python launch_token.py --name "Test Token" --symbol TTP --image ./token.png
  TAX_RATE_BPS=500 FUNDS_BPS=9700 BURN_BPS=100 HOLDERS_BPS=100 LIQUIDITY_BPS=100 \\
      python launch_token.py --name "Tax Token" --symbol TAX --image ./token.png
"""

import argparse
import asyncio
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv
from eth_utils import is_address

from four_meme_deployer import FourMemeDeployer, setup_logging
from memedeploy.constants import BSCSCAN_TX_URL, DRY_RUN_TX_HASH
from memedeploy.models import DeployConfig, TaxConfig, TokenConfig
from memedeploy.services import load_account


def _bps(value: Optional[int], env_name: str) -> int:
    """CLI value if given, else the environment default"""
    if value is not None:
        return value
    raw = os.getenv(env_name, '').strip()
    try:
        return int(raw or 0)
    except ValueError:
        raise ValueError(f"{env_name} must be an integer number of basis points, got {raw!r}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deploy a token on Four.Meme (BSC)")
    parser.add_argument('--name', required=True, help="Token name")
    parser.add_argument('--symbol', required=True, help="Token ticker")
    parser.add_argument('--description', default="", help="Token description")
    parser.add_argument('--image', required=True, help="Path to the token image")
    parser.add_argument('--twitter', default="")
    parser.add_argument('--website', default="")
    parser.add_argument('--telegram', default="")

    tax = parser.add_argument_group('tax', "Basis points, 10000 = 100%%")
    # Unset options fall back to TAX_RATE_BPS, FUNDS_BPS, ... in build_configs
    tax.add_argument('--tax-rate-bps', type=int)
    tax.add_argument('--funds-bps', type=int)
    tax.add_argument('--burn-bps', type=int)
    tax.add_argument('--holders-bps', type=int)
    tax.add_argument('--liquidity-bps', type=int)
    tax.add_argument('--beneficiary', default=None,
                     help="Funds recipient (default: BENEFICIARY_ADDRESS or the wallet)")
    return parser.parse_args(argv)


def build_configs(args: argparse.Namespace, wallet_address: str):
    """Turn CLI options into TokenConfig and TaxConfig"""
    token_config = TokenConfig(
        name=args.name,
        symbol=args.symbol,
        description=args.description,
        image_path=args.image,
        twitter=args.twitter,
        website=args.website,
        telegram=args.telegram,
    )
    tax_config = TaxConfig(
        tax_rate_bps=_bps(args.tax_rate_bps, 'TAX_RATE_BPS'),
        funds_bps=_bps(args.funds_bps, 'FUNDS_BPS'),
        burn_bps=_bps(args.burn_bps, 'BURN_BPS'),
        holders_bps=_bps(args.holders_bps, 'HOLDERS_BPS'),
        liquidity_bps=_bps(args.liquidity_bps, 'LIQUIDITY_BPS'),
        beneficiary_address=args.beneficiary or os.getenv('BENEFICIARY_ADDRESS') or wallet_address,
    )
    return token_config, tax_config


async def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging()

    try:
        deploy_config = DeployConfig.from_env()
        account = load_account(deploy_config.private_key)
        token_config, tax_config = build_configs(args, account.address)
    except ValueError as e:
        print(f"\n❌ CONFIGURATION ERROR: {e}")
        print("   Please check PRIVATE_KEY and the tax settings in your .env file.")
        return 1

    if tax_config.is_taxed and not is_address(tax_config.beneficiary_address):
        print(f"\n❌ CONFIGURATION ERROR: invalid beneficiary address {tax_config.beneficiary_address}")
        return 1

    print(f"🔷 Wallet Address: {account.address}")
    if tax_config.is_taxed:
        print(f"💰 Beneficiary: {tax_config.beneficiary_address}")
    print(f"🧪 Mode: {'DRY RUN' if deploy_config.dry_run else 'LIVE'}")

    deployer = FourMemeDeployer(deploy_config)
    result = await deployer.deploy_token(token_config, tax_config)

    if not result.success:
        print(f"❌ Deployment Failed: {result.error}")
        return 1

    if result.tx_hash == DRY_RUN_TX_HASH:
        print("✅ Dry run completed, payload accepted by the platform")
    else:
        print("✅ Token Deployed Successfully!")
        print(f"📜 Transaction Hash: {result.tx_hash}")
        print(f"🔗 View on Scan: {BSCSCAN_TX_URL.format(tx_hash=result.tx_hash)}")
    print(f"🪙 Token Address: {result.token_address or 'Unknown'}")
    return 0


def run():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
