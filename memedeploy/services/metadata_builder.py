"""
Builds the token metadata payload expected by /private/token/create
"""

import time
from typing import Dict, Optional, Union

from memedeploy.constants import (
    BPS_DENOMINATOR,
    DEFAULT_TRADE_FEE,
    LP_TRADING_FEE,
    MIN_SHARING,
    NETWORK_CODE,
    RAISED_AMOUNT,
    SALE_RATE,
    TAX_TOKEN_TEMPLATE,
    TOTAL_SUPPLY,
    WBNB_ADDRESS,
)
from memedeploy.errors import TaxConfigError
from memedeploy.models import TaxConfig, TokenConfig


def _normalize(value: float) -> Union[int, float]:
    # 5.0 -> 5 so the JSON body carries integers where the platform expects them
    return int(value) if value == int(value) else value


def bps_to_percent(bps: Optional[int]) -> Union[int, float]:
    """Convert basis points to the platform's percent scale (500 -> 5)"""
    return _normalize((bps or 0) / 100)


def validate_tax_config(tax_config: Optional[TaxConfig]) -> None:
    """Raise TaxConfigError if a taxed config breaks the distribution rules"""
    if tax_config is None or not tax_config.is_taxed:
        return

    total_bps = tax_config.distribution_total
    if total_bps != BPS_DENOMINATOR:
        raise TaxConfigError(
            f"Tax distribution must sum to {BPS_DENOMINATOR} (100%). Current sum: {total_bps}"
        )

    if (tax_config.funds_bps or 0) > 0 and not tax_config.beneficiary_address:
        raise TaxConfigError("Beneficiary address required when funds_bps > 0")


def build_tax_info(tax_config: TaxConfig, account_address: str) -> Dict:
    """Translate a validated TaxConfig into the tokenTaxInfo block"""
    return {
        'burnRate': bps_to_percent(tax_config.burn_bps),
        'divideRate': bps_to_percent(tax_config.holders_bps),
        'feeRate': bps_to_percent(tax_config.tax_rate_bps),
        'liquidityRate': bps_to_percent(tax_config.liquidity_bps),
        'recipientAddress': tax_config.beneficiary_address or account_address,
        'recipientRate': bps_to_percent(tax_config.funds_bps),
        'minSharing': MIN_SHARING,
    }


def build_metadata_payload(
    token_config: TokenConfig,
    image_url: str,
    account_address: str,
    tax_config: Optional[TaxConfig] = None,
    launch_time: Optional[int] = None,
) -> Dict:
    """Assemble the full create payload for a token

    Args:
        token_config: Name, symbol, description and social links
        image_url: Hosted URL returned by the upload endpoint
        account_address: Deployer address, default tax recipient
        tax_config: Optional tax settings; validated before anything is built
        launch_time: Milliseconds since epoch, defaults to now

    Raises:
        TaxConfigError: If the tax distribution is invalid
    """
    validate_tax_config(tax_config)
    is_tax_token = tax_config is not None and tax_config.is_taxed

    if is_tax_token:
        trade_fee = str(_normalize(tax_config.tax_rate_bps / BPS_DENOMINATOR))
    else:
        trade_fee = DEFAULT_TRADE_FEE

    raised_token = {
        'b0Amount': "8",
        'buyFee': trade_fee,
        'nativeSymbol': "BNB",
        'networkCode': NETWORK_CODE,
        'platform': "MEME",
        'saleRate': str(SALE_RATE),
        'sellFee': trade_fee,
        'status': "PUBLISH",
        'symbol': "BNB",
        'symbolAddress': WBNB_ADDRESS,
        'totalAmount': str(TOTAL_SUPPLY),
        'totalBAmount': str(RAISED_AMOUNT),
    }
    if is_tax_token:
        raised_token['template'] = TAX_TOKEN_TEMPLATE

    payload = {
        'clickFun': False,
        'desc': token_config.description,
        'funGroup': False,
        'imgUrl': image_url,
        'label': "Meme",
        'launchTime': launch_time if launch_time is not None else int(time.time() * 1000),
        'lpTradingFee': LP_TRADING_FEE,
        'name': token_config.name,
        'preSale': 0,
        'raisedAmount': RAISED_AMOUNT,
        'raisedToken': raised_token,
        'reserveRate': 0,
        'saleRate': SALE_RATE,
        'shortName': token_config.symbol,
        'symbol': "BNB",
        'totalSupply': TOTAL_SUPPLY,
        'twitterUrl': token_config.twitter or "",
        'websiteUrl': token_config.website or "",
        'telegramUrl': token_config.telegram or "",
    }

    if is_tax_token:
        payload['tokenTaxInfo'] = build_tax_info(tax_config, account_address)

    return payload
