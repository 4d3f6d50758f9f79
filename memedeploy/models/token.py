"""
Token metadata and tax distribution models
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TokenConfig:
    """Basic token metadata supplied by the caller"""
    name: str
    symbol: str
    description: str
    image_path: str  # Local file, must exist
    twitter: str = ""
    website: str = ""
    telegram: str = ""


@dataclass(frozen=True)
class TaxConfig:
    """Buy/sell tax and how it is split, all values in basis points (10000 = 100%)

    The four shares (funds, burn, holders, liquidity) must sum to 10000
    whenever tax_rate_bps > 0, and beneficiary_address is required when
    funds_bps > 0.
    """
    tax_rate_bps: int = 0
    funds_bps: int = 0  # Paid to beneficiary_address
    burn_bps: int = 0
    holders_bps: int = 0  # Dividends
    liquidity_bps: int = 0
    beneficiary_address: Optional[str] = None

    @property
    def is_taxed(self) -> bool:
        return (self.tax_rate_bps or 0) > 0

    @property
    def distribution_total(self) -> int:
        return (
            (self.funds_bps or 0)
            + (self.burn_bps or 0)
            + (self.holders_bps or 0)
            + (self.liquidity_bps or 0)
        )
