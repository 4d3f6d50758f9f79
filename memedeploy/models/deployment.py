"""
Deployment configuration and result models
"""

import os
from dataclasses import dataclass, asdict
from typing import Dict, Mapping, Optional

from memedeploy.constants import API_URL, DEFAULT_RPC_URL


def parse_dry_run(value: Optional[str]) -> bool:
    """Dry run is opt-out: only the exact string 'false' disables it"""
    return value != 'false'


@dataclass
class DeployConfig:
    """Wallet, network and execution mode for a single deploy call"""
    private_key: str  # hex, with or without 0x prefix
    rpc_url: str = DEFAULT_RPC_URL
    dry_run: bool = True  # Set False explicitly to broadcast
    api_url: str = API_URL
    http_timeout: int = 30
    receipt_timeout: int = 300
    gas_limit: Optional[int] = None  # None = estimate from node

    def __repr__(self) -> str:
        return (f"DeployConfig(private_key='***', rpc_url={self.rpc_url!r}, "
                f"dry_run={self.dry_run}, api_url={self.api_url!r})")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'DeployConfig':
        """Load configuration from environment variables

        PRIVATE_KEY is required. DRY_RUN defaults to enabled unless set to 'false'.
        """
        env = os.environ if environ is None else environ

        required_vars = ['PRIVATE_KEY']
        missing = [var for var in required_vars if not env.get(var)]
        if missing:
            raise ValueError(f"Missing required environment variables: {missing}")

        gas_limit = env.get('GAS_LIMIT')

        return cls(
            private_key=env['PRIVATE_KEY'],
            rpc_url=env.get('RPC_URL') or DEFAULT_RPC_URL,
            dry_run=parse_dry_run(env.get('DRY_RUN')),
            api_url=env.get('FOUR_MEME_API_URL') or API_URL,
            http_timeout=int(env.get('HTTP_TIMEOUT', '30')),
            receipt_timeout=int(env.get('RECEIPT_TIMEOUT', '300')),
            gas_limit=int(gas_limit) if gas_limit else None,
        )


@dataclass
class DeployResult:
    """Outcome of a deploy call, produced exactly once"""
    success: bool
    tx_hash: Optional[str] = None
    token_address: Optional[str] = None  # Best effort, parsed from receipt logs
    error: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)
