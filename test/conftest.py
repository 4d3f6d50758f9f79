"""
Shared fixtures: a well-known test key, a token image and fake HTTP responses
"""

from unittest.mock import MagicMock

import pytest

from memedeploy.models import DeployConfig, TaxConfig, TokenConfig

# First default Hardhat/Anvil account, never holds real funds
TEST_PRIVATE_KEY = "ac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
BENEFICIARY = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


def make_response(status_code=200, payload=None, text=None):
    """Return a requests.Response stand-in"""
    response = MagicMock()
    response.status_code = status_code
    if payload is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = payload
    response.text = text if text is not None else str(payload)
    return response


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "token.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image")
    return str(path)


@pytest.fixture
def token_config(image_path):
    return TokenConfig(
        name="Test Token Package",
        symbol="TTP",
        description="Launched from the test suite",
        image_path=image_path,
        twitter="https://x.com/test",
    )


@pytest.fixture
def tax_config():
    return TaxConfig(
        tax_rate_bps=500,
        funds_bps=9700,
        burn_bps=100,
        holders_bps=100,
        liquidity_bps=100,
        beneficiary_address=BENEFICIARY,
    )


@pytest.fixture
def dry_run_config():
    return DeployConfig(private_key=TEST_PRIVATE_KEY)


@pytest.fixture
def live_config():
    return DeployConfig(private_key=TEST_PRIVATE_KEY, dry_run=False, gas_limit=500000)


@pytest.fixture
def fake_api():
    api = MagicMock()
    api.generate_nonce.return_value = "nonce-123"
    api.login.return_value = "access-token"
    api.upload_image.return_value = "https://static.four.meme/market/token.png"
    api.create_token.return_value = ("0xabcdef", "0x1234")
    return api
