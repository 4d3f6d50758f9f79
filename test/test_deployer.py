"""
End-to-end tests for FourMemeDeployer with the HTTP and RPC boundaries faked
"""

import asyncio
import json
from unittest.mock import MagicMock, patch

from web3 import Web3

import four_meme_deployer
from four_meme_deployer import FourMemeDeployer
from memedeploy.constants import DRY_RUN_TX_HASH, FACTORY_ADDRESS, ZERO_ADDRESS
from memedeploy.models import DeployConfig, TaxConfig, TokenConfig
from memedeploy.services import FourMemeAPI

from conftest import TEST_ADDRESS, TEST_PRIVATE_KEY, make_response

TOKEN_ADDRESS = "0x4444444444444444444444444444444444444444"


def run(deployer, token_config, tax_config=None):
    return asyncio.run(deployer.deploy_token(token_config, tax_config))


def make_chain(logs):
    w3 = MagicMock()
    w3.eth.gas_price = 1000000000
    w3.eth.chain_id = 56
    w3.eth.get_transaction_count.return_value = 0
    w3.eth.send_raw_transaction.return_value = bytes.fromhex("cd" * 32)
    w3.eth.wait_for_transaction_receipt.return_value = {'status': 1, 'blockNumber': 42, 'logs': logs}
    # Real signing needs a concrete transaction dict
    w3.eth.contract.return_value.functions.createToken.return_value.build_transaction.return_value = {
        'to': Web3.to_checksum_address(FACTORY_ADDRESS),
        'value': 0,
        'gas': 500000,
        'gasPrice': 1000000000,
        'nonce': 0,
        'chainId': 56,
        'data': '0xabcdef',
    }
    return w3


class TestDryRun:
    def test_dry_run_is_the_default(self):
        assert DeployConfig(private_key=TEST_PRIVATE_KEY).dry_run is True

    def test_dry_run_returns_sentinel_without_chain_calls(self, dry_run_config, fake_api, token_config):
        w3 = MagicMock()
        deployer = FourMemeDeployer(dry_run_config, api=fake_api, w3=w3)

        result = run(deployer, token_config)

        assert result.success is True
        assert result.tx_hash == DRY_RUN_TX_HASH
        assert result.token_address == ZERO_ADDRESS
        assert result.error is None
        assert w3.mock_calls == []

    def test_dry_run_never_builds_a_provider(self, dry_run_config, fake_api, token_config):
        deployer = FourMemeDeployer(dry_run_config, api=fake_api)
        run(deployer, token_config)
        assert deployer._w3 is None

    def test_flow_order_and_data_handoff(self, dry_run_config, fake_api, token_config, tax_config):
        deployer = FourMemeDeployer(dry_run_config, api=fake_api)

        result = run(deployer, token_config, tax_config)

        assert result.success is True
        fake_api.generate_nonce.assert_called_once_with(TEST_ADDRESS)
        address, signature = fake_api.login.call_args.args
        assert address == TEST_ADDRESS
        assert signature.startswith('0x')
        fake_api.upload_image.assert_called_once_with(token_config.image_path, 'access-token')

        payload, access_token = fake_api.create_token.call_args.args
        assert access_token == 'access-token'
        assert payload['imgUrl'] == "https://static.four.meme/market/token.png"
        assert payload['tokenTaxInfo']['feeRate'] == 5

    def test_dry_run_prints_full_payload(self, dry_run_config, fake_api, token_config, capsys):
        deployer = FourMemeDeployer(dry_run_config, api=fake_api)

        run(deployer, token_config)

        out = capsys.readouterr().out
        assert "Full Metadata Payload" in out
        payload, _ = fake_api.create_token.call_args.args
        assert json.dumps(payload, indent=2) in out

    def test_live_run_does_not_print_payload(self, live_config, fake_api, token_config, capsys):
        deployer = FourMemeDeployer(live_config, api=fake_api, w3=make_chain([{'address': TOKEN_ADDRESS}]))

        run(deployer, token_config)

        assert "Full Metadata Payload" not in capsys.readouterr().out

    def test_module_level_deploy_token(self, dry_run_config, fake_api, token_config):
        with patch.object(four_meme_deployer, 'FourMemeAPI', return_value=fake_api) as api_cls:
            result = asyncio.run(four_meme_deployer.deploy_token(token_config, dry_run_config))

        api_cls.assert_called_once_with(dry_run_config.api_url, timeout=dry_run_config.http_timeout)
        assert result.success is True
        assert result.tx_hash == DRY_RUN_TX_HASH
        fake_api.create_token.assert_called_once()


class TestPreconditions:
    def test_missing_image_fails_before_any_request(self, dry_run_config, tmp_path):
        session = MagicMock()
        api = FourMemeAPI(session=session)
        deployer = FourMemeDeployer(dry_run_config, api=api)
        config = TokenConfig(name="X", symbol="X", description="", image_path=str(tmp_path / "nope.png"))

        result = run(deployer, config)

        assert result.success is False
        assert "not found" in result.error
        session.post.assert_not_called()

    def test_bad_tax_sum_fails_before_any_request(self, dry_run_config, fake_api, token_config):
        deployer = FourMemeDeployer(dry_run_config, api=fake_api)
        bad = TaxConfig(tax_rate_bps=500, funds_bps=5000, beneficiary_address=TEST_ADDRESS)

        result = run(deployer, token_config, bad)

        assert result.success is False
        assert "10000" in result.error
        fake_api.generate_nonce.assert_not_called()

    def test_missing_beneficiary_fails(self, dry_run_config, fake_api, token_config):
        deployer = FourMemeDeployer(dry_run_config, api=fake_api)
        bad = TaxConfig(tax_rate_bps=500, funds_bps=10000)

        result = run(deployer, token_config, bad)

        assert result.success is False
        fake_api.generate_nonce.assert_not_called()


class TestFailures:
    def test_platform_rejection_returns_raw_response(self, dry_run_config, token_config):
        session = MagicMock()
        session.post.side_effect = [
            make_response(200, {'code': 0, 'data': 'nonce-123'}),
            make_response(200, {'code': 0, 'data': 'access-token'}),
            make_response(200, {'code': 0, 'data': 'https://cdn/token.png'}),
            make_response(200, {'code': 500, 'msg': 'symbol is invalid'}),
        ]
        deployer = FourMemeDeployer(dry_run_config, api=FourMemeAPI(session=session))

        result = run(deployer, token_config)

        assert result.success is False
        assert 'symbol is invalid' in result.error
        assert '"code": 500' in result.error

    def test_login_failure_is_reported_not_raised(self, dry_run_config, fake_api, token_config):
        fake_api.login.side_effect = RuntimeError("connection reset")
        deployer = FourMemeDeployer(dry_run_config, api=fake_api)

        result = run(deployer, token_config)

        assert result.success is False
        assert result.error == "connection reset"
        fake_api.upload_image.assert_not_called()

    def test_invalid_private_key_is_reported(self, fake_api, token_config):
        deployer = FourMemeDeployer(DeployConfig(private_key="not-a-key"), api=fake_api)

        result = run(deployer, token_config)

        assert result.success is False
        fake_api.generate_nonce.assert_not_called()


class TestLiveSubmission:
    def test_resolves_first_non_factory_log(self, live_config, fake_api, token_config):
        w3 = make_chain([{'address': FACTORY_ADDRESS}, {'address': TOKEN_ADDRESS}])
        deployer = FourMemeDeployer(live_config, api=fake_api, w3=w3)

        result = run(deployer, token_config)

        assert result.success is True
        assert result.tx_hash == "0x" + "cd" * 32
        assert result.token_address == TOKEN_ADDRESS
        w3.eth.send_raw_transaction.assert_called_once()

    def test_factory_only_logs_fall_back(self, live_config, fake_api, token_config):
        w3 = make_chain([{'address': FACTORY_ADDRESS}])
        deployer = FourMemeDeployer(live_config, api=fake_api, w3=w3)

        result = run(deployer, token_config)

        assert result.success is True
        assert result.token_address == FACTORY_ADDRESS

    def test_reverted_transaction_fails(self, live_config, fake_api, token_config):
        w3 = make_chain([])
        w3.eth.wait_for_transaction_receipt.return_value = {'status': 0, 'blockNumber': 42, 'logs': []}
        deployer = FourMemeDeployer(live_config, api=fake_api, w3=w3)

        result = run(deployer, token_config)

        assert result.success is False
        assert "reverted" in result.error
