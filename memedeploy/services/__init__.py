from memedeploy.services.four_meme_api import FourMemeAPI
from memedeploy.services.metadata_builder import (
    bps_to_percent,
    build_metadata_payload,
    build_tax_info,
    validate_tax_config,
)
from memedeploy.services.wallet import load_account, login_message, sign_login_message

__all__ = [
    'FourMemeAPI',
    'bps_to_percent',
    'build_metadata_payload',
    'build_tax_info',
    'validate_tax_config',
    'load_account',
    'login_message',
    'sign_login_message',
]
