from memedeploy.models.token import TokenConfig, TaxConfig
from memedeploy.models.deployment import DeployConfig, DeployResult, parse_dry_run

__all__ = ['TokenConfig', 'TaxConfig', 'DeployConfig', 'DeployResult', 'parse_dry_run']
