"""
Four.Meme token deployment on BSC
"""

from memedeploy.models import TokenConfig, TaxConfig, DeployConfig, DeployResult
from memedeploy.errors import DeploymentError

__version__ = "1.0.0"

__all__ = ['TokenConfig', 'TaxConfig', 'DeployConfig', 'DeployResult', 'DeploymentError']
