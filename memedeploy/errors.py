"""
Exceptions raised by the deployment stages

The deployer catches all of them at the top level and turns them into a
failed DeployResult.
"""

from typing import Any, Optional


class DeploymentError(Exception):
    """Base exception for deployment failures."""
    pass


class PreconditionError(DeploymentError):
    """Raised before any network call when the inputs cannot work."""
    pass


class ImageNotFoundError(PreconditionError):
    """Raised when the token image does not exist on disk."""
    pass


class TaxConfigError(PreconditionError):
    """Raised when the tax distribution is invalid."""
    pass


class AuthenticationError(DeploymentError):
    """Raised when nonce generation or login fails."""
    pass


class UploadError(DeploymentError):
    """Raised when the image upload fails."""
    pass


class PlatformAPIError(DeploymentError):
    """Raised when the platform rejects the token metadata."""

    def __init__(self, message: str, response: Optional[Any] = None):
        super().__init__(message)
        self.response = response


class ChainSubmissionError(DeploymentError):
    """Raised when the create transaction cannot be sent or confirmed."""
    pass
