"""
Four.Meme platform API client: login, image upload and token registration
"""

import json
import logging
import mimetypes
import os
from typing import Any, Dict, Optional, Tuple

import requests

from memedeploy.constants import (
    ACCESS_HEADER,
    API_URL,
    NETWORK_CODE,
    SUCCESS_CODES,
    VERIFY_TYPE,
    WALLET_NAME,
)
from memedeploy.errors import (
    AuthenticationError,
    ImageNotFoundError,
    PlatformAPIError,
    UploadError,
)


class FourMemeAPI:
    """Thin wrapper around the /private endpoints used to create a token"""

    def __init__(self, api_url: str = API_URL, timeout: int = 30,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logging.getLogger('meme_deployer')

    def _post(self, path: str, **kwargs) -> requests.Response:
        url = f"{self.api_url}{path}"
        self.logger.debug(f"POST {url}")
        return self.session.post(url, timeout=self.timeout, **kwargs)

    @staticmethod
    def _body(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def generate_nonce(self, address: str) -> str:
        """Request a single-use login nonce for the address"""
        response = self._post('/private/user/nonce/generate', json={
            'accountAddress': address,
            'networkCode': NETWORK_CODE,
            'verifyType': VERIFY_TYPE,
        })
        if response.status_code != 200:
            raise AuthenticationError(f"Nonce request failed: HTTP {response.status_code} {response.text}")

        body = self._body(response) or {}
        nonce = body.get('data')
        if not nonce:
            raise AuthenticationError(f"No nonce in response: {response.text}")
        return nonce

    def login(self, address: str, signature: str) -> str:
        """Exchange the signed nonce for an access token"""
        response = self._post('/private/user/login/dex', json={
            'inviteCode': "",
            'langType': "EN",
            'region': "WEB",
            'verifyInfo': {
                'address': address,
                'networkCode': NETWORK_CODE,
                'signature': signature,
                'verifyType': VERIFY_TYPE,
            },
            'walletName': WALLET_NAME,
        })
        if response.status_code != 200:
            raise AuthenticationError(f"Login failed: HTTP {response.status_code} {response.text}")

        body = self._body(response) or {}
        access_token = body.get('data')
        if not access_token:
            raise AuthenticationError(f"No access token in login response: {response.text}")
        return access_token

    def upload_image(self, image_path: str, access_token: str) -> str:
        """Upload a local image file and return its hosted URL"""
        if not os.path.isfile(image_path):
            raise ImageNotFoundError(f"Image file not found at {image_path}")

        content_type = mimetypes.guess_type(image_path)[0] or 'application/octet-stream'
        with open(image_path, 'rb') as image_file:
            files = {
                'file': (os.path.basename(image_path), image_file, content_type)
            }
            response = self._post(
                '/private/token/upload',
                files=files,
                headers={ACCESS_HEADER: access_token},
            )

        if response.status_code != 200:
            raise UploadError(f"Image upload failed: HTTP {response.status_code} {response.text}")

        body = self._body(response) or {}
        image_url = body.get('data')
        if not image_url:
            raise UploadError(f"No image URL in upload response: {response.text}")
        return image_url

    def create_token(self, payload: Dict, access_token: str) -> Tuple[str, str]:
        """Register token metadata and return (createArg, signature) for the factory call"""
        response = self._post(
            '/private/token/create',
            json=payload,
            headers={ACCESS_HEADER: access_token},
        )
        body = self._body(response)

        if not isinstance(body, dict) or body.get('code') not in SUCCESS_CODES:
            raw = json.dumps(body) if body is not None else response.text
            raise PlatformAPIError(f"API Error: {raw}", response=body if body is not None else response.text)

        data = body.get('data') or {}
        create_arg = data.get('createArg')
        signature = data.get('signature')
        if not create_arg or not signature:
            raise PlatformAPIError(f"API Error: missing createArg/signature: {json.dumps(body)}", response=body)

        return create_arg, signature
