"""
Client for the legacy (v1) JW Platform API.

Every call is authenticated by signing its query parameters with the API
key and secret. The v1 API reports failures inside the JSON body, so the
decoded body is returned as-is regardless of HTTP status.

Example usage:
    from jwplatform import V1Client

    with V1Client("API_KEY", "API_SECRET") as client:
        video = client.make_request("GET", "/videos/show", {"video_key": "gIRtMhYM"})
"""

import logging
import os
import posixpath
from typing import Any, Optional
from urllib.parse import urlencode

from .client import BaseClient
from .constants import (
    API_FORMAT,
    ENV_API_KEY,
    ENV_API_SECRET,
    PARAM_FORMAT,
    V1_API_VERSION,
    V1_BASE_URL,
)
from .exceptions import ConfigurationError, UploadError
from .signing import ParamsInput, Signer, encode_params

logger = logging.getLogger(__name__)


class V1Client(BaseClient):
    """
    Signed-request client for the deprecated v1 API.
    """

    def __init__(self, api_key: str, api_secret: str, signer: Optional[Signer] = None, **config):
        """
        Initialize v1 client.

        Args:
            api_key: API key, sent as api_key
            api_secret: API secret, used only in the signature
            signer: Optional pre-built Signer (tests inject a pinned clock/rng)
            **config: Configuration options (timeout)
        """
        if not api_key or not api_secret:
            raise ConfigurationError("api_key and api_secret cannot be empty")

        super().__init__(V1_BASE_URL, **config)
        self.api_version = V1_API_VERSION
        self.signer = signer or Signer(api_key, api_secret)

    @classmethod
    def from_env(cls, **config) -> "V1Client":
        """Create a client from JWPLATFORM_API_KEY and JWPLATFORM_API_SECRET."""
        return cls(
            os.getenv(ENV_API_KEY, "").strip(),
            os.getenv(ENV_API_SECRET, "").strip(),
            **config
        )

    def _headers(self) -> dict:
        return {
            'Accept': 'application/json',
            'User-Agent': self.user_agent,
        }

    def build_url(self, path: str, params: ParamsInput = None) -> str:
        """
        Build the absolute, signed URL for a v1 call.

        Args:
            path: Path relative to /v1 (e.g. "/videos/show")
            params: Caller query parameters

        Returns:
            URL with the signed query string appended
        """
        rel = posixpath.normpath(posixpath.join("/" + self.api_version, path.lstrip('/')))
        query = encode_params(self.signer.sign(params))
        return f"{self.base_url}{rel}?{query}"

    def make_request(
        self,
        method: str,
        path: str,
        params: ParamsInput = None,
        model: Any = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Make a signed request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path relative to /v1
            params: Caller query parameters
            model: Optional type with a from_dict() classmethod
            timeout: Per-call timeout overriding the configured one

        Returns:
            Decoded JSON body, or model.from_dict(body) when model is given

        Raises:
            DecodeError: If the body is not valid JSON or has the wrong shape
            requests.RequestException: On transport failure
        """
        url = self.build_url(path, params)
        response = self._send(method, url, timeout=timeout, headers=self._headers())
        try:
            logger.debug("v1 %s %s -> %s", method, path, response.status_code)
            data = self._decode(response)
        finally:
            response.close()

        if model is not None:
            return self._convert(model.from_dict, data, response)
        return data

    def upload(
        self,
        filepath: str,
        params: ParamsInput = None,
        model: Any = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Upload a file using the direct upload method.

        First creates the video with a signed call to /videos/create, then
        posts the file to the upload link returned by the API.

        Args:
            filepath: Path of the file to upload ("~" is expanded)
            params: Video parameters (title, description, ...)
            model: Optional type with a from_dict() classmethod
            timeout: Per-call timeout overriding the configured one

        Returns:
            Decoded JSON body of the upload response

        Raises:
            UploadError: If the create call did not return status "ok"
        """
        result = self.make_request('POST', '/videos/create/', params, timeout=timeout)
        if not isinstance(result, dict) or result.get('status') != 'ok':
            message = result.get('message') if isinstance(result, dict) else result
            raise UploadError(f"Error creating video: {message}")

        link = result.get('link') or {}
        if not link.get('address'):
            raise UploadError("Error creating video: response has no upload link")

        upload_url = self._upload_url(link)
        abspath = os.path.expanduser(filepath)

        with open(abspath, 'rb') as fh:
            response = self._send(
                'POST',
                upload_url,
                timeout=timeout,
                headers=self._headers(),
                files={'file': (os.path.basename(abspath), fh)},
            )
        try:
            logger.debug("v1 upload -> %s", response.status_code)
            data = self._decode(response)
        finally:
            response.close()

        if model is not None:
            return self._convert(model.from_dict, data, response)
        return data

    @staticmethod
    def _upload_url(link: dict) -> str:
        """Build the upload URL from the link object of a create response."""
        query = link.get('query') or {}
        values = urlencode(sorted((str(k), str(v)) for k, v in query.items()))
        return f"https://{link['address']}{link.get('path', '')}?{values}&{PARAM_FORMAT}={API_FORMAT}"
