"""
Shared HTTP plumbing for the v1 and v2 JW Platform clients.

Holds the requests session, the merged configuration, and the JSON body
decoding used by both transports.
"""

import json
import logging
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

import requests

from .constants import DEFAULT_CONFIG, USER_AGENT
from .exceptions import ConfigurationError, DecodeError

logger = logging.getLogger(__name__)


class BaseClient:
    """
    Base class for authenticated JW Platform clients.

    Subclasses provide authentication; this class owns the HTTP session and
    guarantees every response is consumed and closed.
    """

    def __init__(self, base_url: str, **config):
        """
        Initialize client.

        Args:
            base_url: Scheme and host of the API
            **config: Configuration options (timeout, strict_body)
        """
        self.base_url = base_url.rstrip('/')
        self.user_agent = USER_AGENT

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self.session = requests.Session()

    def _validate_config(self):
        """Validate client configuration."""
        timeout = self.config['timeout']
        if timeout is None:
            return
        # requests also accepts a (connect, read) pair
        values = timeout if isinstance(timeout, tuple) else (timeout,)
        if not values or any(v is not None and v <= 0 for v in values):
            raise ConfigurationError("timeout must be positive")

    def _send(self, method: str, url: str, timeout: Optional[float] = None, **kwargs) -> requests.Response:
        """
        Issue the HTTP request.

        Transport errors (requests.RequestException) propagate unchanged.
        """
        if timeout is None:
            timeout = self.config['timeout']
        logger.debug("%s %s", method, urlsplit(url).path)
        return self.session.request(method, url, timeout=timeout, **kwargs)

    @staticmethod
    def _convert(build: Callable[[Any], Any], data: Any, response: requests.Response) -> Any:
        """
        Turn decoded JSON into a typed value.

        Raises:
            DecodeError: If the JSON does not have the shape build expects
        """
        try:
            return build(data)
        except (AttributeError, TypeError, KeyError, ValueError) as e:
            raise DecodeError(
                f"response body has unexpected shape: {e}", response.status_code, response.content or b""
            ) from e

    @staticmethod
    def _decode(response: requests.Response, allow_empty: bool = False) -> Any:
        """
        Read and decode a JSON response body.

        Args:
            response: Response to consume
            allow_empty: Return None for an empty body instead of failing

        Returns:
            Decoded JSON value

        Raises:
            DecodeError: If the body is empty (and not allowed) or not JSON
        """
        body = response.content or b""
        if not body.strip():
            if allow_empty:
                return None
            raise DecodeError("empty response body", response.status_code, body)

        try:
            return json.loads(body)
        except ValueError as e:
            raise DecodeError(
                f"invalid JSON in response body: {e}", response.status_code, body
            ) from e

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
