"""
Client for the current (v2) JW Platform API.

Requests carry the API secret as a bearer token. Responses with status
>= 400 are raised as JWErrorResponse; anything else is decoded as JSON.
"""

import json
import logging
import os
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

from .client import BaseClient
from .constants import ENV_API_SECRET, V2_API_VERSION, V2_BASE_URL
from .exceptions import ConfigurationError, EncodeError, JWErrorResponse
from .models import QueryParams

logger = logging.getLogger(__name__)

QueryInput = Union[None, QueryParams, Mapping[str, Any]]


def encode_query(query_params: QueryInput) -> str:
    """URL-encode list-call query parameters with keys sorted."""
    if isinstance(query_params, QueryParams):
        query_params = query_params.to_params()
    return urlencode(sorted((query_params or {}).items()), doseq=True)


class V2Client(BaseClient):
    """
    Bearer-token client for the V2 Platform API.

    Shared by all resource clients; safe to use from several threads since
    it holds no per-call state.
    """

    def __init__(self, auth_token: str, **config):
        """
        Initialize v2 client.

        Args:
            auth_token: API secret presented as the bearer token
            **config: Configuration options (timeout, strict_body)
        """
        if not auth_token:
            raise ConfigurationError("auth_token cannot be empty")

        super().__init__(V2_BASE_URL, **config)
        self.version = V2_API_VERSION
        self._auth_token = auth_token

    @classmethod
    def from_env(cls, **config) -> "V2Client":
        """Create a client from JWPLATFORM_API_SECRET."""
        return cls(os.getenv(ENV_API_SECRET, "").strip(), **config)

    def url_from_path(self, path: str, query_params: QueryInput = None) -> str:
        """
        Resolve a path against the API host.

        Args:
            path: Absolute resource path (e.g. "/v2/sites/abc/media/123")
            query_params: Replaces any query string in path when given

        Returns:
            Absolute request URL
        """
        url = urljoin(self.base_url, path)
        if query_params is None:
            return url
        scheme, netloc, url_path, _, fragment = urlsplit(url)
        return urlunsplit((scheme, netloc, url_path, encode_query(query_params), fragment))

    def _marshal(self, data: Any) -> bytes:
        """
        Serialize a request body to JSON.

        Unless strict_body is set, a body that cannot be serialized is sent
        empty.
        """
        try:
            if hasattr(data, 'to_dict'):
                data = data.to_dict()
            return json.dumps(data).encode('utf-8')
        except (TypeError, ValueError) as e:
            if self.config['strict_body']:
                raise EncodeError(f"cannot serialize request body: {e}") from e
            logger.warning("Request body is not JSON serializable, sending empty body: %s", e)
            return b""

    def request(
        self,
        method: str,
        path: str,
        model: Any = None,
        data: Any = None,
        query_params: QueryInput = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Make an authenticated request to the V2 Platform API.

        Args:
            method: HTTP method
            path: Resource path, resolved against the API host
            model: Optional type with a from_dict() classmethod
            data: Optional JSON body (dict, list, or object with to_dict())
            query_params: Optional QueryParams or mapping for the query string
            timeout: Per-call timeout overriding the configured one

        Returns:
            None for an empty body, otherwise the decoded JSON, passed
            through model.from_dict() when model is given

        Raises:
            JWErrorResponse: If the API answered with status >= 400
            DecodeError: If the body is not valid JSON or has the wrong shape
            EncodeError: If data cannot be serialized and strict_body is set
            requests.RequestException: On transport failure
        """
        url = self.url_from_path(path, query_params)
        headers = {
            'Authorization': f"Bearer {self._auth_token}",
            'User-Agent': self.user_agent,
        }

        kwargs = {}
        if data is not None:
            kwargs['data'] = self._marshal(data)
            if kwargs['data']:
                headers['Content-Type'] = 'application/json'

        response = self._send(method, url, timeout=timeout, headers=headers, **kwargs)
        try:
            status_code = response.status_code
            logger.debug("v2 %s %s -> %s", method, urlsplit(url).path, status_code)
            if status_code >= 400:
                raise self._convert(
                    lambda error: JWErrorResponse.from_dict(error, status_code),
                    self._decode(response),
                    response,
                )
            body = self._decode(response, allow_empty=True)
        finally:
            response.close()

        if body is None or model is None:
            return body
        return self._convert(model.from_dict, body, response)
