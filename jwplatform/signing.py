"""
Request signing for the legacy (v1) JW Platform API.

The v1 API authenticates every call with a SHA1 digest computed over the
sorted query parameters followed by the shared secret. This is a plain
concatenation digest, not an HMAC; the server expects exactly this form.
"""

import hashlib
import random
import time
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

from .constants import (
    API_FORMAT,
    NONCE_DIGITS,
    PARAM_FORMAT,
    PARAM_KEY,
    PARAM_NONCE,
    PARAM_SIGNATURE,
    PARAM_TIMESTAMP,
)

Params = Dict[str, List[str]]
ParamsInput = Union[None, Mapping[str, Union[str, Sequence[str]]], Sequence[Tuple[str, str]]]


def normalize_params(params: ParamsInput = None) -> Params:
    """
    Copy caller parameters into a multi-valued ``{key: [values]}`` dict.

    Accepts None, a mapping of key to a value or list of values, or a
    sequence of ``(key, value)`` pairs with repeatable keys.
    """
    result: Params = {}
    if not params:
        return result

    items = params.items() if isinstance(params, Mapping) else params
    for key, value in items:
        if isinstance(value, (list, tuple)):
            result.setdefault(str(key), []).extend(str(v) for v in value)
        else:
            result.setdefault(str(key), []).append(str(value))
    return result


def encode_params(params: Params) -> str:
    """URL-encode parameters with keys sorted, repeating multi-valued keys."""
    return urlencode(sorted(params.items()), doseq=True)


class Signer:
    """
    Signs v1 request parameters with an API key/secret pair.

    The nonce source is a random generator owned by this signer and seeded
    once at construction. ``clock`` and ``rng`` can be injected to pin the
    nonce and timestamp.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        clock: Callable[[], float] = time.time,
        rng: Optional[random.Random] = None,
    ):
        self._api_key = api_key
        self._api_secret = api_secret
        self._clock = clock
        self._rng = rng or random.Random()

    @property
    def api_key(self) -> str:
        return self._api_key

    def generate_nonce(self) -> str:
        """Generate a random 8 digit, zero padded nonce."""
        return f"{self._rng.randrange(10 ** NONCE_DIGITS):0{NONCE_DIGITS}d}"

    def make_timestamp(self) -> str:
        """Current Unix time in whole seconds."""
        return str(int(self._clock()))

    def base_string(self, params: Params) -> str:
        """
        Build the signature base string.

        Keys are sorted ascending and joined with ``&``. Every value of a
        key is written as ``key=value``; repeated values of the same key
        follow each other with no separator. The secret is appended raw.

        Args:
            params: Multi-valued parameters, including injected ones

        Returns:
            The string to be hashed
        """
        groups = []
        for key in sorted(params):
            groups.append("".join(f"{key}={value}" for value in params[key]))
        return "&".join(groups) + self._api_secret

    def sign(self, params: ParamsInput = None) -> Params:
        """
        Inject the authentication parameters and the signature.

        Args:
            params: Caller parameters (not modified)

        Returns:
            New parameter dict including api_nonce, api_key, api_format,
            api_timestamp and, last of all, api_signature
        """
        signed = normalize_params(params)
        signed[PARAM_NONCE] = [self.generate_nonce()]
        signed[PARAM_KEY] = [self._api_key]
        signed[PARAM_FORMAT] = [API_FORMAT]
        signed[PARAM_TIMESTAMP] = [self.make_timestamp()]

        digest = hashlib.sha1(self.base_string(signed).encode('utf-8')).hexdigest()
        signed[PARAM_SIGNATURE] = [digest]
        return signed
