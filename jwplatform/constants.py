"""
Constants for the JW Platform client library.
"""

__version__ = "1.0.0"

USER_AGENT = f"jwplatform-python/{__version__}"

# Legacy (v1) API
V1_API_HOST = "api.jwplatform.com"
V1_API_VERSION = "v1"
V1_BASE_URL = f"https://{V1_API_HOST}"

# Current (v2) API
V2_API_HOST = "api.jwplayer.com"
V2_API_VERSION = "v2"
V2_BASE_URL = f"https://{V2_API_HOST}"

# Parameters injected into every signed v1 request
PARAM_NONCE = "api_nonce"
PARAM_KEY = "api_key"
PARAM_FORMAT = "api_format"
PARAM_TIMESTAMP = "api_timestamp"
PARAM_SIGNATURE = "api_signature"

API_FORMAT = "json"
NONCE_DIGITS = 8

# Environment variables read by from_env()
ENV_API_KEY = "JWPLATFORM_API_KEY"
ENV_API_SECRET = "JWPLATFORM_API_SECRET"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,          # HTTP timeout in seconds
    'strict_body': False,   # raise EncodeError instead of sending an empty body
}
