"""
JW Platform Client Library

Python client for the JW Platform management APIs: signed requests for the
legacy v1 API and bearer-token requests for the current v2 API.

Example usage:
    from jwplatform import JWPlatform, V1Client

    jw = JWPlatform("API_SECRET")
    media = jw.media.get("9kzNUpe4", "LaJFzc9d")

    legacy = V1Client("API_KEY", "API_SECRET")
    video = legacy.make_request("GET", "/videos/show", {"video_key": "gIRtMhYM"})
"""

from .api import JWPlatform
from .v1 import V1Client
from .v2 import V2Client
from .signing import Signer
from .exceptions import (
    JWPlatformError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    UploadError,
    JWError,
    JWErrorResponse
)
from .models import (
    QueryParams,
    V2ResourceResponse,
    V2ResourcesResponse,
    MediaMetadata,
    MediaResource,
    CreateMediaResponse,
    MediaResourcesResponse,
    Upload,
    WebhookMetadata,
    WebhookResource,
    CreateWebhookResponse,
    WebhookResourcesResponse,
    ChannelMetadata,
    ChannelCreateMetadata,
    ChannelResource,
    ChannelResourcesResponse,
    EventResource,
    EventResourcesResponse
)
from .constants import (
    __version__,
    USER_AGENT,
    DEFAULT_CONFIG
)

__author__ = "JW Platform client contributors"
__all__ = [
    "JWPlatform",
    "V1Client",
    "V2Client",
    "Signer",
    "JWPlatformError",
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "UploadError",
    "JWError",
    "JWErrorResponse",
    "QueryParams",
    "V2ResourceResponse",
    "V2ResourcesResponse",
    "MediaMetadata",
    "MediaResource",
    "CreateMediaResponse",
    "MediaResourcesResponse",
    "Upload",
    "WebhookMetadata",
    "WebhookResource",
    "CreateWebhookResponse",
    "WebhookResourcesResponse",
    "ChannelMetadata",
    "ChannelCreateMetadata",
    "ChannelResource",
    "ChannelResourcesResponse",
    "EventResource",
    "EventResourcesResponse",
    "USER_AGENT",
    "DEFAULT_CONFIG"
]
