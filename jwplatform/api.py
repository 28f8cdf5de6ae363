"""
Entry point for the V2 Platform API.

Example usage:
    from jwplatform import JWPlatform, MediaMetadata, QueryParams

    with JWPlatform("API_SECRET") as jw:
        media = jw.media.get("9kzNUpe4", "LaJFzc9d")
        created = jw.media.create("9kzNUpe4", MediaMetadata(title="My new video"))
        page = jw.media.list("9kzNUpe4", QueryParams(page=2, page_length=5))
"""

from .constants import __version__
from .resources import ChannelsClient, MediaClient, UploadsClient, WebhooksClient
from .v2 import V2Client


class JWPlatform:
    """
    Authenticated client for the media, webhooks, channels (with events)
    and uploads resources of the V2 API.

    All resource clients share one V2Client and its HTTP session.
    """

    def __init__(self, api_secret: str, **config):
        """
        Args:
            api_secret: V2 API secret, used as the bearer token
            **config: Configuration options passed to V2Client
        """
        self.version = __version__
        self.v2_client = V2Client(api_secret, **config)
        self.media = MediaClient(self.v2_client)
        self.webhooks = WebhooksClient(self.v2_client)
        self.channels = ChannelsClient(self.v2_client)
        self.uploads = UploadsClient(self.v2_client)

    def close(self):
        self.v2_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
