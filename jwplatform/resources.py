"""
Resource clients for the V2 Platform API.

Each client formats the resource path, wraps the typed body and hands the
call to the shared V2Client.
"""

from typing import Optional

from .models import (
    ChannelCreateMetadata,
    ChannelMetadata,
    ChannelResource,
    ChannelResourcesResponse,
    CreateMediaResponse,
    CreateWebhookResponse,
    EventResource,
    EventResourcesResponse,
    MediaMetadata,
    MediaResource,
    MediaResourcesResponse,
    QueryParams,
    Upload,
    WebhookMetadata,
    WebhookResource,
    WebhookResourcesResponse,
)
from .v2 import V2Client


class MediaClient:
    """Client for the V2 Media API."""

    def __init__(self, v2_client: V2Client):
        self.v2_client = v2_client

    def get(self, site_id: str, media_id: str) -> MediaResource:
        """Get a single Media resource by ID."""
        path = f"/v2/sites/{site_id}/media/{media_id}"
        return self.v2_client.request('GET', path, MediaResource)

    def create(self, site_id: str, metadata: MediaMetadata, upload: Optional[Upload] = None) -> CreateMediaResponse:
        """Create a Media resource; the "direct" upload method is the API default."""
        body = {"metadata": metadata.to_dict()}
        if upload is not None:
            body["upload"] = upload.to_dict()
        path = f"/v2/sites/{site_id}/media"
        return self.v2_client.request('POST', path, CreateMediaResponse, data=body)

    def list(self, site_id: str, query_params: Optional[QueryParams] = None) -> MediaResourcesResponse:
        """List all Media resources of a site."""
        path = f"/v2/sites/{site_id}/media"
        return self.v2_client.request('GET', path, MediaResourcesResponse, query_params=query_params)

    def update(self, site_id: str, media_id: str, metadata: MediaMetadata) -> MediaResource:
        path = f"/v2/sites/{site_id}/media/{media_id}"
        body = {"metadata": metadata.to_dict()}
        return self.v2_client.request('PATCH', path, MediaResource, data=body)

    def delete(self, site_id: str, media_id: str) -> None:
        path = f"/v2/sites/{site_id}/media/{media_id}"
        self.v2_client.request('DELETE', path)

    def reupload(self, site_id: str, media_id: str, upload: Upload) -> CreateMediaResponse:
        """Replace the source asset of a Media resource."""
        path = f"/v2/sites/{site_id}/media/{media_id}/reupload"
        body = {"upload": upload.to_dict()}
        return self.v2_client.request('POST', path, CreateMediaResponse, data=body)


class WebhooksClient:
    """Client for the V2 Webhooks API."""

    def __init__(self, v2_client: V2Client):
        self.v2_client = v2_client

    def get(self, webhook_id: str) -> WebhookResource:
        return self.v2_client.request('GET', f"/v2/webhooks/{webhook_id}", WebhookResource)

    def create(self, metadata: WebhookMetadata) -> CreateWebhookResponse:
        """Create a Webhook; the returned secret verifies incoming webhooks."""
        body = {"metadata": metadata.to_dict()}
        return self.v2_client.request('POST', "/v2/webhooks", CreateWebhookResponse, data=body)

    def list(self, query_params: Optional[QueryParams] = None) -> WebhookResourcesResponse:
        return self.v2_client.request('GET', "/v2/webhooks", WebhookResourcesResponse, query_params=query_params)

    def update(self, webhook_id: str, metadata: WebhookMetadata) -> WebhookResource:
        body = {"metadata": metadata.to_dict()}
        return self.v2_client.request('PATCH', f"/v2/webhooks/{webhook_id}", WebhookResource, data=body)

    def delete(self, webhook_id: str) -> None:
        self.v2_client.request('DELETE', f"/v2/webhooks/{webhook_id}")


class EventsClient:
    """Client for the V2 Channel Events API."""

    def __init__(self, v2_client: V2Client):
        self.v2_client = v2_client

    def get(self, site_id: str, channel_id: str, event_id: str) -> EventResource:
        path = f"/v2/sites/{site_id}/channels/{channel_id}/events/{event_id}"
        return self.v2_client.request('GET', path, EventResource)

    def list(self, site_id: str, channel_id: str, query_params: Optional[QueryParams] = None) -> EventResourcesResponse:
        path = f"/v2/sites/{site_id}/channels/{channel_id}/events"
        return self.v2_client.request('GET', path, EventResourcesResponse, query_params=query_params)

    def request_master(self, site_id: str, channel_id: str, event_id: str) -> None:
        """Request the master asset of a live event."""
        path = f"/v2/sites/{site_id}/channels/{channel_id}/events/{event_id}/request_master"
        self.v2_client.request('PUT', path)


class ChannelsClient:
    """Client for the V2 Channels API, with Events as a sub-client."""

    def __init__(self, v2_client: V2Client):
        self.v2_client = v2_client
        self.events = EventsClient(v2_client)

    def get(self, site_id: str, channel_id: str) -> ChannelResource:
        path = f"/v2/sites/{site_id}/channels/{channel_id}"
        return self.v2_client.request('GET', path, ChannelResource)

    def create(self, site_id: str, metadata: ChannelCreateMetadata) -> ChannelResource:
        path = f"/v2/sites/{site_id}/channels"
        body = {"metadata": metadata.to_dict()}
        return self.v2_client.request('POST', path, ChannelResource, data=body)

    def list(self, site_id: str, query_params: Optional[QueryParams] = None) -> ChannelResourcesResponse:
        path = f"/v2/sites/{site_id}/channels"
        return self.v2_client.request('GET', path, ChannelResourcesResponse, query_params=query_params)

    def update(self, site_id: str, channel_id: str, metadata: ChannelMetadata) -> ChannelResource:
        path = f"/v2/sites/{site_id}/channels/{channel_id}"
        body = {"metadata": metadata.to_dict()}
        return self.v2_client.request('PATCH', path, ChannelResource, data=body)

    def delete(self, site_id: str, channel_id: str) -> None:
        path = f"/v2/sites/{site_id}/channels/{channel_id}"
        self.v2_client.request('DELETE', path)


class UploadsClient:
    """Client for the V2 multipart Uploads API."""

    def __init__(self, v2_client: V2Client):
        self.v2_client = v2_client

    def list_upload_parts(self, upload_id: str) -> dict:
        """List the parts, completed or not, of a multipart upload."""
        return self.v2_client.request('GET', f"/v2/uploads/{upload_id}/parts")

    def complete_upload(self, upload_id: str) -> None:
        """Mark an upload as complete; all parts must be uploaded first."""
        self.v2_client.request('PUT', f"/v2/uploads/{upload_id}/complete")
