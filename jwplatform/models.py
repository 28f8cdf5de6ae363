"""
Request and response models for the V2 JW Platform API.

Response models are built with ``from_dict`` and tolerate missing fields.
Write-side models serialize with ``to_dict``, omitting empty optional
fields the way the API expects.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


def _omit_empty(data: Dict[str, Any], keep=()) -> Dict[str, Any]:
    """Drop None, empty strings and empty collections, except keys in keep."""
    return {
        key: value for key, value in data.items()
        if key in keep or value not in (None, "", [], {})
    }


@dataclass
class QueryParams:
    """Query parameters accepted by all resource list calls."""

    page_length: int = 0
    page: int = 0
    query: str = ""
    sort: str = ""

    def to_params(self) -> Dict[str, str]:
        """Wire form, with unset (zero or empty) fields left out."""
        params = {
            "page_length": self.page_length,
            "page": self.page,
            "q": self.query,
            "sort": self.sort,
        }
        return {key: str(value) for key, value in params.items() if value}


@dataclass
class V2ResourceResponse:
    """Fields common to every singular resource response."""

    id: str = ""
    created: str = ""
    last_modified: str = ""
    type: str = ""
    relationships: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _resource_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": data.get("id", ""),
            "created": data.get("created", ""),
            "last_modified": data.get("last_modified", ""),
            "type": data.get("type", ""),
            "relationships": data.get("relationships") or {},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "V2ResourceResponse":
        return cls(**cls._resource_fields(data))


@dataclass
class V2ResourcesResponse:
    """Paging fields common to every list response."""

    total: int = 0
    page: int = 0
    page_length: int = 0

    @staticmethod
    def _page_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "total": data.get("total", 0),
            "page": data.get("page", 0),
            "page_length": data.get("page_length", 0),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "V2ResourcesResponse":
        return cls(**cls._page_fields(data))


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------

@dataclass
class MediaMetadata:
    """Describes a Media resource."""

    title: str = ""
    description: str = ""
    author: str = ""
    permalink: str = ""
    category: str = ""
    publish_start_date: str = ""
    publish_end_date: str = ""
    tags: List[str] = field(default_factory=list)
    custom_params: Dict[str, str] = field(default_factory=dict)
    external_id: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "MediaMetadata":
        data = data or {}
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            author=data.get("author", ""),
            permalink=data.get("permalink", ""),
            category=data.get("category", ""),
            publish_start_date=data.get("publish_start_date", ""),
            publish_end_date=data.get("publish_end_date", ""),
            tags=list(data.get("tags") or []),
            custom_params=dict(data.get("custom_params") or {}),
            external_id=data.get("external_id", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty(asdict(self))


@dataclass
class Upload:
    """
    Upload description for Media create and reupload calls.

    Methods are "direct" (default), "multipart", "external" and "fetch".
    mime_type is required for "direct", source_url for "fetch".
    """

    method: str = ""
    mime_type: str = ""
    source_url: str = ""
    trim_in_point: str = ""
    trim_out_point: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty(asdict(self))


@dataclass
class MediaResource(V2ResourceResponse):
    """Media resource returned by get, update and list calls."""

    duration: float = 0.0
    external_id: str = ""
    trim_in_point: str = ""
    trim_out_point: str = ""
    status: str = ""
    error_message: str = ""
    mime_type: str = ""
    media_type: str = ""
    hosting_type: str = ""
    source_url: str = ""
    metadata: MediaMetadata = field(default_factory=MediaMetadata)

    @staticmethod
    def _media_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "duration": data.get("duration", 0.0),
            "external_id": data.get("external_id", ""),
            "trim_in_point": data.get("trim_in_point", ""),
            "trim_out_point": data.get("trim_out_point", ""),
            "status": data.get("status", ""),
            "error_message": data.get("error_message", ""),
            "mime_type": data.get("mime_type", ""),
            "media_type": data.get("media_type", ""),
            "hosting_type": data.get("hosting_type", ""),
            "source_url": data.get("source_url", ""),
            "metadata": MediaMetadata.from_dict(data.get("metadata")),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaResource":
        return cls(**cls._resource_fields(data), **cls._media_fields(data))


@dataclass
class CreateMediaResponse(MediaResource):
    """
    Media create/reupload response.

    For "direct" uploads upload_link is a pre-signed URL; for "multipart"
    uploads upload_token and upload_id feed the Uploads API.
    """

    upload_link: str = ""
    upload_token: str = ""
    upload_id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreateMediaResponse":
        return cls(
            **cls._resource_fields(data),
            **cls._media_fields(data),
            upload_link=data.get("upload_link", ""),
            upload_token=data.get("upload_token", ""),
            upload_id=data.get("upload_id", ""),
        )


@dataclass
class MediaResourcesResponse(V2ResourcesResponse):
    media: List[MediaResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaResourcesResponse":
        return cls(
            **cls._page_fields(data),
            media=[MediaResource.from_dict(item) for item in data.get("media") or []],
        )


# ---------------------------------------------------------------------------
# Webhooks
# ---------------------------------------------------------------------------

@dataclass
class WebhookMetadata:
    """Describes a Webhook resource."""

    name: str = ""
    description: str = ""
    events: List[str] = field(default_factory=list)
    sites: List[str] = field(default_factory=list)
    webhook_url: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "WebhookMetadata":
        data = data or {}
        return cls(
            name=data.get("name", ""),
            description=data.get("description", ""),
            events=list(data.get("events") or []),
            sites=list(data.get("site_ids") or []),
            webhook_url=data.get("webhook_url", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "description": self.description,
            "events": list(self.events),
            "site_ids": list(self.sites),
            "webhook_url": self.webhook_url,
        }
        return _omit_empty(data, keep=("name", "events", "site_ids", "webhook_url"))


@dataclass
class WebhookResource(V2ResourceResponse):
    metadata: WebhookMetadata = field(default_factory=WebhookMetadata)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebhookResource":
        return cls(
            **cls._resource_fields(data),
            metadata=WebhookMetadata.from_dict(data.get("metadata")),
        )


@dataclass
class CreateWebhookResponse(WebhookResource):
    """Webhook create response; secret is only ever returned here."""

    secret: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreateWebhookResponse":
        return cls(
            **cls._resource_fields(data),
            metadata=WebhookMetadata.from_dict(data.get("metadata")),
            secret=data.get("secret", ""),
        )


@dataclass
class WebhookResourcesResponse(V2ResourcesResponse):
    webhooks: List[WebhookResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebhookResourcesResponse":
        return cls(
            **cls._page_fields(data),
            webhooks=[WebhookResource.from_dict(item) for item in data.get("webhooks") or []],
        )


# ---------------------------------------------------------------------------
# Channels and events
# ---------------------------------------------------------------------------

@dataclass
class SimulcastTarget:
    stream_key: str = ""
    stream_url: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulcastTarget":
        return cls(
            stream_key=data.get("stream_key", ""),
            stream_url=data.get("stream_url", ""),
            title=data.get("title", ""),
        )


@dataclass
class RecentEvent:
    media_id: str = ""
    status: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecentEvent":
        return cls(media_id=data.get("media_id", ""), status=data.get("status", ""))


@dataclass
class ChannelMetadata:
    """Describes a Channel resource."""

    custom_params: Dict[str, str] = field(default_factory=dict)
    dvr: str = ""
    simulcast_targets: List[SimulcastTarget] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    title: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ChannelMetadata":
        data = data or {}
        return cls(
            custom_params=dict(data.get("custom_params") or {}),
            dvr=data.get("dvr", ""),
            simulcast_targets=[
                SimulcastTarget.from_dict(item) for item in data.get("simulcast_targets") or []
            ],
            tags=list(data.get("tags") or []),
            title=data.get("title", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ChannelCreateMetadata(ChannelMetadata):
    """Channel metadata accepted on create, adding latency settings."""

    latency: str = ""
    reconnect_window: int = 0


@dataclass
class ChannelResource(V2ResourceResponse):
    metadata: ChannelMetadata = field(default_factory=ChannelMetadata)
    latency: str = ""
    recent_events: List[RecentEvent] = field(default_factory=list)
    reconnect_window: int = 0
    status: str = ""
    stream_key: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelResource":
        return cls(
            **cls._resource_fields(data),
            metadata=ChannelMetadata.from_dict(data.get("metadata")),
            latency=data.get("latency", ""),
            recent_events=[RecentEvent.from_dict(item) for item in data.get("recent_events") or []],
            reconnect_window=data.get("reconnect_window", 0),
            status=data.get("status", ""),
            stream_key=data.get("stream_key", ""),
        )


@dataclass
class ChannelResourcesResponse(V2ResourcesResponse):
    channels: List[ChannelResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelResourcesResponse":
        return cls(
            **cls._page_fields(data),
            channels=[ChannelResource.from_dict(item) for item in data.get("channels") or []],
        )


@dataclass
class MasterAccess:
    status: str = ""
    expiration: str = ""


@dataclass
class EventResource(V2ResourceResponse):
    master_access: MasterAccess = field(default_factory=MasterAccess)
    media_id: str = ""
    status: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventResource":
        access = data.get("master_access") or {}
        return cls(
            **cls._resource_fields(data),
            master_access=MasterAccess(
                status=access.get("status", ""),
                expiration=access.get("expiration", ""),
            ),
            media_id=data.get("media_id", ""),
            status=data.get("status", ""),
        )


@dataclass
class EventResourcesResponse(V2ResourcesResponse):
    events: List[EventResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventResourcesResponse":
        return cls(
            **cls._page_fields(data),
            events=[EventResource.from_dict(item) for item in data.get("events") or []],
        )
