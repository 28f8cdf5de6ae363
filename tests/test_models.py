"""
Unit tests for V2 response and request models.
"""

from jwplatform import (
    ChannelMetadata,
    MediaMetadata,
    MediaResource,
    Upload,
    V2ResourceResponse,
    V2ResourcesResponse,
    WebhookMetadata,
)


class TestResponseModels:

    def test_unmarshal_resource_response(self):
        data = {
            "id": "9jTnCiPO",
            "type": "resource_type",
            "created": "2019-09-25T15:29:11.042095+00:00",
            "last_modified": "2019-09-25T15:29:11.042095+00:00",
            "relationships": {"protectionrule": {"id": "protectionrule_id"}},
        }

        resource = V2ResourceResponse.from_dict(data)

        assert resource.id == "9jTnCiPO"
        assert resource.type == "resource_type"
        assert resource.created == "2019-09-25T15:29:11.042095+00:00"
        assert resource.last_modified == "2019-09-25T15:29:11.042095+00:00"
        assert resource.relationships["protectionrule"] == {"id": "protectionrule_id"}

    def test_unmarshal_resources_response(self):
        resources = V2ResourcesResponse.from_dict({"page": 1, "page_length": 10, "total": 541})

        assert resources.page == 1
        assert resources.page_length == 10
        assert resources.total == 541

    def test_missing_fields_default(self):
        media = MediaResource.from_dict({"id": "abc", "relationships": None})

        assert media.id == "abc"
        assert media.relationships == {}
        assert media.metadata == MediaMetadata()
        assert media.duration == 0.0


class TestRequestModels:

    def test_media_metadata_omits_empty(self):
        metadata = MediaMetadata(title="Title", custom_params={"k": "v"})

        assert metadata.to_dict() == {"title": "Title", "custom_params": {"k": "v"}}

    def test_upload_omits_empty(self):
        assert Upload(method="fetch", source_url="https://example.com/v.mp4").to_dict() == {
            "method": "fetch",
            "source_url": "https://example.com/v.mp4",
        }

    def test_webhook_metadata_wire_names(self):
        metadata = WebhookMetadata(name="hook", webhook_url="https://example.com")

        assert metadata.to_dict() == {
            "name": "hook",
            "events": [],
            "site_ids": [],
            "webhook_url": "https://example.com",
        }

    def test_webhook_metadata_round_trip(self):
        data = {
            "name": "hook",
            "description": "desc",
            "events": ["media_available"],
            "site_ids": ["abcdefgh"],
            "webhook_url": "https://example.com",
        }

        assert WebhookMetadata.from_dict(data).to_dict() == data

    def test_channel_metadata_keeps_all_fields(self):
        assert ChannelMetadata(title="Live").to_dict() == {
            "custom_params": {},
            "dvr": "",
            "simulcast_targets": [],
            "tags": [],
            "title": "Live",
        }
