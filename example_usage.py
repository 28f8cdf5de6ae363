#!/usr/bin/env python3
"""
Basic usage examples for the JW Platform Python client library.

Reads credentials from JWPLATFORM_API_KEY / JWPLATFORM_API_SECRET and a
site id from JWPLATFORM_SITE_ID.
"""

import logging
import os
import sys

import requests

from jwplatform import JWErrorResponse, JWPlatform, MediaMetadata, QueryParams, V1Client


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO)

    site_id = os.getenv("JWPLATFORM_SITE_ID", "")
    api_secret = os.getenv("JWPLATFORM_API_SECRET", "")
    if not site_id or not api_secret:
        print("Set JWPLATFORM_SITE_ID and JWPLATFORM_API_SECRET first.")
        return 1

    print("=== JW Platform Python Client Usage Examples ===\n")

    with JWPlatform(api_secret) as jw:
        print("1. Listing media...")
        try:
            page = jw.media.list(site_id, QueryParams(page_length=5))
            print(f"   Total media: {page.total}")
            for media in page.media:
                print(f"   - {media.id}: {media.metadata.title}")
        except JWErrorResponse as e:
            print(f"   API rejected request ({e.status_code}): {e.errors[0].description}")
        except requests.RequestException as e:
            print(f"   Network error: {e}")
        print()

        print("2. Creating media...")
        try:
            created = jw.media.create(site_id, MediaMetadata(title="Example upload"))
            print(f"   Created {created.id}, upload link: {created.upload_link}")
        except JWErrorResponse as e:
            print(f"   API rejected request ({e.status_code}): {e}")
        print()

    api_key = os.getenv("JWPLATFORM_API_KEY", "")
    if api_key:
        print("3. Legacy v1 video list...")
        with V1Client(api_key, api_secret) as legacy:
            result = legacy.make_request("GET", "/videos/list", {"result_limit": "5"})
            print(f"   Status: {result.get('status')}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
