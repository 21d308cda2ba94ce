"""Fetch a single bounded page of entries for one content type."""

from __future__ import annotations

import requests

from ..errors import SyncError
from ..models import FetchResult, SourceItem
from .client import ContentfulClient

# Known limitation: only the first page is read; entries past MAX_ITEMS are not synced.
MAX_ITEMS = 1000


def fetch_items(client: ContentfulClient, content_type: str, limit: int = MAX_ITEMS) -> FetchResult:
    """Return up to `limit` entries of `content_type`, or a failed result."""

    try:
        response = client.get_entries(skip=0, limit=limit, content_type=content_type)
        entries = response.get("items") or []
        items = [SourceItem.from_entry(entry) for entry in entries[:limit]]
    except (requests.RequestException, SyncError, ValueError, AttributeError) as exc:
        return FetchResult(error=exc)
    return FetchResult(items=items)


__all__ = ["MAX_ITEMS", "fetch_items"]
