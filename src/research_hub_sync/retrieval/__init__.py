"""Read side: Contentful Content Delivery API access."""

from .client import ContentfulClient
from .reader import MAX_ITEMS, fetch_items

__all__ = ["ContentfulClient", "MAX_ITEMS", "fetch_items"]
