"""Write side: Elasticsearch index management and document publishing."""

from .client import ESClient
from .manager import ensure_index
from .publisher import publish_items

__all__ = ["ESClient", "ensure_index", "publish_items"]
