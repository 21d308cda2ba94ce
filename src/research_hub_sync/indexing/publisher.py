"""Upsert fetched entries one at a time, counting failures."""

from __future__ import annotations

from typing import Iterable, Optional

import requests

from ..errors import SyncError
from ..models import PublishOutcome, SourceItem
from ..report import Reporter
from .client import ESClient


def publish_items(
    es: ESClient,
    items: Iterable[SourceItem],
    index_name: str,
    reporter: Optional[Reporter] = None,
) -> PublishOutcome:
    """Write every item keyed by its source id; a failed write never stops the loop."""

    outcome = PublishOutcome()
    for item in items:
        outcome.attempted += 1
        try:
            es.upsert_document(index_name, item.id, item.to_document())
        except (requests.RequestException, SyncError, ValueError, TypeError) as exc:
            outcome.failed += 1
            if reporter is not None:
                reporter.error(exc, f"document {item.id}")
    return outcome


__all__ = ["publish_items"]
