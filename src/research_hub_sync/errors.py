"""Exceptions raised by the Contentful and Elasticsearch clients."""

from __future__ import annotations


class SyncError(RuntimeError):
    """Base class for remote-call failures during a sync run."""


class SourceError(SyncError):
    """The content API rejected or failed a request."""


class DestinationError(SyncError):
    """The search engine rejected or failed a request."""


__all__ = ["SyncError", "SourceError", "DestinationError"]
