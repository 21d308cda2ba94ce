"""Contentful to Elasticsearch sync for a single content type."""

__version__ = "0.1.0"

__all__ = ["__version__"]
