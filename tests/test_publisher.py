"""Tests for research_hub_sync.indexing.publisher ensuring per-item failures are isolated.

Run with coverage:
    pytest tests/test_publisher.py --maxfail=1 -v --cov=research_hub_sync.indexing.publisher --cov-report=term-missing
"""

from unittest.mock import MagicMock, call

import requests

from research_hub_sync.errors import DestinationError
from research_hub_sync.indexing.publisher import publish_items
from research_hub_sync.models import SourceItem


def _items():
    return [
        SourceItem.from_entry({"sys": {"id": "a"}, "fields": {"name": "Foo"}}),
        SourceItem.from_entry({"sys": {"id": "b"}, "fields": {"name": "Bar"}}),
    ]


def test_all_writes_succeed():
    es = MagicMock()
    outcome = publish_items(es, _items(), "demo")
    assert (outcome.attempted, outcome.failed) == (2, 0)
    assert outcome.ok
    assert es.upsert_document.call_args_list == [
        call("demo", "a", {"sys": {"id": "a"}, "fields": {"name": "Foo"}}),
        call("demo", "b", {"sys": {"id": "b"}, "fields": {"name": "Bar"}}),
    ]


def test_failed_write_is_counted_and_loop_continues():
    es = MagicMock()
    es.upsert_document.side_effect = [DestinationError("boom"), {"result": "created"}]
    reporter = MagicMock()

    outcome = publish_items(es, list(reversed(_items())), "demo", reporter=reporter)

    assert (outcome.attempted, outcome.failed, outcome.succeeded) == (2, 1, 1)
    assert not outcome.ok
    assert es.upsert_document.call_count == 2
    reporter.error.assert_called_once()


def test_network_errors_are_counted():
    es = MagicMock()
    es.upsert_document.side_effect = requests.Timeout("slow")
    outcome = publish_items(es, _items(), "demo")
    assert outcome.failed == outcome.attempted == 2


def test_empty_items_publish_nothing():
    es = MagicMock()
    outcome = publish_items(es, [], "demo")
    assert outcome.attempted == 0
    es.upsert_document.assert_not_called()
