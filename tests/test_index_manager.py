"""Tests for research_hub_sync.indexing.manager covering every exists/create/reset branch.

Run with coverage:
    pytest tests/test_index_manager.py --maxfail=1 -v --cov=research_hub_sync.indexing.manager --cov-report=term-missing
"""

from unittest.mock import MagicMock

import requests

from research_hub_sync.errors import DestinationError
from research_hub_sync.indexing.manager import ensure_index
from research_hub_sync.models import IndexReadiness


def test_existing_index_without_reset_is_left_alone():
    es = MagicMock()
    es.index_exists.return_value = True
    assert ensure_index(es, "demo") is IndexReadiness.READY
    es.delete_index.assert_not_called()
    es.create_index.assert_not_called()


def test_reset_deletes_then_creates():
    es = MagicMock()
    es.index_exists.return_value = True
    es.delete_index.return_value = True
    es.create_index.return_value = True

    assert ensure_index(es, "demo", reset=True) is IndexReadiness.READY
    calls = [name for name, _, _ in es.mock_calls]
    assert calls.index("delete_index") < calls.index("create_index")


def test_missing_index_is_created_by_default():
    es = MagicMock()
    es.index_exists.return_value = False
    assert ensure_index(es, "demo") is IndexReadiness.READY
    es.create_index.assert_called_once_with("demo")


def test_missing_index_with_creation_disabled_aborts():
    es = MagicMock()
    es.index_exists.return_value = False
    reporter = MagicMock()
    assert ensure_index(es, "demo", create=False, reporter=reporter) is IndexReadiness.ABORTED
    es.create_index.assert_not_called()
    reporter.step.assert_called_once()
    assert reporter.step.call_args[0][0] is False


def test_create_failure_is_best_effort():
    es = MagicMock()
    es.index_exists.return_value = True
    es.delete_index.side_effect = DestinationError("nope")
    es.create_index.return_value = False
    reporter = MagicMock()

    assert ensure_index(es, "demo", reset=True, reporter=reporter) is IndexReadiness.READY
    reporter.error.assert_called_once()
    es.create_index.assert_called_once_with("demo")
    assert [call[0][0] for call in reporter.step.call_args_list] == [True, False, False]


def test_existence_check_failure_aborts():
    es = MagicMock()
    es.index_exists.side_effect = requests.ConnectionError("down")
    assert ensure_index(es, "demo") is IndexReadiness.ABORTED
    es.create_index.assert_not_called()
