"""Make sure the destination index is ready before any document is written."""

from __future__ import annotations

from typing import Optional

import requests

from ..errors import SyncError
from ..models import IndexReadiness
from ..report import Reporter
from .client import ESClient


def _try_call(action, label: str, reporter: Optional[Reporter]) -> bool:
    try:
        acknowledged = action()
    except (requests.RequestException, SyncError, ValueError) as exc:
        if reporter is not None:
            reporter.error(exc, label)
        acknowledged = False
    if reporter is not None:
        reporter.step(acknowledged, label)
    return acknowledged


def ensure_index(
    es: ESClient,
    name: str,
    create: bool = True,
    reset: bool = False,
    reporter: Optional[Reporter] = None,
) -> IndexReadiness:
    """Create, reset or verify `name` according to the flags.

    Delete/create failures are reported but still yield READY; only a missing
    index with creation disabled, or a failed existence check, aborts.
    """

    try:
        exists = es.index_exists(name)
    except (requests.RequestException, SyncError) as exc:
        if reporter is not None:
            reporter.error(exc, f"Check index {name}")
            reporter.step(False, f"Check index {name}")
        return IndexReadiness.ABORTED

    if exists:
        if reporter is not None:
            reporter.step(True, f"Index {name} exists")
        if reset:
            _try_call(lambda: es.delete_index(name), f"Delete index {name}", reporter)
            _try_call(lambda: es.create_index(name), f"Create index {name}", reporter)
        return IndexReadiness.READY

    if not create:
        if reporter is not None:
            reporter.step(False, f"Index {name} does not exist and index creation is disabled")
        return IndexReadiness.ABORTED

    _try_call(lambda: es.create_index(name), f"Create index {name}", reporter)
    return IndexReadiness.READY


__all__ = ["ensure_index"]
