"""Value objects passed between the reader, index manager, publisher and reporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class SourceItem:
    """One Contentful entry as fetched; `raw` is the document body."""

    id: str
    fields: Mapping[str, Any]
    raw: Mapping[str, Any]

    @classmethod
    def from_entry(cls, entry: Mapping[str, Any]) -> "SourceItem":
        sys_meta = entry.get("sys") or {}
        entry_id = sys_meta.get("id")
        if not entry_id:
            raise ValueError("Entry has no sys.id")
        return cls(id=str(entry_id), fields=entry.get("fields") or {}, raw=entry)

    @property
    def name(self) -> Optional[Any]:
        return self.fields.get("name")

    def to_document(self) -> Dict[str, Any]:
        return dict(self.raw)


@dataclass(frozen=True)
class FetchResult:
    """A single page of entries, or the error that prevented fetching it."""

    items: List[SourceItem] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def usable(self) -> bool:
        """True when the fetch succeeded and returned something to publish."""

        return self.ok and len(self.items) > 0


class IndexReadiness(Enum):
    READY = "ready"
    ABORTED = "aborted"


@dataclass
class PublishOutcome:
    """Running counters for one publish pass."""

    attempted: int = 0
    failed: int = 0

    @property
    def succeeded(self) -> int:
        return self.attempted - self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0


__all__ = ["SourceItem", "FetchResult", "IndexReadiness", "PublishOutcome"]
