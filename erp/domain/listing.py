"""Domain helpers for text search, ordering and pagination of record lists."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Generic, Mapping, Sequence, TypeVar

T = TypeVar("T")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InvalidQueryError(ValueError):
    """Raised when page/page_size are outside the accepted range."""


@dataclass(frozen=True)
class ListQuery:
    text: str | None = None
    page: int = 1
    page_size: int = 25

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidQueryError("page must be >= 1")
        if self.page_size < 1:
            raise InvalidQueryError("page_size must be >= 1")


@dataclass
class Page(Generic[T]):
    data: list[T] = field(default_factory=list)
    total: int = 0


def search_in_text(text: Any, query: str | None) -> bool:
    """Case-insensitive substring match; a blank query matches everything."""
    needle = (query or "").strip()
    if not needle:
        return True
    return needle.lower() in str(text or "").lower()


def matches(record: Mapping[str, Any], query: str | None) -> bool:
    return search_in_text(record.get("code"), query) or search_in_text(record.get("name"), query)


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp; anything unreadable sorts as the oldest."""
    if not isinstance(value, str) or not value:
        return _EPOCH
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def newest_first(records: Sequence[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    # sorted() is stable with reverse=True, so equal timestamps keep array order
    return sorted(records, key=lambda r: parse_timestamp(r.get("updatedAt")), reverse=True)


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    start = (page - 1) * page_size
    return Page(data=list(items[start:start + page_size]), total=len(items))
