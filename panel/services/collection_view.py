"""
Search, sort and paginate in-memory record sets for table pages.

Records come straight from the auth API (licenses, users, files, webhooks,
subscriptions, chat channels) and may be dicts or plain objects. Nothing
here raises on imperfect upstream data: missing fields and values that
cannot be ordered degrade to "no match" and "equal".
"""

from collections.abc import Mapping
from datetime import date, datetime, timezone
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence
import logging
import math
import unicodedata

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE_WINDOW = 5


def get_field(record: Any, field: str) -> Any:
    """Read a field from a dict-like or attribute-style record; None if absent."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


class ViewParams(BaseModel):
    """Table state chosen by the operator: search text, sort and page."""

    query: str = ''
    search_fields: List[str] = []
    sort_field: Optional[str] = None
    sort_direction: str = 'asc'
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator('query', mode='before')
    def _parse_query(cls, v):
        if v is None:
            return ''
        return str(v)

    @field_validator('sort_direction', mode='before')
    def _parse_direction(cls, v):
        v = str(v or '').strip().lower()
        return v if v in ('asc', 'desc') else 'asc'

    @field_validator('page', mode='before')
    def _parse_page(cls, v):
        """Fall back to the first page for anything that is not a positive int."""
        try:
            v = int(v)
        except (TypeError, ValueError):
            return 1
        return v if v >= 1 else 1

    @field_validator('page_size', mode='before')
    def _parse_page_size(cls, v):
        try:
            v = int(v)
        except (TypeError, ValueError):
            return DEFAULT_PAGE_SIZE
        return v if v >= 1 else DEFAULT_PAGE_SIZE


class ViewResult(BaseModel):
    """One rendered page of a filtered and sorted collection."""

    items: List[Any]
    total_filtered: int
    total_pages: int
    page: int
    page_size: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def previous_page(self) -> int:
        return max(1, self.page - 1)

    @property
    def next_page(self) -> int:
        return max(1, min(self.total_pages, self.page + 1))

    @property
    def first_index(self) -> int:
        """1-based index of the first item shown, 0 when nothing is shown."""
        if not self.items:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        if not self.items:
            return 0
        return min(self.page * self.page_size, self.total_filtered)

    def page_numbers(self, window: int = DEFAULT_PAGE_WINDOW) -> List[int]:
        """
        Page buttons to show around the current page.

        Shows every page when they fit in the window, otherwise a window of
        fixed width that sticks to the first/last pages near either end and
        is centred on the current page elsewhere.
        """
        if self.total_pages <= 0:
            return []
        if self.total_pages <= window:
            return list(range(1, self.total_pages + 1))

        half = window // 2
        if self.page <= half + 1:
            start = 1
        elif self.page >= self.total_pages - half:
            start = self.total_pages - window + 1
        else:
            start = self.page - half
        return list(range(start, start + window))


def _matches(record: Any, needle: str, search_fields: Sequence[str]) -> bool:
    for field in search_fields:
        value = get_field(record, field)
        if value is None:
            continue
        if needle in str(value).casefold():
            return True
    return False


def filter_records(records: Sequence[Any], query: str, search_fields: Sequence[str]) -> List[Any]:
    """
    Keep records where any search field contains query, case-insensitively.

    An empty query keeps every record.
    """
    if not query:
        return list(records)
    needle = query.casefold()
    return [record for record in records if _matches(record, needle, search_fields)]


def _collation_key(value: str):
    # Accent-insensitive primary key; ties put lowercase first like localeCompare
    decomposed = unicodedata.normalize('NFKD', value)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), value.casefold(), value.swapcase())


def _as_instant(value):
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def _compare_values(a: Any, b: Any) -> int:
    """Three-way compare of two present values; 0 when they cannot be ordered."""
    if isinstance(a, str) and isinstance(b, str):
        a, b = _collation_key(a), _collation_key(b)
    elif isinstance(a, date) and isinstance(b, date):
        a, b = _as_instant(a), _as_instant(b)
    elif isinstance(a, (str, date)) or isinstance(b, (str, date)):
        # str vs number, date vs number, ...
        return 0
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        logger.debug(f"CollectionView: cannot order {type(a).__name__} and {type(b).__name__}")
    return 0


def sort_records(records: Sequence[Any], sort_field: Optional[str], direction: str = 'asc') -> List[Any]:
    """
    Stable sort by a single field.

    None values go last for both directions; ties keep their input order.
    """
    if not sort_field:
        return list(records)
    descending = direction == 'desc'

    def compare(left, right):
        a = get_field(left, sort_field)
        b = get_field(right, sort_field)
        if a is None or b is None:
            if a is None and b is None:
                return 0
            return 1 if a is None else -1
        result = _compare_values(a, b)
        return -result if descending else result

    return sorted(records, key=cmp_to_key(compare))


def paginate(records: Sequence[Any], page: int, page_size: int) -> ViewResult:
    """Cut one 1-indexed page out of records; past the end yields no items."""
    page_size = max(1, page_size)
    total = len(records)
    total_pages = math.ceil(total / page_size) if total else 0
    if page > total_pages:
        items = []
    else:
        start = (page - 1) * page_size
        items = list(records[start:start + page_size])
    return ViewResult(
        items=items,
        total_filtered=total,
        total_pages=total_pages,
        page=page,
        page_size=page_size,
    )


def view(records: Sequence[Any], params: ViewParams) -> ViewResult:
    """
    Run the full table pipeline: filter, then sort, then paginate.

    Args:
        records: Records as returned by the API
        params: Search text, search fields, sort and page selection

    Returns:
        ViewResult with the page items and the totals needed for the footer
    """
    filtered = filter_records(records, params.query, params.search_fields)
    ordered = sort_records(filtered, params.sort_field, params.sort_direction)
    return paginate(ordered, params.page, params.page_size)
