"""
Pagination: the page options sent with list calls and the normalized Page
returned for every paged endpoint.

Jira pages come in several envelopes (``values``, ``issues``, ``comments``,
``worklogs``, ``dashboards``, ``screens``). Page.from_envelope() reads any of
them into the same shape.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, Type, TypeVar

from .domain.base import UNSET, Record

T = TypeVar('T')


@dataclass
class PageOptions(Record):
    """Query parameters controlling which slice of a listing is returned."""
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET
    order_by: Optional[str] = UNSET
    expand: Optional[str] = UNSET


@dataclass
class Page(Generic[T]):
    """One page of a listing.

    Attributes:
        start_at: Index of the first item in this page
        max_results: Page size requested from (or granted by) the server
        total: Total number of items across all pages
        is_last: True when no further page exists
        items: Items of this page
        self_: URL this page was fetched from
        next_page: Server supplied link to the next page, if any
        next_page_start: ``start_at`` for the next request, when the server
            did not supply a link and this is not the last page
    """
    start_at: int = 0
    max_results: int = 0
    total: int = 0
    is_last: bool = True
    items: List[T] = field(default_factory=list)
    self_: str = ''
    next_page: Optional[str] = None
    next_page_start: Optional[int] = None

    @staticmethod
    def derive(
        start_at: int,
        max_results: int,
        total: int,
        next_page: Optional[str] = None
    ) -> Tuple[bool, Optional[int]]:
        """Compute ``(is_last, next_page_start)`` from the page counters.

        A page size of zero is not special-cased.
        """
        is_last = start_at + max_results >= total
        next_page_start = start_at + max_results if not is_last and not next_page else None
        return is_last, next_page_start

    @classmethod
    def from_envelope(
        cls,
        data: Any,
        items_key: str,
        self_url: str,
        item_type: Optional[Type[Any]] = None
    ) -> 'Page':
        """Normalize a paged response body.

        Args:
            data: Parsed response body
            items_key: Envelope key holding the items (e.g. "values")
            self_url: URL the page was requested from
            item_type: Record type to build each item with

        Returns:
            Normalized Page
        """
        if isinstance(data, list):
            data = {items_key: data, 'startAt': 0, 'maxResults': len(data), 'total': len(data)}
        elif not isinstance(data, Mapping):
            data = {}

        raw_items = data.get(items_key) or []
        items = [_build_item(item_type, item) for item in raw_items]
        start_at = int(data.get('startAt') or 0)
        max_results = int(data.get('maxResults') or 0)
        next_page = data.get('nextPage') or data.get('next') or None

        if data.get('total') is not None:
            total = int(data['total'])
            is_last, next_page_start = cls.derive(start_at, max_results, total, next_page)
        else:
            # Envelopes without a total only report isLast
            total = start_at + len(items)
            is_last = bool(data.get('isLast', True))
            next_page_start = start_at + max_results if not is_last and not next_page else None

        return cls(
            start_at=start_at,
            max_results=max_results,
            total=total,
            is_last=is_last,
            items=items,
            self_=self_url,
            next_page=next_page,
            next_page_start=next_page_start
        )

    def next_options(self, options: Optional[PageOptions] = None) -> Optional[PageOptions]:
        """Page options for fetching the following page, or None on the last page."""
        if self.next_page_start is None:
            return None
        base = options or PageOptions()
        return PageOptions(
            start_at=self.next_page_start,
            max_results=base.max_results if base.is_set('max_results') else self.max_results,
            order_by=base.order_by,
            expand=base.expand
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'startAt': self.start_at,
            'maxResults': self.max_results,
            'total': self.total,
            'isLast': self.is_last,
            'values': [item.to_dict() if isinstance(item, Record) else item for item in self.items],
            'self': self.self_,
            'nextPage': self.next_page,
            'nextPageStart': self.next_page_start,
        }

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _build_item(item_type: Optional[Type[Any]], item: Any) -> Any:
    if item_type is not None and isinstance(item, Mapping) and issubclass(item_type, Record):
        return item_type.from_dict(item)
    return item
