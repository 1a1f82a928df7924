"""
Lazy multi-page listing.

A Listing walks a paginated resource as one sequence: it fetches a page only
when the items of the previous one have all been handed out, and stops once
the server's totals say nothing is left.

    for model in client.category_models(1234, {"geo_id": 213}):
        ...

Listings are single-pass. To start over, ask the client for a new one.
If the server keeps reporting more results than it delivers, iteration
never ends; bound it with ``itertools.islice`` when that matters.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterator, Mapping, Optional

from torg_catalog.integrations.contracts.envelope import parse_page

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str, Dict[str, Any]], Any]


class Listing(Iterator[Any]):
    def __init__(self, fetch_page: PageFetcher, resource: str, params: Optional[Mapping[str, Any]] = None) -> None:
        self._fetch_page = fetch_page
        self._resource = resource
        self._params: Dict[str, Any] = dict(params or {})
        self._params["page"] = int(self._params.get("page", 1))
        self._buffer: Deque[Any] = deque()
        self._has_more = True
        self._results_total: Optional[int] = None
        self._pages_fetched = 0

    @property
    def resource(self) -> str:
        return self._resource

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    @property
    def has_more(self) -> bool:
        return self._has_more

    @property
    def results_total(self) -> Optional[int]:
        return self._results_total

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def __iter__(self) -> "Listing":
        return self

    def __next__(self) -> Any:
        if not self._buffer and not self.fetch_next_page():
            raise StopIteration
        if not self._buffer:
            # Server claimed more results but sent an empty page.
            logger.info("Listing %s ended on an empty page %s", self._resource, self._params["page"] - 1)
            self._has_more = False
            raise StopIteration
        return self._buffer.popleft()

    def fetch_next_page(self) -> bool:
        """Fetch one page into the buffer. Returns False when the listing is exhausted."""
        if not self._has_more:
            return False

        page = parse_page(self._fetch_page(self._resource, dict(self._params)))
        self._pages_fetched += 1
        self._results_total = page.results_total
        self._has_more = page.has_more
        self._buffer = deque(page.listing)
        self._params["page"] += 1

        logger.debug(
            "Fetched %s page %s: %s items (total=%s, per_page=%s, has_more=%s)",
            self._resource,
            page.page,
            len(self._buffer),
            page.results_total,
            page.results_per_page,
            self._has_more,
        )
        if not self._has_more:
            logger.info("Listing %s exhausted after %s page(s)", self._resource, self._pages_fetched)
        return True

    def __repr__(self) -> str:
        return (
            f"Listing(resource={self._resource!r}, page={self._params['page']!r}, "
            f"buffered={len(self._buffer)}, has_more={self._has_more!r})"
        )
