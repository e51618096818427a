"""Paged result for history listings."""

from math import ceil
from typing import Iterable

from rewardledger.exceptions import InvalidArgument


class PagedList(list):
    """
    One page of a fully materialized result.

    Behaves as a list of the page items and carries the paging metadata.
    ``page_size=None`` is unbounded: page 0 holds every item.

    Usage:
        page = PagedList(entries, page_index=1, page_size=20)
        page.total_count, page.total_pages, page.has_next_page
    """

    def __init__(self, source: Iterable, page_index: int = 0, page_size: int | None = None):
        if page_size is not None and page_size <= 0:
            raise InvalidArgument("INVALID_PAGE_SIZE", page_size=page_size)

        items = list(source)
        self.page_index = max(page_index, 0)
        self.page_size = page_size
        self.total_count = len(items)

        if page_size is None:
            self.total_pages = 1 if items else 0
            super().__init__(items if self.page_index == 0 else [])
        else:
            self.total_pages = ceil(self.total_count / page_size)
            start = self.page_index * page_size
            super().__init__(items[start:start + page_size])

    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 0

    @property
    def has_next_page(self) -> bool:
        return self.page_index + 1 < self.total_pages

    def __repr__(self):
        return (
            f"<PagedList page={self.page_index} size={self.page_size} "
            f"items={len(self)} total={self.total_count}>"
        )
