"""Page-at-a-time delivery of a result list."""

import logging
from typing import List, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginationCursor:
    """Tracks which page of a result list has been handed out."""

    def __init__(self, page_size: int):
        """
        Initialize the cursor.

        Args:
            page_size: Number of items per page. Must be positive.
        """
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        self.current_page = 0
        self.has_more = True

    def reset(self) -> None:
        """Start over from the first page. Call whenever the criteria change."""
        self.current_page = 0
        self.has_more = True

    def next_page(self, results: Sequence[T]) -> List[T]:
        """
        Return the next page of ``results``.

        The cursor only advances when a non-empty page is returned, so calling
        this again after the last page keeps returning an empty list.

        Args:
            results: The full, already filtered result list.

        Returns:
            The slice for the current page (possibly empty).
        """
        start = self.current_page * self.page_size
        if start >= len(results):
            self.has_more = False
            return []

        end = min(start + self.page_size, len(results))
        page = list(results[start:end])
        self.has_more = end < len(results)
        self.current_page += 1
        logger.debug(f"Delivered page {self.current_page} ({start}:{end} of {len(results)})")
        return page

    def __repr__(self) -> str:
        return (
            f"<PaginationCursor page={self.current_page} size={self.page_size} "
            f"has_more={self.has_more}>"
        )
