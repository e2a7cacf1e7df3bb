"""Tests for the pagination cursor."""

import pytest

from pronet.pagination import PaginationCursor


class TestPaginationCursor:
    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            PaginationCursor(0)

    def test_paging_reproduces_list(self):
        items = list(range(45))
        cursor = PaginationCursor(20)
        collected = []
        while cursor.has_more:
            collected.extend(cursor.next_page(items))
        assert collected == items
        assert cursor.current_page == 3

    def test_exact_multiple_reports_no_more_on_last_page(self):
        cursor = PaginationCursor(10)
        cursor.next_page(list(range(20)))
        page = cursor.next_page(list(range(20)))
        assert len(page) == 10
        assert cursor.has_more is False

    def test_over_fetch_is_idempotent(self):
        items = list(range(5))
        cursor = PaginationCursor(20)
        assert cursor.next_page(items) == items
        for _ in range(3):
            assert cursor.next_page(items) == []
            assert cursor.has_more is False
            assert cursor.current_page == 1

    def test_empty_results(self):
        cursor = PaginationCursor(5)
        assert cursor.next_page([]) == []
        assert cursor.has_more is False
        assert cursor.current_page == 0

    def test_reset(self):
        cursor = PaginationCursor(2)
        cursor.next_page([1, 2, 3])
        cursor.reset()
        assert cursor.current_page == 0
        assert cursor.has_more is True
        assert cursor.next_page([1, 2, 3]) == [1, 2]
