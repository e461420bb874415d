"""Tests for client-side pagination."""

import pytest

from autoservice.pipeline.pagination import PageState, paginate, total_pages_for


class TestTotalPages:
    def test_twelve_items_five_per_page(self):
        assert total_pages_for(12, 5) == 3

    def test_exact_multiple(self):
        assert total_pages_for(10, 5) == 2

    def test_empty_collection_has_zero_pages(self):
        assert total_pages_for(0, 5) == 0

    def test_zero_page_size_raises(self):
        with pytest.raises(ValueError, match="page_size"):
            total_pages_for(12, 0)


class TestPaginate:
    def test_first_and_last_page_sizes(self):
        items = list(range(12))
        assert len(paginate(items, 1, 5).items) == 5
        assert paginate(items, 3, 5).items == [10, 11]

    def test_pages_reconstruct_collection_in_order(self):
        items = list(range(23))
        total = total_pages_for(len(items), 4)
        rebuilt = []
        for number in range(1, total + 1):
            page = paginate(items, number, 4)
            assert len(page.items) <= 4
            rebuilt.extend(page.items)
        assert rebuilt == items

    def test_out_of_range_page_is_clamped(self):
        items = list(range(12))
        assert paginate(items, 99, 5).page == 3
        assert paginate(items, 0, 5).page == 1

    def test_empty_collection_renders_empty_first_page(self):
        page = paginate([], 1, 5)
        assert page.items == []
        assert page.page == 1
        assert page.total_pages == 0
        assert page.is_empty

    def test_navigation_flags(self):
        items = list(range(12))
        assert paginate(items, 1, 5).has_next
        assert not paginate(items, 1, 5).has_previous
        assert not paginate(items, 3, 5).has_next


class TestPageState:
    def test_defaults(self):
        state = PageState()
        assert state.current_page == 1
        assert state.items_per_page == 5

    def test_invalid_page_size_rejected(self):
        with pytest.raises(ValueError):
            PageState(items_per_page=0)

    def test_go_to_valid_page(self):
        state = PageState()
        assert state.go_to(3, 12)
        assert state.current_page == 3

    def test_page_zero_is_ignored(self):
        state = PageState(current_page=2)
        assert not state.go_to(0, 12)
        assert state.current_page == 2

    def test_page_past_end_is_ignored(self):
        state = PageState(current_page=2)
        assert not state.go_to(4, 12)
        assert state.current_page == 2

    def test_next_stops_at_last_page(self):
        state = PageState(current_page=3)
        assert not state.next(12)
        assert state.current_page == 3

    def test_previous_stops_at_first_page(self):
        state = PageState()
        assert not state.previous(12)

    def test_shrinking_collection_clamps_current_page(self):
        state = PageState(current_page=3)
        state.clamp(6)
        assert state.current_page == 2

    def test_larger_page_size_clamps_current_page(self):
        state = PageState(current_page=3)
        state.set_items_per_page(10, 12)
        assert state.current_page == 2
