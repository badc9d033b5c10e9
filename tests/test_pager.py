"""pager モジュールのテスト。"""

from __future__ import annotations

import pytest

from pagingmediator.errors import PagingValidationError
from pagingmediator.pager import (
    PagePagerState,
    advance_page_position,
    compute_total_pages,
    has_more_pages,
    is_load_trigger,
)


def test_compute_total_pages_rounds_up() -> None:
    assert compute_total_pages(25, 10) == 3
    assert compute_total_pages(20, 10) == 2
    assert compute_total_pages(0, 10) == 0
    assert compute_total_pages(10_001, 100) == 101


def test_compute_total_pages_rejects_negative_total() -> None:
    with pytest.raises(PagingValidationError):
        compute_total_pages(-1, 10)


def test_advance_page_position_non_empty_and_empty() -> None:
    state = PagePagerState(page_size=10)
    assert advance_page_position(state=state, items=[1, 2, 3], total_count=13) is True
    assert (state.current_page, state.total_pages) == (2, 2)

    assert advance_page_position(state=state, items=[], total_count=13) is False
    assert (state.current_page, state.total_pages) == (2, 2)


def test_has_more_pages_false_while_total_unknown() -> None:
    state = PagePagerState(page_size=10)
    assert has_more_pages(state) is False
    state.total_pages = 1
    assert has_more_pages(state) is True
    state.current_page = 2
    assert has_more_pages(state) is False


def test_state_reset_keeps_page_size() -> None:
    state = PagePagerState(page_size=7, current_page=4, total_pages=3, is_fetching=True)
    state.reset()
    assert state == PagePagerState(page_size=7)


@pytest.mark.parametrize("offset", [0, 1, 3, 5])
def test_trigger_fires_only_on_exact_boundary(offset: int) -> None:
    state = PagePagerState(page_size=10, current_page=2, total_pages=3)
    total = 20
    boundary = total - offset
    assert is_load_trigger(
        state=state, current_flat_index=boundary, total_items_rendered=total, load_offset=offset
    )
    for index in (boundary - 1, boundary + 1):
        assert not is_load_trigger(
            state=state, current_flat_index=index, total_items_rendered=total, load_offset=offset
        )


def test_trigger_suppressed_while_fetching_or_exhausted() -> None:
    fetching = PagePagerState(page_size=10, current_page=2, total_pages=3, is_fetching=True)
    assert not is_load_trigger(
        state=fetching, current_flat_index=9, total_items_rendered=10, load_offset=1
    )
    exhausted = PagePagerState(page_size=10, current_page=4, total_pages=3)
    assert not is_load_trigger(
        state=exhausted, current_flat_index=29, total_items_rendered=30, load_offset=1
    )
