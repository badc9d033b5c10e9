"""ページャモジュール。"""

from pagingmediator.pager.page_pager import (
    PagePagerState,
    advance_page_position,
    compute_total_pages,
    has_more_pages,
)
from pagingmediator.pager.trigger import is_load_trigger

__all__ = [
    "PagePagerState",
    "advance_page_position",
    "compute_total_pages",
    "has_more_pages",
    "is_load_trigger",
]
