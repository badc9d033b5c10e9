"""ページ番号方式のページャ。"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass

from pagingmediator.config import FIRST_PAGE, UNKNOWN_TOTAL_PAGES
from pagingmediator.errors import PagingValidationError


@dataclass(slots=True)
class PagePagerState:
    """ページング状態。

    Attributes:
        page_size: 1ページあたり件数。構築後は変更しない。
        current_page: 次に取得するページ番号（1始まり）。
        total_pages: 最後に判明した総ページ数。0は未判明。
        is_fetching: 取得中フラグ。排他制御ではなく参照用。
    """

    page_size: int
    current_page: int = FIRST_PAGE
    total_pages: int = UNKNOWN_TOTAL_PAGES
    is_fetching: bool = False

    def reset(self) -> None:
        """初期状態へ戻す。page_size は維持する。"""

        self.current_page = FIRST_PAGE
        self.total_pages = UNKNOWN_TOTAL_PAGES
        self.is_fetching = False


def compute_total_pages(total_count: int, page_size: int) -> int:
    """総件数から総ページ数を切り上げで求める。

    Raises:
        PagingValidationError: 総件数が負の場合。
    """

    if total_count < 0:
        raise PagingValidationError(
            f"total_count が負です: {total_count}",
            validation_code="negative_total_count",
        )
    return (total_count + page_size - 1) // page_size


def advance_page_position(
    *,
    state: PagePagerState,
    items: Sized,
    total_count: int,
) -> bool:
    """成功応答を反映して状態更新する。

    Args:
        state: 現在状態。
        items: 取得した1ページ分の結果。
        total_count: 応答の総件数。

    Returns:
        次ページへ進んだならTrue。空ページなら進まずFalse。
    """

    state.total_pages = compute_total_pages(total_count, state.page_size)
    if len(items) == 0:
        return False
    state.current_page += 1
    return True


def has_more_pages(state: PagePagerState) -> bool:
    """未取得ページが残っていると見込まれるか判定する。"""

    return state.current_page <= state.total_pages
