"""スクロール位置による追加取得判定。"""

from __future__ import annotations

from pagingmediator.pager.page_pager import PagePagerState, has_more_pages


def is_load_trigger(
    *,
    state: PagePagerState,
    current_flat_index: int,
    total_items_rendered: int,
    load_offset: int,
) -> bool:
    """次ページを今取得すべきか判定する。

    描画位置が末尾からちょうど load_offset 件手前に一致したときだけ True。
    それより手前でも先でも False を返す。

    Args:
        state: 現在状態。
        current_flat_index: 描画中要素の通し順位（1始まり）。
        total_items_rendered: 描画済み要素の総数。
        load_offset: 末尾からのオフセット。

    Returns:
        取得中でなく、境界に一致し、未取得ページが残っていればTrue。
    """

    if state.is_fetching:
        return False
    if current_flat_index != total_items_rendered - load_offset:
        return False
    return has_more_pages(state)
