"""ページングメディエータ実装。"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import replace
from typing import Any, Generic

from pagingmediator.config import DEFAULT_LOAD_OFFSET, MediatorConfig
from pagingmediator.errors import PagingValidationError
from pagingmediator.pager.page_pager import (
    PagePagerState,
    advance_page_position,
    has_more_pages,
)
from pagingmediator.pager.trigger import is_load_trigger
from pagingmediator.types import FetchFn, P, PagingResult, T
from pagingmediator.validation import (
    coerce_page_response,
    normalize_load_offset,
    validate_fetch_fn,
    validate_page_size,
    validate_render_position,
)


def _is_async_callable(fn: Any) -> bool:
    """コルーチン関数、または __call__ がコルーチン関数ならTrue。"""

    if inspect.iscoroutinefunction(fn):
        return True
    call = getattr(fn, "__call__", None)
    return inspect.iscoroutinefunction(call)


class _PagingMediatorBase(Generic[P, T]):
    """同期・非同期メディエータ共通の状態管理。"""

    def __init__(
        self,
        page_size: int,
        fetch_fn: FetchFn[P],
        *,
        config: MediatorConfig | None = None,
    ) -> None:
        validate_fetch_fn(fetch_fn)
        self._config = config or MediatorConfig()
        normalize_load_offset(self._config.load_offset, default=DEFAULT_LOAD_OFFSET)
        self._state = PagePagerState(page_size=validate_page_size(page_size))
        self._fetch_fn = fetch_fn

    @property
    def page_size(self) -> int:
        """1ページあたり件数。"""

        return self._state.page_size

    @property
    def current_page(self) -> int:
        """次に取得するページ番号。"""

        return self._state.current_page

    @property
    def total_pages(self) -> int:
        """最後に判明した総ページ数。0は未判明。"""

        return self._state.total_pages

    @property
    def is_fetching(self) -> bool:
        """取得中ならTrue。"""

        return self._state.is_fetching

    @property
    def has_more_results(self) -> bool:
        """未取得ページが残っていると見込まれるならTrue。"""

        return has_more_pages(self._state)

    def snapshot(self) -> PagePagerState:
        """現在状態の複製を返す。"""

        return replace(self._state)

    def _apply_response(self, raw: Any) -> PagingResult[T]:
        response = coerce_page_response(raw)
        if response.error is not None:
            return PagingResult(error=response.error)
        if response.items is not None and response.total_count is not None:
            advance_page_position(
                state=self._state,
                items=response.items,
                total_count=response.total_count,
            )
            return PagingResult(items=response.items)
        return PagingResult()

    def should_load_more(
        self,
        current_flat_index: int,
        total_items_rendered: int,
        load_offset: int | None = None,
    ) -> bool:
        """描画位置から次ページを今取得すべきか判定する。

        Args:
            current_flat_index: 描画しようとしている要素の通し順位（1始まり）。
            total_items_rendered: 描画済み要素の総数。
            load_offset: 末尾から何件手前で取得するか。既定は設定値（1）。

        Returns:
            取得中でなく、current_flat_index == total_items_rendered - load_offset
            であり、未取得ページが残っていればTrue。
        """

        offset = normalize_load_offset(load_offset, default=self._config.load_offset)
        validate_render_position(current_flat_index, total_items_rendered)
        return is_load_trigger(
            state=self._state,
            current_flat_index=current_flat_index,
            total_items_rendered=total_items_rendered,
            load_offset=offset,
        )

    def reset(self) -> None:
        """1ページ目から取得し直せるよう状態を初期化する。"""

        self._state.reset()

    def __repr__(self) -> str:
        state = self._state
        return (
            f"{type(self).__name__}(page_size={state.page_size}, "
            f"current_page={state.current_page}, total_pages={state.total_pages}, "
            f"is_fetching={state.is_fetching})"
        )


class PagingMediator(_PagingMediatorBase[P, T]):
    """1ページ取得関数を自動ページングのデータ源に変換する非同期メディエータ。

    呼び出し側は描画のたびに should_load_more() で判定し、Trueのときだけ
    get_results() を呼ぶ。is_fetching は参照用のフラグであり、
    get_results() 自体は重複呼び出しを拒否しない。重複した場合は
    後に完了した応答の値が current_page / total_pages に残る。
    """

    def __init__(
        self,
        page_size: int,
        fetch_fn: FetchFn[P],
        *,
        config: MediatorConfig | None = None,
    ) -> None:
        """メディエータを初期化する。

        Args:
            page_size: 1ページあたり件数。一画面に表示できる件数以上を推奨。
            fetch_fn: (params, page, page_size) を受け取る1ページ取得関数。
                PageResponse または (items, total_count, error) を返す。
                同期関数はワーカースレッドで実行する。
            config: メディエータ設定。

        Raises:
            PagingValidationError: page_size または fetch_fn が不正な場合。
        """

        super().__init__(page_size, fetch_fn, config=config)
        self._fetch_is_async = _is_async_callable(fetch_fn)

    async def get_results(self, params: P) -> PagingResult[T]:
        """次ページを取得する。

        取得関数の待機前に is_fetching を立て、完了直後に下ろす。
        エラー応答時は current_page / total_pages を変更しないため、
        再度呼び出すと同じページを再取得する。

        Args:
            params: 取得関数へそのまま渡すパラメータ。

        Returns:
            取得結果。取得関数のエラーは例外ではなく error に格納する。
        """

        state = self._state
        state.is_fetching = True
        try:
            if self._fetch_is_async:
                raw: Any = self._fetch_fn(params, state.current_page, state.page_size)
            else:
                raw = await asyncio.to_thread(
                    self._fetch_fn, params, state.current_page, state.page_size
                )
            if inspect.isawaitable(raw):
                raw = await raw
        finally:
            state.is_fetching = False
        return self._apply_response(raw)


class SyncPagingMediator(_PagingMediatorBase[P, T]):
    """同期取得関数用のメディエータ。

    get_results() は取得完了までブロックする。非同期の取得関数は受け付けない。
    """

    def __init__(
        self,
        page_size: int,
        fetch_fn: FetchFn[P],
        *,
        config: MediatorConfig | None = None,
    ) -> None:
        """メディエータを初期化する。

        Raises:
            PagingValidationError: page_size が不正な場合、または fetch_fn が
                非同期関数の場合。
        """

        super().__init__(page_size, fetch_fn, config=config)
        if _is_async_callable(fetch_fn):
            raise PagingValidationError(
                "SyncPagingMediator には同期の取得関数を指定してください。",
                validation_code="async_fetch_fn",
            )

    def get_results(self, params: P) -> PagingResult[T]:
        """次ページを取得する。状態更新の順序は PagingMediator と同じ。"""

        state = self._state
        state.is_fetching = True
        try:
            raw: Any = self._fetch_fn(params, state.current_page, state.page_size)
        finally:
            state.is_fetching = False
        if inspect.isawaitable(raw):
            close = getattr(raw, "close", None)
            if close is not None:
                close()
            raise PagingValidationError(
                "取得関数が awaitable を返しました。PagingMediator を使用してください。",
                validation_code="async_fetch_result",
            )
        return self._apply_response(raw)
