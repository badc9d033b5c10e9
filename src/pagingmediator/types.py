"""公開型と内部共通データ構造。"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pagingmediator.errors import PagingError

P = TypeVar("P")
T = TypeVar("T")


@dataclass(slots=True)
class PageResponse(Generic[T]):
    """取得関数の1ページ分の応答。

    成功時は items と total_count を、失敗時は error のみを持つ。

    Attributes:
        items: 取得結果。順序を保持する。
        total_count: 全ページ合計の件数。
        error: 取得失敗時のエラー。
    """

    items: Sequence[T] | None = None
    total_count: int | None = None
    error: PagingError | None = None

    @classmethod
    def success(cls, items: Sequence[T], total_count: int) -> PageResponse[T]:
        """成功応答を生成する。"""

        return cls(items=items, total_count=total_count)

    @classmethod
    def failure(cls, error: PagingError | str) -> PageResponse[T]:
        """失敗応答を生成する。"""

        if not isinstance(error, PagingError):
            error = PagingError(error)
        return cls(error=error)


@dataclass(slots=True)
class PagingResult(Generic[T]):
    """get_results() の返却値。

    Attributes:
        items: 取得結果。エラー時と空応答時はNone。
        error: 取得関数が報告したエラー。
    """

    items: Sequence[T] | None = None
    error: PagingError | None = None

    @property
    def ok(self) -> bool:
        """エラーがなければTrue。"""

        return self.error is None

    def unwrap(self) -> Sequence[T]:
        """結果を取り出す。

        Returns:
            取得結果。空応答時は空リスト。

        Raises:
            PagingError: 取得関数がエラーを報告した場合。
        """

        if self.error is not None:
            raise self.error
        if self.items is None:
            return []
        return self.items


@dataclass(slots=True, frozen=True)
class FlatPosition:
    """セクション/行アドレスを平坦化した位置。

    Attributes:
        index: 全セクション通しの1始まり順位。
        total: 全セクション合計行数。
    """

    index: int
    total: int


RawPageResponse = PageResponse[Any] | tuple[Any, Any, Any]
FetchFn = Callable[[P, int, int], RawPageResponse | Awaitable[RawPageResponse]]
