"""入力正規化とバリデーション。"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pagingmediator.errors import PagingError, PagingValidationError
from pagingmediator.types import PageResponse


def _is_strict_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_page_size(value: Any) -> int:
    """ページサイズを検証する。

    Args:
        value: 入力ページサイズ。

    Returns:
        検証済みページサイズ。

    Raises:
        PagingValidationError: 正の整数でない場合。
    """

    if not _is_strict_int(value):
        raise PagingValidationError(
            f"page_size は整数で指定してください: {value!r}",
            validation_code="invalid_page_size_type",
        )
    if value <= 0:
        raise PagingValidationError(
            f"page_size は1以上を指定してください: {value}",
            validation_code="non_positive_page_size",
        )
    return value


def validate_fetch_fn(value: Any) -> None:
    """取得関数が呼び出し可能か検証する。"""

    if not callable(value):
        raise PagingValidationError(
            "fetch_fn は呼び出し可能オブジェクトを指定してください。",
            validation_code="invalid_fetch_fn",
        )


def normalize_load_offset(value: int | None, *, default: int) -> int:
    """ロードオフセットを正規化する。

    Args:
        value: 入力オフセット。Noneなら既定値。
        default: 既定値。

    Returns:
        正規化済みオフセット。

    Raises:
        PagingValidationError: 負数または整数以外の場合。
    """

    if value is None:
        value = default
    if not _is_strict_int(value) or value < 0:
        raise PagingValidationError(
            f"load_offset は0以上の整数を指定してください: {value!r}",
            validation_code="invalid_load_offset",
        )
    return value


def validate_render_position(current_flat_index: int, total_items_rendered: int) -> None:
    """描画位置と描画件数を検証する。"""

    if not _is_strict_int(current_flat_index) or not _is_strict_int(total_items_rendered):
        raise PagingValidationError(
            "描画位置と描画件数は整数で指定してください。",
            validation_code="invalid_render_position_type",
        )
    if total_items_rendered < 0:
        raise PagingValidationError(
            f"描画件数は0以上を指定してください: {total_items_rendered}",
            validation_code="negative_total_items",
        )


def coerce_page_response(raw: Any) -> PageResponse[Any]:
    """取得関数の戻り値を PageResponse へ正規化する。

    PageResponse か (items, total_count, error) の3要素タプルを受け付ける。
    error が文字列の場合は PagingError へ変換する。

    Raises:
        PagingValidationError: 上記以外の戻り値の場合。
    """

    if isinstance(raw, PageResponse):
        return raw
    if isinstance(raw, tuple) and len(raw) == 3:
        items, total_count, error = raw
        if isinstance(error, str):
            error = PagingError(error)
        if error is not None and not isinstance(error, PagingError):
            raise PagingValidationError(
                f"取得関数のエラーは PagingError で返してください: {type(error).__name__}",
                validation_code="invalid_fetch_error",
            )
        if items is not None and not isinstance(items, Sequence):
            items = list(items)
        return PageResponse(items=items, total_count=total_count, error=error)
    raise PagingValidationError(
        f"取得関数の戻り値が不正です: {type(raw).__name__}",
        validation_code="invalid_fetch_response",
    )
