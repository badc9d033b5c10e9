"""HTTP取得の補助。"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pagingmediator.config import HttpFetchConfig
from pagingmediator.errors import PagingError
from pagingmediator.types import PageResponse


def build_request_headers(user_agent: str) -> Mapping[str, str]:
    """標準ヘッダを構築する。"""

    return {
        "Accept": "application/json",
        "User-Agent": user_agent,
    }


def build_page_query(
    *,
    config: HttpFetchConfig,
    params: Mapping[str, Any] | None,
    page: int,
    limit: int,
) -> dict[str, Any]:
    """呼び出し側パラメータにページング用クエリを重ねる。

    Args:
        config: 取得設定。
        params: 呼び出し側パラメータ。
        page: 1始まりのページ番号。
        limit: 1ページあたり件数。

    Returns:
        クエリパラメータ。
    """

    query: dict[str, Any] = dict(params) if params is not None else {}
    if config.page_param is not None:
        query[config.page_param] = page
    query[config.limit_param] = limit
    if config.offset_param is not None:
        query[config.offset_param] = (page - 1) * limit
    return query


def _coerce_total(value: Any) -> int | None:
    """総件数を非負整数へ変換する。

    Noneはキー欠落と同じく未判明として扱う。

    Raises:
        ValueError: 整数として解釈できない、または負の場合。
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"bool は総件数として扱えません: {value!r}")
    if isinstance(value, int):
        total = value
    elif isinstance(value, float) and value.is_integer():
        total = int(value)
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        total = int(value.strip())
    else:
        raise ValueError(f"総件数が整数ではありません: {value!r}")
    if total < 0:
        raise ValueError(f"総件数が負です: {total}")
    return total


def parse_page_payload(content: bytes, *, config: HttpFetchConfig) -> PageResponse[Any]:
    """JSON本文を PageResponse へ変換する。

    総件数キーが無い、または値がnullの場合は total_count=None のまま返す。
    値はあるが整数として解釈できない場合は error を持つ応答を返す。

    Args:
        content: レスポンス本文。
        config: 取得設定。

    Returns:
        解析結果。解析できない場合は error を持つ応答。
    """

    try:
        payload = json.loads(content)
    except (UnicodeDecodeError, ValueError) as exc:
        return PageResponse.failure(f"レスポンス本文をJSONとして解析できませんでした: {exc}")
    if not isinstance(payload, Mapping):
        return PageResponse.failure("レスポンス本文がJSONオブジェクトではありません。")

    items = payload.get(config.items_key)
    if not isinstance(items, list):
        return PageResponse.failure(
            f"レスポンスに結果配列 '{config.items_key}' がありません。"
        )
    try:
        total_count = _coerce_total(payload.get(config.total_key))
    except ValueError as exc:
        return PageResponse.failure(
            f"レスポンスの総件数 '{config.total_key}' が不正です: {exc}"
        )
    return PageResponse(items=items, total_count=total_count)


def error_for_status(status_code: int, *, request_url: str) -> PagingError | None:
    """HTTPステータスがエラーなら PagingError を返す。"""

    if status_code < 400:
        return None
    return PagingError(f"HTTP {status_code}: {request_url}")
