"""httpx によるページ取得関数。

いずれも PagingMediator の fetch_fn としてそのまま渡せる。通信失敗や
HTTPエラーは例外にせず PageResponse.error で返す。再試行は行わない。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from pagingmediator.config import HttpFetchConfig
from pagingmediator.http import (
    build_page_query,
    build_request_headers,
    error_for_status,
    parse_page_payload,
)
from pagingmediator.types import PageResponse


def _response_to_page(response: httpx.Response, *, config: HttpFetchConfig) -> PageResponse[Any]:
    error = error_for_status(response.status_code, request_url=str(response.request.url))
    if error is not None:
        return PageResponse(error=error)
    return parse_page_payload(response.content, config=config)


class HttpPageFetcher:
    """同期1ページ取得関数。"""

    def __init__(self, *, client: httpx.Client, config: HttpFetchConfig | None = None) -> None:
        self._client = client
        self._config = config or HttpFetchConfig()

    def __call__(self, params: Mapping[str, Any] | None, page: int, limit: int) -> PageResponse[Any]:
        """1ページ分を取得する。"""

        query = build_page_query(config=self._config, params=params, page=page, limit=limit)
        headers = dict(build_request_headers(self._config.user_agent))
        try:
            response = self._client.get(self._config.endpoint, params=query, headers=headers)
        except httpx.HTTPError as exc:
            return PageResponse.failure(f"通信に失敗しました: {type(exc).__name__}: {exc}")
        return _response_to_page(response, config=self._config)


class AsyncHttpPageFetcher:
    """非同期1ページ取得関数。"""

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        config: HttpFetchConfig | None = None,
    ) -> None:
        self._client = client
        self._config = config or HttpFetchConfig()

    async def __call__(
        self,
        params: Mapping[str, Any] | None,
        page: int,
        limit: int,
    ) -> PageResponse[Any]:
        """1ページ分を取得する。"""

        query = build_page_query(config=self._config, params=params, page=page, limit=limit)
        headers = dict(build_request_headers(self._config.user_agent))
        try:
            response = await self._client.get(self._config.endpoint, params=query, headers=headers)
        except httpx.HTTPError as exc:
            return PageResponse.failure(f"通信に失敗しました: {type(exc).__name__}: {exc}")
        return _response_to_page(response, config=self._config)
