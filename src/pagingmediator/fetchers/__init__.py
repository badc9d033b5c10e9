"""取得関数モジュール。"""

from pagingmediator.fetchers.http_fetcher import AsyncHttpPageFetcher, HttpPageFetcher

__all__ = [
    "AsyncHttpPageFetcher",
    "HttpPageFetcher",
]
