"""設定値定義。"""

from __future__ import annotations

from dataclasses import dataclass

FIRST_PAGE = 1
UNKNOWN_TOTAL_PAGES = 0
DEFAULT_LOAD_OFFSET = 1

DEFAULT_USER_AGENT = "pagingmediator/0.1.0"


@dataclass(slots=True)
class MediatorConfig:
    """メディエータ設定。

    Attributes:
        load_offset: should_load_more() の既定オフセット。
    """

    load_offset: int = DEFAULT_LOAD_OFFSET


@dataclass(slots=True)
class HttpFetchConfig:
    """HTTP取得関数の設定。

    Attributes:
        endpoint: 取得先パス（base_url からの相対、または絶対URL）。
        page_param: ページ番号のクエリ名。
        limit_param: 件数上限のクエリ名。
        offset_param: 指定時は (page - 1) * limit をこの名前で送る。
        items_key: 応答JSON内の結果配列キー。
        total_key: 応答JSON内の総件数キー。
        user_agent: User-Agent。
    """

    endpoint: str = ""
    page_param: str | None = "page"
    limit_param: str = "limit"
    offset_param: str | None = None
    items_key: str = "results"
    total_key: str = "totalCount"
    user_agent: str = DEFAULT_USER_AGENT
