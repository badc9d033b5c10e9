"""pagingmediator 公開API。"""

from pagingmediator.config import HttpFetchConfig, MediatorConfig
from pagingmediator.errors import (
    PagingError,
    PagingMediatorError,
    PagingValidationError,
)
from pagingmediator.fetchers import AsyncHttpPageFetcher, HttpPageFetcher
from pagingmediator.mediator import PagingMediator, SyncPagingMediator
from pagingmediator.sections import (
    SectionedListSource,
    StaticSectionedList,
    flatten_index_path,
    should_load_more_at,
)
from pagingmediator.types import FlatPosition, PageResponse, PagingResult

__all__ = [
    "AsyncHttpPageFetcher",
    "FlatPosition",
    "HttpFetchConfig",
    "HttpPageFetcher",
    "MediatorConfig",
    "PageResponse",
    "PagingError",
    "PagingMediator",
    "PagingMediatorError",
    "PagingResult",
    "PagingValidationError",
    "SectionedListSource",
    "StaticSectionedList",
    "SyncPagingMediator",
    "flatten_index_path",
    "should_load_more_at",
]
