"""validation モジュールのテスト。"""

from __future__ import annotations

import pytest

from pagingmediator.errors import PagingError, PagingValidationError
from pagingmediator.types import PageResponse
from pagingmediator.validation import (
    coerce_page_response,
    normalize_load_offset,
    validate_page_size,
    validate_render_position,
)


def test_validate_page_size() -> None:
    assert validate_page_size(1) == 1
    with pytest.raises(PagingValidationError) as exc_info:
        validate_page_size(0)
    assert exc_info.value.validation_code == "non_positive_page_size"
    assert exc_info.value.origin == "client_validation"


def test_normalize_load_offset_defaults_and_rejects_negative() -> None:
    assert normalize_load_offset(None, default=1) == 1
    assert normalize_load_offset(0, default=1) == 0
    with pytest.raises(PagingValidationError):
        normalize_load_offset(-2, default=1)


def test_validate_render_position_rejects_negative_total() -> None:
    validate_render_position(0, 0)
    with pytest.raises(PagingValidationError):
        validate_render_position(1, -1)
    with pytest.raises(PagingValidationError):
        validate_render_position(1.0, 3)  # type: ignore[arg-type]


def test_coerce_page_response_passes_through_and_converts_tuples() -> None:
    response = PageResponse.success([1], 1)
    assert coerce_page_response(response) is response

    converted = coerce_page_response((None, None, "timeout"))
    assert isinstance(converted.error, PagingError)
    assert converted.error.message == "timeout"

    from_generator = coerce_page_response(((x for x in range(2)), 2, None))
    assert from_generator.items == [0, 1]


def test_coerce_page_response_rejects_foreign_error_and_shapes() -> None:
    with pytest.raises(PagingValidationError):
        coerce_page_response((None, None, ValueError("x")))
    with pytest.raises(PagingValidationError):
        coerce_page_response([1, 2, 3])
