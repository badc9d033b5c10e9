"""セクション/行アドレスを平坦な位置へ変換するアダプタ。

メディエータ本体はリストの件数を参照しない。セクション分けされた
リストを使う呼び出し側は、ここで通し順位と総数を求めてから
should_load_more() を呼ぶ。
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from pagingmediator.errors import PagingValidationError
from pagingmediator.mediator import PagingMediator
from pagingmediator.types import FlatPosition


@runtime_checkable
class SectionedListSource(Protocol):
    """セクション数と各セクションの行数を返すリスト。"""

    def number_of_sections(self) -> int: ...

    def number_of_rows(self, section: int) -> int: ...


class StaticSectionedList:
    """行数の列から作る SectionedListSource 実装。"""

    def __init__(self, rows_per_section: Sequence[int]) -> None:
        self._rows = list(rows_per_section)

    def number_of_sections(self) -> int:
        return len(self._rows)

    def number_of_rows(self, section: int) -> int:
        return self._rows[section]


def count_rendered_items(source: SectionedListSource) -> int:
    """全セクション合計行数を返す。"""

    return sum(source.number_of_rows(i) for i in range(source.number_of_sections()))


def flatten_index_path(source: SectionedListSource, *, section: int, row: int) -> FlatPosition:
    """(section, row) を1始まりの通し順位と総数へ変換する。

    Args:
        source: 件数の取得元。
        section: 0始まりのセクション番号。
        row: セクション内の0始まりの行番号。

    Returns:
        平坦化済み位置。

    Raises:
        PagingValidationError: section/row が範囲外の場合。
    """

    sections = source.number_of_sections()
    if section < 0 or section >= sections:
        raise PagingValidationError(
            f"section が範囲外です: section={section}, sections={sections}",
            validation_code="section_out_of_range",
        )
    if row < 0 or row >= source.number_of_rows(section):
        raise PagingValidationError(
            f"row が範囲外です: section={section}, row={row}",
            validation_code="row_out_of_range",
        )

    index = 1 + sum(source.number_of_rows(i) for i in range(section)) + row
    return FlatPosition(index=index, total=count_rendered_items(source))


def should_load_more_at(
    mediator: PagingMediator[Any, Any],
    source: SectionedListSource,
    *,
    section: int,
    row: int,
    load_offset: int | None = None,
) -> bool:
    """セクション/行アドレスで should_load_more() を判定する。"""

    position = flatten_index_path(source, section=section, row=row)
    return mediator.should_load_more(position.index, position.total, load_offset)
