# ==============================
# Unit: Table Normalizer
# ==============================
from __future__ import annotations

import pytest

from table_to_image.errors import TableTooLargeError, UnsupportedFormatError
from table_to_image.normalizer import (
    TableShape,
    count_cells,
    detect_shape,
    normalize,
    validate_table_size,
)


def test_headers_rows_passes_through_unchanged() -> None:
    table = {"headers": ["A", "B"], "rows": [[1, 2], [3, 4]]}
    result = normalize(table)
    assert result.model_dump() == table
    assert detect_shape(table) is TableShape.HEADERS_ROWS


def test_headers_rows_is_not_checked_for_consistency() -> None:
    table = {"headers": ["A", "B", "C"], "rows": [[1], [2, 3, 4, 5]]}
    result = normalize(table)
    assert result.headers == ["A", "B", "C"]
    assert result.rows == [[1], [2, 3, 4, 5]]


def test_records_use_first_record_keys_in_order() -> None:
    result = normalize([{"x": 1, "y": "foo"}, {"x": 2, "y": "bar"}])
    assert result.headers == ["x", "y"]
    assert result.rows == [[1, "foo"], [2, "bar"]]


def test_records_missing_keys_become_none_and_extra_keys_are_dropped() -> None:
    result = normalize([{"b": 1, "a": 2}, {"a": 3, "z": 9}])
    assert result.headers == ["b", "a"]
    assert result.rows == [[1, 2], [None, 3]]


def test_records_first_element_decides_shape() -> None:
    table = [{"a": 1}, ["not", "a", "record"]]
    assert detect_shape(table) is TableShape.ARRAY_OF_OBJECTS
    assert normalize(table).rows == [[1], [None]]


def test_2d_array_splits_header_row() -> None:
    result = normalize([["H1", "H2"], [10, 20], [30, 40]])
    assert result.headers == ["H1", "H2"]
    assert result.rows == [[10, 20], [30, 40]]
    assert detect_shape([["H1"]]) is TableShape.ARRAY_2D


def test_2d_array_with_only_header_row_has_no_rows() -> None:
    result = normalize([["H1", "H2"]])
    assert result.headers == ["H1", "H2"]
    assert result.rows == []


@pytest.mark.parametrize(
    "table",
    [[], {}, None, 42, "a,b\n1,2", [1, 2, 3], [None, {"a": 1}], {"headers": ["A"]}],
)
def test_unsupported_shapes_raise(table) -> None:
    with pytest.raises(UnsupportedFormatError, match="Unsupported table format"):
        normalize(table)


def test_cell_count_for_headers_rows_includes_header_row() -> None:
    assert count_cells({"headers": ["A", "B"], "rows": [[1, 2], [3, 4]]}) == 6


def test_cell_count_for_lists_sums_element_sizes() -> None:
    assert count_cells([["a", "b"], [1, 2], [3]]) == 5
    assert count_cells([{"x": 1, "y": 2}, {"x": 3}]) == 3
    assert count_cells("not a table") == 0


def test_cell_count_for_list_of_strings_counts_characters() -> None:
    assert count_cells(["abc", "de", 7, None]) == 5


def test_size_guard_rejects_oversized_table() -> None:
    table = {"headers": ["A", "B"], "rows": [[i, i] for i in range(10)]}
    with pytest.raises(TableTooLargeError, match=r"max 20 cells") as exc_info:
        validate_table_size(table, 20)
    assert exc_info.value.cell_count == 22
    assert validate_table_size(table, 22) == 22


def test_empty_headers_rows_is_still_headers_rows_shape() -> None:
    table = {"headers": [], "rows": []}
    assert detect_shape(table) is TableShape.HEADERS_ROWS
    assert normalize(table).model_dump() == table
    assert count_cells(table) == 0
