"""
Table normalization: turn any supported table shape into {headers, rows}.

Supported shapes, checked in order (first match wins):
1. {"headers": [...], "rows": [[...], ...]}  -> passed through unchanged
2. [{"a": 1, "b": 2}, ...]                   -> headers from the FIRST record's keys
3. [["a", "b"], [1, 2], ...]                 -> first inner list is the header row

Detection only looks at the first element of a list. Mixed lists are not
rejected: the first element decides how every other element is read.
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Tuple

from .errors import TableTooLargeError, UnsupportedFormatError
from .schemas import CanonicalTable

logger = logging.getLogger(__name__)


class TableShape(str, Enum):
    HEADERS_ROWS = "headers_rows"
    ARRAY_OF_OBJECTS = "array_of_objects"
    ARRAY_2D = "2d_array"


# ------------------------------
# Shape predicates
# ------------------------------
def _is_headers_rows(table: Any) -> bool:
    return (
        isinstance(table, dict)
        and isinstance(table.get("headers"), list)
        and isinstance(table.get("rows"), list)
    )


def _is_array_of_objects(table: Any) -> bool:
    return isinstance(table, list) and len(table) > 0 and isinstance(table[0], dict)


def _is_array_2d(table: Any) -> bool:
    return isinstance(table, list) and len(table) > 0 and isinstance(table[0], list)


# ------------------------------
# Converters
# ------------------------------
def _from_headers_rows(table: dict) -> CanonicalTable:
    return CanonicalTable(headers=table["headers"], rows=table["rows"])


def _from_array_of_objects(table: list) -> CanonicalTable:
    headers = list(table[0].keys())
    rows = []
    for record in table:
        # non-dict elements after the first have no keys to project
        lookup = record if isinstance(record, dict) else {}
        rows.append([lookup.get(h) for h in headers])
    return CanonicalTable(headers=headers, rows=rows)


def _from_array_2d(table: list) -> CanonicalTable:
    return CanonicalTable(headers=table[0], rows=table[1:])


SHAPES: List[Tuple[TableShape, Callable[[Any], bool], Callable[[Any], CanonicalTable]]] = [
    (TableShape.HEADERS_ROWS, _is_headers_rows, _from_headers_rows),
    (TableShape.ARRAY_OF_OBJECTS, _is_array_of_objects, _from_array_of_objects),
    (TableShape.ARRAY_2D, _is_array_2d, _from_array_2d),
]


def detect_shape(table: Any) -> TableShape:
    for shape, matches, _ in SHAPES:
        if matches(table):
            return shape
    raise UnsupportedFormatError()


def normalize(table: Any) -> CanonicalTable:
    """
    Convert table data in one of the supported shapes into a CanonicalTable.
    Raises UnsupportedFormatError when no shape matches.
    """
    for shape, matches, convert in SHAPES:
        if matches(table):
            normalized = convert(table)
            logger.debug(
                "Normalized %s table: %d headers, %d rows",
                shape.value, len(normalized.headers), len(normalized.rows),
            )
            return normalized
    logger.warning("Rejected table with unsupported format: %s", type(table).__name__)
    raise UnsupportedFormatError()


# ------------------------------
# Size guard
# ------------------------------
def count_cells(table: Any) -> int:
    """
    Cell count used by the size guard, computed on the raw (un-normalized) input.
    headers/rows objects count the header row too: len(headers) * (len(rows) + 1).
    Lists sum the length of each list element, the key count of each record,
    or the character count of each string; other elements count 0.
    """
    if _is_headers_rows(table):
        return len(table["headers"]) * (len(table["rows"]) + 1)
    if isinstance(table, list):
        return sum(len(row) if isinstance(row, (list, dict, str)) else 0 for row in table)
    return 0


def validate_table_size(table: Any, max_cells: int) -> int:
    cell_count = count_cells(table)
    if cell_count > max_cells:
        logger.warning("Rejected table with %d cells (max %d)", cell_count, max_cells)
        raise TableTooLargeError(cell_count, max_cells)
    return cell_count
