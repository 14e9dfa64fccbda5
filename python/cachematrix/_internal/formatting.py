from __future__ import annotations

from typing import Any

import numpy as np


_EDGE_ITEMS: int = 4


def configure(*, edge_items: int = 4) -> None:
    global _EDGE_ITEMS
    edge_items = int(edge_items)
    if edge_items < 1:
        raise ValueError("edge_items must be at least 1")
    _EDGE_ITEMS = edge_items


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= _EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(_EDGE_ITEMS))
    tail = list(range(length - _EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_row(
    array: np.ndarray,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries = [_format_value(array[row_index, col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(array[row_index, col]) for col in col_tail)
    return " ".join(entries)


def array_lines(array: np.ndarray) -> list[str]:
    rows, cols = array.shape
    if rows == 0 or cols == 0:
        return ["[]"]

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = ["["]
    for row_index in row_head:
        lines.append(f" [{_format_row(array, row_index, col_head, col_tail, cols_truncated)}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        lines.append(f" [{_format_row(array, row_index, col_head, col_tail, cols_truncated)}]")
    lines.append("]")
    return lines


def handle_str(handle: Any) -> str:
    value = handle.get_value()
    rows, cols = value.shape
    info = [f"shape=({rows}, {cols})", f"cached_inverse={handle.has_cached_inverse()}"]
    header = f"{handle.__class__.__name__}({', '.join(info)})"
    return "\n".join([header, *array_lines(value)])
