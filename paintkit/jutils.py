"""Small arithmetic and copy helpers used by the image decoder."""

from __future__ import annotations

from typing import MutableSequence, Sequence

DCTSIZE2 = 64

# Natural-order position of each zigzag-ordered coefficient, with 16 extra
# entries of 63 so that a corrupt run length cannot index past the table.
NATURAL_ORDER: tuple[int, ...] = (
    0, 1, 8, 16, 9, 2, 3, 10,
    17, 24, 32, 25, 18, 11, 4, 5,
    12, 19, 26, 33, 40, 48, 41, 34,
    27, 20, 13, 6, 7, 14, 21, 28,
    35, 42, 49, 56, 57, 50, 43, 36,
    29, 22, 15, 23, 30, 37, 44, 51,
    58, 59, 52, 45, 38, 31, 39, 46,
    53, 60, 61, 54, 47, 55, 62, 63,
    63, 63, 63, 63, 63, 63, 63, 63,
    63, 63, 63, 63, 63, 63, 63, 63,
)


def _check_operands(a: int, b: int) -> None:
    if a < 0:
        raise ValueError(f"a must be non-negative, got {a}")
    if b <= 0:
        raise ValueError(f"b must be positive, got {b}")


def div_round_up(a: int, b: int) -> int:
    """Return ``ceil(a / b)`` for ``a >= 0`` and ``b > 0``."""
    _check_operands(a, b)
    return (a + b - 1) // b


def round_up(a: int, b: int) -> int:
    """Return ``a`` rounded up to the next multiple of ``b``."""
    _check_operands(a, b)
    a += b - 1
    return a - a % b


def copy_sample_rows(
    input_array: Sequence[MutableSequence[int]],
    source_row: int,
    output_array: Sequence[MutableSequence[int]],
    dest_row: int,
    num_rows: int,
    num_cols: int,
) -> None:
    """Copy ``num_cols`` samples of ``num_rows`` rows between row arrays.

    Rows are copied one after another, so overlapping ranges within one array
    duplicate rows.
    """
    if source_row + num_rows > len(input_array) or dest_row + num_rows > len(output_array):
        raise IndexError("row range exceeds array bounds")
    sources = input_array[source_row:source_row + num_rows]
    targets = output_array[dest_row:dest_row + num_rows]
    for src, dst in zip(sources, targets):
        if len(src) < num_cols or len(dst) < num_cols:
            raise ValueError(f"rows must hold at least {num_cols} samples")
        dst[:num_cols] = src[:num_cols]


def copy_block_row(
    input_row: Sequence[Sequence[int]],
    output_row: Sequence[MutableSequence[int]],
    num_blocks: int,
) -> None:
    """Copy ``num_blocks`` coefficient blocks of 64 values each."""
    if num_blocks > len(input_row) or num_blocks > len(output_row):
        raise IndexError("block count exceeds row length")
    for src, dst in zip(input_row[:num_blocks], output_row[:num_blocks]):
        if len(src) < DCTSIZE2 or len(dst) < DCTSIZE2:
            raise ValueError(f"blocks must hold {DCTSIZE2} coefficients")
        dst[:DCTSIZE2] = src[:DCTSIZE2]