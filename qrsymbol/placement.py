# -*- coding: utf-8 -*-
"""
Data Placement Module

Places the final codeword bit stream into the matrix with the standard
zigzag traversal: two-column strips from the right edge, alternating upward
and downward, skipping the vertical timing column and every function module.
"""

from typing import Iterator, List, Sequence, Tuple

Grid = List[List[bool]]


def iter_data_coords(is_function: Grid) -> Iterator[Tuple[int, int]]:
    """
    Yield (row, col) of every non-function module in placement order.

    Example:
        >>> from qrsymbol.functional_areas import build_function_patterns
        >>> _, is_function = build_function_patterns(1)
        >>> next(iter_data_coords(is_function))
        (20, 20)
    """
    size = len(is_function)
    upward = True
    col = size - 1

    while col > 0:
        if col == 6:  # Skip timing pattern column
            col -= 1

        for i in range(size):
            r = (size - 1 - i) if upward else i
            for c in (col, col - 1):
                if not is_function[r][c]:
                    yield r, c

        upward = not upward
        col -= 2


def place_data_bits(modules: Grid, is_function: Grid, bits: Sequence[int]) -> int:
    """
    Write bits into the free modules of the matrix.

    Bits beyond the number of free modules are not consumed; free modules
    left over once the bits run out are set light.

    Returns:
        int: Number of free modules in the matrix
    """
    count = 0
    for count, (r, c) in enumerate(iter_data_coords(is_function), start=1):
        modules[r][c] = bool(bits[count - 1]) if count <= len(bits) else False
    return count
