# -*- coding: utf-8 -*-
"""
QR Code Mask Penalty Evaluation Module

This module implements the mask pattern evaluation rules of ISO/IEC 18004:2015
section 8.8.2. Every candidate mask is scored with four criteria (N1-N4) and
the mask with the lowest total penalty is kept.

Functions:
    penalty_N1: Evaluate adjacent modules in runs (Rule N1)
    penalty_N2: Evaluate 2x2 blocks of same color (Rule N2)
    penalty_N3: Evaluate finder-like patterns (Rule N3)
    penalty_N4: Evaluate dark/light module ratio (Rule N4)
    compute_mask_penalty: Calculate total penalty score
"""

from typing import List, Sequence

N1_BASE = 3
N2_BLOCK = 3
N3_PATTERN = 40
N4_STEP = 10

_FINDER_LIKE = (True, False, True, True, True, False, True)
_LIGHT_MARGIN = (False,) * 4


def _run_penalty(line: Sequence[bool]) -> int:
    score = 0
    run = 1
    for i in range(1, len(line)):
        if line[i] == line[i - 1]:
            run += 1
        else:
            if run >= 5:
                score += N1_BASE + (run - 5)
            run = 1
    if run >= 5:
        score += N1_BASE + (run - 5)
    return score


def penalty_N1(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for adjacent modules in runs (Rule N1).

    Runs of 5 or more modules of the same color, horizontal and vertical,
    score 3 + (run_length - 5) each.

    Example:
        >>> penalty_N1([[True] * 5])
        3
    """
    score = sum(_run_penalty(row) for row in rows)
    score += sum(_run_penalty(col) for col in zip(*rows))
    return score


def penalty_N2(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for 2x2 blocks of same color (Rule N2).

    Each 2x2 block whose four modules share a color adds 3; overlapping
    blocks are counted separately.

    Example:
        >>> penalty_N2([[True, True], [True, True]])
        3
    """
    score = 0
    for r in range(len(rows) - 1):
        upper, lower = rows[r], rows[r + 1]
        for c in range(len(upper) - 1):
            value = upper[c]
            if upper[c + 1] == value and lower[c] == value and lower[c + 1] == value:
                score += N2_BLOCK
    return score


def _count_finder_like(seq: Sequence[bool]) -> int:
    """
    Count 1:1:3:1:1 patterns with four light modules on one side.

    Each 11-module window (pattern + margin, or margin + pattern) that lies
    fully inside the line counts once, so a pattern with light margins on
    both sides counts twice.
    """
    seq = tuple(seq)
    count = 0
    for i in range(len(seq) - 10):
        window = seq[i:i + 11]
        if window == _FINDER_LIKE + _LIGHT_MARGIN:
            count += 1
        if window == _LIGHT_MARGIN + _FINDER_LIKE:
            count += 1
    return count


def penalty_N3(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for finder-like patterns (Rule N3).

    Dark-light-dark-dark-dark-light-dark sequences preceded or followed by four
    light modules, in rows and columns, add 40 each.

    Example:
        >>> penalty_N3([[True, False, True, True, True, False, True,
        ...              False, False, False, False]])
        40
    """
    score = sum(N3_PATTERN * _count_finder_like(row) for row in rows)
    score += sum(N3_PATTERN * _count_finder_like(col) for col in zip(*rows))
    return score


def penalty_N4(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for dark/light module ratio (Rule N4).

    The dark percentage is rounded to the nearest integer, then
    10 * floor(abs(percent - 50) / 5) is added.

    Example:
        >>> penalty_N4([[True, True, True, False]])  # 75% dark
        50
    """
    total = sum(len(row) for row in rows)
    dark = sum(sum(1 for v in row if v) for row in rows)
    percent = (dark * 100 + total // 2) // total
    return N4_STEP * (abs(percent - 50) // 5)


def compute_mask_penalty(matrix_bool: List[List[bool]]) -> int:
    """
    Calculate total mask penalty score for a QR code matrix.

    Args:
        matrix_bool (List[List[bool]]): QR matrix (True=dark, False=light)

    Returns:
        int: N1 + N2 + N3 + N4 (lower is better)
    """
    rows = [[bool(v) for v in row] for row in matrix_bool]
    return penalty_N1(rows) + penalty_N2(rows) + penalty_N3(rows) + penalty_N4(rows)
