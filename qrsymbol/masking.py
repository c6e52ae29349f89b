# -*- coding: utf-8 -*-
"""
Data Masking Module

The eight standard data masks, their application to the non-function
modules, and the penalty-driven choice of the best mask.

Functions:
    mask_bit: Whether a mask flips the module at (x, y)
    apply_mask: XOR a mask into every non-function module
    evaluate_masks: Penalty score of every mask for one unmasked matrix
    choose_best_mask: Masked matrix with the lowest penalty
"""

import logging
from enum import IntEnum
from typing import Dict, List, Tuple

from .exceptions import InvalidArgument
from .functional_areas import draw_format_bits
from .penalties import compute_mask_penalty

logger = logging.getLogger(__name__)

Grid = List[List[bool]]


class MaskPattern(IntEnum):
    """Mask pattern references 000-111; conditions use x = column, y = row."""
    CHECKERBOARD = 0    # (x + y) mod 2 == 0
    HORIZONTAL = 1      # y mod 2 == 0
    VERTICAL = 2        # x mod 3 == 0
    DIAGONAL = 3        # (x + y) mod 3 == 0
    BLOCKS = 4          # (y div 2 + x div 3) mod 2 == 0
    PRODUCT = 5         # (xy) mod 2 + (xy) mod 3 == 0
    PRODUCT_PARITY = 6  # ((xy) mod 2 + (xy) mod 3) mod 2 == 0
    MIXED_PARITY = 7    # ((x + y) mod 2 + (xy) mod 3) mod 2 == 0


def normalize_mask(mask) -> MaskPattern:
    if not isinstance(mask, int) or isinstance(mask, bool):
        raise InvalidArgument(f"Mask must be an integer 0..7, got {mask!r}")
    try:
        return MaskPattern(mask)
    except ValueError:
        raise InvalidArgument(f"Mask must be 0..7, got {mask!r}") from None


def mask_bit(mask: MaskPattern, x: int, y: int) -> bool:
    """Return True if the given mask inverts the module at column x, row y."""
    if mask == MaskPattern.CHECKERBOARD:
        return (x + y) % 2 == 0
    elif mask == MaskPattern.HORIZONTAL:
        return y % 2 == 0
    elif mask == MaskPattern.VERTICAL:
        return x % 3 == 0
    elif mask == MaskPattern.DIAGONAL:
        return (x + y) % 3 == 0
    elif mask == MaskPattern.BLOCKS:
        return (y // 2 + x // 3) % 2 == 0
    elif mask == MaskPattern.PRODUCT:
        return (x * y) % 2 + (x * y) % 3 == 0
    elif mask == MaskPattern.PRODUCT_PARITY:
        return ((x * y) % 2 + (x * y) % 3) % 2 == 0
    elif mask == MaskPattern.MIXED_PARITY:
        return ((x + y) % 2 + (x * y) % 3) % 2 == 0
    raise InvalidArgument(f"Unknown mask pattern {mask!r}")


def apply_mask(modules: Grid, is_function: Grid, mask: int) -> None:
    """Invert, in place, every non-function module selected by the mask."""
    pattern = normalize_mask(mask)
    size = len(modules)
    for y in range(size):
        row = modules[y]
        func_row = is_function[y]
        for x in range(size):
            if not func_row[x] and mask_bit(pattern, x, y):
                row[x] = not row[x]


def masked_copy(modules: Grid, is_function: Grid, ecc: str, mask: int) -> Grid:
    """Masked copy of the matrix with the mask's format bits drawn."""
    candidate = [list(row) for row in modules]
    function_copy = [list(row) for row in is_function]
    apply_mask(candidate, function_copy, mask)
    draw_format_bits(candidate, function_copy, ecc, mask)
    return candidate


def evaluate_masks(modules: Grid, is_function: Grid, ecc: str) -> Dict[int, int]:
    """Penalty score of each of the eight masks, keyed by mask number."""
    return {
        int(mask): compute_mask_penalty(masked_copy(modules, is_function, ecc, mask))
        for mask in MaskPattern
    }


def choose_best_mask(modules: Grid, is_function: Grid, ecc: str) -> Tuple[int, Grid, int]:
    """
    Apply every mask to a copy of the unmasked matrix and keep the best.

    Ties keep the lowest-numbered mask.

    Returns:
        Tuple[int, Grid, int]: (mask, masked_modules, penalty)
    """
    best_mask = None
    best_modules = None
    best_penalty = None

    for mask in MaskPattern:
        candidate = masked_copy(modules, is_function, ecc, mask)
        penalty = compute_mask_penalty(candidate)
        logger.debug("Mask %d penalty %d", mask, penalty)
        if best_penalty is None or penalty < best_penalty:
            best_mask, best_modules, best_penalty = int(mask), candidate, penalty

    return best_mask, best_modules, best_penalty
