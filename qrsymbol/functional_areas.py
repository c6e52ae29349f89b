# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

Draws the function patterns of a symbol according to ISO/IEC 18004 and keeps
the parallel function-module map that tells data placement and masking which
cells never carry payload data.

Grids are lists of rows indexed as grid[y][x] (y = row, x = column) and
True means a dark module.

Functions:
    build_function_patterns: Unmasked matrix with every function pattern drawn
    draw_format_bits: Write the 15-bit format information for a mask
    calculate_format_bits: BCH(15,5) format word
    calculate_version_bits: BCH(18,6) version word
    build_function_mask: Function and separator masks for renderers
    build_zone_map: Per-module zone names for renderers
"""

from typing import List, Optional, Tuple

from .versions import ECC_FORMAT_BITS, compute_alignment_centers, normalize_ecc, symbol_size

Grid = List[List[bool]]

FORMAT_GENERATOR = 0x537
FORMAT_XOR_MASK = 0x5412
VERSION_GENERATOR = 0x1F25


def new_grid(size: int) -> Grid:
    return [[False] * size for _ in range(size)]


def _set_function(modules: Grid, is_function: Grid, x: int, y: int, dark: bool) -> None:
    modules[y][x] = dark
    is_function[y][x] = True


def draw_finder_pattern(modules: Grid, is_function: Grid, x: int, y: int) -> None:
    """
    Draw a 7x7 finder pattern with its top-left corner at (x, y).

    Pattern: 1111111
             1000001
             1011101
             1011101
             1011101
             1000001
             1111111

    The one-module light separator around it is marked as well, clipped to
    the symbol.
    """
    size = len(modules)
    for dy in range(-1, 8):
        for dx in range(-1, 8):
            px, py = x + dx, y + dy
            if not (0 <= px < size and 0 <= py < size):
                continue
            if 0 <= dx <= 6 and 0 <= dy <= 6:
                outer = dx in (0, 6) or dy in (0, 6)
                inner = 2 <= dx <= 4 and 2 <= dy <= 4
                _set_function(modules, is_function, px, py, outer or inner)
            else:
                _set_function(modules, is_function, px, py, False)


def draw_timing_patterns(modules: Grid, is_function: Grid) -> None:
    """Alternate dark/light along row 6 and column 6, skipping claimed cells."""
    size = len(modules)
    for i in range(size):
        if not is_function[6][i]:
            _set_function(modules, is_function, i, 6, i % 2 == 0)
        if not is_function[i][6]:
            _set_function(modules, is_function, 6, i, i % 2 == 0)


def draw_alignment_pattern(modules: Grid, is_function: Grid, cx: int, cy: int) -> None:
    """5x5 dark ring, light ring, dark center around (cx, cy)."""
    for dy in range(-2, 3):
        for dx in range(-2, 3):
            _set_function(modules, is_function, cx + dx, cy + dy, max(abs(dx), abs(dy)) != 1)


def draw_alignment_patterns(modules: Grid, is_function: Grid, version: int) -> None:
    centers = compute_alignment_centers(version)
    last = len(centers) - 1
    for i, cy in enumerate(centers):
        for j, cx in enumerate(centers):
            # The three combinations that fall on finder patterns
            if (i == 0 and j == 0) or (i == 0 and j == last) or (i == last and j == 0):
                continue
            draw_alignment_pattern(modules, is_function, cx, cy)


def reserve_format_info(is_function: Grid) -> None:
    """Mark the two 15-bit format information areas as function modules."""
    size = len(is_function)
    for i in range(9):
        if i != 6:
            is_function[8][i] = True
            is_function[i][8] = True
    for i in range(8):
        is_function[8][size - 1 - i] = True
        is_function[size - 1 - i][8] = True


def draw_dark_module(modules: Grid, is_function: Grid) -> None:
    size = len(modules)
    _set_function(modules, is_function, 8, size - 8, True)


def calculate_format_bits(ecc: str, mask: int) -> int:
    """
    Compute the 15-bit format word: 2 ECC bits, 3 mask bits, 10 BCH bits,
    XORed with 0x5412.

    Example:
        >>> bin(calculate_format_bits('L', 4))
        '0b110011000101111'
    """
    data = ECC_FORMAT_BITS[normalize_ecc(ecc)] << 3 | mask
    rem = data
    for _ in range(10):
        rem = (rem << 1) ^ ((rem >> 9) * FORMAT_GENERATOR)
    return (data << 10 | rem) ^ FORMAT_XOR_MASK


def calculate_version_bits(version: int) -> int:
    """18-bit version word: 6 version bits followed by 12 BCH bits."""
    rem = version
    for _ in range(12):
        rem = (rem << 1) ^ ((rem >> 11) * VERSION_GENERATOR)
    return version << 12 | rem


def draw_format_bits(modules: Grid, is_function: Grid, ecc: str, mask: int) -> None:
    """
    Write both copies of the format information for the given mask.

    Bit 0 is the least significant bit of the format word.
    """
    size = len(modules)
    bits = calculate_format_bits(ecc, mask)

    def bit(i: int) -> bool:
        return (bits >> i) & 1 != 0

    # Copy around the top-left finder
    for i in range(6):
        _set_function(modules, is_function, 8, i, bit(i))
    _set_function(modules, is_function, 8, 7, bit(6))
    _set_function(modules, is_function, 8, 8, bit(7))
    _set_function(modules, is_function, 7, 8, bit(8))
    for i in range(9, 15):
        _set_function(modules, is_function, 14 - i, 8, bit(i))

    # Copy split between top-right and bottom-left finders
    for i in range(8):
        _set_function(modules, is_function, size - 1 - i, 8, bit(i))
    for i in range(8, 15):
        _set_function(modules, is_function, 8, size - 15 + i, bit(i))

    draw_dark_module(modules, is_function)


def draw_version_info(modules: Grid, is_function: Grid, version: int) -> None:
    """Two 6x3 blocks of version information, versions 7 and up."""
    if version < 7:
        return
    size = len(modules)
    bits = calculate_version_bits(version)
    for i in range(18):
        dark = (bits >> i) & 1 != 0
        a = size - 11 + i % 3
        b = i // 3
        _set_function(modules, is_function, a, b, dark)
        _set_function(modules, is_function, b, a, dark)


def build_function_patterns(version: int) -> Tuple[Grid, Grid]:
    """
    Build the unmasked matrix of a version with every function pattern drawn.

    Format information is only reserved here; it depends on the mask and is
    written by draw_format_bits.

    Returns:
        Tuple[Grid, Grid]: (modules, is_function)
    """
    size = symbol_size(version)
    modules = new_grid(size)
    is_function = new_grid(size)

    draw_finder_pattern(modules, is_function, 0, 0)
    draw_finder_pattern(modules, is_function, size - 7, 0)
    draw_finder_pattern(modules, is_function, 0, size - 7)
    draw_timing_patterns(modules, is_function)
    draw_alignment_patterns(modules, is_function, version)
    reserve_format_info(is_function)
    draw_version_info(modules, is_function, version)
    draw_dark_module(modules, is_function)
    return modules, is_function


def build_function_mask(version: int) -> Tuple[Grid, Grid]:
    """
    Build masks identifying functional and separator areas.

    Returns:
        Tuple[Grid, Grid]: (func_mask, sep_mask)
            - func_mask[r][c] = True if module (r, c) is a function module
            - sep_mask[r][c] = True if module (r, c) is a finder separator
    """
    _, func_mask = build_function_patterns(version)
    size = len(func_mask)
    sep_mask = new_grid(size)
    for (r0, c0) in ((0, 0), (0, size - 7), (size - 7, 0)):
        for r in range(r0 - 1, r0 + 8):
            for c in range(c0 - 1, c0 + 8):
                if 0 <= r < size and 0 <= c < size:
                    if r < r0 or r > r0 + 6 or c < c0 or c > c0 + 6:
                        sep_mask[r][c] = True
    return func_mask, sep_mask


def build_zone_map(version: int) -> List[List[Optional[str]]]:
    """
    Name the function zone of every module, None for data/ECC modules.

    Zones: 'finder', 'separator', 'timing', 'alignment', 'format',
    'version', 'dark'.
    """
    size = symbol_size(version)
    _, sep_mask = build_function_mask(version)
    zones: List[List[Optional[str]]] = [[None] * size for _ in range(size)]

    for r in range(size):
        for c in range(size):
            if sep_mask[r][c]:
                zones[r][c] = 'separator'
            elif (r < 7 and c < 7) or (r < 7 and c >= size - 7) or (r >= size - 7 and c < 7):
                zones[r][c] = 'finder'

    for i in range(8, size - 8):
        zones[6][i] = 'timing'
        zones[i][6] = 'timing'

    # Alignment patterns sit on top of the timing row/column where they cross
    centers = compute_alignment_centers(version)
    last = len(centers) - 1
    for i, cy in enumerate(centers):
        for j, cx in enumerate(centers):
            if (i == 0 and j == 0) or (i == 0 and j == last) or (i == last and j == 0):
                continue
            for r in range(cy - 2, cy + 3):
                for c in range(cx - 2, cx + 3):
                    zones[r][c] = 'alignment'

    for i in range(9):
        if i != 6:
            zones[8][i] = 'format'
            zones[i][8] = 'format'
    for i in range(8):
        zones[8][size - 1 - i] = 'format'
        zones[size - 1 - i][8] = 'format'

    if version >= 7:
        for i in range(18):
            a, b = size - 11 + i % 3, i // 3
            zones[b][a] = 'version'
            zones[a][b] = 'version'

    zones[size - 8][8] = 'dark'
    return zones
