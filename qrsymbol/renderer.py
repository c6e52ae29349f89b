# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

Turns a finished symbol into something a person or a scanner can look at:
console text, a black/white PNG, and PNG/SVG images colored by zone
(finder, timing, alignment, format, version, data, ECC, remainder) to show the
structure of the symbol. The quiet zone is added here; symbols never carry it.

Functions:
    render_text: Console rendering, two characters per module
    render_png: Black/white PNG bytes
    render_colored_png_from_matrix: Zone-colored PNG (base64) with metrics
    render_colored_svg_from_matrix: Zone-colored SVG
"""

import base64
from io import BytesIO
from typing import Any, Dict, List, Optional, Tuple

from PIL import Image, ImageDraw

from .functional_areas import build_function_patterns, build_zone_map
from .placement import iter_data_coords
from .versions import get_version_parameters

# Color palette for QR code zone visualization
PALETTE = {
    'background': (255, 255, 255),    # White background
    'finder': (128, 0, 128),          # Purple - Finder patterns (3 corners)
    'separator': (230, 230, 230),     # Light gray - Visual separators
    'timing': (255, 165, 0),          # Orange - Timing patterns (row/col 6)
    'alignment': (0, 128, 128),       # Teal - Alignment patterns
    'format': (255, 0, 0),            # Red - Format information bits
    'dark': (255, 0, 0),              # Red - Fixed dark module
    'version': (180, 0, 0),           # Dark red - Version information (v>=7)
    'data': (35, 35, 35),             # Dark gray - Data payload
    'ecc': (20, 90, 160),             # Blue - Error correction codes
    'remainder': (200, 200, 200),     # Light gray - Remainder bits (no codeword)
}

CONSOLE_QUIET_ZONE = 2


def _check_geometry(border: int, scale: int = 1) -> None:
    if border < 0:
        raise ValueError(f"Border must not be negative, got {border}")
    if scale < 1:
        raise ValueError(f"Scale must be at least 1, got {scale}")


def render_text(symbol, border: int = CONSOLE_QUIET_ZONE, dark: str = '██',
                light: str = '  ') -> str:
    """
    Render the symbol as console text with a light quiet zone.

    Each module takes two characters so the symbol stays roughly square in
    a terminal.
    """
    _check_geometry(border)
    width = symbol.size + 2 * border
    quiet_row = light * width
    lines = [quiet_row] * border
    margin = light * border
    for row in symbol.modules:
        lines.append(margin + ''.join(dark if v else light for v in row) + margin)
    lines.extend([quiet_row] * border)
    return '\n'.join(lines)


def render_png(symbol, border: int = 4, scale: int = 10) -> bytes:
    """Black modules on white, `scale` pixels per module, PNG bytes."""
    _check_geometry(border, scale)
    img_px = (symbol.size + 2 * border) * scale
    img = Image.new('1', (img_px, img_px), 1)
    draw = ImageDraw.Draw(img)
    for r, row in enumerate(symbol.modules):
        for c, is_dark in enumerate(row):
            if is_dark:
                x0 = (c + border) * scale
                y0 = (r + border) * scale
                draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill=0)
    buf = BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue()


def _zone_layout(symbol) -> Tuple[List[List[Optional[str]]], int, int, int]:
    """
    Zone name of every module.

    Codeword modules are 'data' or 'ecc'; the trailing remainder bits
    carry no codeword and are 'remainder'.

    Returns:
        Tuple: (zones, functional_count, data_module_count, remainder_count)
    """
    zones = build_zone_map(symbol.version)
    _, is_function = build_function_patterns(symbol.version)
    params = get_version_parameters(symbol.version, symbol.ecc)

    # Interleaving emits every data codeword before the first ECC codeword
    data_bits = params.data_capacity * 8
    codeword_bits = params.total_codewords * 8
    data_count = 0
    for index, (r, c) in enumerate(iter_data_coords(is_function)):
        if index < data_bits:
            zones[r][c] = 'data'
        elif index < codeword_bits:
            zones[r][c] = 'ecc'
        else:
            zones[r][c] = 'remainder'
        data_count += 1

    functional_count = symbol.size * symbol.size - data_count
    return zones, functional_count, data_count, params.remainder_bits


def render_colored_png_from_matrix(symbol, border: int = 4, scale: int = 6) -> Tuple[str, Dict[str, Any]]:
    """
    Render the symbol as a PNG colored by zone.

    Dark modules take the color of their zone; light separator modules are
    drawn light gray so the finder boundaries stay visible.

    Args:
        symbol: Symbol with version, size, modules and ecc
        border (int): Quiet zone size in modules (recommended: 4+)
        scale (int): Pixel size per module

    Returns:
        Tuple[str, Dict[str, Any]]: (base64_png, metrics_dict)
            - metrics_dict: size, modules, dark_modules, functional_modules,
              data_modules (codeword and remainder modules), remainder_modules,
              border

    Example:
        >>> from qrsymbol import encode
        >>> b64, metrics = render_colored_png_from_matrix(encode(b"HELLO"))
        >>> metrics['size']
        21
    """
    _check_geometry(border, scale)
    zones, functional_count, data_count, remainder_count = _zone_layout(symbol)
    size = symbol.size

    img_px = (size + 2 * border) * scale
    img = Image.new('RGB', (img_px, img_px), PALETTE['background'])
    draw = ImageDraw.Draw(img)

    dark_modules = 0
    for r, row in enumerate(symbol.modules):
        for c, is_dark in enumerate(row):
            zone = zones[r][c]
            if is_dark:
                dark_modules += 1
                fill = PALETTE[zone]
            elif zone == 'separator':
                fill = PALETTE['separator']
            else:
                continue
            x0 = (c + border) * scale
            y0 = (r + border) * scale
            draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill=fill)

    buf = BytesIO()
    img.save(buf, format='PNG')
    b64 = base64.b64encode(buf.getvalue()).decode('ascii')

    return b64, {
        'size': size,
        'modules': size * size,
        'dark_modules': dark_modules,
        'functional_modules': functional_count,
        'data_modules': data_count,
        'remainder_modules': remainder_count,
        'border': border,
    }


def render_colored_svg_from_matrix(symbol, border: int = 4, scale: int = 10) -> bytes:
    """
    Render the symbol as an SVG colored by zone.

    Same coloring as render_colored_png_from_matrix, for printing.

    Returns:
        bytes: UTF-8 encoded SVG content
    """
    _check_geometry(border, scale)
    zones, _, _, _ = _zone_layout(symbol)

    px = (symbol.size + 2 * border) * scale
    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect width="{px}" height="{px}" fill="rgb{PALETTE["background"]}"/>')

    for r, row in enumerate(symbol.modules):
        for c, is_dark in enumerate(row):
            zone = zones[r][c]
            if is_dark:
                fill = PALETTE[zone]
            elif zone == 'separator':
                fill = PALETTE['separator']
            else:
                continue
            x = (c + border) * scale
            y = (r + border) * scale
            out.append(f'<rect x="{x}" y="{y}" width="{scale}" height="{scale}" fill="rgb{fill}"/>')

    out.append('</svg>')
    return "\n".join(out).encode("utf-8")
