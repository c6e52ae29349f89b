# -*- coding: utf-8 -*-
"""
QR Symbol Encoder - Core Package

Encodes a short binary payload (machine UUID, MAC address, hardware
inventory JSON, ...) into a QR Code symbol: byte mode, Reed-Solomon error
correction, function patterns and penalty-based mask selection
(ISO/IEC 18004 subset).

Modules:
    qr_generator: encode() pipeline and the Symbol type
    versions: Capacity tables and version selection
    codewords: Bit buffer and data codeword builder
    galois / reed_solomon / interleave: Error correction codewords
    functional_areas: Finder, timing, alignment, format and version patterns
    placement: Zigzag data placement
    masking / penalties: Mask patterns and penalty rules N1-N4
    renderer: Text, PNG and SVG rendering of finished symbols
"""

__version__ = "1.0.0"
__author__ = "QR Symbol Encoder Team"

from .exceptions import (
    AllocationFailure,
    BufferTooSmall,
    CapacityExceeded,
    EncodeError,
    InternalInconsistency,
    InvalidArgument,
)
from .qr_generator import Symbol, encode, evaluate_all_masks, make_qr
from .renderer import (
    render_colored_png_from_matrix,
    render_colored_svg_from_matrix,
    render_png,
    render_text,
)
from .functional_areas import build_function_mask, compute_alignment_centers
from .penalties import compute_mask_penalty
from .versions import MAX_PAYLOAD_LENGTH, MAX_VERSION, MIN_VERSION, max_payload_length

__all__ = [
    'encode',
    'make_qr',
    'evaluate_all_masks',
    'Symbol',
    'render_text',
    'render_png',
    'render_colored_png_from_matrix',
    'render_colored_svg_from_matrix',
    'build_function_mask',
    'compute_alignment_centers',
    'compute_mask_penalty',
    'max_payload_length',
    'MAX_PAYLOAD_LENGTH',
    'MIN_VERSION',
    'MAX_VERSION',
    'EncodeError',
    'InvalidArgument',
    'CapacityExceeded',
    'BufferTooSmall',
    'AllocationFailure',
    'InternalInconsistency',
]
