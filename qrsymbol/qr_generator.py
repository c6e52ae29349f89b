# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Orchestrates the encoding pipeline for a byte payload:

    version selection -> data codewords -> Reed-Solomon + interleaving ->
    bit stream -> function patterns -> data placement -> masking

Every call builds its own grids and buffers; the only shared state is the
read-only GF(256) tables. On failure an EncodeError is raised and no partial
symbol is returned.

Functions:
    encode: Encode a byte payload into a Symbol
    make_qr: Convenience wrapper for text payloads and web-form parameters
    evaluate_all_masks: Penalty score of the eight masks for one payload
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from .codewords import build_data_codewords
from .exceptions import AllocationFailure, CapacityExceeded, InternalInconsistency, InvalidArgument
from .functional_areas import build_function_patterns
from .galois import initialize_tables
from .interleave import add_error_correction, codewords_to_bits
from .masking import choose_best_mask, evaluate_masks, masked_copy, normalize_mask
from .penalties import compute_mask_penalty
from .placement import place_data_bits
from .renderer import render_text
from .versions import (
    MAX_VERSION,
    MIN_VERSION,
    VersionParameters,
    get_version_parameters,
    max_payload_length,
    normalize_ecc,
    payload_fits,
    select_version,
)

logger = logging.getLogger(__name__)

Grid = List[List[bool]]


@dataclass(frozen=True)
class Symbol:
    """
    A finished QR Code symbol.

    modules[y][x] is True for a dark module. The grid holds every structural
    pattern but no quiet zone.
    """
    version: int
    size: int
    modules: Tuple[Tuple[bool, ...], ...]
    ecc: str = 'L'
    mask: int = 0
    penalty: int = 0

    @property
    def matrix(self) -> Grid:
        """Rows as fresh lists, for renderers that expect lists."""
        return [list(row) for row in self.modules]

    @property
    def dark_modules(self) -> int:
        return sum(sum(row) for row in self.modules)

    def text(self, border: int = 2) -> str:
        return render_text(self, border=border)


def _payload_bytes(payload, length: Optional[int], ecc: str) -> bytes:
    if payload is None:
        raise InvalidArgument("Payload is required")
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise InvalidArgument(
            f"Payload must be bytes, got {type(payload).__name__}; encode text first"
        )
    data = bytes(payload)
    if length is None:
        length = len(data)
    if not isinstance(length, int) or isinstance(length, bool):
        raise InvalidArgument(f"Length must be an integer, got {length!r}")
    if length <= 0:
        raise InvalidArgument("Payload length must be at least 1 byte")
    limit = max_payload_length(ecc)
    if length > limit:
        raise CapacityExceeded(f"Payload of {length} bytes exceeds the maximum of {limit}")
    if length > len(data):
        raise InvalidArgument(f"Length {length} exceeds the {len(data)} bytes supplied")
    return data[:length]


def _resolve_version(length: int, ecc: str, version: Optional[int]) -> VersionParameters:
    if version is None:
        return select_version(length, ecc)
    if not isinstance(version, int) or isinstance(version, bool) \
            or not MIN_VERSION <= version <= MAX_VERSION:
        raise InvalidArgument(f"Version must be {MIN_VERSION}..{MAX_VERSION}, got {version!r}")
    params = get_version_parameters(version, ecc)
    if not payload_fits(length, params):
        raise CapacityExceeded(
            f"Payload of {length} bytes does not fit version {version}-{ecc}"
        )
    return params


def _build_unmasked(data: bytes, params: VersionParameters) -> Tuple[Grid, Grid]:
    """Function patterns plus placed data bits, before any mask."""
    initialize_tables()
    data_codewords = build_data_codewords(data, params.data_capacity, params.char_count_bits)
    codewords = add_error_correction(data_codewords, params)
    bits = codewords_to_bits(codewords, params.remainder_bits)

    modules, is_function = build_function_patterns(params.version)
    free_modules = place_data_bits(modules, is_function, bits)
    if free_modules != len(bits):
        raise InternalInconsistency(
            f"Version {params.version} has {free_modules} data modules, "
            f"bit stream has {len(bits)}"
        )
    return modules, is_function


def encode(
    payload: Union[bytes, bytearray, memoryview],
    length: Optional[int] = None,
    *,
    ecc: str = 'L',
    version: Optional[int] = None,
    mask: Optional[int] = None
) -> Symbol:
    """
    Encode a byte payload into a QR Code symbol (byte mode).

    Args:
        payload: Opaque payload bytes; need not be NUL-terminated
        length (Optional[int]): Number of leading payload bytes to encode
            (default: all of them)
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[int]): Force a version (1-40); None picks the smallest
        mask (Optional[int]): Force a mask (0-7); None picks the lowest penalty

    Returns:
        Symbol: version, size = 4 * version + 17, modules[y][x] (True = dark)

    Raises:
        InvalidArgument: No payload, zero length, or an option out of range
        CapacityExceeded: The payload does not fit
        AllocationFailure: A scratch buffer could not be allocated
        InternalInconsistency: A version table or placement invariant failed

    Example:
        >>> symbol = encode(b"HELLO")
        >>> symbol.version, symbol.size
        (1, 21)
    """
    level = normalize_ecc(ecc)
    data = _payload_bytes(payload, length, level)
    params = _resolve_version(len(data), level, version)
    chosen = None if mask is None else normalize_mask(mask)

    try:
        modules, is_function = _build_unmasked(data, params)
        if chosen is None:
            best_mask, best_modules, best_penalty = choose_best_mask(modules, is_function, level)
        else:
            best_mask = int(chosen)
            best_modules = masked_copy(modules, is_function, level, best_mask)
            best_penalty = compute_mask_penalty(best_modules)
    except MemoryError as ex:
        raise AllocationFailure(f"Out of memory encoding version {params.version}") from ex

    logger.debug(
        "Encoded %d bytes as version %d-%s, mask %d (penalty %d)",
        len(data), params.version, level, best_mask, best_penalty
    )
    return Symbol(
        version=params.version,
        size=params.size,
        modules=tuple(tuple(row) for row in best_modules),
        ecc=level,
        mask=best_mask,
        penalty=best_penalty,
    )


def make_qr(
    text: Union[str, bytes],
    ecc: str = 'L',
    version: Optional[Union[int, str]] = None,
    mask: Union[str, int, None] = 'auto',
    encoding: str = 'utf-8'
) -> Symbol:
    """
    Generate a QR code symbol from text or bytes with web-form style parameters.

    Args:
        text (Union[str, bytes]): Data to encode; str is encoded with `encoding`
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): 1-40, or 'auto'/None for the minimum
        mask (Union[str, int, None]): 0-7, or 'auto'/None for the lowest penalty
        encoding (str): Character encoding used for str input

    Example:
        >>> make_qr("https://example.com", ecc='M', version='auto', mask='auto').version
        2
    """
    if isinstance(text, str):
        try:
            payload = text.encode(encoding)
        except (LookupError, UnicodeEncodeError) as ex:
            raise InvalidArgument(f"Cannot encode text as {encoding}: {ex}") from ex
    else:
        payload = text

    ver_arg = None if version in (None, 'auto') else _to_int(version, 'version')
    mask_arg = None if mask in (None, 'auto') else _to_int(mask, 'mask')
    return encode(payload, ecc=ecc, version=ver_arg, mask=mask_arg)


def _to_int(value, name: str) -> int:
    if isinstance(value, (bool, float)):
        raise InvalidArgument(f"Invalid {name}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"Invalid {name}: {value!r}") from None


def evaluate_all_masks(
    payload: Union[bytes, bytearray, memoryview],
    ecc: str = 'L',
    version: Optional[int] = None
) -> Tuple[int, int, Dict[int, int]]:
    """
    Evaluate all mask patterns (0-7) for one payload and version.

    Returns:
        Tuple[int, int, Dict[int, int]]: (best_mask, best_score, all_scores)
            - best_mask: Mask pattern with lowest penalty, lowest number on ties
            - best_score: Penalty score of the best mask
            - all_scores: Dictionary mapping mask -> penalty score
    """
    level = normalize_ecc(ecc)
    data = _payload_bytes(payload, None, level)
    params = _resolve_version(len(data), level, version)
    modules, is_function = _build_unmasked(data, params)

    scores = evaluate_masks(modules, is_function, level)
    best_mask = min(scores, key=lambda m: (scores[m], m))
    return best_mask, scores[best_mask], scores
