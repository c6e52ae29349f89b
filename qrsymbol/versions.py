# -*- coding: utf-8 -*-
"""
QR Code Capacity / Version Tables Module

Per-version constants for byte-mode symbols (ISO/IEC 18004:2015, Table 9):
error correction codewords per block and block counts for the four error
correction levels, the raw data module count of each version, the alignment
pattern centers, and the selection of the smallest version holding a payload.

Functions:
    get_version_parameters: Derived constants for one version and ECC level
    get_raw_data_modules: Number of data+ECC modules (including remainder bits)
    compute_alignment_centers: Alignment pattern center coordinates
    char_count_bits: Width of the byte-mode length field
    select_version: Smallest version that fits a payload
    max_payload_length: Largest byte payload for an ECC level
"""

import logging
from functools import lru_cache
from typing import List, NamedTuple

from .exceptions import CapacityExceeded, InvalidArgument

logger = logging.getLogger(__name__)

MIN_VERSION = 1
MAX_VERSION = 40

# Byte mode indicator
BYTE_MODE_INDICATOR = 0b0100
MODE_INDICATOR_BITS = 4

ECC_LEVELS = ('L', 'M', 'Q', 'H')

# Format-information encoding of each level
ECC_FORMAT_BITS = {'L': 0b01, 'M': 0b00, 'Q': 0b11, 'H': 0b10}

# ECC codewords per block, index 0 = version 1
_ECC_CODEWORDS_PER_BLOCK = {
    'L': (7, 10, 15, 20, 26, 18, 20, 24, 30, 18, 20, 24, 26, 30, 22, 24, 28, 30, 28, 28,
          28, 28, 30, 30, 26, 28, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
    'M': (10, 16, 26, 18, 24, 16, 18, 22, 22, 26, 30, 22, 22, 24, 24, 28, 28, 26, 26, 26,
          26, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28),
    'Q': (13, 22, 18, 26, 18, 24, 18, 22, 20, 24, 28, 26, 24, 20, 30, 24, 28, 28, 26, 30,
          28, 30, 30, 30, 30, 28, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
    'H': (17, 28, 22, 16, 22, 28, 26, 26, 24, 28, 24, 28, 22, 24, 24, 30, 28, 28, 26, 28,
          30, 24, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
}

# Number of error correction blocks, index 0 = version 1
_NUM_BLOCKS = {
    'L': (1, 1, 1, 1, 1, 2, 2, 2, 2, 4, 4, 4, 4, 4, 6, 6, 6, 6, 7, 8,
          8, 9, 9, 10, 12, 12, 12, 13, 14, 15, 16, 17, 18, 19, 19, 20, 21, 22, 24, 25),
    'M': (1, 1, 1, 2, 2, 4, 4, 4, 5, 5, 5, 8, 9, 9, 10, 10, 11, 13, 14, 16,
          17, 17, 18, 20, 21, 23, 25, 26, 28, 29, 31, 33, 35, 37, 38, 40, 43, 45, 47, 49),
    'Q': (1, 1, 2, 2, 4, 4, 6, 6, 8, 8, 8, 10, 12, 16, 12, 17, 16, 18, 21, 20,
          23, 23, 25, 27, 29, 34, 34, 35, 38, 40, 43, 45, 48, 51, 53, 56, 59, 62, 65, 68),
    'H': (1, 1, 2, 4, 4, 4, 5, 6, 8, 8, 11, 11, 16, 16, 18, 16, 19, 21, 25, 25,
          25, 34, 30, 32, 35, 37, 40, 42, 45, 48, 51, 54, 57, 60, 63, 66, 70, 74, 77, 81),
}


class VersionParameters(NamedTuple):
    """Constants derived once per (version, ECC level)."""
    version: int
    ecc: str
    size: int
    total_codewords: int
    data_capacity: int
    ecc_per_block: int
    block_count: int
    remainder_bits: int
    char_count_bits: int


def normalize_ecc(ecc: str) -> str:
    """Return the upper-case ECC level or raise InvalidArgument."""
    level = (ecc or '').strip().upper() if isinstance(ecc, str) else ''
    if level not in ECC_LEVELS:
        raise InvalidArgument(f"Unknown error correction level: {ecc!r}")
    return level


def _check_version(version: int) -> None:
    if not isinstance(version, int) or isinstance(version, bool) \
            or not MIN_VERSION <= version <= MAX_VERSION:
        raise InvalidArgument(f"Version must be {MIN_VERSION}..{MAX_VERSION}, got {version!r}")


def symbol_size(version: int) -> int:
    """Modules per side: 4 * version + 17."""
    return 4 * version + 17


def get_raw_data_modules(version: int) -> int:
    """
    Number of modules available for data and ECC codewords (with remainder bits).

    Everything except finder, separator, timing, alignment, format, version
    and dark modules.

    Example:
        >>> get_raw_data_modules(1)
        208
        >>> get_raw_data_modules(7)
        1568
    """
    _check_version(version)
    result = (16 * version + 128) * version + 64
    if version >= 2:
        num_align = version // 7 + 2
        result -= (25 * num_align - 10) * num_align - 55
        if version >= 7:
            result -= 36
    return result


def compute_alignment_centers(version: int) -> List[int]:
    """
    Calculate the center positions of alignment patterns for a given QR version.

    The series starts at size - 7 and steps inward by an even stride, always
    ending at coordinate 6. Version 1 has no alignment patterns.

    Args:
        version (int): QR code version (1-40)

    Returns:
        List[int]: Ascending center coordinates, used for both rows and columns

    Example:
        >>> compute_alignment_centers(7)
        [6, 22, 38]
        >>> compute_alignment_centers(32)
        [6, 34, 60, 86, 112, 138]
    """
    _check_version(version)
    if version == 1:
        return []

    num_align = version // 7 + 2
    step = (version * 8 + num_align * 3 + 5) // (num_align * 4 - 4) * 2
    last = symbol_size(version) - 7
    centers = [last - i * step for i in range(num_align - 1)]
    centers.append(6)
    return sorted(centers)


def char_count_bits(version: int) -> int:
    """Byte-mode length field width: 8 bits up to version 9, 16 bits after."""
    return 8 if version <= 9 else 16


@lru_cache(maxsize=None, typed=True)
def get_version_parameters(version: int, ecc: str = 'L') -> VersionParameters:
    """
    Derive the codeword layout of a version.

    Args:
        version (int): QR code version (1-40)
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')

    Returns:
        VersionParameters: total codewords, data capacity, ECC per block,
        block count, remainder bits and length field width

    Note:
        total_codewords == data_capacity + ecc_per_block * block_count
    """
    _check_version(version)
    level = normalize_ecc(ecc)
    raw = get_raw_data_modules(version)
    ecc_per_block = _ECC_CODEWORDS_PER_BLOCK[level][version - 1]
    block_count = _NUM_BLOCKS[level][version - 1]
    total = raw // 8
    return VersionParameters(
        version=version,
        ecc=level,
        size=symbol_size(version),
        total_codewords=total,
        data_capacity=total - ecc_per_block * block_count,
        ecc_per_block=ecc_per_block,
        block_count=block_count,
        remainder_bits=raw % 8,
        char_count_bits=char_count_bits(version),
    )


def get_data_codeword_capacity(version: int, ecc: str = 'L') -> int:
    return get_version_parameters(version, ecc).data_capacity


def get_total_codewords(version: int) -> int:
    return get_raw_data_modules(version) // 8


def payload_fits(length: int, params: VersionParameters) -> bool:
    """True if mode indicator, length field and payload fit the data capacity."""
    if length >= 1 << params.char_count_bits:
        return False
    needed = MODE_INDICATOR_BITS + params.char_count_bits + 8 * length
    return needed <= params.data_capacity * 8


def select_version(length: int, ecc: str = 'L') -> VersionParameters:
    """
    Pick the smallest version whose data capacity holds the payload.

    Versions whose 8-bit length field cannot represent the payload length
    are skipped, so payloads over 255 bytes always land on version 10+.

    Raises:
        CapacityExceeded: No version up to MAX_VERSION can hold the payload
    """
    level = normalize_ecc(ecc)
    for version in range(MIN_VERSION, MAX_VERSION + 1):
        params = get_version_parameters(version, level)
        if payload_fits(length, params):
            logger.debug("Selected version %d-%s for %d byte payload", version, level, length)
            return params
    raise CapacityExceeded(
        f"Payload of {length} bytes exceeds the capacity of version {MAX_VERSION}-{level}"
    )


@lru_cache(maxsize=None)
def max_payload_length(ecc: str = 'L') -> int:
    """Largest byte-mode payload that fits at the given ECC level."""
    params = get_version_parameters(MAX_VERSION, ecc)
    return (params.data_capacity * 8 - MODE_INDICATOR_BITS - params.char_count_bits) // 8


MAX_PAYLOAD_LENGTH = max_payload_length('L')
