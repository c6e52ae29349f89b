# -*- coding: utf-8 -*-
"""
Reed-Solomon Encoder Module

Computes error correction codewords over GF(256) by polynomial long division
of the data block by the generator polynomial (x - a^0)(x - a^1)...(x - a^(k-1)).

Functions:
    compute_generator_polynomial: Monic generator polynomial of degree k
    compute_reed_solomon: Remainder (parity) codewords of one data block
"""

from functools import lru_cache
from typing import List, Sequence, Tuple

from .exceptions import InvalidArgument
from .galois import multiply, power_of_two


@lru_cache(maxsize=None)
def compute_generator_polynomial(degree: int) -> Tuple[int, ...]:
    """
    Build the generator polynomial of the given degree.

    Coefficients are ordered from the highest power down; the leading
    coefficient is always 1.

    Example:
        >>> compute_generator_polynomial(7)
        (1, 127, 122, 154, 164, 11, 68, 117)
    """
    if degree < 1 or degree > 255:
        raise InvalidArgument(f"Generator degree must be 1..255, got {degree}")

    result = [1] + [0] * degree
    for d in range(degree):
        factor = power_of_two(d)
        for i in range(d + 1, 0, -1):
            result[i] ^= multiply(result[i - 1], factor)
    return tuple(result)


def compute_reed_solomon(data: Sequence[int], ecc_length: int) -> List[int]:
    """
    Compute the Reed-Solomon parity codewords of a data block.

    Args:
        data (Sequence[int]): Data codewords (0..255)
        ecc_length (int): Number of parity codewords

    Returns:
        List[int]: ecc_length parity codewords

    Example:
        >>> data = [0x10, 0x20, 0x0C, 0x56, 0x61, 0x80, 0xEC, 0x11,
        ...         0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11]
        >>> [hex(b) for b in compute_reed_solomon(data, 10)]
        ['0xa5', '0x24', '0xd4', '0xc1', '0xed', '0x36', '0xc7', '0x87', '0x2c', '0x55']
    """
    generator = compute_generator_polynomial(ecc_length)
    parity = [0] * ecc_length

    for byte in data:
        factor = byte ^ parity[0]
        parity.pop(0)
        parity.append(0)
        for j in range(ecc_length):
            parity[j] ^= multiply(generator[j + 1], factor)

    return parity
