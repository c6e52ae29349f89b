# -*- coding: utf-8 -*-
"""
Galois Field GF(256) Module

Exponentiation and logarithm tables over GF(2^8) with the QR Code primitive
polynomial x^8 + x^4 + x^3 + x^2 + 1 (0x11D) and generator alpha = 2.

The tables are process-wide and read-only once built. Building is idempotent
and guarded by a module flag.

Functions:
    initialize_tables: Build the exp/log tables (once per process)
    multiply: Multiply two field elements
    power_of_two: alpha ** n
"""

from typing import List

GF_SIZE = 256
PRIMITIVE_POLYNOMIAL = 0x11D

# exp is duplicated over 512 entries so log[a] + log[b] needs no modulo.
_EXP: List[int] = [0] * (GF_SIZE * 2)
_LOG: List[int] = [0] * GF_SIZE
_tables_ready = False


def initialize_tables() -> None:
    """
    Build the exponentiation and logarithm tables.

    Starts from 1 and repeatedly doubles, reducing by the primitive
    polynomial whenever the 9th bit is set, for 255 steps.
    """
    global _tables_ready
    if _tables_ready:
        return

    value = 1
    for i in range(GF_SIZE - 1):
        _EXP[i] = value
        _LOG[value] = i
        value <<= 1
        if value & GF_SIZE:
            value ^= PRIMITIVE_POLYNOMIAL

    for i in range(GF_SIZE - 1, GF_SIZE * 2):
        _EXP[i] = _EXP[i - (GF_SIZE - 1)]

    _tables_ready = True


def exp_table() -> List[int]:
    """Return a copy of the 512-entry exponentiation table."""
    initialize_tables()
    return list(_EXP)


def log_table() -> List[int]:
    """Return a copy of the 256-entry logarithm table (log[0] is unused)."""
    initialize_tables()
    return list(_LOG)


def multiply(a: int, b: int) -> int:
    """
    Multiply two elements of GF(256).

    Args:
        a (int): Field element 0..255
        b (int): Field element 0..255

    Returns:
        int: a * b in GF(256); 0 if either operand is 0

    Example:
        >>> multiply(2, 128)
        29
    """
    if a == 0 or b == 0:
        return 0
    initialize_tables()
    return _EXP[_LOG[a] + _LOG[b]]


def power_of_two(n: int) -> int:
    """Return alpha ** n, i.e. exp[n mod 255]."""
    initialize_tables()
    return _EXP[n % (GF_SIZE - 1)]
