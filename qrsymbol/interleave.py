# -*- coding: utf-8 -*-
"""
Codeword Interleaver Module

Splits the data codewords into error correction blocks, appends each block's
Reed-Solomon parity and interleaves the blocks column by column into the
final codeword sequence that is placed in the matrix.

Blocks come in two lengths: short blocks first, then long blocks holding one
more data codeword. Short blocks carry a filler slot at the position of the
long blocks' extra codeword, which is skipped when interleaving.
"""

from typing import List, NamedTuple, Sequence

from .exceptions import InternalInconsistency
from .reed_solomon import compute_reed_solomon
from .versions import VersionParameters


class CodewordBlock(NamedTuple):
    data: List[int]
    parity: List[int]

    @property
    def total_length(self) -> int:
        return len(self.data) + len(self.parity)


def split_blocks(data: Sequence[int], params: VersionParameters) -> List[CodewordBlock]:
    """
    Split data codewords into blocks and compute each block's parity.

    Raises:
        InternalInconsistency: The block data lengths do not add up to the
            version's data capacity
    """
    total = params.total_codewords
    block_count = params.block_count
    ecc_len = params.ecc_per_block

    long_blocks = total % block_count
    short_blocks = block_count - long_blocks
    short_length = total // block_count

    if len(data) != params.data_capacity:
        raise InternalInconsistency(
            f"Got {len(data)} data codewords, version {params.version}-{params.ecc} "
            f"expects {params.data_capacity}"
        )
    expected = short_blocks * (short_length - ecc_len) + long_blocks * (short_length + 1 - ecc_len)
    if expected != params.data_capacity:
        raise InternalInconsistency(
            f"Block data lengths sum to {expected}, data capacity is {params.data_capacity}"
        )

    blocks = []
    offset = 0
    for i in range(block_count):
        data_length = short_length - ecc_len + (0 if i < short_blocks else 1)
        block_data = list(data[offset:offset + data_length])
        offset += data_length
        blocks.append(CodewordBlock(block_data, compute_reed_solomon(block_data, ecc_len)))
    return blocks


def interleave_blocks(blocks: Sequence[CodewordBlock], params: VersionParameters) -> List[int]:
    """
    Emit the codewords of all blocks column-major.

    For each position, the codeword at that position of every block that has
    one; short blocks have no codeword at the long blocks' extra data slot.
    """
    short_data = params.total_codewords // params.block_count - params.ecc_per_block
    rows = []
    for block in blocks:
        if len(block.data) == short_data:
            rows.append(block.data + [None] + block.parity)
        else:
            rows.append(block.data + block.parity)

    result = []
    for position in range(max(len(row) for row in rows)):
        for row in rows:
            if position < len(row) and row[position] is not None:
                result.append(row[position])

    if len(result) != params.total_codewords:
        raise InternalInconsistency(
            f"Interleaved {len(result)} codewords, expected {params.total_codewords}"
        )
    return result


def add_error_correction(data: Sequence[int], params: VersionParameters) -> List[int]:
    """Split, compute parity and interleave: the final codeword sequence."""
    return interleave_blocks(split_blocks(data, params), params)


def codewords_to_bits(codewords: Sequence[int], remainder_bits: int = 0) -> List[int]:
    """Serialize codewords MSB first, followed by the zero remainder bits."""
    bits = [(byte >> (7 - i)) & 1 for byte in codewords for i in range(8)]
    bits.extend([0] * remainder_bits)
    return bits
