# -*- coding: utf-8 -*-
"""
Data Codeword Builder Module

Packs a byte-mode segment into the data codewords of one symbol version:

    mode indicator (0100) | length field (8/16 bits) | payload bytes |
    terminator (up to 4 zero bits) | zero bits to a byte boundary |
    0xEC / 0x11 pad codewords up to the data capacity
"""

from typing import List

from .exceptions import BufferTooSmall, CapacityExceeded, InvalidArgument
from .versions import BYTE_MODE_INDICATOR, MODE_INDICATOR_BITS

PAD_CODEWORDS = (0xEC, 0x11)
TERMINATOR_BITS = 4


class BitBuffer:
    """
    Append-only, MSB-first bit sequence with a fixed byte capacity.

    An append that would push bit_length past capacity * 8 raises
    BufferTooSmall and leaves the buffer unchanged.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise InvalidArgument("Bit buffer capacity must not be negative")
        self.capacity = capacity
        self.bit_length = 0
        self._bytes = bytearray(capacity)

    @property
    def remaining_bits(self) -> int:
        return self.capacity * 8 - self.bit_length

    def append_bits(self, value: int, count: int) -> None:
        """Append the low `count` bits of `value`, most significant first."""
        if count < 0 or value < 0 or value >> count:
            raise InvalidArgument(f"Value {value} does not fit in {count} bits")
        if count > self.remaining_bits:
            raise BufferTooSmall(
                f"Cannot append {count} bits, only {self.remaining_bits} of "
                f"{self.capacity * 8} left"
            )
        for bit in range(count - 1, -1, -1):
            if (value >> bit) & 1:
                self._bytes[self.bit_length >> 3] |= 0x80 >> (self.bit_length & 7)
            self.bit_length += 1

    def to_bytes(self) -> bytes:
        return bytes(self._bytes)

    def __len__(self) -> int:
        return self.bit_length


def build_data_codewords(payload: bytes, data_capacity: int, length_bits: int) -> List[int]:
    """
    Build the data codewords for a byte-mode payload.

    Args:
        payload (bytes): Opaque payload bytes
        data_capacity (int): Data codewords of the selected version
        length_bits (int): Width of the length field (8 or 16)

    Returns:
        List[int]: Exactly data_capacity codewords

    Raises:
        CapacityExceeded: The length does not fit the length field, or the
            header plus payload exceed the capacity before padding

    Note:
        The terminator is shortened when fewer than 4 bits remain.
    """
    length = len(payload)
    if length >= 1 << length_bits:
        raise CapacityExceeded(
            f"Payload of {length} bytes does not fit a {length_bits}-bit length field"
        )

    buffer = BitBuffer(data_capacity)
    buffer.append_bits(BYTE_MODE_INDICATOR, MODE_INDICATOR_BITS)
    buffer.append_bits(length, length_bits)
    for byte in payload:
        buffer.append_bits(byte, 8)

    buffer.append_bits(0, min(TERMINATOR_BITS, buffer.remaining_bits))
    if buffer.bit_length % 8:
        buffer.append_bits(0, 8 - buffer.bit_length % 8)

    pad_index = 0
    while buffer.remaining_bits:
        buffer.append_bits(PAD_CODEWORDS[pad_index % 2], 8)
        pad_index += 1

    return list(buffer.to_bytes())
