# -*- coding: utf-8 -*-
"""
QR Symbol Encoder - Exceptions

Every failure of an encode call is reported as a subclass of EncodeError.
CapacityExceeded is the only user-facing condition ("payload too large for
encoding"); the other kinds indicate a bad call or an internal fault.
"""


class EncodeError(Exception):
    """Base class for all encoder errors."""


class InvalidArgument(EncodeError, ValueError):
    """Missing payload, zero length, or an option outside its range."""


class CapacityExceeded(EncodeError, ValueError):
    """The payload does not fit in any eligible symbol version."""


class BufferTooSmall(CapacityExceeded):
    """An append to the bit buffer would exceed its byte capacity."""


class AllocationFailure(EncodeError, MemoryError):
    """A per-call scratch buffer could not be allocated."""


class InternalInconsistency(EncodeError, RuntimeError):
    """A block-split or placement invariant failed (version table bug)."""
