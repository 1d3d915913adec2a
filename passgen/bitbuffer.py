"""Fixed-width symbol extraction from a random byte stream.

The buffer holds one 64-bit register. Symbols are sliced off its low end;
when fewer than one symbol's worth of bits remain, the leftover bits are
dropped and the whole register is replaced with a fresh little-endian
word from the source.
"""

from __future__ import annotations

import numpy as np

from passgen.config import REGISTER_BITS
from passgen.sources.base import RandomSource

_REGISTER_BYTES = REGISTER_BITS // 8
_REGISTER_DTYPE = np.dtype("<u8")


class RandomBitBuffer:
    """A register of random bits consumed in fixed-width slices.

    Parameters
    ----------
    source:
        An opened :class:`RandomSource`. The buffer never opens or
        closes it.
    """

    def __init__(self, source: RandomSource) -> None:
        self._source = source
        self._register = 0
        self._valid_bits = 0
        self.refills = 0

    @property
    def valid_bits(self) -> int:
        return self._valid_bits

    @property
    def bytes_consumed(self) -> int:
        return self.refills * _REGISTER_BYTES

    def refill(self) -> None:
        """Replace the register with a fresh word from the source.

        Raises :class:`EntropySourceExhausted` on a short read; the
        register is left untouched in that case.
        """
        chunk = self._source.read(_REGISTER_BYTES)
        self._register = int(np.frombuffer(chunk, dtype=_REGISTER_DTYPE)[0])
        self._valid_bits = REGISTER_BITS
        self.refills += 1

    def take(self, width: int) -> int:
        """Return the next *width* bits as an unsigned integer."""
        if not 1 <= width <= REGISTER_BITS:
            raise ValueError(f"symbol width must be in [1, {REGISTER_BITS}], got {width}")
        if self._valid_bits < width:
            self.refill()
        symbol = self._register & ((1 << width) - 1)
        self._register >>= width
        self._valid_bits -= width
        return symbol
